# Auto-generated __init__.py

from . import writer
from .writer import read_manifest
from .writer import render_manifest
from .writer import write_manifest

__all__ = [
    "writer",
    "read_manifest",
    "render_manifest",
    "write_manifest",
]
