# Auto-generated __init__.py

from . import core
from . import manifest
from . import cli

__all__ = [
    "core",
    "manifest",
    "cli",
]
