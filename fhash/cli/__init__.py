# Auto-generated __init__.py

from . import driver
from .driver import fingerprint_directory
from .driver import load_settings
from .driver import main
from .driver import run

__all__ = [
    "driver",
    "fingerprint_directory",
    "load_settings",
    "main",
    "run",
]
