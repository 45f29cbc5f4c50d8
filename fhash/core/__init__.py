# Auto-generated __init__.py

from . import errors
from .errors import ArgumentError
from .errors import ConfigError
from .errors import FhashError
from .errors import ManifestFormatError
from . import primitive
from .primitive import HashPrimitive
from .primitive import HashlibPrimitive
from .primitive import empty_digest
from .primitive import new_hasher
from . import models
from .models import Entry
from .models import EntryKind
from .models import sort_entries
from .models import sort_key
from . import leaf
from .leaf import file_digest
from .leaf import hash_file
from . import serializer
from .serializer import format_entry
from .serializer import parse_line
from .serializer import render_entry
from .serializer import write_entry
from . import tree
from .tree import MANIFEST_FILENAME
from .tree import hash_directory
from .tree import list_children

__all__ = [
    "errors",
    "leaf",
    "models",
    "primitive",
    "serializer",
    "tree",
    "ArgumentError",
    "ConfigError",
    "Entry",
    "EntryKind",
    "FhashError",
    "HashPrimitive",
    "HashlibPrimitive",
    "MANIFEST_FILENAME",
    "ManifestFormatError",
    "empty_digest",
    "file_digest",
    "format_entry",
    "hash_directory",
    "hash_file",
    "list_children",
    "new_hasher",
    "parse_line",
    "render_entry",
    "sort_entries",
    "sort_key",
    "write_entry",
]
