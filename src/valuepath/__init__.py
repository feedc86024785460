"""
valuepath: a dotted, JSONPath-like notation naming one value nested inside
fields, list elements and map entries.

This package uses a src-layout. Import the package as `valuepath`.
"""

from importlib.metadata import version

__version__ = version("valuepath")

from .config import VALUEPATH_CONFIG, ValuePathConfig
from .dsl import P, PathRef
from .errors import InvalidPathError, ValuePathError
from .parser import parse
from .path import Path
from .runtime import configure_logging, get_logger
from .segments import ElementSegment, FieldSegment, KeySegment, Segment
from .validate import validate_path

__all__ = [
    "__version__",
    "VALUEPATH_CONFIG",
    "ElementSegment",
    "FieldSegment",
    "InvalidPathError",
    "KeySegment",
    "P",
    "Path",
    "PathRef",
    "Segment",
    "ValuePathConfig",
    "ValuePathError",
    "configure_logging",
    "get_logger",
    "parse",
    "validate_path",
]
