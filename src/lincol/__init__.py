"""JSON Pointer lookup of line/column information in YAML and JSON content."""

from lincol.errors import (
    DecodeError,
    DocumentTooLargeError,
    LincolError,
    ParseError,
    SourceReadError,
)
from lincol.models.position import Position
from lincol.parser.loader import from_path, from_reader, from_str
from lincol.parser.positions import Positions

__version__ = "0.1.0"

__all__ = [
    "DecodeError",
    "DocumentTooLargeError",
    "LincolError",
    "ParseError",
    "Position",
    "Positions",
    "SourceReadError",
    "__version__",
    "from_path",
    "from_reader",
    "from_str",
]
