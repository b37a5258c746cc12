"""nulluuid: a nullable UUID with JSON, text, binary, and database codecs."""

from nulluuid.domain.errors import (
    DriverScanError,
    LengthMismatchError,
    NullUUIDError,
    ParseError,
    UnsupportedShapeError,
)
from nulluuid.domain.nullable import NIL, NullUUID

__version__ = "0.1.0"

__all__ = [
    "NIL",
    "DriverScanError",
    "LengthMismatchError",
    "NullUUID",
    "NullUUIDError",
    "ParseError",
    "UnsupportedShapeError",
    "__version__",
]
