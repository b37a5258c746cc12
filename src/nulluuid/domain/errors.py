"""Error kinds raised by NullUUID decoders.

Every decode failure raises a subclass of :class:`NullUUIDError`.
The concrete classes also inherit the builtin exception a caller would
naturally catch (``ValueError`` / ``TypeError``).
"""

from __future__ import annotations


class NullUUIDError(Exception):
    """Base class for all nulluuid errors."""

    code = "NULLUUID_ERROR"


class ParseError(NullUUIDError, ValueError):
    """Malformed UUID text, or a JSON payload that is not valid JSON."""

    code = "PARSE_ERROR"


class UnsupportedShapeError(NullUUIDError, TypeError):
    """JSON payload decoded to something other than string, object, or null."""

    code = "UNSUPPORTED_SHAPE"

    def __init__(self, shape: str) -> None:
        super().__init__(f"cannot decode JSON {shape} into NullUUID")
        self.shape = shape


class LengthMismatchError(NullUUIDError, ValueError):
    """Binary payload is not exactly 16 bytes."""

    code = "LENGTH_MISMATCH"

    def __init__(self, length: int) -> None:
        super().__init__(f"invalid UUID (got {length} bytes)")
        self.length = length


class DriverScanError(NullUUIDError):
    """The primitive failed to scan a database driver value.

    The underlying error is available as ``__cause__``.
    """

    code = "DRIVER_SCAN_ERROR"
