"""The UUID primitive that NullUUID delegates raw work to.

NullUUID never parses, formats, or scans on its own. It calls a
:class:`UUIDPrimitive`, so tests and alternative backends can swap the
primitive without touching the nullable wrapper.

Accepted text forms:

- ``xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx`` (36 chars, any hex case)
- ``{xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx}`` (38 chars)
- ``urn:uuid:xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx`` (45 chars)
- ``xxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxx`` (32 hex digits)
"""

from __future__ import annotations

import re
import uuid
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from nulluuid.domain.errors import LengthMismatchError, ParseError

UUID_SIZE = 16

_CANONICAL = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)
_HEX32 = re.compile(r"^[0-9a-fA-F]{32}$")
_URN_PREFIX = "urn:uuid:"


@runtime_checkable
class UUIDPrimitive(Protocol):
    """Raw UUID capabilities required by NullUUID."""

    def parse(self, text: str | bytes) -> uuid.UUID: ...

    def format(self, value: uuid.UUID) -> str: ...

    def to_bytes(self, value: uuid.UUID) -> bytes: ...

    def from_bytes(self, data: bytes) -> uuid.UUID: ...

    def from_object(self, obj: Mapping[str, Any]) -> uuid.UUID: ...

    def scan(self, src: Any) -> uuid.UUID: ...

    def driver_value(self, value: uuid.UUID) -> Any: ...


class StdlibPrimitive:
    """UUIDPrimitive backed by :class:`uuid.UUID`."""

    def parse(self, text: str | bytes) -> uuid.UUID:
        """Parse one of the accepted text forms.

        Raises:
            ParseError: wrong length, bad urn prefix, or bad layout.
        """
        if isinstance(text, (bytes, bytearray, memoryview)):
            try:
                text = bytes(text).decode("ascii")
            except UnicodeDecodeError as exc:
                raise ParseError("invalid UUID format") from exc

        n = len(text)
        if n == 45:
            if text[:9].lower() != _URN_PREFIX:
                raise ParseError(f"invalid urn prefix: {text[:9]!r}")
            text = text[9:]
        elif n == 38:
            if text[0] != "{" or text[-1] != "}":
                raise ParseError("invalid UUID format")
            text = text[1:-1]
        elif n == 32:
            if not _HEX32.match(text):
                raise ParseError("invalid UUID format")
            return uuid.UUID(hex=text)
        elif n != 36:
            raise ParseError(f"invalid UUID length: {n}")

        if not _CANONICAL.match(text):
            raise ParseError("invalid UUID format")
        return uuid.UUID(text)

    def format(self, value: uuid.UUID) -> str:
        return str(value)

    def to_bytes(self, value: uuid.UUID) -> bytes:
        return value.bytes

    def from_bytes(self, data: bytes) -> uuid.UUID:
        if len(data) != UUID_SIZE:
            raise LengthMismatchError(len(data))
        return uuid.UUID(bytes=bytes(data))

    def from_object(self, obj: Mapping[str, Any]) -> uuid.UUID:
        """Decode a structured JSON form.

        ``{"bytes": [16 ints]}`` and ``{"hex": "<32 hex digits>"}`` are
        understood; anything else raises :class:`ParseError`.
        """
        if set(obj) == {"bytes"}:
            raw = obj["bytes"]
            if (
                not isinstance(raw, list)
                or len(raw) != UUID_SIZE
                or not all(isinstance(b, int) and not isinstance(b, bool) for b in raw)
                or not all(0 <= b <= 255 for b in raw)
            ):
                raise ParseError("object field 'bytes' must hold 16 integers in 0..255")
            return uuid.UUID(bytes=bytes(raw))
        if set(obj) == {"hex"}:
            raw = obj["hex"]
            if not isinstance(raw, str) or not _HEX32.match(raw):
                raise ParseError("object field 'hex' must hold 32 hex digits")
            return uuid.UUID(hex=raw)
        raise ParseError(f"cannot decode object with keys {sorted(obj)} into UUID")

    def scan(self, src: Any) -> uuid.UUID:
        """Convert a database driver value to a UUID.

        Empty strings and empty byte strings scan to the nil UUID.
        Byte strings of 16 bytes are raw; other lengths are treated as text.
        """
        if isinstance(src, uuid.UUID):
            return src
        if isinstance(src, str):
            if src == "":
                return uuid.UUID(int=0)
            return self.parse(src)
        if isinstance(src, (bytes, bytearray, memoryview)):
            data = bytes(src)
            if len(data) == 0:
                return uuid.UUID(int=0)
            if len(data) == UUID_SIZE:
                return uuid.UUID(bytes=data)
            return self.parse(data)
        raise TypeError(f"unable to scan type {type(src).__name__} into UUID")

    def driver_value(self, value: uuid.UUID) -> str:
        return str(value)


default_primitive: UUIDPrimitive = StdlibPrimitive()
