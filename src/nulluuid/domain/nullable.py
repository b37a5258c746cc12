"""NullUUID: a UUID that may be explicitly absent.

The wrapper pairs a :class:`uuid.UUID` payload with a ``valid`` flag and
implements four codecs on top of the wrapped primitive:

========  ===================  ==============================
codec     absent               present
========  ===================  ==============================
JSON      ``null``             ``"<canonical>"``
text      ``null`` (encode)    ``<canonical>``
binary    ``b""`` (encode)     16 raw bytes
driver    ``None``             primitive driver value
========  ===================  ==============================

Known sharp edges:

- Text decode does not recognise ``null``; decoding the absent text
  encoding fails.
- Binary decode requires exactly 16 bytes; decoding the absent binary
  encoding (zero bytes) fails.

INVARIANT: when ``valid`` is False the payload is never exposed as
meaningful by accessors, encoders, or equality.
"""

from __future__ import annotations

import json
import logging
import uuid
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar

from pydantic_core import core_schema

from nulluuid.domain.errors import (
    DriverScanError,
    LengthMismatchError,
    ParseError,
    UnsupportedShapeError,
)
from nulluuid.domain.primitive import UUID_SIZE, UUIDPrimitive, default_primitive

logger = logging.getLogger(__name__)

NIL = uuid.UUID(int=0)

NULL_LITERAL = b"null"

_JSON_SHAPES: dict[type, str] = {
    bool: "boolean",
    int: "number",
    float: "number",
    list: "array",
}


def _json_int(digits: str) -> int | float:
    """JSON integer hook: digit runs past the interpreter's int limit become float."""
    try:
        return int(digits)
    except ValueError:
        return float(digits)


@dataclass(eq=False, slots=True)
class NullUUID:
    """A nullable UUID.

    Attributes:
        value: The payload; meaningless when ``valid`` is False.
        valid: True when the payload is present.
    """

    value: uuid.UUID = NIL
    valid: bool = False

    primitive: ClassVar[UUIDPrimitive] = default_primitive

    # --- Construction ---

    @classmethod
    def new(cls, value: uuid.UUID, valid: bool) -> NullUUID:
        """Build directly; *value* is not checked when *valid* is False."""
        return cls(value, valid)

    @classmethod
    def from_uuid(cls, value: uuid.UUID) -> NullUUID:
        """Build a NullUUID that is always valid."""
        return cls(value, True)

    @classmethod
    def from_optional(cls, value: uuid.UUID | None) -> NullUUID:
        """Build a NullUUID that is absent when *value* is None."""
        if value is None:
            return cls(NIL, False)
        return cls(value, True)

    @classmethod
    def from_json(cls, data: bytes | str) -> NullUUID:
        nu = cls()
        nu.unmarshal_json(data)
        return nu

    @classmethod
    def from_text(cls, data: bytes | str) -> NullUUID:
        nu = cls()
        nu.unmarshal_text(data)
        return nu

    @classmethod
    def from_binary(cls, data: bytes) -> NullUUID:
        nu = cls()
        nu.unmarshal_binary(data)
        return nu

    @classmethod
    def from_driver(cls, src: Any) -> NullUUID:
        nu = cls()
        nu.scan(src)
        return nu

    # --- Accessors ---

    def value_or_zero(self) -> uuid.UUID:
        """Return the payload if valid, otherwise the nil UUID."""
        if not self.valid:
            return NIL
        return self.value

    def to_optional(self) -> uuid.UUID | None:
        """Return the payload if valid, otherwise None."""
        if not self.valid:
            return None
        return self.value

    def is_zero(self) -> bool:
        return not self.valid

    # --- JSON ---

    def marshal_json(self) -> bytes:
        if not self.valid:
            return NULL_LITERAL
        return json.dumps(self.primitive.format(self.value)).encode("ascii")

    def unmarshal_json(self, data: bytes | str) -> None:
        """Decode a JSON document into this instance.

        A JSON string is parsed strictly: malformed text raises
        :class:`ParseError` instead of falling back to absent. A JSON
        object is handed to the primitive's structured decoder. ``null``
        marks the instance absent and leaves the payload untouched.

        Raises:
            ParseError: invalid JSON, or a string/object the primitive rejects.
            UnsupportedShapeError: a number, boolean, or array.
        """
        try:
            decoded = json.loads(data, parse_int=_json_int)
        except ValueError as exc:
            self.valid = False
            logger.debug("JSON decode failed: %s", exc)
            raise ParseError(f"invalid JSON: {exc}") from exc
        except RecursionError as exc:
            self.valid = False
            logger.debug("JSON decode failed: nesting too deep")
            raise ParseError("invalid JSON: nesting too deep") from exc

        if decoded is None:
            self.valid = False
            return

        try:
            if isinstance(decoded, str):
                self.value = self.primitive.parse(decoded)
            elif isinstance(decoded, Mapping):
                self.value = self.primitive.from_object(decoded)
            else:
                shape = _JSON_SHAPES.get(type(decoded), type(decoded).__name__)
                raise UnsupportedShapeError(shape)
        except (ValueError, TypeError) as exc:
            self.valid = False
            logger.debug("JSON decode rejected: %s", exc)
            raise
        self.valid = True

    # --- Text ---

    def marshal_text(self) -> bytes:
        if not self.valid:
            return NULL_LITERAL
        return self.primitive.format(self.value).encode("ascii")

    def unmarshal_text(self, data: bytes | str) -> None:
        """Parse *data* as UUID text. ``null`` is not accepted."""
        try:
            parsed = self.primitive.parse(data)
        except ParseError as exc:
            self.valid = False
            logger.debug("text decode failed: %s", exc)
            raise
        self.value = parsed
        self.valid = True

    # --- Binary ---

    def marshal_binary(self) -> bytes:
        if not self.valid:
            return b""
        return self.primitive.to_bytes(self.value)

    def unmarshal_binary(self, data: bytes) -> None:
        """Copy exactly 16 raw bytes into this instance.

        A zero-length input is rejected like any other wrong length; it
        does not mark the instance absent. On failure the instance is
        left unchanged.
        """
        if len(data) != UUID_SIZE:
            raise LengthMismatchError(len(data))
        self.value = self.primitive.from_bytes(bytes(data))
        self.valid = True

    # --- Database binding ---

    def scan(self, src: Any) -> None:
        """Read a driver value. ``None`` (SQL NULL) marks the instance absent."""
        if src is None:
            self.value, self.valid = NIL, False
            return

        try:
            scanned = self.primitive.scan(src)
        except (ValueError, TypeError) as exc:
            self.valid = False
            logger.debug("driver scan failed for %s: %s", type(src).__name__, exc)
            raise DriverScanError(str(exc)) from exc
        self.value = scanned
        self.valid = True

    def driver_value(self) -> Any:
        """Produce a driver value; ``None`` (SQL NULL) when absent."""
        if not self.valid:
            return None
        return self.primitive.driver_value(self.value)

    # --- Python protocols ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NullUUID):
            return NotImplemented
        return (self.valid, self.value_or_zero()) == (other.valid, other.value_or_zero())

    def __hash__(self) -> int:
        return hash((self.valid, self.value_or_zero()))

    def __str__(self) -> str:
        return self.marshal_text().decode("ascii")

    def __bytes__(self) -> bytes:
        return self.marshal_binary()

    # --- pydantic ---

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls._serialize, info_arg=True
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: Any, handler: Any) -> dict[str, Any]:
        return {"anyOf": [{"type": "string", "format": "uuid"}, {"type": "null"}]}

    @classmethod
    def _coerce(cls, raw: Any) -> NullUUID:
        if isinstance(raw, NullUUID):
            return raw
        if raw is None:
            return cls()
        if isinstance(raw, uuid.UUID):
            return cls.from_uuid(raw)
        if isinstance(raw, str):
            return cls.from_text(raw)
        if isinstance(raw, (bytes, bytearray)):
            if len(raw) == UUID_SIZE:
                return cls.from_binary(bytes(raw))
            return cls.from_text(bytes(raw))
        if isinstance(raw, Mapping):
            return cls.from_uuid(cls.primitive.from_object(raw))
        raise ValueError(f"cannot build NullUUID from {type(raw).__name__}")

    @staticmethod
    def _serialize(nu: NullUUID, info: core_schema.SerializationInfo) -> Any:
        if info.mode_is_json():
            if not nu.valid:
                return None
            return nu.primitive.format(nu.value)
        return nu.to_optional()
