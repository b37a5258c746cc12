"""CodecService: encode and decode NullUUID values at a string boundary.

The CLI deals only in strings, so binary payloads cross this boundary as
hex and driver values as their text form. Every method returns a
:class:`ServiceResult`; decode failures become a :class:`ServiceError`
whose code is the error kind (``PARSE_ERROR``, ``UNSUPPORTED_SHAPE``,
``LENGTH_MISMATCH``, ``DRIVER_SCAN_ERROR``).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from sqlalchemy import insert, select, text
from sqlalchemy.engine import Engine

from nulluuid.domain.errors import LengthMismatchError, NullUUIDError, ParseError
from nulluuid.domain.nullable import NullUUID
from nulluuid.domain.types import Encoding
from nulluuid.infrastructure.database.engine import init_database
from nulluuid.infrastructure.database.schema import links
from nulluuid.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class CodecService:
    """Run NullUUID codecs and report the outcome as ServiceResult."""

    def __init__(
        self,
        *,
        uppercase_hex: bool = False,
        engine_factory: Callable[[], Engine] = init_database,
    ) -> None:
        self._uppercase_hex = uppercase_hex
        self._engine_factory = engine_factory

    # --- Public operations ---

    def encode(self, fmt: Encoding, value: str | None) -> ServiceResult:
        """Encode *value* (None means absent) in *fmt*."""
        op = "encode"
        try:
            nu = self._build(value)
        except ParseError as exc:
            return self._failure(op, exc, format=fmt, value=value)

        return ServiceResult(
            ok=True,
            op=op,
            data={**self._describe(nu), "format": str(fmt), "encoded": self._encode(nu, fmt)},
        )

    def decode(self, fmt: Encoding, payload: str | None) -> ServiceResult:
        """Decode *payload* from *fmt*.

        A None payload is SQL NULL and only meaningful for the driver format.
        """
        op = "decode"
        if payload is None and fmt is not Encoding.DRIVER:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="MISSING_PAYLOAD",
                    message=f"a payload is required for the {fmt} format",
                    detail={"format": str(fmt)},
                ),
            )

        try:
            nu = self._decode(fmt, payload)
        except NullUUIDError as exc:
            return self._failure(op, exc, format=fmt, payload=payload)

        return ServiceResult(ok=True, op=op, data={**self._describe(nu), "format": str(fmt)})

    def inspect(self, value: str | None) -> ServiceResult:
        """Report every encoding of *value* plus a database round trip."""
        op = "inspect"
        try:
            nu = self._build(value)
        except ParseError as exc:
            return self._failure(op, exc, value=value)

        encodings = {str(fmt): self._encode(nu, fmt) for fmt in Encoding}
        stored, restored, dialect = self._database_roundtrip(nu)
        warnings: list[str] = []
        if not nu.valid:
            warnings.append("absent text encoding 'null' cannot be decoded back")
            warnings.append("absent binary encoding (0 bytes) cannot be decoded back")

        return ServiceResult(
            ok=True,
            op=op,
            data={
                **self._describe(nu),
                "encodings": encodings,
                "database": {"stored": stored, "roundtrip_equal": restored == nu},
            },
            warnings=warnings,
            meta={"dialect": dialect},
        )

    # --- Helpers ---

    @staticmethod
    def _build(value: str | None) -> NullUUID:
        if value is None:
            return NullUUID()
        return NullUUID.from_text(value)

    @staticmethod
    def _describe(nu: NullUUID) -> dict[str, Any]:
        opt = nu.to_optional()
        return {"valid": nu.valid, "uuid": str(opt) if opt is not None else None}

    def _encode(self, nu: NullUUID, fmt: Encoding) -> str | None:
        if fmt is Encoding.JSON:
            return nu.marshal_json().decode("ascii")
        if fmt is Encoding.TEXT:
            return nu.marshal_text().decode("ascii")
        if fmt is Encoding.BINARY:
            hexed = nu.marshal_binary().hex()
            return hexed.upper() if self._uppercase_hex else hexed
        return nu.driver_value()

    @staticmethod
    def _decode(fmt: Encoding, payload: str | None) -> NullUUID:
        if fmt is Encoding.DRIVER:
            return NullUUID.from_driver(payload)
        assert payload is not None
        if fmt is Encoding.JSON:
            return NullUUID.from_json(payload)
        if fmt is Encoding.TEXT:
            return NullUUID.from_text(payload)
        try:
            raw = bytes.fromhex(payload)
        except ValueError as exc:
            raise ParseError(f"binary payload is not hex: {exc}") from exc
        return NullUUID.from_binary(raw)

    def _database_roundtrip(self, nu: NullUUID) -> tuple[Any, NullUUID, str]:
        """Write *nu* through NullUUIDType and read it back.

        Returns ``(raw stored column value, NullUUID read back, dialect name)``.
        """
        engine = self._engine_factory()
        try:
            with engine.begin() as conn:
                row_id = conn.execute(
                    insert(links).values(label="inspect", parent_id=nu)
                ).inserted_primary_key[0]
                stored = conn.execute(
                    text("SELECT parent_id FROM links WHERE id = :id"), {"id": row_id}
                ).scalar_one()
                restored = conn.execute(
                    select(links.c.parent_id).where(links.c.id == row_id)
                ).scalar_one()
        finally:
            engine.dispose()
        logger.debug("database round trip stored %r", stored)
        return stored, restored, engine.dialect.name

    @staticmethod
    def _failure(op: str, exc: NullUUIDError, **detail: Any) -> ServiceResult:
        detail = {k: str(v) if isinstance(v, Encoding) else v for k, v in detail.items()}
        if isinstance(exc, LengthMismatchError):
            detail["length"] = exc.length
        logger.debug("%s failed with %s: %s", op, exc.code, exc)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=exc.code, message=str(exc), detail=detail),
        )
