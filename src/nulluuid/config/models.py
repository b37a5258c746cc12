"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, nulluuid.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel

from nulluuid.domain.types import Encoding


class CodecConfig(BaseModel):
    """[codec] section."""

    model_config = {"frozen": True}

    default_format: Encoding = Encoding.JSON
    uppercase_hex: bool = False
