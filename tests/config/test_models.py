"""Tests for config section models."""

import pytest
from pydantic import ValidationError

from nulluuid.config.models import CodecConfig
from nulluuid.domain.types import Encoding


def test_codec_defaults() -> None:
    cfg = CodecConfig()
    assert cfg.default_format is Encoding.JSON
    assert cfg.uppercase_hex is False


def test_codec_accepts_format_string() -> None:
    assert CodecConfig(default_format="binary").default_format is Encoding.BINARY


def test_codec_rejects_unknown_format() -> None:
    with pytest.raises(ValidationError):
        CodecConfig(default_format="yaml")


def test_codec_frozen() -> None:
    cfg = CodecConfig()
    with pytest.raises(ValidationError):
        cfg.uppercase_hex = True  # type: ignore[misc]
