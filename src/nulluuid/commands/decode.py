"""Command: decode a payload in one format."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nulluuid.commands._base import FORMAT_CHOICE, NullUUIDCommand, resolve_format

if TYPE_CHECKING:
    from nulluuid.commands._context import AppContext


@click.command(
    cls=NullUUIDCommand,
    examples="""\
  nulluuid decode '"12345678-abcd-1234-abcd-0123456789ab"'
  nulluuid decode null
  nulluuid decode 12345678abcd1234abcd0123456789ab --format binary
  nulluuid decode --format driver        # SQL NULL""",
)
@click.argument("payload", required=False)
@click.option("-f", "--format", "fmt", type=FORMAT_CHOICE, default=None, help="Source encoding.")
@click.pass_obj
def decode(app: AppContext, payload: str | None, fmt: str | None) -> None:
    """Decode PAYLOAD. Binary payloads are given as hex.

    Omitting PAYLOAD means SQL NULL and is only valid with --format driver.
    """
    encoding = resolve_format(fmt, app.settings.codec.default_format)
    app.emit(app.codec.decode(encoding, payload))
