"""Command: encode a UUID (or absence) in one format."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nulluuid.commands._base import FORMAT_CHOICE, NullUUIDCommand, resolve_format

if TYPE_CHECKING:
    from nulluuid.commands._context import AppContext


@click.command(
    cls=NullUUIDCommand,
    examples="""\
  nulluuid encode 12345678-abcd-1234-abcd-0123456789ab
  nulluuid encode 12345678-abcd-1234-abcd-0123456789ab --format binary
  nulluuid encode --format json          # absent -> null
  nulluuid -q encode {12345678-abcd-1234-abcd-0123456789ab} -f text""",
)
@click.argument("value", required=False)
@click.option("-f", "--format", "fmt", type=FORMAT_CHOICE, default=None, help="Target encoding.")
@click.pass_obj
def encode(app: AppContext, value: str | None, fmt: str | None) -> None:
    """Encode VALUE; omit VALUE to encode an absent UUID."""
    encoding = resolve_format(fmt, app.settings.codec.default_format)
    app.emit(app.codec.encode(encoding, value))
