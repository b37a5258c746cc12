"""Command: show every encoding of a UUID plus a database round trip."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nulluuid.commands._base import NullUUIDCommand

if TYPE_CHECKING:
    from nulluuid.commands._context import AppContext


@click.command(
    "inspect",
    cls=NullUUIDCommand,
    examples="""\
  nulluuid inspect 12345678-abcd-1234-abcd-0123456789ab
  nulluuid inspect                       # absent
  nulluuid --json inspect urn:uuid:12345678-abcd-1234-abcd-0123456789ab""",
)
@click.argument("value", required=False)
@click.pass_obj
def inspect_cmd(app: AppContext, value: str | None) -> None:
    """Encode VALUE in all formats and round-trip it through SQLite."""
    app.emit(app.codec.inspect(value))
