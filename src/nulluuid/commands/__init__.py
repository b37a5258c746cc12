"""Subcommand modules for nulluuid.

Provides register_commands() which uses deferred imports to keep
``nulluuid --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from nulluuid.commands.decode import decode
    from nulluuid.commands.encode import encode
    from nulluuid.commands.inspect_cmd import inspect_cmd

    cli.add_command(encode)
    cli.add_command(decode)
    cli.add_command(inspect_cmd)
