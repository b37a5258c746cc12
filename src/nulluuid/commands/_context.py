"""AppContext: shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Configures logging, builds the codec service from
settings, and centralizes result emission (stdout/stderr + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nulluuid.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from nulluuid.config.settings import NullUUIDSettings
    from nulluuid.services.codec import CodecService
    from nulluuid.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: NullUUIDSettings) -> None:
        self.settings = settings
        self._codec: CodecService | None = None

        from nulluuid.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def codec(self) -> CodecService:
        """The codec service (created lazily on first access)."""
        if self._codec is None:
            from nulluuid.services.codec import CodecService

            self._codec = CodecService(uppercase_hex=self.settings.codec.uppercase_hex)
        return self._codec

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout; warnings go to stderr unless in JSON mode.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output and not settings.quiet:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
