"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``.  Owns logging setup, the lazily built SlugService,
and result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from slugline.config.logging import configure_logging
from slugline.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from slugline.config.settings import SluglineSettings
    from slugline.services.result import ServiceResult
    from slugline.services.slug import SlugService


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: SluglineSettings) -> None:
        self.settings = settings
        self._service: SlugService | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> SlugService:
        """The slug service (created lazily on first access)."""
        if self._service is None:
            from slugline.services.slug import SlugService

            self._service = SlugService(self.settings)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout; warnings go to stderr so piped output stays clean.
        * Failure: stderr, exit code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
