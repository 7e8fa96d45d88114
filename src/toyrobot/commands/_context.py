"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Builds session services from the settings and
centralizes result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from toyrobot.output.formatters import OutputSettings, format_result, format_results

if TYPE_CHECKING:
    from toyrobot.config.settings import RobotSettings
    from toyrobot.services.dispatcher import ReportSink
    from toyrobot.services.result import ServiceResult
    from toyrobot.services.session import LineObserver, SessionService


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: RobotSettings) -> None:
        self.settings = settings

        from toyrobot.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            echo_commands=self.settings.output.echo_commands,
        )

    def session_service(
        self,
        *,
        sink: ReportSink | None = None,
        observer: LineObserver | None = None,
    ) -> SessionService:
        """A SessionService on the configured grid."""
        from toyrobot.services.session import SessionService

        return SessionService(self.settings.grid, sink=sink, observer=observer)

    def _emit_warnings(self, result: ServiceResult, *, prefix: str = "") -> None:
        for warning in result.warnings:
            click.echo(f"WARNING: {prefix}{warning}", err=True)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Per-line failures are emitted to stderr so they don't pollute
          piped report output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = self.output_settings
        output = format_result(result, settings=settings)
        if result.ok:
            if output:
                click.echo(output)
            if not settings.json_output:
                self._emit_warnings(result)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    def emit_many(self, results: list[ServiceResult]) -> None:
        """Output one result per input file; exit 1 if any file failed."""
        settings = self.output_settings
        if settings.json_output:
            click.echo(format_results(results, settings=settings))
        else:
            succeeded = [r for r in results if r.ok]
            if succeeded:
                click.echo(format_results(succeeded, settings=settings))
            for result in results:
                if result.ok:
                    self._emit_warnings(result, prefix=f"{result.data['source']}: ")
                else:
                    click.echo(format_result(result, settings=settings), err=True)
        if not all(r.ok for r in results):
            raise SystemExit(1)
