"""Main Typer application.

Entry point: ``minver`` (configured via pyproject.toml ``[project.scripts]``).

Commands: report, version.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from minver import __version__
from minver.config import settings
from minver.exceptions import EventDecodeError, EventReportError
from minver.logging_setup import configure_logging
from minver.reporting.decoding import iter_events
from minver.reporting.handlers import minimal_output_handler_for_std_streams
from minver.reporting.reporter import EventReporter

app = typer.Typer(
    name="minver",
    help="minver: minimum-supported-version result reporting.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

EXIT_OK = 0
EXIT_FAILURE_REPORTED = 1
EXIT_BAD_INPUT = 2


@app.command(name="report", help="Render JSON-lines events as minimal output.")
def report_cmd(
    input_path: Optional[Path] = typer.Option(
        None,
        "--input",
        "-i",
        exists=True,
        dir_okay=False,
        readable=True,
        help="JSON-lines event file. Reads stdin when omitted.",
    ),
    strict: Optional[bool] = typer.Option(
        None,
        "--strict/--no-strict",
        help="Fail on final results the minimal handler cannot render.",
    ),
) -> None:
    """Feed every event through the minimal output handler.

    Versions and ``true`` go to stdout; ``none``, ``unsupported`` and
    ``false`` go to stderr.  Exits 1 when anything was written to stderr.
    """
    configure_logging(settings.log_level)
    error_console = Console(stderr=True)

    if strict is None:
        strict = settings.effective_strict

    handler = minimal_output_handler_for_std_streams(strict=strict)
    reporter = EventReporter([handler])

    # Raw bytes; decode_event owns UTF-8 decoding.
    try:
        if input_path is not None:
            with input_path.open("rb") as fh:
                reporter.report_stream(iter_events(fh))
        else:
            reporter.report_stream(iter_events(sys.stdin.buffer))
    except EventDecodeError as exc:
        error_console.print(f"[red]Invalid event:[/red] {exc}")
        raise typer.Exit(code=EXIT_BAD_INPUT) from exc
    except EventReportError as exc:
        error_console.print(f"[red]Reporting failed:[/red] {exc}")
        raise typer.Exit(code=EXIT_FAILURE_REPORTED) from exc

    if handler.failure_sink.lines_written:
        raise typer.Exit(code=EXIT_FAILURE_REPORTED)


@app.command(name="version", help="Show the minver version.")
def version_cmd() -> None:
    typer.echo(__version__)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
