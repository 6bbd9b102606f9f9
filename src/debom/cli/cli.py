#!/usr/bin/env python3
"""
debom.cli.cli

Typer-based CLI that strips UTF-8 byte-order-marks from files.

Examples
--------
Strip BOMs in place from every file directly under ``./data``:

    debom ./data

Write BOM-stripped copies of all ``.csv`` files, recursively:

    debom ./data --copy --recursive --pattern "*.csv"
"""

from __future__ import annotations

import logging
import traceback

import typer

from debom.constants import DEFAULT_PATTERN
from debom.errors import DebomError

app = typer.Typer(
    name="debom",
    help="Remove UTF-8 byte-order-marks from files, in place or into a copy tree.",
    no_args_is_help=True,
)

PATH_HELP = "A directory or file to process."
COPY_HELP = (
    "Store a copy of the processed files instead of overwriting the original(s)."
)
RECURSIVE_HELP = (
    "Search recursively in subdirectories. Ignored when a file path is provided."
)
PATTERN_HELP = "Pattern to match files against. Ignored when a file path is provided."


def _configure_logging(debug: bool) -> None:
    """Route library logging to stderr; DEBUG when ``--debug`` is set."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(threadName)s %(name)s: %(message)s",
    )


def _print_run_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly run error.

    Parameters
    ----------
    exc : Exception
        Exception raised before or during the run.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.secho(f"\nError: {exc}\n", fg=typer.colors.RED, err=True)
    if debug:
        typer.echo("Traceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


@app.command()
def main(
    path: str = typer.Argument(..., help=PATH_HELP, show_default=False),
    copy_files: bool = typer.Option(False, "--copy", "-c", help=COPY_HELP),
    recursive: bool = typer.Option(False, "--recursive", "-r", help=RECURSIVE_HELP),
    pattern: str = typer.Option(DEFAULT_PATTERN, "--pattern", "-p", help=PATTERN_HELP),
    debug: bool = typer.Option(False, "--debug", help="Log pipeline steps and show full tracebacks."),
) -> None:
    """Strip UTF-8 BOMs from the files selected by PATH.

    Parameters
    ----------
    path : str
        Directory to scan or a single file.
    copy_files : bool, default=False
        Write BOM-stripped copies under ``DeBOM Copied`` instead of rewriting
        files in place.
    recursive : bool, default=False
        Descend into subdirectories.
    pattern : str, default="*"
        Glob matched against file names.
    debug : bool, default=False
        Enable DEBUG logging and tracebacks.

    Notes
    -----
    - Per-file failures are reported but never change the exit status.
    - Only configuration errors exit non-zero.
    """
    _configure_logging(debug)

    from debom.application.use_cases import build_options, run
    from debom.infrastructure.reporting import ConsoleReporter

    try:
        options = build_options(
            path=path,
            copy_files=copy_files,
            recursive=recursive,
            pattern=pattern,
        )
        run(options, reporter=ConsoleReporter())
    except DebomError as exc:
        raise typer.Exit(code=_print_run_error(exc, debug))


if __name__ == "__main__":
    app()
