"""Serialized console reporting of per-file results and run summaries."""

from __future__ import annotations

import threading
from pathlib import Path

import typer

from debom.application.results import Continue, FileOpResult, Skipped, Summary, describe

_COLORS = {
    Continue: typer.colors.GREEN,
    Skipped: typer.colors.YELLOW,
}


class ConsoleReporter:
    """Print results one line at a time under a shared lock.

    Parameters
    ----------
    lock : threading.Lock | None, default=None
        Lock serializing output. A fresh lock is created when omitted.
    err : bool, default=False
        Write to stderr instead of stdout.
    """

    def __init__(self, lock: threading.Lock | None = None, *, err: bool = False) -> None:
        self.lock = lock or threading.Lock()
        self._err = err

    def report(self, path: Path, result: FileOpResult) -> None:
        """Print ``<path>...<outcome>`` for one file."""
        color = _COLORS.get(type(result), typer.colors.RED)
        line = f"{path}..." + typer.style(describe(result), fg=color)
        with self.lock:
            typer.echo(line, err=self._err)

    def report_summary(self, summary: Summary, destination: Path | None) -> None:
        """Print the counts line and, for copy runs, the destination root."""
        with self.lock:
            typer.echo(f"\n{summary}", err=self._err)
            if destination is not None:
                typer.secho(
                    f"\nWrote files to {destination}",
                    fg=typer.colors.BLUE,
                    err=self._err,
                )
