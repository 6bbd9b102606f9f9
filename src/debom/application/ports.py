"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from debom.application.results import FileOpResult, Summary


class FileOpener(Protocol):
    """Open a file for read-write processing."""

    def __call__(self, path: Path) -> FileOpResult:
        """Return ``Continue(handle)`` or a terminal result."""


class ResultReporter(Protocol):
    """Serialized sink for per-file and run-level output."""

    def report(self, path: Path, result: FileOpResult) -> None:
        """Emit one line for one file's result."""

    def report_summary(self, summary: Summary, destination: Path | None) -> None:
        """Emit the run summary once every file has been reported."""
