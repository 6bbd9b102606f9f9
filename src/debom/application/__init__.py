"""Application-layer use-cases and option objects."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from debom.application.options import Copy, Options, OutputMode, Overwrite
from debom.application.ports import FileOpener, ResultReporter
from debom.application.results import (
    Continue,
    Failed,
    FileOpResult,
    Skipped,
    Summary,
    bind,
    chain,
)
from debom.constants import DEFAULT_PATTERN


def build_options(
    *,
    path: Path | str,
    copy_files: bool = False,
    recursive: bool = False,
    pattern: str = DEFAULT_PATTERN,
) -> Options:
    """Build typed run options via lazy use-case import."""
    from debom.application.use_cases import build_options as _impl

    return _impl(path=path, copy_files=copy_files, recursive=recursive, pattern=pattern)


def process_file(
    path: Path,
    options: Options,
    *,
    opener: FileOpener | None = None,
) -> FileOpResult:
    """Process a single file via lazy use-case import."""
    from debom.application.use_cases import process_file as _impl

    return _impl(path, options, opener=opener)


def run_batch(
    files: Sequence[Path],
    options: Options,
    *,
    reporter: ResultReporter | None = None,
    opener: FileOpener | None = None,
    max_workers: int | None = None,
) -> Summary:
    """Process a file batch concurrently via lazy use-case import."""
    from debom.application.use_cases import run_batch as _impl

    return _impl(
        files,
        options,
        reporter=reporter,
        opener=opener,
        max_workers=max_workers,
    )


__all__ = [
    "Continue",
    "Copy",
    "Failed",
    "FileOpResult",
    "Options",
    "OutputMode",
    "Overwrite",
    "Skipped",
    "Summary",
    "bind",
    "chain",
    "build_options",
    "process_file",
    "run_batch",
]
