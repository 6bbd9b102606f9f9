"""Top-level API for stripping UTF-8 byte-order-marks from files."""

from __future__ import annotations

from pathlib import Path

from debom.application.ports import ResultReporter
from debom.application.results import FileOpResult, Summary
from debom.constants import DEFAULT_PATTERN

__version__ = "0.1.0"


def process_path(
    path: Path | str,
    copy_files: bool = False,
    recursive: bool = False,
    pattern: str = DEFAULT_PATTERN,
    reporter: ResultReporter | None = None,
) -> Summary:
    """Strip UTF-8 BOMs from the files selected by ``path`` and ``pattern``.

    Parameters
    ----------
    path : Path | str
        A directory to scan or a single file.
    copy_files : bool, default=False
        Write BOM-stripped copies under ``<root>/DeBOM Copied`` instead of
        rewriting files in place.
    recursive : bool, default=False
        Descend into subdirectories. Ignored for a single file.
    pattern : str, default="*"
        Glob matched against file names. Ignored for a single file.
    reporter : ResultReporter | None, default=None
        Optional sink for per-file lines and the summary.

    Returns
    -------
    Summary
        Processed/skipped/failed counts.

    Raises
    ------
    debom.errors.ConfigurationError
        If ``path`` is blank or does not exist, or ``pattern`` is blank.
    """
    from debom.api import process_path as _impl

    return _impl(
        path=path,
        copy_files=copy_files,
        recursive=recursive,
        pattern=pattern,
        reporter=reporter,
    )


def strip_bom(path: Path | str, destination: Path | None = None) -> FileOpResult:
    """Strip the UTF-8 BOM from a single file.

    Parameters
    ----------
    path : Path | str
        File to process.
    destination : Path | None, default=None
        When given, write a BOM-stripped copy under this directory instead of
        modifying ``path``.

    Returns
    -------
    FileOpResult
        ``Continue`` when the BOM was removed, ``Skipped`` or ``Failed``
        otherwise.
    """
    from debom.api import strip_bom as _impl

    return _impl(path, destination)


__all__ = ["process_path", "strip_bom"]
