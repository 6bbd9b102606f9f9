"""Public path-based API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path

from debom.application.options import Copy, Options, Overwrite
from debom.application.ports import ResultReporter
from debom.application.results import FileOpResult, Summary
from debom.application.use_cases import build_options, process_file, run
from debom.constants import DEFAULT_PATTERN


def process_path(
    path: Path | str,
    copy_files: bool = False,
    recursive: bool = False,
    pattern: str = DEFAULT_PATTERN,
    reporter: ResultReporter | None = None,
    max_workers: int | None = None,
) -> Summary:
    """Strip UTF-8 BOMs from every matching file under ``path``."""
    options = build_options(
        path=path,
        copy_files=copy_files,
        recursive=recursive,
        pattern=pattern,
    )
    return run(options, reporter=reporter, max_workers=max_workers)


def strip_bom(path: Path | str, destination: Path | None = None) -> FileOpResult:
    """Strip the BOM from one file, in place or into ``destination``.

    The returned ``Continue`` holds the already closed handle.
    """
    file_path = Path(path)
    mode = Overwrite() if destination is None else Copy(destination)
    options = Options(path=file_path, output_mode=mode)
    return process_file(file_path, options)
