"""Application use-cases orchestrating BOM-stripping runs."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent import futures
from pathlib import Path

from pydantic import ValidationError

from debom.application.options import Copy, Options, Overwrite, copy_directory_for
from debom.application.ports import FileOpener, ResultReporter
from debom.application.results import Continue, Failed, FileOpResult, Summary
from debom.constants import DEFAULT_PATTERN
from debom.errors import ConfigurationError
from debom.infrastructure.file_system import discover_files, open_stream
from debom.infrastructure.strategies import select_strategy
from debom.schemas import RunConfig

logger = logging.getLogger(__name__)


def build_options(
    *,
    path: Path | str,
    copy_files: bool = False,
    recursive: bool = False,
    pattern: str = DEFAULT_PATTERN,
) -> Options:
    """Build typed run options from command/API params.

    Raises
    ------
    ConfigurationError
        If the path is blank or missing, or the pattern is blank or anchored.
    """
    try:
        config = RunConfig(
            path=path,
            copy_files=copy_files,
            recursive=recursive,
            pattern=pattern,
        )
    except ValidationError as exc:
        messages = "; ".join(str(error["msg"]).removeprefix("Value error, ") for error in exc.errors())
        raise ConfigurationError(messages) from exc

    root = Path(config.path)
    output_mode = Copy(copy_directory_for(root)) if config.copy_files else Overwrite()
    return Options(
        path=root,
        output_mode=output_mode,
        recursive=config.recursive,
        pattern=config.pattern,
    )


def process_file(
    path: Path,
    options: Options,
    *,
    opener: FileOpener | None = None,
) -> FileOpResult:
    """Use-case: run one file through open, detection and the output strategy.

    The handle is closed before this returns, whatever the outcome.
    """
    opener = opener or open_stream
    opened = opener(path)
    if not isinstance(opened, Continue):
        return opened

    with opened.handle as handle:
        strategy = select_strategy(options, path)
        result = strategy(handle)
    logger.debug("%s -> %s", path, type(result).__name__)
    return result


def _process_and_report(
    path: Path,
    options: Options,
    opener: FileOpener | None,
    reporter: ResultReporter | None,
) -> FileOpResult:
    try:
        result = process_file(path, options, opener=opener)
    except Exception as exc:
        logger.exception("unexpected error while processing %s", path)
        result = Failed(str(exc) or type(exc).__name__)
    if reporter is not None:
        try:
            reporter.report(path, result)
        except OSError:
            logger.warning("could not report result for %s", path, exc_info=True)
    return result


def run_batch(
    files: Sequence[Path],
    options: Options,
    *,
    reporter: ResultReporter | None = None,
    opener: FileOpener | None = None,
    max_workers: int | None = None,
) -> Summary:
    """Use-case: process every file concurrently and summarize the outcomes.

    Parameters
    ----------
    files : Sequence[Path]
        Files to process; one task is submitted per entry.
    options : Options
        Shared, immutable run options.
    reporter : ResultReporter | None, default=None
        Receives each file's result as soon as it is ready, then the summary
        after every task has finished.
    opener : FileOpener | None, default=None
        Override for :func:`open_stream`.
    max_workers : int | None, default=None
        Thread pool size; ``None`` uses the executor default.

    Returns
    -------
    Summary
        Counts whose total equals ``len(files)``.
    """
    with futures.ThreadPoolExecutor(
        max_workers=max_workers,
        thread_name_prefix="debom",
    ) as executor:
        pending = [
            executor.submit(_process_and_report, path, options, opener, reporter)
            for path in files
        ]
        results = [future.result() for future in pending]

    summary = Summary.from_results(results)
    if reporter is not None:
        destination = (
            options.output_mode.destination
            if isinstance(options.output_mode, Copy)
            else None
        )
        reporter.report_summary(summary, destination)
    return summary


def run(
    options: Options,
    *,
    reporter: ResultReporter | None = None,
    max_workers: int | None = None,
) -> Summary:
    """Use-case: discover files for ``options`` and process them.

    Raises
    ------
    ConfigurationError
        If the glob pattern cannot be applied to the root directory.
    """
    try:
        files = discover_files(options)
    except (ValueError, NotImplementedError) as exc:
        raise ConfigurationError(f"Invalid pattern '{options.pattern}': {exc}") from exc
    logger.debug("discovered %d file(s) under %s", len(files), options.path)
    return run_batch(files, options, reporter=reporter, max_workers=max_workers)
