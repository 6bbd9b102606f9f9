"""Output strategies composed from BOM primitives."""

from __future__ import annotations

import logging
from functools import partial
from pathlib import Path

from debom.application.options import Copy, Options, Overwrite
from debom.application.results import Failed, FileOpResult, chain
from debom.infrastructure.bom import check_for_bom, copy_remaining_bytes, shift_in_place
from debom.infrastructure.file_system import PathError, create_copy_path
from debom.types import FileHandle, Stage

logger = logging.getLogger(__name__)


def overwrite_strategy() -> Stage:
    """Detect the BOM, then shift the file contents left in place."""
    return chain(check_for_bom, shift_in_place)


def copy_strategy(file_path: Path, base_path: Path, destination: Path) -> Stage:
    """Detect the BOM, then write the remaining bytes to the mirror path."""

    def _run(handle: FileHandle) -> FileOpResult:
        try:
            target = create_copy_path(destination, base_path, file_path)
        except PathError as exc:
            return Failed(str(exc))
        logger.debug("copy target for %s is %s", file_path, target)
        return chain(check_for_bom, partial(copy_remaining_bytes, target))(handle)

    return _run


def select_strategy(options: Options, file_path: Path) -> Stage:
    """Return the stage pipeline matching ``options.output_mode``."""
    match options.output_mode:
        case Overwrite():
            return overwrite_strategy()
        case Copy(destination=destination):
            return copy_strategy(file_path, options.root_directory, destination)
    raise TypeError(f"Unsupported output mode: {options.output_mode!r}")
