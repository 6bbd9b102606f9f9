"""File discovery, opening and copy-path helpers."""

from __future__ import annotations

import io
import logging
import os
from datetime import datetime
from pathlib import Path

from debom.application.options import Copy, Options
from debom.application.results import Continue, Failed, FileOpResult
from debom.types import FileHandle

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"
FILE_IN_USE_MESSAGE = "File is in use by another handle"


class PathError(ValueError):
    """Raised when a relative or copy path cannot be computed."""


class FileInUseError(OSError):
    """Raised when another handle already holds the file's exclusive lock."""


def discover_files(options: Options) -> list[Path]:
    """Enumerate the files a run should process.

    Parameters
    ----------
    options : Options
        Run options. ``pattern`` and ``recursive`` only apply when
        ``options.path`` is a directory.

    Returns
    -------
    list[Path]
        Sorted file paths, one per underlying file. Empty when the root does
        not exist.

    Notes
    -----
    Symlinks and hard links to an already listed file are dropped. In copy
    mode files already under the destination root are excluded so a second
    run never picks up copies written by the first.
    """
    root = options.path
    if root.is_file():
        return [root]
    if not root.is_dir():
        return []

    matches = root.rglob(options.pattern) if options.recursive else root.glob(options.pattern)
    excluded = None
    if isinstance(options.output_mode, Copy):
        excluded = options.output_mode.destination.resolve()

    candidates: list[Path] = []
    for candidate in matches:
        if not candidate.is_file():
            continue
        if excluded is not None and candidate.resolve().is_relative_to(excluded):
            continue
        candidates.append(candidate)

    files: list[Path] = []
    seen: set[tuple[int, int]] = set()
    for candidate in sorted(candidates):
        stat = candidate.stat()
        identity = (stat.st_dev, stat.st_ino)
        if identity in seen:
            logger.debug("skipping %s: same file already listed", candidate)
            continue
        seen.add(identity)
        files.append(candidate)
    return files


def _acquire(handle: io.FileIO) -> None:
    try:
        if os.name == "nt":
            import msvcrt

            msvcrt.locking(handle.fileno(), msvcrt.LK_NBLCK, 1)
        else:
            import fcntl

            fcntl.flock(handle, fcntl.LOCK_EX | fcntl.LOCK_NB)
    except OSError as exc:
        raise FileInUseError(exc.errno, FILE_IN_USE_MESSAGE) from exc


def _release(handle: io.FileIO) -> None:
    if os.name == "nt":
        import msvcrt

        handle.seek(0)
        msvcrt.locking(handle.fileno(), msvcrt.LK_UNLCK, 1)
    else:
        import fcntl

        fcntl.flock(handle, fcntl.LOCK_UN)


class LockedFile(io.BufferedRandom):
    """Buffered read-write handle that drops its exclusive lock on close."""

    def close(self) -> None:
        if not self.closed:
            try:
                self.flush()
                _release(self.raw)
            finally:
                super().close()


def _open_read_write(path: Path) -> FileHandle:
    raw = io.FileIO(path, "r+")
    try:
        _acquire(raw)
    except FileInUseError:
        raw.close()
        raise
    return LockedFile(raw)


def open_stream(path: Path | str) -> FileOpResult:
    """Open an existing file for exclusive read-write access.

    Parameters
    ----------
    path : Path | str
        File to open.

    Returns
    -------
    FileOpResult
        ``Continue(handle)`` on success, otherwise ``Failed`` with a message
        describing the failure class. The handle holds a non-blocking
        exclusive lock until it is closed, so a second ``open_stream`` on the
        same file fails instead of racing the first.
    """
    raw = str(path)
    if not raw.strip():
        return Failed("File path cannot be empty")
    if "\x00" in raw:
        return Failed("Path contains invalid characters")

    file_path = Path(raw)
    try:
        handle = _open_read_write(file_path)
    except FileInUseError:
        return Failed(FILE_IN_USE_MESSAGE)
    except PermissionError:
        return Failed("Access to the file is denied")
    except FileNotFoundError:
        parent = file_path.absolute().parent
        if not parent.is_dir():
            return Failed(f"Directory {parent} not found")
        return Failed(f"File {file_path.absolute()} not found")
    except (OSError, ValueError) as exc:
        return Failed(str(exc))

    logger.debug("opened %s", file_path)
    return Continue(handle)


def relative_file_path(base_path: Path, file_path: Path) -> Path:
    """Return ``file_path`` relative to ``base_path``.

    ``base_path`` may be a file, in which case its directory is used.

    Examples
    --------
    ``/example/path/to/file.txt`` relative to ``/example/path`` is
    ``to/file.txt``.
    """
    if not str(base_path).strip() or not str(file_path).strip():
        raise PathError("Base path and file name cannot be empty.")
    base = base_path if base_path.is_dir() else base_path.parent
    relative = Path(os.path.relpath(file_path.absolute(), base.absolute()))
    if relative.parts and relative.parts[0] == os.pardir:
        raise PathError(f"File {file_path} is not located under {base}")
    return relative


def ensure_directory_exists(file_path: Path) -> Path:
    """Create the parent directory of ``file_path`` if it is missing."""
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise PathError(f"Could not create directory {file_path.parent}: {exc}") from exc
    return file_path.absolute()


def unique_copy_path(target: Path, now: datetime | None = None) -> Path:
    """Return ``target`` or, if taken, a timestamped sibling that is free."""
    if not target.exists():
        return target
    stamp = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
    candidate = target.with_name(f"{target.stem}_{stamp}{target.suffix}")
    counter = 1
    while candidate.exists():
        candidate = target.with_name(f"{target.stem}_{stamp}_{counter}{target.suffix}")
        counter += 1
    return candidate


def create_copy_path(destination: Path, base_path: Path, file_path: Path) -> Path:
    """Compute where the BOM-stripped copy of ``file_path`` is written.

    The mirror directory is created; the file itself is not.

    Raises
    ------
    PathError
        If the relative path or the mirror directory cannot be produced.
    """
    mirror = destination / relative_file_path(base_path, file_path)
    return unique_copy_path(ensure_directory_exists(mirror))
