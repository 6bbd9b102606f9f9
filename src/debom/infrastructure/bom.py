"""UTF-8 BOM detection and removal primitives.

Each function takes an open binary handle and returns a ``FileOpResult`` so
the functions can be chained with :func:`debom.application.results.bind`.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path

from debom.application.results import Continue, Failed, FileOpResult, Skipped
from debom.constants import MAX_BUFFER_SIZE, UTF8_BOM, UTF8_BOM_LENGTH
from debom.infrastructure.buffer_pool import BufferPool, shared_pool
from debom.types import FileHandle

logger = logging.getLogger(__name__)

EMPTY_FILE_REASON = "File is empty"
BOM_NOT_FOUND_REASON = "UTF-8 BOM not found"


def has_bom(buffer: bytes | bytearray | memoryview) -> bool:
    """Compare exactly the first three bytes of ``buffer`` with the UTF-8 BOM.

    Pooled buffers can be longer than requested, so only the BOM-length
    prefix is inspected.
    """
    return bytes(buffer[:UTF8_BOM_LENGTH]) == UTF8_BOM


def check_for_bom(handle: FileHandle, *, pool: BufferPool = shared_pool) -> FileOpResult:
    """Read the leading bytes of ``handle`` and decide whether it has a BOM.

    Parameters
    ----------
    handle : FileHandle
        Binary handle positioned at offset 0.
    pool : BufferPool, optional
        Pool supplying the read buffer.

    Returns
    -------
    FileOpResult
        ``Continue(handle)`` positioned just past the BOM, or ``Skipped`` for
        empty files and files without a BOM.
    """
    with pool.acquire(UTF8_BOM_LENGTH) as buffer:
        view = memoryview(buffer)[:UTF8_BOM_LENGTH]
        bytes_read = handle.readinto(view) or 0
        # Only the bytes read this call are compared; the rest is stale pool data.
        found = has_bom(view[:bytes_read])

    if bytes_read == 0:
        return Skipped(EMPTY_FILE_REASON)
    if not found:
        return Skipped(BOM_NOT_FOUND_REASON)
    return Continue(handle)


def shift_in_place(handle: FileHandle, *, pool: BufferPool = shared_pool) -> FileOpResult:
    """Move everything after the BOM to offset 0 and drop the last three bytes.

    The file is rewritten chunk by chunk without extra disk space. An error
    part-way through leaves the file partially shifted.
    """
    try:
        with pool.acquire(MAX_BUFFER_SIZE) as buffer:
            chunk = memoryview(buffer)[:MAX_BUFFER_SIZE]
            file_length = handle.seek(0, io.SEEK_END)
            read_pos = UTF8_BOM_LENGTH
            write_pos = 0
            while read_pos < file_length:
                handle.seek(read_pos)
                bytes_read = handle.readinto(chunk) or 0
                if bytes_read == 0:
                    break
                handle.seek(write_pos)
                handle.write(chunk[:bytes_read])
                read_pos += bytes_read
                write_pos += bytes_read
            handle.truncate(file_length - UTF8_BOM_LENGTH)
            handle.flush()
    except OSError as exc:
        logger.debug("in-place shift failed: %s", exc)
        return Failed(str(exc))
    return Continue(handle)


def copy_remaining_bytes(
    target_path: Path,
    handle: FileHandle,
    *,
    pool: BufferPool = shared_pool,
) -> FileOpResult:
    """Stream the rest of ``handle`` into a new file at ``target_path``.

    ``target_path`` must not exist yet. A failure while streaming can leave a
    partial file behind.
    """
    try:
        output = target_path.open("xb")
    except (OSError, ValueError) as exc:
        logger.debug("could not create %s: %s", target_path, exc)
        return Failed(str(exc))

    try:
        with output, pool.acquire(MAX_BUFFER_SIZE) as buffer:
            chunk = memoryview(buffer)[:MAX_BUFFER_SIZE]
            while bytes_read := handle.readinto(chunk) or 0:
                output.write(chunk[:bytes_read])
    except OSError as exc:
        return Failed(f"Could not copy remaining bytes: {exc}")
    return Continue(handle)
