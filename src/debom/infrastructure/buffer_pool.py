"""Thread-safe pool of reusable byte buffers."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager

MIN_BUCKET_SIZE = 16


def bucket_size(size: int) -> int:
    """Round ``size`` up to the pool's power-of-two bucket capacity."""
    if size < 0:
        raise ValueError("Buffer size must be non-negative.")
    capacity = MIN_BUCKET_SIZE
    while capacity < size:
        capacity <<= 1
    return capacity


class BufferPool:
    """Lend ``bytearray`` buffers and take them back for reuse.

    Buffers handed out may be larger than requested: callers must slice to
    the logical length they need.

    Parameters
    ----------
    max_retained : int, default=32
        Maximum number of idle buffers kept per bucket.
    """

    def __init__(self, max_retained: int = 32) -> None:
        if max_retained < 0:
            raise ValueError("max_retained must be non-negative.")
        self._max_retained = max_retained
        self._free: dict[int, list[bytearray]] = {}
        self._lock = threading.Lock()

    def rent(self, size: int) -> bytearray:
        """Take a buffer of at least ``size`` bytes out of the pool."""
        capacity = bucket_size(size)
        with self._lock:
            free = self._free.get(capacity)
            if free:
                return free.pop()
        return bytearray(capacity)

    def give_back(self, buffer: bytearray) -> None:
        """Return a rented buffer; buffers of foreign sizes are dropped."""
        capacity = len(buffer)
        if capacity != bucket_size(capacity):
            return
        with self._lock:
            free = self._free.setdefault(capacity, [])
            if len(free) < self._max_retained:
                free.append(buffer)

    def idle_count(self, size: int) -> int:
        """Number of idle buffers in the bucket serving ``size``."""
        with self._lock:
            return len(self._free.get(bucket_size(size), []))

    @contextmanager
    def acquire(self, size: int) -> Iterator[bytearray]:
        """Lend a buffer for the duration of a ``with`` block."""
        buffer = self.rent(size)
        try:
            yield buffer
        finally:
            self.give_back(buffer)


shared_pool = BufferPool()
