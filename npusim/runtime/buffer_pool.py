# buffer_pool.py
# ---------------------------------------------
# Fixed-capacity pool of pre-allocated DMA buffers.
# Buffers are handed out as BufferHandle objects and returned
# through release(handle). Free slots are kept on a stack (LIFO).
# ---------------------------------------------

import logging
import threading
from dataclasses import dataclass, field

import numpy as np

from npusim.runtime.errors import PoolExhausted, UnknownBufferError, BufferNotAcquiredError

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class BufferHandle:
    """Handle to a buffer acquired from a BufferPool."""
    index: int
    buffer: np.ndarray
    _pool: "BufferPool" = field(default=None, repr=False)

    @property
    def size(self) -> int:
        return self.buffer.nbytes

    def release(self):
        """Return this buffer to the pool that issued it."""
        if self._pool is None:
            raise UnknownBufferError(f"{self!r} was not issued by any pool")
        self._pool.release(self)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False


class BufferPool:
    def __init__(self, buffer_size: int, count: int):
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")

        self._lock = threading.Lock()
        self.buffer_size = buffer_size
        self.buffers = [np.zeros(buffer_size, dtype=np.uint8) for _ in range(count)]
        self._available = list(range(count))   # stack, top = last element
        self._in_use = set()

    @property
    def capacity(self) -> int:
        return len(self.buffers)

    def acquire(self) -> BufferHandle:
        """
        Take a buffer from the pool.

        The most recently released slot is handed out first.
        Raises PoolExhausted immediately if nothing is free; never waits.
        """
        with self._lock:
            if not self._available:
                raise PoolExhausted(len(self.buffers), self.buffer_size)

            idx = self._available.pop()
            self._in_use.add(idx)
            logger.debug(f"acquired buffer {idx} ({len(self._available)} left)")
            return BufferHandle(index=idx, buffer=self.buffers[idx], _pool=self)

    def release(self, handle: BufferHandle):
        """
        Return a previously acquired buffer to the pool.

        Args:
            handle: BufferHandle returned by acquire() on this pool

        Raises:
            UnknownBufferError: handle was not issued by this pool
            BufferNotAcquiredError: the slot is not currently held
        """
        if not isinstance(handle, BufferHandle) or handle._pool is not self:
            raise UnknownBufferError(f"{handle!r} was not issued by this pool")

        with self._lock:
            if handle.index not in self._in_use:
                raise BufferNotAcquiredError(handle.index)
            self._in_use.remove(handle.index)
            self._available.append(handle.index)
            logger.debug(f"released buffer {handle.index} ({len(self._available)} free)")

    def available(self) -> int:
        """Number of buffers not currently handed out."""
        with self._lock:
            return len(self._available)

    def in_use(self) -> int:
        """Number of buffers currently held by callers."""
        with self._lock:
            return len(self._in_use)

    def reset(self):
        """Return every buffer to the pool. Outstanding handles become stale."""
        with self._lock:
            self._available = list(range(len(self.buffers)))
            self._in_use.clear()

    def dump(self):
        """Print the pool map."""
        with self._lock:
            in_use = set(self._in_use)
            free = len(self._available)
        print("\n==== BUFFER POOL ====\n")
        for idx in range(len(self.buffers)):
            state = "in use" if idx in in_use else "free"
            print(f"buffer {idx:<4d} : size={self.buffer_size} bytes, {state}")
        print(f"\nIn use: {len(in_use)} buffers")
        print(f"Available: {free} buffers")
        print(f"Capacity: {len(self.buffers)} buffers\n")

    def __repr__(self):
        return (
            f"BufferPool(buffer_size={self.buffer_size}, count={len(self.buffers)}, "
            f"available={len(self._available)})"
        )
