"""
Per-key mutual exclusion.

One lock per active key (queue id), created on first use and dropped when
the last holder or waiter leaves, so the registry only holds keys that are
currently busy. Different keys never block each other.

Usage:
    locks = KeyedLock()

    with locks.hold(queue_id, timeout=10):
        ...  # read-modify-write for this queue only
"""

from __future__ import annotations

import threading
from collections.abc import Hashable, Iterator
from contextlib import contextmanager

from foodq.exceptions import FoodQError


class KeyedLock:
    """Registry of reference-counted locks keyed by any hashable."""

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: dict[Hashable, list] = {}  # key -> [lock, users]

    def _checkout(self, key: Hashable) -> threading.Lock:
        with self._guard:
            slot = self._locks.get(key)
            if slot is None:
                slot = self._locks[key] = [threading.Lock(), 0]
            slot[1] += 1
            return slot[0]

    def _checkin(self, key: Hashable) -> None:
        with self._guard:
            slot = self._locks[key]
            slot[1] -= 1
            if slot[1] == 0:
                del self._locks[key]

    @contextmanager
    def hold(self, key: Hashable, timeout: float | None = None) -> Iterator[None]:
        """
        Hold the lock for ``key`` for the duration of the block.

        Raises:
            FoodQError(STORAGE_FAULT): lock not acquired within timeout
        """
        lock = self._checkout(key)
        try:
            acquired = lock.acquire(timeout=-1 if timeout is None else timeout)
            if not acquired:
                raise FoodQError("STORAGE_FAULT", key=key, reason="lock_timeout")
            try:
                yield
            finally:
                lock.release()
        finally:
            self._checkin(key)

    def active_keys(self) -> list[Hashable]:
        """Keys currently held or waited on."""
        with self._guard:
            return list(self._locks)
