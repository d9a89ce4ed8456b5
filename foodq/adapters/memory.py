"""
In-memory Queue Store -- keeps queues in a dict.

Use this adapter for development or tests that should not touch the
database. Same locking contract as the ORM store; data lives as long as
the process. close() discards every queue, and any later call on the
store fails with STORAGE_FAULT.

Configuration:
    FOODQ = {
        "QUEUE_STORE": "foodq.adapters.memory.InMemoryQueueStore",
    }
"""

from __future__ import annotations

import dataclasses
import itertools
import threading
from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from django.utils import timezone

from foodq.conf import get_setting
from foodq.exceptions import FoodQError
from foodq.locks import KeyedLock
from foodq.results import QueueSnapshot

_sentinel = object()


class InMemoryQueueStore:
    """
    Dict-backed implementation of the QueueStore protocol.

    Snapshots are immutable, so replace() is a single reference swap:
    readers see either the old queue or the new one, never a mix.
    """

    def __init__(self, lock_timeout=_sentinel):
        self.lock_timeout = (
            get_setting("LOCK_TIMEOUT") if lock_timeout is _sentinel else lock_timeout
        )
        self._rows: dict[int, QueueSnapshot] = {}
        self._ids = itertools.count(1)
        self._write_lock = threading.Lock()
        self._locks = KeyedLock()
        self._closed = False

    @contextmanager
    def guard(self, queue_id: int) -> Iterator[None]:
        self._check_open()
        with self._locks.hold(queue_id, timeout=self.lock_timeout):
            yield

    def fetch(self, queue_id: int) -> QueueSnapshot:
        self._check_open()
        snapshot = self._rows.get(queue_id)
        if snapshot is None:
            raise FoodQError("QUEUE_NOT_FOUND", queue=queue_id)
        return snapshot

    def replace(self, queue_id: int, entries: Sequence[int]) -> QueueSnapshot:
        with self._write_lock:
            self._check_open()
            current = self._rows.get(queue_id)
            if current is None:
                raise FoodQError("QUEUE_NOT_FOUND", queue=queue_id)
            snapshot = dataclasses.replace(
                current,
                entries=tuple(entries),
                version=current.version + 1,
                updated_at=timezone.now(),
            )
            self._rows[queue_id] = snapshot
        return snapshot

    def create(self, cook_id: int) -> QueueSnapshot:
        with self._write_lock:
            self._check_open()
            if any(s.cook_id == cook_id for s in self._rows.values()):
                raise FoodQError("QUEUE_EXISTS", cook=cook_id)
            now = timezone.now()
            snapshot = QueueSnapshot(
                id=next(self._ids),
                cook_id=cook_id,
                entries=(),
                version=0,
                created_at=now,
                updated_at=now,
            )
            self._rows[snapshot.id] = snapshot
        return snapshot

    def close(self) -> None:
        with self._write_lock:
            self._rows.clear()
            self._closed = True

    def _check_open(self) -> None:
        if self._closed:
            raise FoodQError("STORAGE_FAULT", reason="closed")
