"""
Django ORM Queue Store - RecipeQueue rows as durable queue storage.

Concurrency:
    guard(queue_id) holds an in-process lock for that id and opens
    transaction.atomic(); fetch() inside the guard reads with
    SELECT ... FOR UPDATE, so other processes wait on the row lock
    (PostgreSQL, MySQL) and guards on different ids run side by side.

    SQLite has one writer per database and no row locks, so two open
    transactions on different ids collide with "database table is locked".
    On that backend every store call also takes a store-wide lock: guarded
    cycles run one at a time and only wait, never fail, on each other.

Settings:
    FOODQ = {
        "QUEUE_STORE": "foodq.adapters.orm.OrmQueueStore",
        "DATABASE_ALIAS": "default",
        "LOCK_TIMEOUT": 10,
    }
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from django.db import DatabaseError, IntegrityError, connections, transaction

from foodq.conf import get_setting
from foodq.exceptions import FoodQError
from foodq.locks import KeyedLock
from foodq.models import RecipeQueue
from foodq.results import QueueSnapshot

logger = logging.getLogger(__name__)

_sentinel = object()


class OrmQueueStore:
    """QueueStore backed by the RecipeQueue model."""

    def __init__(self, using: str | None = None, lock_timeout=_sentinel):
        self.using = using or get_setting("DATABASE_ALIAS")
        self.lock_timeout = (
            get_setting("LOCK_TIMEOUT") if lock_timeout is _sentinel else lock_timeout
        )
        self._locks = KeyedLock()
        self._held = threading.local()
        self._writer = threading.RLock()

    # ══════════════════════════════════════════════════════════════
    # PROTOCOL
    # ══════════════════════════════════════════════════════════════

    @contextmanager
    def guard(self, queue_id: int) -> Iterator[None]:
        """Lock one queue id and run the block in a single transaction."""
        with self._locks.hold(queue_id, timeout=self.lock_timeout):
            held = self._held_ids()
            held.add(queue_id)
            try:
                with self._serialized(), transaction.atomic(using=self.using):
                    yield
            except DatabaseError as exc:
                logger.error(
                    f"Queue {queue_id}: transaction failed, rolled back",
                    extra={"queue": queue_id, "error": str(exc)},
                )
                raise FoodQError(
                    "STORAGE_FAULT", queue=queue_id, operation="commit"
                ) from exc
            finally:
                held.discard(queue_id)

    def fetch(self, queue_id: int) -> QueueSnapshot:
        qs = self._queues()
        if queue_id in self._held_ids():
            qs = qs.select_for_update()

        try:
            with self._serialized():
                row = qs.get(pk=queue_id)
        except RecipeQueue.DoesNotExist:
            raise FoodQError("QUEUE_NOT_FOUND", queue=queue_id)
        except DatabaseError as exc:
            logger.error(
                f"Queue {queue_id}: fetch failed",
                extra={"queue": queue_id, "error": str(exc)},
            )
            raise FoodQError("STORAGE_FAULT", queue=queue_id, operation="fetch") from exc

        return self._snapshot(row)

    def replace(self, queue_id: int, entries: Sequence[int]) -> QueueSnapshot:
        try:
            with self._serialized(), transaction.atomic(using=self.using):
                row = self._queues().select_for_update().get(pk=queue_id)
                row.entries = list(entries)
                row.version += 1
                row.save(update_fields=["entries", "version", "updated_at"])
        except RecipeQueue.DoesNotExist:
            raise FoodQError("QUEUE_NOT_FOUND", queue=queue_id)
        except DatabaseError as exc:
            logger.error(
                f"Queue {queue_id}: replace failed, nothing stored",
                extra={"queue": queue_id, "error": str(exc)},
            )
            raise FoodQError(
                "STORAGE_FAULT", queue=queue_id, operation="replace"
            ) from exc

        return self._snapshot(row)

    def create(self, cook_id: int) -> QueueSnapshot:
        try:
            with self._serialized(), transaction.atomic(using=self.using):
                if self._queues().filter(cook_id=cook_id).exists():
                    raise FoodQError("QUEUE_EXISTS", cook=cook_id)
                row = self._queues().create(cook_id=cook_id, entries=[])
        except IntegrityError as exc:
            # Lost the race against another create for the same cook
            raise FoodQError("QUEUE_EXISTS", cook=cook_id) from exc
        except DatabaseError as exc:
            raise FoodQError("STORAGE_FAULT", cook=cook_id, operation="create") from exc

        return self._snapshot(row)

    def close(self) -> None:
        connection = connections[self.using]
        if not connection.in_atomic_block:
            connection.close()
        logger.info(f"Queue store on '{self.using}' closed")

    # ══════════════════════════════════════════════════════════════
    # INTERNALS
    # ══════════════════════════════════════════════════════════════

    def _queues(self):
        return RecipeQueue.objects.using(self.using)

    @contextmanager
    def _serialized(self) -> Iterator[None]:
        """Store-wide lock, taken only where the database has a single writer."""
        if connections[self.using].vendor != "sqlite":
            yield
            return

        timeout = -1 if self.lock_timeout is None else self.lock_timeout
        if not self._writer.acquire(timeout=timeout):
            raise FoodQError(
                "STORAGE_FAULT", database=self.using, reason="lock_timeout"
            )
        try:
            yield
        finally:
            self._writer.release()

    def _held_ids(self) -> set:
        if not hasattr(self._held, "ids"):
            self._held.ids = set()
        return self._held.ids

    @staticmethod
    def _snapshot(row: RecipeQueue) -> QueueSnapshot:
        return QueueSnapshot(
            id=row.pk,
            cook_id=row.cook_id,
            entries=tuple(row.entries or ()),
            version=row.version,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
