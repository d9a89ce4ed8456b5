"""
Queue Store Protocol - interface for durable queue storage.

FoodQ defines this protocol. Storage adapters (Django ORM, in-memory)
implement it; QueueService only ever talks to a QueueStore.
"""

from __future__ import annotations

from collections.abc import Sequence
from contextlib import AbstractContextManager
from typing import Protocol, runtime_checkable

from foodq.results import QueueSnapshot


@runtime_checkable
class QueueStore(Protocol):
    """
    Protocol for keyed, ordered queue storage.

    Contract:
    - replace() is the only mutation and is atomic per queue id
    - guard() gives exclusive read-modify-write scope for one queue id;
      different ids never block each other
    - storage failures surface as FoodQError(STORAGE_FAULT)
    """

    def fetch(self, queue_id: int) -> QueueSnapshot:
        """
        Return the stored queue.

        Inside a guard() block, the read is part of the guarded cycle.

        Raises:
            FoodQError(QUEUE_NOT_FOUND): no queue with that id
            FoodQError(STORAGE_FAULT): storage unavailable
        """
        ...

    def replace(self, queue_id: int, entries: Sequence[int]) -> QueueSnapshot:
        """
        Overwrite the stored entries, bump version and updated_at.

        Raises:
            FoodQError(QUEUE_NOT_FOUND): queue vanished
            FoodQError(STORAGE_FAULT): write failed, nothing was stored
        """
        ...

    def guard(self, queue_id: int) -> AbstractContextManager[None]:
        """
        Exclusive scope for one fetch + replace cycle.

        An exception inside the block leaves the queue as it was.
        """
        ...

    def create(self, cook_id: int) -> QueueSnapshot:
        """
        Create an empty queue owned by cook_id.

        Raises:
            FoodQError(QUEUE_EXISTS): cook already has a queue
        """
        ...

    def close(self) -> None:
        """Release resources held by the store."""
        ...
