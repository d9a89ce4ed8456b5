"""
FoodQ Queue Service - one Store → Ordering → Store cycle per call.

Usage:
    from foodq import get_queue_service, FoodQError

    queues = get_queue_service()

    queues.enqueue(queue_id, 42)
    queues.reorder(queue_id, 42, 0)        # cook it first
    next_up = queues.next(queue_id)
    if next_up.is_empty:
        ...

    try:
        queues.dequeue(queue_id, 99)
    except FoodQError as e:
        e.code  # "NOT_PRESENT"

Every mutation runs inside store.guard(queue_id): fetch, apply one
ordering function, replace. Two mutations on the same queue never
interleave; mutations on different queues never wait for each other.
Validation and ordering failures never reach replace().
"""

import logging
from collections.abc import Callable, Sequence

from foodq import ordering
from foodq.exceptions import FoodQError
from foodq.protocols.store import QueueStore
from foodq.results import NextRecipe, QueueSnapshot
from foodq.signals import queue_updated

logger = logging.getLogger(__name__)


def _validate_int(value, field: str, minimum: int | None = None) -> int:
    # bool is an int subclass; True is not a recipe
    if isinstance(value, bool) or not isinstance(value, int):
        raise FoodQError("VALIDATION_ERROR", field=field, value=repr(value))
    if minimum is not None and value < minimum:
        raise FoodQError(
            "VALIDATION_ERROR", field=field, value=value, minimum=minimum
        )
    return value


class QueueService:
    """
    Queue operations over an explicitly provided QueueStore.

    Build one per process (see foodq.conf.get_queue_service) and share it;
    the service keeps no per-request state.
    """

    def __init__(self, store: QueueStore):
        self.store = store

    # ══════════════════════════════════════════════════════════════
    # READS
    # ══════════════════════════════════════════════════════════════

    def contents(self, queue_id: int) -> QueueSnapshot:
        """Return the queue as stored (ordered recipe ids + metadata)."""
        queue_id = _validate_int(queue_id, "queue", minimum=1)
        return self.store.fetch(queue_id)

    def next(self, queue_id: int) -> NextRecipe:
        """
        Return the recipe to cook next.

        An empty queue is not an error: NextRecipe.is_empty is True.
        A missing queue raises QUEUE_NOT_FOUND.
        """
        queue_id = _validate_int(queue_id, "queue", minimum=1)
        snapshot = self.store.fetch(queue_id)
        recipe_id = ordering.peek_first(snapshot.entries)

        if recipe_id is None:
            logger.info(f"Queue {queue_id}: no recipes queued")

        return NextRecipe(queue_id=queue_id, recipe_id=recipe_id)

    # ══════════════════════════════════════════════════════════════
    # MUTATIONS
    # ══════════════════════════════════════════════════════════════

    def enqueue(self, queue_id: int, recipe_id: int) -> QueueSnapshot:
        """Add recipe_id at the end of the queue (duplicates allowed)."""
        queue_id = _validate_int(queue_id, "queue", minimum=1)
        recipe_id = _validate_int(recipe_id, "recipe", minimum=0)

        return self._mutate(
            queue_id,
            "enqueue",
            lambda entries: ordering.append(entries, recipe_id),
            recipe=recipe_id,
        )

    def dequeue(self, queue_id: int, recipe_id: int) -> QueueSnapshot:
        """
        Remove the first occurrence of recipe_id.

        Raises:
            FoodQError(NOT_PRESENT): recipe not queued (or queue empty)
        """
        queue_id = _validate_int(queue_id, "queue", minimum=1)
        recipe_id = _validate_int(recipe_id, "recipe", minimum=0)

        return self._mutate(
            queue_id,
            "dequeue",
            lambda entries: ordering.remove_first_match(entries, recipe_id),
            recipe=recipe_id,
        )

    def reorder(self, queue_id: int, recipe_id: int, position: int) -> QueueSnapshot:
        """
        Move the first occurrence of recipe_id to a zero-based position.

        Raises:
            FoodQError(NOT_PRESENT): recipe not queued (or queue empty)
            FoodQError(INVALID_POSITION): position outside the queue
        """
        queue_id = _validate_int(queue_id, "queue", minimum=1)
        recipe_id = _validate_int(recipe_id, "recipe", minimum=0)
        position = _validate_int(position, "position")

        return self._mutate(
            queue_id,
            "reorder",
            lambda entries: ordering.move_to_position(entries, recipe_id, position),
            recipe=recipe_id,
            position=position,
        )

    # ══════════════════════════════════════════════════════════════
    # INTERNALS
    # ══════════════════════════════════════════════════════════════

    def _mutate(
        self,
        queue_id: int,
        operation: str,
        apply: Callable[[Sequence[int]], list[int]],
        **context,
    ) -> QueueSnapshot:
        """Run fetch → apply → replace under the store guard for queue_id."""
        with self.store.guard(queue_id):
            current = self.store.fetch(queue_id)
            try:
                entries = apply(current.entries)
            except FoodQError as e:
                logger.warning(
                    f"Queue {queue_id}: {operation} rejected ({e.code})",
                    extra={"queue": queue_id, "operation": operation, **e.details},
                )
                raise
            snapshot = self.store.replace(queue_id, entries)

        logger.info(
            f"Queue {queue_id}: {operation} applied, {snapshot.length} recipes queued",
            extra={
                "queue": queue_id,
                "operation": operation,
                "version": snapshot.version,
                **context,
            },
        )

        queue_updated.send(
            sender=self.__class__,
            snapshot=snapshot,
            operation=operation,
            context=context,
        )

        return snapshot
