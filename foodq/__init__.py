"""
FoodQ - recipes and a per-cook queue of what to cook next.

Usage:
    from foodq import get_queue_service, FoodQError

    queues = get_queue_service()

    queues.enqueue(queue_id, 5)
    queues.enqueue(queue_id, 7)
    queues.enqueue(queue_id, 9)
    queues.reorder(queue_id, 9, 0)   # [9, 5, 7]
    queues.dequeue(queue_id, 5)      # [9, 7]

    next_up = queues.next(queue_id)
    if next_up.is_empty:
        print("Nothing queued")
    else:
        print(f"Cook recipe {next_up.recipe_id}")

    # Collaborators
    from foodq.services import Onboarding, RecipeCatalog

    cook = Onboarding.create_cook(name="Ana", email="ana@example.com")
    queue = Onboarding.create_queue(cook)
"""

from foodq.exceptions import FoodQError


def __getattr__(name):
    """Lazy import to avoid AppRegistryNotReady errors."""
    if name == "QueueService":
        from foodq.service import QueueService

        return QueueService
    if name == "get_queue_service":
        from foodq.conf import get_queue_service

        return get_queue_service
    if name == "QueueSnapshot":
        from foodq.results import QueueSnapshot

        return QueueSnapshot
    if name == "NextRecipe":
        from foodq.results import NextRecipe

        return NextRecipe
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "FoodQError",
    "QueueService",
    "get_queue_service",
    "QueueSnapshot",
    "NextRecipe",
]
__version__ = "0.1.0"
