"""
FoodQ Adapters.

Implementations of the QueueStore protocol.
Adapters are loaded by dotted path (FOODQ["QUEUE_STORE"]), so importing
this package does not touch the ORM.
"""

__all__ = [
    "OrmQueueStore",
    "InMemoryQueueStore",
]


def __getattr__(name):
    """Lazy import to avoid AppRegistryNotReady errors."""
    if name == "OrmQueueStore":
        from foodq.adapters.orm import OrmQueueStore

        return OrmQueueStore
    if name == "InMemoryQueueStore":
        from foodq.adapters.memory import InMemoryQueueStore

        return InMemoryQueueStore
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
