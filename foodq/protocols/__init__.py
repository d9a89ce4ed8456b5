"""
FoodQ Protocols.

Defines interfaces for storage integrations.
"""

from foodq.protocols.store import QueueStore

__all__ = [
    "QueueStore",
]
