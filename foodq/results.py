"""
FoodQ Result Types.

Immutable reads of a queue, returned by stores and the queue service.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class QueueSnapshot:
    """
    Estado de uma fila em um dado momento.

    entries is always a tuple, in queue order.
    """

    id: int
    cook_id: int
    entries: tuple[int, ...]
    version: int
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def length(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class NextRecipe:
    """
    Próxima receita da fila.

    recipe_id=None means the queue exists but is empty; 0 is a valid recipe.
    """

    queue_id: int
    recipe_id: int | None

    @property
    def is_empty(self) -> bool:
        return self.recipe_id is None
