"""
Queue ordering -- pure operations over a sequence of recipe references.

No I/O, no Django. Every function takes the current entries and returns
a new list; the input is never mutated. Duplicates are allowed: the same
recipe may be queued twice, and remove/move only touch the FIRST match.

Usage:
    from foodq.ordering import append, move_to_position

    entries = append([5, 7], 9)             # [5, 7, 9]
    entries = move_to_position(entries, 9, 0)  # [9, 5, 7]
"""

from __future__ import annotations

from collections.abc import Sequence

from foodq.exceptions import FoodQError


def append(entries: Sequence[int] | None, recipe_id: int) -> list[int]:
    """Add recipe_id at the end. A missing sequence starts a new one."""
    return [*(entries or ()), recipe_id]


def peek_first(entries: Sequence[int] | None) -> int | None:
    """
    Return the next recipe, or None when the queue is empty.

    None is the empty signal; recipe 0 is a legitimate reference.
    """
    if not entries:
        return None
    return entries[0]


def index_of(entries: Sequence[int] | None, recipe_id: int) -> int:
    """
    Index of the first occurrence of recipe_id.

    Raises:
        FoodQError(NOT_PRESENT): sequence is empty or has no such recipe
    """
    for index, entry in enumerate(entries or ()):
        if entry == recipe_id:
            return index
    raise FoodQError("NOT_PRESENT", recipe=recipe_id)


def remove_first_match(entries: Sequence[int] | None, recipe_id: int) -> list[int]:
    """
    Remove the first occurrence of recipe_id.

    Later duplicates stay where they are; the result is exactly one
    element shorter than the input.

    Raises:
        FoodQError(NOT_PRESENT): sequence is empty or has no such recipe
    """
    index = index_of(entries, recipe_id)
    return [*entries[:index], *entries[index + 1 :]]


def move_to_position(
    entries: Sequence[int] | None, recipe_id: int, position: int
) -> list[int]:
    """
    Move the first occurrence of recipe_id to a zero-based position.

    The recipe is taken out first and re-inserted at ``position`` of what
    remains, so valid positions are 0..len(entries) - 1. Anything outside
    that range is rejected, never clamped. Moving to the current index
    returns the same ordering.

    Args:
        entries: Current queue
        recipe_id: Recipe to move
        position: Target index in the resulting queue

    Returns:
        New list with the same elements and length

    Raises:
        FoodQError(NOT_PRESENT): sequence is empty or has no such recipe
        FoodQError(INVALID_POSITION): position outside 0..len(entries) - 1
    """
    remaining = remove_first_match(entries, recipe_id)

    if not 0 <= position <= len(remaining):
        raise FoodQError(
            "INVALID_POSITION",
            recipe=recipe_id,
            position=position,
            max_position=len(remaining),
        )

    remaining.insert(position, recipe_id)
    return remaining
