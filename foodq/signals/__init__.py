"""
FoodQ Signals.

Communication with other apps happens via signals, so the queue
subsystem never imports its listeners.

Signals:
    queue_updated: A queue mutation was stored
"""

from django.dispatch import Signal

# Queue changed - sent after the guarded cycle finished
# Sent by QueueService.enqueue() / dequeue() / reorder()
# Args: snapshot (QueueSnapshot), operation ("enqueue" | "dequeue" | "reorder"),
#       context (dict with recipe and, for reorder, position)
queue_updated = Signal()

__all__ = ["queue_updated"]
