"""
Onboarding service -- create cooks and their (single) recipe queue.

All methods are @classmethod so callers never instantiate it.
"""

import logging

from django.core.exceptions import ValidationError

from foodq.conf import get_queue_service
from foodq.exceptions import FoodQError
from foodq.models import Cook
from foodq.results import QueueSnapshot

logger = logging.getLogger(__name__)


class Onboarding:
    """Cook and queue creation."""

    @classmethod
    def create_cook(
        cls,
        name: str | None = None,
        email: str | None = None,
        subscription: bool = False,
    ) -> Cook:
        """
        Create a cook.

        Blank name/email are stored as NULL (absent), not as "".

        Raises:
            FoodQError(VALIDATION_ERROR): invalid or already used email
        """
        cook = Cook(
            name=(name or "").strip() or None,
            email=(email or "").strip().lower() or None,
            subscription=subscription,
        )
        try:
            cook.full_clean()
        except ValidationError as e:
            raise FoodQError("VALIDATION_ERROR", fields=e.message_dict)

        cook.save()

        logger.info(f"Created cook {cook.pk}", extra={"cook": cook.pk})
        return cook

    @classmethod
    def create_queue(cls, cook: Cook | int) -> QueueSnapshot:
        """
        Create the empty recipe queue of a cook.

        Args:
            cook: Cook instance or id

        Raises:
            FoodQError(COOK_NOT_FOUND): no such cook
            FoodQError(QUEUE_EXISTS): cook already has a queue
        """
        cook_id = cook.pk if isinstance(cook, Cook) else cook
        if isinstance(cook_id, bool) or not isinstance(cook_id, int):
            raise FoodQError("VALIDATION_ERROR", field="cook", value=repr(cook_id))

        if not Cook.objects.filter(pk=cook_id).exists():
            raise FoodQError("COOK_NOT_FOUND", cook=cook_id)

        snapshot = get_queue_service().store.create(cook_id)

        logger.info(
            f"Created queue {snapshot.id} for cook {cook_id}",
            extra={"cook": cook_id, "queue": snapshot.id},
        )
        return snapshot
