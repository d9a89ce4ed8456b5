"""
RecipeQueue model.

RecipeQueue = a cook's ordered list of recipe ids to cook next.

The whole ordering lives in ``entries`` (a JSON list), so one row is one
queue and every change is a single-row UPDATE. Ordering rules live in
foodq.ordering; storage rules in foodq.adapters.orm.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _
from simple_history.models import HistoricalRecords


class RecipeQueue(models.Model):
    """
    Fila de receitas de um cook.

    entries: [12, 7, 12, 3]  (duplicates allowed, order is meaningful)
    version: bumped on every replace; 0 for a fresh queue
    """

    cook = models.OneToOneField(
        "foodq.Cook",
        on_delete=models.CASCADE,
        related_name="queue",
        verbose_name=_("Cook"),
    )
    entries = models.JSONField(
        default=list,
        blank=True,
        verbose_name=_("Entries"),
        help_text=_("Recipe ids in cooking order"),
    )
    version = models.PositiveIntegerField(
        default=0,
        verbose_name=_("Version"),
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    # History
    history = HistoricalRecords()

    class Meta:
        db_table = "foodq_queue"
        verbose_name = _("Recipe Queue")
        verbose_name_plural = _("Recipe Queues")
        ordering = ["id"]

    def __str__(self) -> str:
        return f"Queue #{self.pk} ({len(self.entries or [])} recipes)"
