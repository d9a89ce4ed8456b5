"""
Cook and SavedRecipe models.

Cook = the person who owns a queue. Name and email are optional and
stored as NULL when absent (never as empty strings).
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class Cook(models.Model):
    """Person who saves recipes and owns one recipe queue."""

    name = models.CharField(
        max_length=200,
        null=True,
        blank=True,
        verbose_name=_("Name"),
    )
    email = models.EmailField(
        unique=True,
        null=True,
        blank=True,
        verbose_name=_("Email"),
    )
    subscription = models.BooleanField(
        default=False,
        verbose_name=_("Subscription"),
    )

    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    last_login_at = models.DateTimeField(
        null=True, blank=True, verbose_name=_("last login at")
    )

    class Meta:
        db_table = "foodq_cook"
        verbose_name = _("Cook")
        verbose_name_plural = _("Cooks")
        ordering = ["id"]

    def __str__(self) -> str:
        return self.name or self.email or f"Cook #{self.pk}"


class SavedRecipe(models.Model):
    """Recipe bookmarked by a cook (what "my recipes" lists)."""

    cook = models.ForeignKey(
        Cook,
        on_delete=models.CASCADE,
        related_name="saved_recipes",
        verbose_name=_("Cook"),
    )
    recipe = models.ForeignKey(
        "foodq.Recipe",
        on_delete=models.CASCADE,
        related_name="saved_by",
        verbose_name=_("Recipe"),
    )
    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))

    class Meta:
        db_table = "foodq_saved_recipe"
        verbose_name = _("Saved Recipe")
        verbose_name_plural = _("Saved Recipes")
        ordering = ["created_at", "id"]
        constraints = [
            models.UniqueConstraint(
                fields=["cook", "recipe"], name="foodq_saved_recipe_unique"
            ),
        ]

    def __str__(self) -> str:
        return f"{self.cook} → {self.recipe}"
