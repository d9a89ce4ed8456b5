"""
Recipe, Ingredient and RecipeIngredient models.

Recipe = what a cook can queue. The queue itself only stores recipe ids,
so nothing here is consulted by the queue subsystem.
"""

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models
from django.utils.translation import gettext_lazy as _


class MealType(models.TextChoices):
    """Meal a recipe is meant for."""

    BREAKFAST = "breakfast", _("Breakfast")
    LUNCH = "lunch", _("Lunch")
    DINNER = "dinner", _("Dinner")
    DESSERT = "dessert", _("Dessert")
    SNACK = "snack", _("Snack")


class IngredientKind(models.TextChoices):
    """Food group of an ingredient."""

    VEGETABLE = "vegetable", _("Vegetable")
    FRUIT = "fruit", _("Fruit")
    MEAT = "meat", _("Meat")
    MEAT_ALTERNATIVE = "meat_alternative", _("Meat alternative")
    FATS = "fats", _("Fats")
    DAIRY = "dairy", _("Dairy")
    GRAIN = "grain", _("Grain")
    SPICE = "spice", _("Spice")
    PULSE = "pulse", _("Pulse")
    OTHER = "other", _("Other")


class Ingredient(models.Model):
    """Catalogue entry for something a recipe uses."""

    name = models.CharField(
        unique=True,
        max_length=100,
        verbose_name=_("Name"),
    )
    kind = models.CharField(
        max_length=20,
        choices=IngredientKind.choices,
        default=IngredientKind.OTHER,
        verbose_name=_("Kind"),
    )

    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    class Meta:
        db_table = "foodq_ingredient"
        verbose_name = _("Ingredient")
        verbose_name_plural = _("Ingredients")
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class Recipe(models.Model):
    """
    Receita.

    Times are durations (prep, cook, total); all optional.
    dietary_restrictions is a list of labels: ["vegan", "gluten-free"].
    """

    name = models.CharField(
        max_length=200,
        verbose_name=_("Name"),
    )
    instructions = models.TextField(
        blank=True,
        verbose_name=_("Instructions"),
    )
    category = models.CharField(
        max_length=20,
        choices=MealType.choices,
        default=MealType.DINNER,
        verbose_name=_("Category"),
    )
    cuisine = models.CharField(
        max_length=100,
        blank=True,
        verbose_name=_("Cuisine"),
    )
    servings = models.PositiveSmallIntegerField(
        default=1,
        verbose_name=_("Servings"),
    )
    dietary_restrictions = models.JSONField(
        default=list,
        blank=True,
        verbose_name=_("Dietary restrictions"),
    )

    total_time = models.DurationField(null=True, blank=True, verbose_name=_("Total time"))
    prep_time = models.DurationField(null=True, blank=True, verbose_name=_("Prep time"))
    cook_time = models.DurationField(null=True, blank=True, verbose_name=_("Cook time"))

    creator = models.ForeignKey(
        "foodq.Cook",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="created_recipes",
        verbose_name=_("Creator"),
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    class Meta:
        db_table = "foodq_recipe"
        verbose_name = _("Recipe")
        verbose_name_plural = _("Recipes")
        ordering = ["name", "id"]
        indexes = [
            models.Index(fields=["category"], name="foodq_recipe_category_idx"),
        ]

    def clean(self):
        super().clean()
        if self.servings is not None and self.servings <= 0:
            raise ValidationError({"servings": _("Must be greater than zero.")})
        if not isinstance(self.dietary_restrictions, list):
            raise ValidationError(
                {"dietary_restrictions": _("Must be a list of labels.")}
            )
        for label in self.dietary_restrictions:
            if not isinstance(label, str) or not label.strip():
                raise ValidationError(
                    {"dietary_restrictions": _("Labels must be non-empty strings.")}
                )

    def save(self, *args, **kwargs):
        self.full_clean()
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return self.name


class RecipeIngredient(models.Model):
    """Ingredient line of a recipe: how much of what."""

    recipe = models.ForeignKey(
        Recipe,
        on_delete=models.CASCADE,
        related_name="ingredients",
        verbose_name=_("Recipe"),
    )
    ingredient = models.ForeignKey(
        Ingredient,
        on_delete=models.PROTECT,
        related_name="recipe_lines",
        verbose_name=_("Ingredient"),
    )
    amount = models.DecimalField(
        max_digits=10,
        decimal_places=3,
        default=Decimal("1"),
        verbose_name=_("Amount"),
    )
    unit = models.CharField(
        max_length=20,
        blank=True,
        verbose_name=_("Unit"),
        help_text=_("g, kg, ml, cup, tbsp, un..."),
    )

    class Meta:
        db_table = "foodq_recipe_ingredient"
        verbose_name = _("Recipe Ingredient")
        verbose_name_plural = _("Recipe Ingredients")
        ordering = ["recipe", "id"]
        constraints = [
            models.UniqueConstraint(
                fields=["recipe", "ingredient"], name="foodq_recipe_ingredient_unique"
            ),
        ]

    def __str__(self) -> str:
        unit_str = f" {self.unit}" if self.unit else ""
        return f"{self.ingredient} ({self.amount}{unit_str})"
