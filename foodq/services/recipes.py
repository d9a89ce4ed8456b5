"""
Recipe catalogue service -- create, read, update and list recipes.

The queue subsystem never calls this module: queues hold recipe ids and
do not check that they exist.
"""

import logging

from django.core.exceptions import ValidationError
from django.db import transaction

from foodq.exceptions import FoodQError
from foodq.models import (
    Cook,
    Ingredient,
    IngredientKind,
    Recipe,
    RecipeIngredient,
    SavedRecipe,
)

logger = logging.getLogger(__name__)


class RecipeCatalog:
    """
    Recipe CRUD.

    Ingredient lines are given as dicts:
        {"name": "Flour", "kind": "grain", "amount": Decimal("0.5"), "unit": "kg"}
    Unknown ingredient names are added to the catalogue on the fly.
    """

    @classmethod
    def create(cls, ingredients: list[dict] | None = None, **fields) -> Recipe:
        """
        Create a recipe with its ingredient lines.

        Raises:
            FoodQError(VALIDATION_ERROR): invalid recipe fields
        """
        with transaction.atomic():
            recipe = Recipe(**fields)
            cls._save(recipe)
            cls._set_ingredients(recipe, ingredients or [])

        logger.info(
            f"Created recipe {recipe.pk} ({recipe.name})",
            extra={"recipe": recipe.pk, "creator": recipe.creator_id},
        )
        return recipe

    @classmethod
    def get(cls, recipe_id: int) -> Recipe:
        """
        Get a recipe by id.

        Raises:
            FoodQError(RECIPE_NOT_FOUND): no such recipe
        """
        try:
            return Recipe.objects.prefetch_related("ingredients__ingredient").get(
                pk=recipe_id
            )
        except Recipe.DoesNotExist:
            raise FoodQError("RECIPE_NOT_FOUND", recipe=recipe_id)

    @classmethod
    def update(
        cls, recipe_id: int, ingredients: list[dict] | None = None, **fields
    ) -> Recipe:
        """
        Update recipe fields; ingredient lines are replaced when given.

        Raises:
            FoodQError(RECIPE_NOT_FOUND): no such recipe
            FoodQError(VALIDATION_ERROR): invalid recipe fields
        """
        with transaction.atomic():
            try:
                recipe = Recipe.objects.select_for_update().get(pk=recipe_id)
            except Recipe.DoesNotExist:
                raise FoodQError("RECIPE_NOT_FOUND", recipe=recipe_id)

            for name, value in fields.items():
                setattr(recipe, name, value)
            cls._save(recipe)

            if ingredients is not None:
                recipe.ingredients.all().delete()
                cls._set_ingredients(recipe, ingredients)

        logger.info(f"Updated recipe {recipe.pk}", extra={"recipe": recipe.pk})
        return recipe

    @classmethod
    def list_for_cook(cls, cook_id: int) -> list[Recipe]:
        """Recipes saved by a cook, oldest save first."""
        saved = (
            SavedRecipe.objects.filter(cook_id=cook_id)
            .select_related("recipe")
            .order_by("created_at", "id")
        )
        return [s.recipe for s in saved]

    @classmethod
    def save_for_cook(cls, cook_id: int, recipe_id: int) -> SavedRecipe:
        """
        Add a recipe to a cook's saved recipes (idempotent).

        Raises:
            FoodQError(COOK_NOT_FOUND): no such cook
            FoodQError(RECIPE_NOT_FOUND): no such recipe
        """
        if not Cook.objects.filter(pk=cook_id).exists():
            raise FoodQError("COOK_NOT_FOUND", cook=cook_id)
        if not Recipe.objects.filter(pk=recipe_id).exists():
            raise FoodQError("RECIPE_NOT_FOUND", recipe=recipe_id)

        saved, created = SavedRecipe.objects.get_or_create(
            cook_id=cook_id, recipe_id=recipe_id
        )
        if created:
            logger.info(
                f"Cook {cook_id} saved recipe {recipe_id}",
                extra={"cook": cook_id, "recipe": recipe_id},
            )
        return saved

    # ══════════════════════════════════════════════════════════════
    # INTERNALS
    # ══════════════════════════════════════════════════════════════

    @staticmethod
    def _save(recipe: Recipe) -> None:
        try:
            recipe.save()
        except ValidationError as e:
            raise FoodQError("VALIDATION_ERROR", fields=e.message_dict)

    @staticmethod
    def _set_ingredients(recipe: Recipe, lines: list[dict]) -> None:
        names = [line["name"].strip() for line in lines]
        if len(set(names)) != len(names):
            raise FoodQError(
                "VALIDATION_ERROR", field="ingredients", reason="duplicate_ingredient"
            )

        for line in lines:
            ingredient, _ = Ingredient.objects.get_or_create(
                name=line["name"].strip(),
                defaults={"kind": line.get("kind") or IngredientKind.OTHER},
            )
            RecipeIngredient.objects.create(
                recipe=recipe,
                ingredient=ingredient,
                amount=line.get("amount", 1),
                unit=line.get("unit", ""),
            )
