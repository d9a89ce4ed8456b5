"""
Tests for the recipe catalogue (foodq.services.recipes) and Recipe validation.
"""

from datetime import timedelta
from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError

from foodq.exceptions import FoodQError
from foodq.models import (
    Cook,
    Ingredient,
    IngredientKind,
    MealType,
    Recipe,
    RecipeIngredient,
    SavedRecipe,
)
from foodq.services import RecipeCatalog


# ═══════════════════════════════════════════════════════════════════
# Fixtures
# ═══════════════════════════════════════════════════════════════════


@pytest.fixture
def cook(db):
    return Cook.objects.create(name="Ana")


@pytest.fixture
def pancakes(db, cook):
    return RecipeCatalog.create(
        name="Pancakes",
        category=MealType.BREAKFAST,
        servings=4,
        prep_time=timedelta(minutes=10),
        dietary_restrictions=["vegetarian"],
        creator=cook,
        ingredients=[
            {"name": "Flour", "kind": IngredientKind.GRAIN, "amount": Decimal("0.25"), "unit": "kg"},
            {"name": "Milk", "kind": IngredientKind.DAIRY, "amount": Decimal("300"), "unit": "ml"},
        ],
    )


# ═══════════════════════════════════════════════════════════════════
# Recipe model validation
# ═══════════════════════════════════════════════════════════════════


class TestRecipeValidation:
    def test_zero_servings_rejected(self, db):
        with pytest.raises(ValidationError):
            Recipe.objects.create(name="Air", servings=0)

    def test_restrictions_must_be_list(self, db):
        with pytest.raises(ValidationError):
            Recipe.objects.create(name="Soup", dietary_restrictions="vegan")

    def test_restriction_labels_must_be_strings(self, db):
        with pytest.raises(ValidationError):
            Recipe.objects.create(name="Soup", dietary_restrictions=["vegan", ""])

    def test_defaults(self, db):
        recipe = Recipe.objects.create(name="Toast")
        assert recipe.category == MealType.DINNER
        assert recipe.servings == 1
        assert recipe.dietary_restrictions == []
        assert recipe.total_time is None


# ═══════════════════════════════════════════════════════════════════
# RecipeCatalog
# ═══════════════════════════════════════════════════════════════════


class TestCreate:
    def test_create_with_ingredients(self, pancakes):
        lines = list(pancakes.ingredients.order_by("id"))

        assert [line.ingredient.name for line in lines] == ["Flour", "Milk"]
        assert lines[0].amount == Decimal("0.250")
        assert lines[0].unit == "kg"
        assert lines[1].ingredient.kind == IngredientKind.DAIRY

    def test_reuses_known_ingredients(self, pancakes):
        RecipeCatalog.create(name="Bread", ingredients=[{"name": "Flour"}])

        assert Ingredient.objects.filter(name="Flour").count() == 1
        assert Ingredient.objects.get(name="Flour").recipe_lines.count() == 2

    def test_unknown_kind_defaults_to_other(self, db):
        recipe = RecipeCatalog.create(name="Tea", ingredients=[{"name": "Leaves"}])
        assert recipe.ingredients.get().ingredient.kind == IngredientKind.OTHER

    def test_invalid_fields(self, db):
        with pytest.raises(FoodQError) as exc:
            RecipeCatalog.create(name="Air", servings=0)

        assert exc.value.code == "VALIDATION_ERROR"
        assert "servings" in exc.value.details["fields"]
        assert not Recipe.objects.filter(name="Air").exists()

    def test_duplicate_ingredient_rolls_back(self, db):
        with pytest.raises(FoodQError) as exc:
            RecipeCatalog.create(
                name="Salad", ingredients=[{"name": "Kale"}, {"name": "Kale"}]
            )

        assert exc.value.code == "VALIDATION_ERROR"
        assert not Recipe.objects.filter(name="Salad").exists()


class TestGet:
    def test_get(self, pancakes):
        assert RecipeCatalog.get(pancakes.pk) == pancakes

    def test_missing(self, db):
        with pytest.raises(FoodQError) as exc:
            RecipeCatalog.get(999)
        assert exc.value.code == "RECIPE_NOT_FOUND"


class TestUpdate:
    def test_update_fields(self, pancakes):
        recipe = RecipeCatalog.update(pancakes.pk, servings=6, cuisine="American")

        recipe.refresh_from_db()
        assert recipe.servings == 6
        assert recipe.cuisine == "American"
        assert recipe.ingredients.count() == 2

    def test_replace_ingredients(self, pancakes):
        RecipeCatalog.update(pancakes.pk, ingredients=[{"name": "Oats", "unit": "cup"}])

        lines = RecipeIngredient.objects.filter(recipe=pancakes)
        assert [line.ingredient.name for line in lines] == ["Oats"]

    def test_invalid_update_keeps_recipe(self, pancakes):
        with pytest.raises(FoodQError):
            RecipeCatalog.update(pancakes.pk, servings=0, ingredients=[])

        pancakes.refresh_from_db()
        assert pancakes.servings == 4
        assert pancakes.ingredients.count() == 2

    def test_missing(self, db):
        with pytest.raises(FoodQError) as exc:
            RecipeCatalog.update(999, name="Ghost")
        assert exc.value.code == "RECIPE_NOT_FOUND"


class TestSavedRecipes:
    def test_list_in_save_order(self, cook, pancakes):
        soup = RecipeCatalog.create(name="Soup")
        RecipeCatalog.save_for_cook(cook.pk, soup.pk)
        RecipeCatalog.save_for_cook(cook.pk, pancakes.pk)

        assert RecipeCatalog.list_for_cook(cook.pk) == [soup, pancakes]

    def test_save_is_idempotent(self, cook, pancakes):
        RecipeCatalog.save_for_cook(cook.pk, pancakes.pk)
        RecipeCatalog.save_for_cook(cook.pk, pancakes.pk)

        assert SavedRecipe.objects.filter(cook=cook).count() == 1

    def test_created_recipes_are_not_saved_automatically(self, cook, pancakes):
        assert RecipeCatalog.list_for_cook(cook.pk) == []

    def test_unknown_cook(self, pancakes):
        with pytest.raises(FoodQError) as exc:
            RecipeCatalog.save_for_cook(999, pancakes.pk)
        assert exc.value.code == "COOK_NOT_FOUND"

    def test_unknown_recipe(self, cook):
        with pytest.raises(FoodQError) as exc:
            RecipeCatalog.save_for_cook(cook.pk, 999)
        assert exc.value.code == "RECIPE_NOT_FOUND"

    def test_list_for_cook_without_saves(self, cook):
        assert RecipeCatalog.list_for_cook(cook.pk) == []
