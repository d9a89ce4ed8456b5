"""
FoodQ Models.

- Cook: owner of saved recipes and of one queue
- SavedRecipe: recipe bookmarked by a cook
- Ingredient / Recipe / RecipeIngredient: the recipe catalogue
- RecipeQueue: ordered recipe ids a cook plans to cook next
"""

from foodq.models.cook import Cook, SavedRecipe
from foodq.models.queue import RecipeQueue
from foodq.models.recipe import (
    Ingredient,
    IngredientKind,
    MealType,
    Recipe,
    RecipeIngredient,
)

__all__ = [
    "Cook",
    "SavedRecipe",
    "Ingredient",
    "IngredientKind",
    "MealType",
    "Recipe",
    "RecipeIngredient",
    "RecipeQueue",
]
