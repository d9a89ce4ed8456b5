"""
FoodQ Services.

Collaborators around the queue subsystem:
- onboarding: create cooks and their queue
- recipes: recipe CRUD and saved recipes
"""

from foodq.services.onboarding import Onboarding
from foodq.services.recipes import RecipeCatalog

__all__ = [
    "Onboarding",
    "RecipeCatalog",
]
