"""
Recipe domain module.

Contains the Recipe aggregate, its value objects and validation errors.
"""

from .entities.recipe import Recipe
from .exceptions import (
    MissingIngredientsError,
    MissingInstructionsError,
    MissingNameError,
    MissingTagsError,
    RecipeValidationError,
)
from .value_objects import (
    RecipeId,
    RecipeIngredients,
    RecipeInstructions,
    RecipeName,
    RecipeTags,
)

__all__ = [
    "MissingIngredientsError",
    "MissingInstructionsError",
    "MissingNameError",
    "MissingTagsError",
    "Recipe",
    "RecipeId",
    "RecipeIngredients",
    "RecipeInstructions",
    "RecipeName",
    "RecipeTags",
    "RecipeValidationError",
]
