"""Recipe context schemas."""

from recipe_core.infrastructure.recipes.schemas.recipe_schemas import (
    RecipeBase,
    RecipeCreate,
    RecipeResponse,
    RecipeValidationErrorResponse,
)

__all__ = [
    "RecipeBase",
    "RecipeCreate",
    "RecipeResponse",
    "RecipeValidationErrorResponse",
]
