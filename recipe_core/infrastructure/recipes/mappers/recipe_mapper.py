"""Mapper for Recipe schema ↔ Domain conversion."""

from recipe_core.domain.common.clock import Clock, local_now
from recipe_core.domain.recipes.entities.recipe import Recipe
from recipe_core.domain.recipes.exceptions import RecipeValidationError
from recipe_core.infrastructure.recipes.schemas.recipe_schemas import (
    RecipeCreate,
    RecipeResponse,
    RecipeValidationErrorResponse,
)


class RecipeMapper:
    """Mapper for Recipe schema ↔ Domain conversion."""

    def __init__(self, clock: Clock = local_now) -> None:
        self.clock = clock

    def to_domain(self, schema: RecipeCreate) -> Recipe:
        """Create a new domain recipe from raw input."""
        return Recipe.create(
            id=schema.id,
            name=schema.name,
            tags=schema.tags,
            ingredients=schema.ingredients,
            instructions=schema.instructions,
            clock=self.clock,
        )

    def from_response(self, schema: RecipeResponse) -> Recipe:
        """Reconstitute a domain recipe from its serialized form."""
        return Recipe.create_with_id(
            id=schema.id or "",
            name=schema.name,
            tags=schema.tags,
            ingredients=schema.ingredients,
            instructions=schema.instructions,
            published_at=schema.published_at,
        )

    def to_response(self, recipe: Recipe) -> RecipeResponse:
        """Convert domain recipe to its serialized form."""
        return RecipeResponse(
            id=recipe.id.to_primitive(),
            name=recipe.name.to_primitive(),
            tags=recipe.tags.to_primitive(),
            ingredients=recipe.ingredients.to_primitive(),
            instructions=recipe.instructions.to_primitive(),
            published_at=recipe.published_at,
        )

    def to_error_response(self, error: RecipeValidationError) -> RecipeValidationErrorResponse:
        """Convert a validation failure to its serialized form."""
        return RecipeValidationErrorResponse(field=error.field, message=error.message)
