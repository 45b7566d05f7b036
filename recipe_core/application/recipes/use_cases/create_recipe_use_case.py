"""
Use case for creating a recipe from raw input.
"""

from collections.abc import Iterable

import structlog

from recipe_core.domain.common.clock import Clock
from recipe_core.domain.recipes.entities.recipe import Recipe
from recipe_core.domain.recipes.exceptions import RecipeValidationError

logger = structlog.get_logger(__name__)


class CreateRecipeUseCase:
    """Use case for creating a recipe from raw input."""

    def __init__(self, clock: Clock) -> None:
        """
        Initialize use case with dependencies.

        Args:
            clock: Time source used to stamp published_at
        """
        self.clock = clock

    def create_recipe(
        self,
        id: str,
        name: str,
        tags: Iterable[str],
        ingredients: Iterable[str],
        instructions: Iterable[str],
    ) -> Recipe:
        """
        Build a validated recipe.

        Args:
            id: External identifier, or "" for a recipe not stored yet
            name: Recipe title
            tags: Classification labels
            ingredients: Ingredient lines
            instructions: Preparation steps

        Returns:
            The created recipe

        Raises:
            RecipeValidationError: For the first field that fails validation
        """
        try:
            recipe = Recipe.create(
                id=id,
                name=name,
                tags=tags,
                ingredients=ingredients,
                instructions=instructions,
                clock=self.clock,
            )
        except RecipeValidationError as err:
            logger.info(
                "recipe_validation_failed",
                recipe_id=id or None,
                field=err.field,
                reason=err.message,
            )
            raise

        logger.info(
            "recipe_created",
            recipe_id=recipe.id.value,
            name=recipe.name.value,
            tag_count=len(recipe.tags),
            ingredient_count=len(recipe.ingredients),
            instruction_count=len(recipe.instructions),
        )

        return recipe
