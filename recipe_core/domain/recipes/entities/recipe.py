"""Recipe aggregate root."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from recipe_core.domain.common.clock import Clock, local_now
from recipe_core.domain.common.entity import Entity
from recipe_core.domain.recipes.value_objects import (
    RecipeId,
    RecipeIngredients,
    RecipeInstructions,
    RecipeName,
    RecipeTags,
)


@dataclass(frozen=True, eq=False, repr=False)
class Recipe(Entity[RecipeId]):
    """
    Recipe aggregate root.

    Business Rules:
    - Name, tags, ingredients and instructions cannot be empty
    - Each field validates itself; there are no cross-field rules
    - Fields are validated in a fixed order (id, name, tags, ingredients,
      instructions) and the first failure is raised
    - published_at is stamped once, when the recipe is created
    - A recipe is never modified; changes produce a new Recipe
    """

    # Identity
    id: RecipeId

    # Content
    name: RecipeName
    tags: RecipeTags
    ingredients: RecipeIngredients
    instructions: RecipeInstructions

    # Metadata
    published_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        for field_name, expected in (
            ("id", RecipeId),
            ("name", RecipeName),
            ("tags", RecipeTags),
            ("ingredients", RecipeIngredients),
            ("instructions", RecipeInstructions),
        ):
            value = getattr(self, field_name)
            if not isinstance(value, expected):
                raise TypeError(
                    f"Recipe.{field_name} must be a {expected.__name__}, "
                    f"got {type(value).__name__}; use Recipe.create for raw input"
                )
        if self.published_at is not None and not isinstance(self.published_at, datetime):
            raise TypeError("Recipe.published_at must be a datetime or None")

    # Factory methods
    @classmethod
    def create(
        cls,
        id: str,
        name: str,
        tags: Iterable[str],
        ingredients: Iterable[str],
        instructions: Iterable[str],
        *,
        clock: Clock = local_now,
    ) -> "Recipe":
        """
        Create a recipe from raw input.

        Args:
            id: External identifier, or "" for a recipe not stored yet
            name: Recipe title
            tags: Classification labels
            ingredients: Ingredient lines
            instructions: Preparation steps
            clock: Time source for published_at, read exactly once

        Returns:
            New Recipe instance

        Raises:
            MissingNameError: If name is empty
            MissingTagsError: If tags is empty
            MissingIngredientsError: If ingredients is empty
            MissingInstructionsError: If instructions is empty
        """
        recipe_id = RecipeId.from_primitive(id)
        recipe_name = RecipeName.from_primitive(name)
        recipe_tags = RecipeTags.from_primitive(tags)
        recipe_ingredients = RecipeIngredients.from_primitive(ingredients)
        recipe_instructions = RecipeInstructions.from_primitive(instructions)

        return cls(
            id=recipe_id,
            name=recipe_name,
            tags=recipe_tags,
            ingredients=recipe_ingredients,
            instructions=recipe_instructions,
            published_at=clock(),
        )

    @classmethod
    def create_with_id(
        cls,
        id: str,
        name: str,
        tags: Iterable[str],
        ingredients: Iterable[str],
        instructions: Iterable[str],
        published_at: datetime | None,
    ) -> "Recipe":
        """Reconstitute a recipe from storage or transport, keeping its published_at."""
        return cls(
            id=RecipeId.from_primitive(id),
            name=RecipeName.from_primitive(name),
            tags=RecipeTags.from_primitive(tags),
            ingredients=RecipeIngredients.from_primitive(ingredients),
            instructions=RecipeInstructions.from_primitive(instructions),
            published_at=published_at,
        )
