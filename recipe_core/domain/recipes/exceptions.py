"""Recipe module domain exceptions."""

from recipe_core.domain.common.exceptions import ValidationError


class RecipeValidationError(ValidationError):
    """Raised when a recipe field violates its invariant."""


class MissingNameError(RecipeValidationError):
    """Raised when the recipe name is empty."""

    def __init__(self) -> None:
        super().__init__("A receita precisa ter um nome", field="name")


class MissingTagsError(RecipeValidationError):
    """Raised when the recipe has no tags."""

    def __init__(self) -> None:
        super().__init__("A receita precisa pelo menos de uma tag", field="tags")


class MissingIngredientsError(RecipeValidationError):
    """Raised when the recipe has no ingredients."""

    def __init__(self) -> None:
        super().__init__("A receita precisa pelo menos de um ingrediente", field="ingredients")


class MissingInstructionsError(RecipeValidationError):
    """Raised when the recipe has no instructions."""

    def __init__(self) -> None:
        super().__init__("A receita precisa pelo menos de uma instrução", field="instructions")
