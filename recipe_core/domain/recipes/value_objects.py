"""
Recipe value objects.

Each field of a Recipe is wrapped in a value object that validates itself
on construction, so an invalid field can never be held by an aggregate.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import ClassVar, Self

from recipe_core.domain.common.entity import EntityId
from recipe_core.domain.common.value_object import ValueObject

from .exceptions import (
    MissingIngredientsError,
    MissingInstructionsError,
    MissingNameError,
    MissingTagsError,
    RecipeValidationError,
)


@dataclass(frozen=True)
class RecipeId(EntityId):
    """Strongly-typed recipe identifier. Absent until the recipe is stored."""

    value: str | None = None


@dataclass(frozen=True)
class RecipeName(ValueObject):
    """Human-readable recipe title."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"RecipeName expects a str, got {type(self.value).__name__}")
        if not self.value:
            raise MissingNameError()

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TextLines(ValueObject):
    """
    Ordered, non-empty sequence of text lines.

    ``value`` is a tuple, not a list: the accessor cannot be used to mutate
    the lines, and it compares equal to ``tuple(raw)``. Use ``to_primitive``
    for a plain list. Subclasses name the error raised for an empty
    sequence; the base class itself cannot be instantiated.
    """

    missing_error: ClassVar[type[RecipeValidationError]]

    value: tuple[str, ...]

    def __post_init__(self) -> None:
        if type(self) is TextLines:
            raise TypeError(
                "TextLines is abstract, use RecipeTags, RecipeIngredients or RecipeInstructions"
            )
        if isinstance(self.value, str):
            raise TypeError(f"{self.__class__.__name__} expects a sequence of strings, not a str")
        # Frozen dataclass: normalize lists to a tuple
        object.__setattr__(self, "value", tuple(self.value))
        if any(not isinstance(line, str) for line in self.value):
            raise TypeError(f"{self.__class__.__name__} expects every line to be a str")
        if not self.value:
            raise self.missing_error()

    def __len__(self) -> int:
        return len(self.value)

    def __iter__(self) -> Iterator[str]:
        return iter(self.value)

    def __getitem__(self, index: int) -> str:
        return self.value[index]

    @classmethod
    def from_primitive(cls, raw: Iterable[str]) -> Self:
        """Build from any ordered iterable of strings."""
        if isinstance(raw, str):
            raise TypeError(f"{cls.__name__} expects a sequence of strings, not a str")
        return cls(tuple(raw))

    def to_primitive(self) -> list[str]:
        """Convert to a plain list for serialization."""
        return list(self.value)


@dataclass(frozen=True)
class RecipeTags(TextLines):
    """Classification labels (e.g. "main", "chicken")."""

    missing_error = MissingTagsError


@dataclass(frozen=True)
class RecipeIngredients(TextLines):
    """Ingredient lines, in the order they are listed."""

    missing_error = MissingIngredientsError


@dataclass(frozen=True)
class RecipeInstructions(TextLines):
    """Preparation steps, in the order they are performed."""

    missing_error = MissingInstructionsError
