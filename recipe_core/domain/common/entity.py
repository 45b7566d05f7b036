"""
Base class for Entities.

Entities are objects that have a distinct identity. Two entities are equal
if they have the same assigned identity, regardless of their attributes.
An entity whose identity has not been assigned yet (not persisted) is only
equal to itself.

Example:
    @dataclass(frozen=True, eq=False, repr=False)
    class Recipe(Entity[RecipeId]):
        id: RecipeId
        name: RecipeName
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Entity IDs are value objects that wrap an external identifier string.
    The identifier has two states:

    - absent (``value is None``): the entity has not been stored yet
    - assigned (non-empty ``value``): the identity given by storage

    An empty string is never a valid assigned identity. Use
    ``from_primitive`` to map raw input, where ``""`` means absent.
    """

    value: str | None = None

    def __post_init__(self) -> None:
        if self.value is not None and not isinstance(self.value, str):
            raise TypeError(
                f"{self.__class__.__name__} expects a str or None, got {type(self.value).__name__}"
            )
        if self.value is not None and not self.value:
            raise ValueError(
                f"{self.__class__.__name__} cannot be an empty string, use generate() instead"
            )

    def __str__(self) -> str:
        return self.value or ""

    @property
    def is_assigned(self) -> bool:
        """Whether storage has assigned an identity."""
        return self.value is not None

    @classmethod
    def generate(cls) -> Self:
        """Set placeholder (absent) id. Usually these are set by the storage layer"""
        return cls(None)

    @classmethod
    def from_primitive(cls, raw: str) -> Self:
        """Map raw input to an id, treating an empty string as absent."""
        if not isinstance(raw, str):
            raise TypeError(f"{cls.__name__} expects a str, got {type(raw).__name__}")
        if not raw:
            return cls.generate()
        return cls(raw)

    def to_primitive(self) -> str | None:
        """Convert to primitive for serialization."""
        return self.value


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Entities are:
    - Defined by identity (not attributes)
    - Have lifecycle (created, stored, replaced)

    Subclasses must have an 'id' attribute of type IdType.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        if not self.id.is_assigned or not other.id.is_assigned:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        if not self.id.is_assigned:
            return id(self)
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
