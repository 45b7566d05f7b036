"""
Domain common module.

Contains base classes for domain modeling:
- ValueObject: Immutable objects defined by their attributes
- Entity: Objects with identity
- Clock: Injected time source for aggregate construction
"""

from .clock import Clock, fixed_clock, local_now, system_clock
from .entity import Entity, EntityId
from .exceptions import DomainError, ValidationError
from .value_object import ValueObject

__all__ = [
    "Clock",
    "DomainError",
    "Entity",
    "EntityId",
    "ValidationError",
    "ValueObject",
    "fixed_clock",
    "local_now",
    "system_clock",
]
