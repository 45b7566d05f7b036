"""
Domain layer.

The domain layer contains the core business logic of the application.
It has no dependencies on external frameworks or infrastructure.

This layer contains:
- Entities: Objects with identity
- Value Objects: Immutable, self-validating wrappers around primitives
- Aggregate Roots: Consistency boundaries (Recipe)
"""
