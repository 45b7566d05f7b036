"""
Infrastructure layer.

Handles the external concerns around the domain:

- Serialization shape (pydantic schemas)
- Conversion between schemas and domain objects (mappers)

This layer depends on domain and application layers,
but they do not depend on it.
"""
