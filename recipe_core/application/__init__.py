"""
Application layer.

The application layer orchestrates domain objects and defines the boundaries
of the system. It contains use cases that represent the operations available
to external actors, such as an HTTP handler or a file importer that needs to
turn raw input into a validated Recipe.
"""
