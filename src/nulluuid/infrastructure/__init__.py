"""Infrastructure layer: SQLAlchemy column type, schema, and engine.

This layer depends on the domain layer and SQLAlchemy.
It must never import from services, commands, or output.
"""
