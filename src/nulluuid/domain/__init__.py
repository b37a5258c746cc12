"""Domain layer: the nullable UUID value, the primitive it wraps, and errors.

This layer depends only on stdlib and pydantic-core.
It must never import from services, infrastructure, commands, or config.
"""
