"""Domain layer — temporal value types and record glue.

This layer depends only on stdlib, pydantic, and modeltypes.errors.
It must never import from infrastructure or config.
"""
