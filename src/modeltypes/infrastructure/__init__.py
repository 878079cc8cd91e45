"""Infrastructure layer — the persistence boundary.

This layer depends on stdlib, SQLAlchemy, and the domain value types.
It must never import from config.
"""
