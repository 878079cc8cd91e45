"""Date/DateTime column types via SQLAlchemy Core."""

from modeltypes.infrastructure.database.types import DateTimeType, DateType

__all__ = [
    "DateTimeType",
    "DateType",
]
