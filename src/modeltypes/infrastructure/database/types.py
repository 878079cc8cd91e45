"""Column types carrying Date and DateTime through SQLAlchemy.

Values are stored as canonical text in a ``TEXT`` column, the same way
timestamps are stored elsewhere in SQLite schemas: ``YYYY-MM-DD`` or
``YYYY-MM-DD HH:MM:SS``. Sub-second parts are never written.

Two kinds of "empty" stay distinct at this boundary:

- A null Date/DateTime is written as the zero-instant literal
  (``0001-01-01``), never as SQL NULL, and reads back as a null value.
- Python ``None`` is written as SQL NULL and reads back as ``None``.
  This is the only way to store "no value" in a nullable column.
"""

from __future__ import annotations

from typing import Any, ClassVar, TypeVar

from sqlalchemy import Text
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator

from modeltypes.domain.dates import Date, DateTime, format_instant

_T = TypeVar("_T", Date, DateTime)


class _TemporalType(TypeDecorator[_T]):
    impl = Text
    cache_ok = True

    value_type: ClassVar[type[Date] | type[DateTime]]

    def process_bind_param(self, value: Any, dialect: Dialect) -> str | None:
        if value is None:
            return None
        if not isinstance(value, self.value_type):
            value = self.value_type.scan(value)
        return format_instant(value.value(), self.value_type.layout)

    def process_result_value(self, value: Any, dialect: Dialect) -> _T | None:
        if value is None:
            return None
        return self.value_type.scan(value)

    @property
    def python_type(self) -> type[Date] | type[DateTime]:
        return self.value_type


class DateType(_TemporalType[Date]):
    """``TEXT`` column holding a :class:`~modeltypes.domain.dates.Date`."""

    value_type = Date


class DateTimeType(_TemporalType[DateTime]):
    """``TEXT`` column holding a :class:`~modeltypes.domain.dates.DateTime`."""

    value_type = DateTime
