"""Tests for the Date/DateTime SQLAlchemy column types."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

import pytest
from sqlalchemy import Row, Table, insert, select, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import StatementError

from modeltypes.domain.dates import Date, DateTime, parse_date, parse_datetime
from modeltypes.errors import ScanTypeError
from modeltypes.infrastructure.database import DateTimeType, DateType


def _insert(engine: Engine, table: Table, **values: Any) -> None:
    with engine.begin() as conn:
        conn.execute(insert(table).values(id=1, **values))


def _raw(engine: Engine) -> tuple[Any, ...]:
    with engine.connect() as conn:
        row = conn.execute(text("SELECT day, at, due FROM events WHERE id = 1")).one()
    return tuple(row)


def _typed(engine: Engine, table: Table) -> Row[Any]:
    with engine.connect() as conn:
        return conn.execute(select(table.c.day, table.c.at, table.c.due)).one()


class TestBind:
    def test_stores_canonical_text(self, db_engine: Engine, events_table: Table) -> None:
        _insert(
            db_engine,
            events_table,
            day=Date(datetime(2017, 8, 1, 10, 2, 57)),
            at=DateTime(datetime(2017, 8, 1, 10, 2, 57, 123456)),
        )
        assert _raw(db_engine) == ("2017-08-01", "2017-08-01 10:02:57", None)

    def test_zero_values_are_not_null(self, db_engine: Engine, events_table: Table) -> None:
        _insert(db_engine, events_table, day=Date(), at=DateTime(), due=Date())
        assert _raw(db_engine) == ("0001-01-01", "0001-01-01 00:00:00", "0001-01-01")

    def test_plain_values_are_scanned(self, db_engine: Engine, events_table: Table) -> None:
        _insert(db_engine, events_table, day=date(2017, 8, 1), at="2017-08-01")
        assert _raw(db_engine)[:2] == ("2017-08-01", "2017-08-01 00:00:00")

    def test_unsupported_bind_value(self, db_engine: Engine, events_table: Table) -> None:
        with pytest.raises(StatementError) as exc_info:
            _insert(db_engine, events_table, day=12, at=DateTime())
        assert isinstance(exc_info.value.orig, ScanTypeError)


class TestResult:
    def test_round_trip(self, db_engine: Engine, events_table: Table) -> None:
        day = parse_date("2017-08-01")
        at = parse_datetime("2017-08-01 10:02:57")
        _insert(db_engine, events_table, day=day, at=at, due=day.add_date(0, 0, 30))
        row = _typed(db_engine, events_table)
        assert isinstance(row.day, Date)
        assert isinstance(row.at, DateTime)
        assert row.day == day
        assert row.at == at
        assert str(row.due) == "2017-08-31"

    def test_zero_round_trip(self, db_engine: Engine, events_table: Table) -> None:
        _insert(db_engine, events_table, day=Date(), at=DateTime(), due=Date())
        row = _typed(db_engine, events_table)
        assert row.day.is_zero()
        assert row.at.is_zero()
        assert row.due.is_zero()

    def test_sql_null_reads_back_as_none(self, db_engine: Engine, events_table: Table) -> None:
        _insert(db_engine, events_table, day=Date(), at=DateTime(), due=None)
        assert _typed(db_engine, events_table).due is None

    def test_cross_layout_rows(self, db_engine: Engine, events_table: Table) -> None:
        """Rows written by other tools may hold the other type's layout."""
        with db_engine.begin() as conn:
            conn.execute(
                text(
                    "INSERT INTO events (id, day, at) "
                    "VALUES (1, '2017-08-01 10:02:57', '2017-08-01')"
                )
            )
        row = _typed(db_engine, events_table)
        assert str(row.day) == "2017-08-01"
        assert str(row.at) == "2017-08-01 00:00:00"

    def test_empty_text_reads_back_as_zero(self, db_engine: Engine, events_table: Table) -> None:
        with db_engine.begin() as conn:
            conn.execute(text("INSERT INTO events (id, day, at) VALUES (1, '', '')"))
        row = _typed(db_engine, events_table)
        assert row.day.is_zero()
        assert row.at.is_zero()


def test_python_type() -> None:
    assert DateType().python_type is Date
    assert DateTimeType().python_type is DateTime
