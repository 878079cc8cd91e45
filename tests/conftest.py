"""Shared pytest fixtures for modeltypes tests."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime

import pytest
from sqlalchemy import Column, Integer, MetaData, Table, create_engine
from sqlalchemy.engine import Engine

from modeltypes.domain import dates
from modeltypes.infrastructure.database import DateTimeType, DateType

FIXED_NOW = datetime(2017, 8, 1, 10, 2, 57)

metadata = MetaData()

events = Table(
    "events",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("day", DateType, nullable=False),
    Column("at", DateTimeType, nullable=False),
    Column("due", DateType),  # nullable: Python None round-trips as NULL
)


@pytest.fixture
def db_engine() -> Iterator[Engine]:
    """In-memory SQLite engine with the ``events`` table created."""
    engine = create_engine("sqlite:///:memory:")
    metadata.create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def fixed_clock(monkeypatch: pytest.MonkeyPatch) -> datetime:
    """Pin ``today()`` / ``now()`` to :data:`FIXED_NOW`."""
    monkeypatch.setattr(dates, "_clock", lambda: FIXED_NOW)
    return FIXED_NOW


@pytest.fixture
def events_table() -> Table:
    """The ``events`` table: a Date, a DateTime, and a nullable Date column."""
    return events
