"""Date and DateTime value types.

Both types wrap a :class:`datetime.datetime` instant and share one
contract across every boundary they cross:

- Null detection: a value is null when its text at the type's precision
  equals the text of :data:`ZERO_INSTANT`.
- Text: ``YYYY-MM-DD`` for Date, ``YYYY-MM-DD HH:MM:SS`` for DateTime.
- JSON: the quoted canonical text, or the literal ``false`` when null.
- Database: :meth:`value` never yields ``None`` (a null value is sent as
  :data:`ZERO_INSTANT`), :meth:`scan` accepts datetimes, canonical text
  of either type, and the empty string.

INVARIANT: equality and null detection compare canonical text, never
truncated instants. Ordering and :meth:`sub` use the full instant.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from typing import Any, ClassVar, Self

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from modeltypes.errors import DateRangeError, DecodeError, FatalParseError, ParseError, ScanTypeError

logger = logging.getLogger(__name__)

DEFAULT_SERVER_DATE_FORMAT = "%Y-%m-%d"
DEFAULT_SERVER_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"

ZERO_INSTANT = datetime.min

_JSON_NULL = "false"


# ---------------------------------------------------------------------------
# Wall clock
# ---------------------------------------------------------------------------


def _local_clock() -> datetime:
    return datetime.now()


def _utc_clock() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


_clock: Callable[[], datetime] = _local_clock


def use_utc_clock(enabled: bool) -> None:
    """Switch :func:`today` and :func:`now` between local and UTC wall time.

    Both clocks return naive datetimes.
    """
    global _clock
    _clock = _utc_clock if enabled else _local_clock
    logger.debug("wall clock set to %s", "utc" if enabled else "local")


# ---------------------------------------------------------------------------
# Layout helpers
# ---------------------------------------------------------------------------


def format_instant(instant: datetime, layout: str) -> str:
    """Format *instant* with a ``strftime`` *layout*, year padded to 4 digits.

    glibc renders ``%Y`` for year 1 as ``"1"``, which would break the
    null sentinel, so the year is substituted before formatting.
    """
    return instant.strftime(layout.replace("%Y", f"{instant.year:04d}"))


def _parse(layout: str, value: str) -> datetime:
    try:
        parsed = datetime.strptime(value, layout)
    except ValueError as exc:
        raise ParseError(layout, value, str(exc)) from exc
    # strptime also takes unpadded or space-padded fields ("2017-8-1").
    if format_instant(parsed, layout) != value:
        raise ParseError(layout, value, "text is not in the layout's padded form")
    return parsed


def _add_date(instant: datetime, years: int, months: int, days: int) -> datetime:
    # Overflowing days roll into the next month: Jan 31 + 1 month is Mar 3
    # (Mar 2 in leap years), never clipped to the end of February.
    month_index = instant.month - 1 + months
    year = instant.year + years + month_index // 12
    month = month_index % 12 + 1
    try:
        first = instant.replace(year=year, month=month, day=1)
        return first + timedelta(days=instant.day - 1 + days)
    except (ValueError, OverflowError) as exc:
        msg = f"adding {years}y {months}m {days}d to {instant.isoformat()} leaves years 1-9999"
        raise DateRangeError(msg, details={"years": years, "months": months, "days": days}) from exc


def _comparable(a: datetime, b: datetime) -> tuple[datetime, datetime]:
    """Naive instants count as UTC when paired with an aware one."""
    if (a.tzinfo is None) == (b.tzinfo is None):
        return a, b
    if a.tzinfo is None:
        a = a.replace(tzinfo=UTC)
    if b.tzinfo is None:
        b = b.replace(tzinfo=UTC)
    return a, b


# ---------------------------------------------------------------------------
# Shared value type
# ---------------------------------------------------------------------------


@dataclass(frozen=True, eq=False)
class _Temporal:
    """Common behaviour of :class:`Date` and :class:`DateTime`."""

    instant: datetime = ZERO_INSTANT

    layout: ClassVar[str]
    fallback_layout: ClassVar[str]
    kind: ClassVar[str]

    def __post_init__(self) -> None:
        instant = self.instant
        if isinstance(instant, _Temporal):
            instant = instant.instant
        elif not isinstance(instant, datetime):
            if not isinstance(instant, date):
                msg = f"{self.kind} needs a datetime or date, got {type(instant).__name__}"
                raise TypeError(msg)
            instant = datetime(instant.year, instant.month, instant.day)
        object.__setattr__(self, "instant", instant)

    # --- text ---

    def __str__(self) -> str:
        return format_instant(self.instant, self.layout)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    def is_zero(self) -> bool:
        """Return True if this value formats like the zero instant."""
        return str(self) == format_instant(ZERO_INSTANT, self.layout)

    is_null = is_zero

    # --- JSON ---

    def to_json(self) -> str:
        """Encode as a quoted canonical string, or ``false`` when null."""
        if self.is_zero():
            return _JSON_NULL
        return json.dumps(str(self))

    @classmethod
    def from_json(cls, data: str | bytes) -> Self:
        """Decode a quoted canonical string, ``false``, ``null`` or ``""``.

        Raises:
            DecodeError: If *data* is not valid JSON, holds another JSON
                type, or the string does not match the canonical layout.
        """
        try:
            decoded = json.loads(data)
        except json.JSONDecodeError as exc:
            msg = f"invalid JSON for {cls.kind}: {exc}"
            raise DecodeError(msg) from exc
        if decoded is None or decoded is False:
            return cls()
        if not isinstance(decoded, str):
            msg = f"{cls.kind} must be a JSON string or false, got {type(decoded).__name__}"
            raise DecodeError(msg)
        if decoded == "":
            return cls()
        try:
            return cls(_parse(cls.layout, decoded))
        except ParseError as exc:
            raise DecodeError(exc.message, details=exc.details) from exc

    # --- database ---

    def value(self) -> datetime:
        """Outbound database value. A null value becomes :data:`ZERO_INSTANT`."""
        if self.is_zero():
            return ZERO_INSTANT
        return self.instant

    @classmethod
    def scan(cls, src: Any) -> Self:
        """Build a value from a database driver result.

        Accepts a ``datetime`` (copied through), a ``date`` (midnight),
        the empty string (zero value), or text in this type's layout. Text
        that fails is retried with the other type's layout.

        Raises:
            ParseError: If non-empty text matches neither layout.
            ScanTypeError: If *src* is any other type.
        """
        if isinstance(src, (datetime, date)):
            return cls(src)
        if isinstance(src, str):
            if src == "":
                return cls()
            try:
                return cls(_parse(cls.layout, src))
            except ParseError:
                logger.debug("%s scan falling back to %r for %r", cls.kind, cls.fallback_layout, src)
                return cls(_parse(cls.fallback_layout, src))
        logger.debug("%s scan rejected source of type %s", cls.kind, type(src).__name__)
        raise ScanTypeError(cls.kind, src)

    # --- comparison and arithmetic ---

    def equal(self, other: Self) -> bool:
        """Return True if both values have the same canonical text."""
        return str(self) == str(other)

    def sub(self, other: Self) -> timedelta:
        """Return the signed duration ``self - other``."""
        a, b = _comparable(self.instant, other.instant)
        return a - b

    def greater(self, other: Self) -> bool:
        return self.sub(other) > timedelta(0)

    def greater_equal(self, other: Self) -> bool:
        return self.sub(other) >= timedelta(0)

    def lower(self, other: Self) -> bool:
        return self.sub(other) < timedelta(0)

    def lower_equal(self, other: Self) -> bool:
        return self.sub(other) <= timedelta(0)

    def add_date(self, years: int, months: int, days: int) -> Self:
        """Shift by calendar years, months and days.

        Follows calendar normalization: the day of month is kept and any
        overflow rolls forward, so ``2017-01-31 + 1 month`` is ``2017-03-03``.

        Raises:
            DateRangeError: If the result falls outside years 1 to 9999.
        """
        return type(self)(_add_date(self.instant, years, months, days))

    # --- Python protocol ---

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.equal(other)

    def __hash__(self) -> int:
        return hash((self.kind, str(self)))

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.lower(other)

    def __le__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.lower_equal(other)

    def __gt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.greater(other)

    def __ge__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.greater_equal(other)

    def __sub__(self, other: object) -> timedelta:
        if type(other) is not type(self):
            return NotImplemented
        return self.sub(other)

    # --- pydantic ---

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls._serialize, when_used="json"
            ),
        )

    @classmethod
    def _validate(cls, value: Any) -> Self:
        if isinstance(value, cls):
            return value
        if isinstance(value, _Temporal):
            return cls(value.instant)
        if value is None or value is False:
            return cls()
        if isinstance(value, (datetime, date, str)):
            return cls.scan(value)
        msg = f"{cls.kind} cannot be built from {type(value).__name__}"
        raise DecodeError(msg)

    @staticmethod
    def _serialize(value: _Temporal) -> str | bool:
        if value.is_zero():
            return False
        return str(value)


class Date(_Temporal):
    """A calendar day, formatted ``YYYY-MM-DD``.

    The wrapped instant keeps its time of day in memory; only formatting,
    equality and null detection ignore it.
    """

    layout = DEFAULT_SERVER_DATE_FORMAT
    fallback_layout = DEFAULT_SERVER_DATETIME_FORMAT
    kind = "date"

    def to_datetime(self) -> DateTime:
        """Promote to a DateTime carrying the same instant."""
        return DateTime(self.instant)


class DateTime(_Temporal):
    """A point in time at second precision, formatted ``YYYY-MM-DD HH:MM:SS``."""

    layout = DEFAULT_SERVER_DATETIME_FORMAT
    fallback_layout = DEFAULT_SERVER_DATE_FORMAT
    kind = "datetime"

    def to_date(self) -> Date:
        """Narrow to the Date holding the same instant."""
        return Date(self.instant)


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------


def today() -> Date:
    """Return the current date from the wall clock."""
    return Date(_clock())


def now() -> DateTime:
    """Return the current date and time from the wall clock."""
    return DateTime(_clock())


def parse_date_with_layout(layout: str, value: str) -> Date:
    """Parse *value* under *layout*. The empty string yields the zero Date.

    Raises:
        ParseError: If *value* does not match *layout*.
    """
    if value == "":
        return Date()
    return Date(_parse(layout, value))


def parse_datetime_with_layout(layout: str, value: str) -> DateTime:
    """Parse *value* under *layout*. The empty string yields the zero DateTime.

    Raises:
        ParseError: If *value* does not match *layout*.
    """
    if value == "":
        return DateTime()
    return DateTime(_parse(layout, value))


def parse_date(value: str) -> Date:
    """Parse a trusted ``YYYY-MM-DD`` literal.

    Never use this on user input: a malformed *value* raises
    :class:`FatalParseError`, which ``except ParseError`` does not catch.
    Use :func:`parse_date_with_layout` for untrusted text.
    """
    try:
        return parse_date_with_layout(DEFAULT_SERVER_DATE_FORMAT, value)
    except ParseError as exc:
        raise FatalParseError(exc.message, details=exc.details) from exc


def parse_datetime(value: str) -> DateTime:
    """Parse a trusted ``YYYY-MM-DD HH:MM:SS`` literal.

    Same contract as :func:`parse_date`.
    """
    try:
        return parse_datetime_with_layout(DEFAULT_SERVER_DATETIME_FORMAT, value)
    except ParseError as exc:
        raise FatalParseError(exc.message, details=exc.details) from exc
