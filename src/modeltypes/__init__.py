"""modeltypes — Date/DateTime value types and record field glue."""

__version__ = "0.1.0"

from modeltypes.domain.dates import (
    DEFAULT_SERVER_DATE_FORMAT,
    DEFAULT_SERVER_DATETIME_FORMAT,
    ZERO_INSTANT,
    Date,
    DateTime,
    now,
    parse_date,
    parse_date_with_layout,
    parse_datetime,
    parse_datetime_with_layout,
    today,
)
from modeltypes.domain.fields import FieldMap, KeySubstitution
from modeltypes.domain.records import (
    FieldName,
    ModelName,
    RecordIDWithName,
    RecordRef,
    Selection,
)
from modeltypes.errors import (
    DateRangeError,
    DecodeError,
    FatalParseError,
    ModelTypesError,
    ParseError,
    ScanTypeError,
)

__all__ = [
    "DEFAULT_SERVER_DATETIME_FORMAT",
    "DEFAULT_SERVER_DATE_FORMAT",
    "ZERO_INSTANT",
    "Date",
    "DateTime",
    "DateRangeError",
    "DecodeError",
    "FatalParseError",
    "FieldMap",
    "FieldName",
    "KeySubstitution",
    "ModelName",
    "ModelTypesError",
    "ParseError",
    "RecordIDWithName",
    "RecordRef",
    "ScanTypeError",
    "Selection",
    "now",
    "parse_date",
    "parse_date_with_layout",
    "parse_datetime",
    "parse_datetime_with_layout",
    "today",
]
