"""Exception taxonomy for modeltypes.

Five failure kinds cross the value boundaries:

- ``ParseError``: malformed text handed to an explicit-layout parser.
- ``FatalParseError``: the trusted-literal parser was given bad input.
- ``ScanTypeError``: a database value of an unsupported Python type.
- ``DecodeError``: a JSON document of the wrong shape or element type.
- ``DateRangeError``: calendar arithmetic left the representable years.

All but ``FatalParseError`` also derive from the
matching builtin (``ValueError`` / ``TypeError``) so pydantic validators
report them as ordinary validation failures.
"""

from __future__ import annotations

from typing import Any


class ModelTypesError(Exception):
    """Base exception for all modeltypes errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ParseError(ModelTypesError, ValueError):
    """Text did not match the requested layout.

    Attributes:
        layout: The ``strptime`` layout the text was parsed against.
        value: The offending text.
    """

    def __init__(self, layout: str, value: str, reason: str = "") -> None:
        message = f"cannot parse {value!r} as {layout!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, details={"layout": layout, "value": value})
        self.layout = layout
        self.value = value


class FatalParseError(ModelTypesError):
    """A trusted literal failed to parse.

    Raised by :func:`~modeltypes.domain.dates.parse_date` and
    :func:`~modeltypes.domain.dates.parse_datetime`. Deliberately not a
    :class:`ParseError`: code guarding untrusted input with
    ``except ParseError`` must not absorb a misuse of the trusted parser.
    """


class ScanTypeError(ModelTypesError, TypeError):
    """A database value arrived with an unsupported Python type."""

    def __init__(self, target: str, source: Any) -> None:
        source_type = type(source).__name__
        super().__init__(
            f"{target} data is not a datetime or str but {source_type}",
            details={"target": target, "source_type": source_type},
        )
        self.source_type = source_type


class DecodeError(ModelTypesError, ValueError):
    """A JSON document has the wrong shape or element types."""


class DateRangeError(ModelTypesError, ValueError):
    """Calendar arithmetic produced a date outside years 1 to 9999."""
