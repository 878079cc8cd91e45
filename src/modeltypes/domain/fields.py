"""FieldMap: one record's column values keyed by column name.

Values are stored as-is; Date and DateTime get no special handling.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

PK_KEYS: tuple[str, ...] = ("id", "ID")


@dataclass(frozen=True)
class KeySubstitution:
    """Rename ``orig`` to ``new``; with ``keep`` the original key stays too."""

    orig: str
    new: str
    keep: bool = False


class FieldMap(dict[str, Any]):
    """A ``dict`` of column values with primary-key and renaming helpers."""

    def remove_pk(self) -> None:
        """Drop the primary-key entries (``id`` and ``ID``)."""
        for key in PK_KEYS:
            self.pop(key, None)

    def remove_pk_if_zero(self) -> None:
        """Drop primary-key entries whose value is the integer 0.

        ``False`` is not treated as zero.
        """
        for key in PK_KEYS:
            value = self.get(key)
            if isinstance(value, int) and not isinstance(value, bool) and value == 0:
                del self[key]

    def substitute_keys(self, substs: Iterable[KeySubstitution]) -> None:
        """Apply *substs* in order. Missing ``orig`` keys are skipped."""
        for subst in substs:
            if subst.orig not in self:
                continue
            value = self[subst.orig]
            if not subst.keep:
                del self[subst.orig]
            self[subst.new] = value
