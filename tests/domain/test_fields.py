"""Tests for FieldMap and KeySubstitution."""

from __future__ import annotations

import pytest

from modeltypes.domain.dates import parse_date
from modeltypes.domain.fields import FieldMap, KeySubstitution


@pytest.fixture
def field_map() -> FieldMap:
    return FieldMap(id=3, name="Alice", birthday=parse_date("1990-04-12"))


class TestEnumeration:
    def test_keys_and_values(self, field_map: FieldMap) -> None:
        assert sorted(field_map.keys()) == ["birthday", "id", "name"]
        assert "Alice" in list(field_map.values())

    def test_dates_are_plain_values(self, field_map: FieldMap) -> None:
        assert field_map["birthday"] == parse_date("1990-04-12")


class TestRemovePK:
    def test_removes_both_spellings(self) -> None:
        fm = FieldMap(id=1, ID=2, name="x")
        fm.remove_pk()
        assert fm == {"name": "x"}

    def test_missing_pk_is_fine(self) -> None:
        fm = FieldMap(name="x")
        fm.remove_pk()
        assert fm == {"name": "x"}


class TestRemovePKIfZero:
    def test_removes_zero(self) -> None:
        fm = FieldMap(id=0, ID=0, name="x")
        fm.remove_pk_if_zero()
        assert fm == {"name": "x"}

    def test_keeps_nonzero(self, field_map: FieldMap) -> None:
        field_map.remove_pk_if_zero()
        assert field_map["id"] == 3

    @pytest.mark.parametrize("value", [False, "0", None, 0.0])
    def test_keeps_non_integer_zero_like_values(self, value: object) -> None:
        fm = FieldMap(id=value)
        fm.remove_pk_if_zero()
        assert "id" in fm


class TestSubstituteKeys:
    def test_rename(self, field_map: FieldMap) -> None:
        field_map.substitute_keys([KeySubstitution(orig="name", new="display_name")])
        assert "name" not in field_map
        assert field_map["display_name"] == "Alice"

    def test_keep_original(self, field_map: FieldMap) -> None:
        field_map.substitute_keys([KeySubstitution(orig="name", new="display_name", keep=True)])
        assert field_map["name"] == "Alice"
        assert field_map["display_name"] == "Alice"

    def test_missing_origin_is_skipped(self, field_map: FieldMap) -> None:
        field_map.substitute_keys([KeySubstitution(orig="email", new="mail")])
        assert "mail" not in field_map

    def test_applied_in_order(self) -> None:
        fm = FieldMap(a=1)
        fm.substitute_keys([KeySubstitution("a", "b"), KeySubstitution("b", "c")])
        assert fm == {"c": 1}

    def test_same_key_without_keep(self) -> None:
        fm = FieldMap(a=1)
        fm.substitute_keys([KeySubstitution("a", "a")])
        assert fm == {"a": 1}
