"""Record identification and labelling vocabulary.

``RecordIDWithName`` travels over JSON as a two-element array
``[id, "display name"]``, the shape many-to-one fields use on the wire.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, NewType, Self

from pydantic import BaseModel, model_serializer, model_validator

from modeltypes.errors import DecodeError

ModelName = NewType("ModelName", str)
FieldName = NewType("FieldName", str)

# (key -> label) choices of a selection field.
Selection = dict[str, str]


@dataclass(frozen=True)
class RecordRef:
    """Uniquely identifies a record by model and ID."""

    model_name: str
    id: int


def _pair_fields(data: Sequence[Any]) -> dict[str, Any]:
    """Check an ``[id, name]`` pair and return it as model fields."""
    if len(data) != 2:
        msg = f"record id with name must have 2 elements, got {len(data)}"
        raise DecodeError(msg, details={"length": len(data)})
    record_id, name = data
    if isinstance(record_id, float) and record_id.is_integer():
        record_id = int(record_id)
    if isinstance(record_id, bool) or not isinstance(record_id, int):
        msg = f"record id must be an integer, got {type(record_id).__name__}"
        raise DecodeError(msg, details={"index": 0})
    if not isinstance(name, str):
        msg = f"record name must be a string, got {type(name).__name__}"
        raise DecodeError(msg, details={"index": 1})
    return {"id": record_id, "name": name}


class RecordIDWithName(BaseModel):
    """A record ID together with the record's display name."""

    model_config = {"frozen": True}

    id: int
    name: str

    @model_validator(mode="before")
    @classmethod
    def coerce_pair(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            return _pair_fields(data)
        return data

    @model_serializer
    def dump_pair(self) -> list[Any]:
        return [self.id, self.name]

    def to_json(self) -> str:
        """Encode as ``[id,"name"]``."""
        return self.model_dump_json()

    @classmethod
    def from_json(cls, data: str | bytes) -> Self:
        """Decode an ``[id, "name"]`` array.

        Raises:
            DecodeError: If *data* is not a 2-element array of an integer
                and a string.
        """
        try:
            decoded = json.loads(data)
        except json.JSONDecodeError as exc:
            msg = f"invalid JSON for record id with name: {exc}"
            raise DecodeError(msg) from exc
        if not isinstance(decoded, list):
            msg = f"record id with name must be a JSON array, got {type(decoded).__name__}"
            raise DecodeError(msg)
        return cls(**_pair_fields(decoded))
