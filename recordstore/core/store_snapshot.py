"""Store Snapshot — serialization / deserialization of a record sequence.

Invariants:
    - to_snapshot produces a JSON-safe list (one dict per record, store order kept)
    - from_snapshot rebuilds records in the same order with no other hidden state
    - Snapshot entries never contain the blank record

Design Decisions:
    - Pydantic does the per-record work (model_dump / model_validate); dataclass
      and NamedTuple records go through pydantic's TypeAdapter so all shapes share one path
    - mode="json" on dump: UUIDs, datetimes and Enums become plain strings
    - NamedTuples dump as lists, so entries are re-keyed by _fields
"""

from typing import Any, Sequence, TypeVar

from pydantic import BaseModel, TypeAdapter

from recordstore.core.record_copy import is_namedtuple

T = TypeVar("T")


def _adapter(record_type: type) -> TypeAdapter:
    return TypeAdapter(record_type)


def record_to_dict(record: object) -> dict[str, Any]:
    """Serialize one record to a JSON-safe dict."""
    if isinstance(record, BaseModel):
        return record.model_dump(mode="json")
    dumped = _adapter(type(record)).dump_python(record, mode="json")
    if is_namedtuple(record):
        return dict(zip(record._fields, dumped))
    return dumped


def store_to_snapshot(records: Sequence[object]) -> list[dict[str, Any]]:
    """Serialize an ordered record sequence. Pure, no IO."""
    return [record_to_dict(r) for r in records]


def store_from_snapshot(
    snapshot: Sequence[dict[str, Any]], record_type: type[T],
) -> list[T]:
    """Rebuild records of `record_type` from a snapshot, preserving order."""
    if isinstance(record_type, type) and issubclass(record_type, BaseModel):
        return [record_type.model_validate(entry) for entry in snapshot]
    adapter = _adapter(record_type)
    if isinstance(record_type, type) and issubclass(record_type, tuple):
        return [adapter.validate_python(record_type(**entry)) for entry in snapshot]
    return [adapter.validate_python(entry) for entry in snapshot]
