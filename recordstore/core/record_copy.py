"""Record Copy — value-semantics copy of a record with selected fields changed.

Invariants:
    - copy_record never mutates its input
    - Supported shapes: dataclass instances, pydantic models (frozen or not), NamedTuples
    - Unsupported shapes raise TypeError; the store rejects them at construction

Design Decisions:
    - Records are values: "set active=True" is modelled as copy-then-write-back
      at the same index, never as attribute assignment on the stored object
"""

import dataclasses
from typing import Any, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


def is_namedtuple(record: object) -> bool:
    return isinstance(record, tuple) and hasattr(record, "_replace") and hasattr(record, "_fields")


def supports_copy(record: object) -> bool:
    """Whether copy_record can produce a modified copy of this record."""
    if isinstance(record, BaseModel) or is_namedtuple(record):
        return True
    return dataclasses.is_dataclass(record) and not isinstance(record, type)


def copy_record(record: T, **changes: Any) -> T:
    """Return a copy of `record` with `changes` applied."""
    if isinstance(record, BaseModel):
        return record.model_copy(update=changes)
    if is_namedtuple(record):
        return record._replace(**changes)
    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        return dataclasses.replace(record, **changes)
    raise TypeError(
        f"Cannot copy record of type {type(record).__name__}: "
        "expected a dataclass instance, a pydantic model or a NamedTuple",
    )
