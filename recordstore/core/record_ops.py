"""Record Operations — lookup and circular navigation over an ordered record sequence.

Invariants:
    - Sequence order is the only navigation order (no sort key)
    - Every function is PURE: reads the sequence, never mutates it
    - Absence is a normal outcome: blank record / NOT_FOUND / status, never an exception
    - next/previous wrap around; an unknown id degrades to first/last

Design Decisions:
    - Free functions over the Identified protocol, not methods per record type
      (ADR: one implementation shared by every record shape)
    - Optional `positions` mapping short-circuits the linear scan; callers that
      pass it are responsible for keeping it in step with the sequence
"""

from typing import Hashable, Mapping, Sequence, TypeVar

from recordstore.core.domain_types import NOT_FOUND, StoreStatus
from recordstore.core.identity import Identified

R = TypeVar("R", bound=Identified)


def index_of(
    records: Sequence[R],
    record_id: Hashable,
    positions: Mapping[Hashable, int] | None = None,
) -> int:
    """Position of `record_id` in the sequence, or NOT_FOUND."""
    if positions is not None:
        return positions.get(record_id, NOT_FOUND)
    for i, record in enumerate(records):
        if record.id == record_id:
            return i
    return NOT_FOUND


def record_exists(
    records: Sequence[R],
    record_id: Hashable,
    positions: Mapping[Hashable, int] | None = None,
) -> bool:
    return index_of(records, record_id, positions) != NOT_FOUND


def find_record(
    records: Sequence[R],
    record_id: Hashable,
    blank: R,
    positions: Mapping[Hashable, int] | None = None,
) -> tuple[R, StoreStatus]:
    """(record, NO_ERROR) when present, (blank, RECORD_NOT_FOUND) otherwise."""
    i = index_of(records, record_id, positions)
    if i == NOT_FOUND:
        return blank, StoreStatus.RECORD_NOT_FOUND
    return records[i], StoreStatus.NO_ERROR


def first_record(records: Sequence[R], blank: R) -> R:
    return records[0] if records else blank


def last_record(records: Sequence[R], blank: R) -> R:
    return records[-1] if records else blank


def next_record(
    records: Sequence[R],
    record_id: Hashable,
    blank: R,
    positions: Mapping[Hashable, int] | None = None,
) -> R:
    """Record after `record_id`; wraps to first when at the end or unknown."""
    if not records:
        return blank
    i = index_of(records, record_id, positions)
    if i == NOT_FOUND or i == len(records) - 1:
        return records[0]
    return records[i + 1]


def previous_record(
    records: Sequence[R],
    record_id: Hashable,
    blank: R,
    positions: Mapping[Hashable, int] | None = None,
) -> R:
    """Record before `record_id`; wraps to last when at the start or unknown."""
    if not records:
        return blank
    i = index_of(records, record_id, positions)
    if i == NOT_FOUND or i == 0:
        return records[-1]
    return records[i - 1]


def build_positions(records: Sequence[R]) -> dict[Hashable, int]:
    """id -> position map for a sequence already known to be id-unique."""
    return {record.id: i for i, record in enumerate(records)}


def duplicate_ids(records: Sequence[R]) -> list[Hashable]:
    """Ids appearing more than once, in first-repeat order."""
    seen: set = set()
    dupes: list = []
    for record in records:
        if record.id in seen and record.id not in dupes:
            dupes.append(record.id)
        seen.add(record.id)
    return dupes
