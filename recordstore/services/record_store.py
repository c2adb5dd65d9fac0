"""Record Store — owning, ordered, id-unique collection with CRUD and navigation.

Invariants:
    - No two stored records share an id (add rejects collisions, update never changes an id)
    - Order is insertion order: add appends, update keeps position, remove shifts later records down
    - Every operation fully applies or fully rejects — no half-applied state
    - Expected failures come back as StoreStatus values; nothing here raises them
    - _positions always mirrors _records (id -> index)

Design Decisions:
    - Thin imperative shell over core.record_ops / core.enforce_activity: the
      store owns state and logging, the core owns the rules (ADR: ExMA impureim sandwich)
    - Blank record supplied by the owner at construction, validated once there
    - Single-owner, no internal locking: callers serialize access if they share a store
"""

import logging
from typing import Any, Generic, Hashable, Iterable, Iterator, Sequence, TypeVar

from recordstore.config import get_settings
from recordstore.core.domain_types import NOT_FOUND, Locale, StoreStatus
from recordstore.core.enforce_activity import evaluate_update
from recordstore.core.errors import (
    DuplicateRecordError, ErrorContext, InvalidRecordTypeError,
)
from recordstore.core.identity import Activatable, Identified
from recordstore.core.record_copy import copy_record, supports_copy
from recordstore.core.record_ops import (
    build_positions, duplicate_ids, find_record, first_record, index_of,
    last_record, next_record, previous_record, record_exists,
)
from recordstore.core.status_messages import format_status
from recordstore.core.store_snapshot import store_from_snapshot, store_to_snapshot
from recordstore.core.store_stats import compute_store_stats

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Identified)


def _validate_blank(blank: object, ctx: ErrorContext) -> None:
    """Reject record types that cannot satisfy the identity contract."""
    type_name = type(blank).__name__
    if not isinstance(blank, Identified):
        raise InvalidRecordTypeError(type_name, "no 'id' attribute", ctx)
    try:
        hash(blank.id)
    except TypeError:
        raise InvalidRecordTypeError(
            type_name, f"id of type {type(blank.id).__name__} is not hashable", ctx,
        ) from None
    if isinstance(blank, Activatable) and not supports_copy(blank):
        raise InvalidRecordTypeError(
            type_name,
            "activatable records must be dataclasses, pydantic models or NamedTuples",
            ctx,
        )


class RecordStore(Generic[R]):
    """Ordered, identity-unique store for records of one type."""

    def __init__(self, blank: R, name: str | None = None):
        self.name = name or get_settings().store_name
        _validate_blank(blank, ErrorContext(store_name=self.name, operation="init"))
        self._blank = blank
        self._records: list[R] = []
        self._positions: dict[Hashable, int] = {}

    # --- Construction ----------------------------------------------------------

    @classmethod
    def from_records(
        cls, blank: R, records: Iterable[R], name: str | None = None,
    ) -> "RecordStore[R]":
        """Rebuild a store from an ordered sequence. Duplicate ids are malformed input."""
        store = cls(blank, name)
        items = list(records)
        dupes = duplicate_ids(items)
        if dupes:
            raise DuplicateRecordError(
                dupes, ErrorContext(store_name=store.name, operation="from_records"),
            )
        store._records = items
        store._positions = build_positions(items)
        return store

    @classmethod
    def from_snapshot(
        cls,
        blank: R,
        snapshot: Sequence[dict[str, Any]],
        record_type: type[R] | None = None,
        name: str | None = None,
    ) -> "RecordStore[R]":
        """Rebuild a store from the output of to_snapshot()."""
        records = store_from_snapshot(snapshot, record_type or type(blank))
        return cls.from_records(blank, records, name)

    def to_snapshot(self) -> list[dict[str, Any]]:
        return store_to_snapshot(self._records)

    # --- Read access -------------------------------------------------------------

    @property
    def blank(self) -> R:
        return self._blank

    @property
    def records(self) -> tuple[R, ...]:
        """Stored records in navigation order (a copy, not the live list)."""
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[R]:
        return iter(tuple(self._records))

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._positions

    def __repr__(self) -> str:
        return f"RecordStore(name={self.name!r}, size={len(self._records)})"

    def stats(self) -> dict:
        return compute_store_stats(self._records)

    def message(
        self,
        status: StoreStatus,
        record_id: Hashable | None = None,
        locale: Locale | str | None = None,
    ) -> str:
        """User-facing text for `status`; locale defaults to Settings.default_locale."""
        return format_status(status, locale or get_settings().default_locale, record_id)

    # --- Lookup ------------------------------------------------------------------

    def exists(self, record_id: Hashable) -> bool:
        return record_exists(self._records, record_id, self._positions)

    def index(self, record_id: Hashable) -> int:
        """Position of `record_id`, or NOT_FOUND."""
        return index_of(self._records, record_id, self._positions)

    def find(self, record_id: Hashable) -> tuple[R, StoreStatus]:
        return find_record(self._records, record_id, self._blank, self._positions)

    # --- Navigation --------------------------------------------------------------

    def first_record(self) -> R:
        return first_record(self._records, self._blank)

    def last_record(self) -> R:
        return last_record(self._records, self._blank)

    def next_record(self, record_id: Hashable) -> R:
        return next_record(self._records, record_id, self._blank, self._positions)

    def previous_record(self, record_id: Hashable) -> R:
        return previous_record(self._records, record_id, self._blank, self._positions)

    # --- Mutation ----------------------------------------------------------------

    def add(self, record: R) -> StoreStatus:
        """Append `record` unless its id is already stored."""
        if record.id in self._positions:
            return self._reject("add", record.id, StoreStatus.RECORD_EXISTS)
        self._positions[record.id] = len(self._records)
        self._records.append(record)
        return self._accept("add", record.id)

    def update(self, old_record: R, new_record: R, active_flag: bool) -> StoreStatus:
        """Replace the stored counterpart of `old_record` with `new_record`.

        The target is located by `new_record.id`; ids never change on update.
        """
        return self.update_by_id(new_record.id, new_record, active_flag)

    def update_by_id(
        self, record_id: Hashable, new_record: R, active_flag: bool,
    ) -> StoreStatus:
        """Replace the record stored under `record_id`.

        With active_flag=True the record is unlocked and fully replaced. With
        active_flag=False the only accepted change is a reactivation: the new
        record must equal the stored one with active=True. Everything else is
        READ_ONLY and leaves the store untouched. `new_record` must carry
        `record_id`; a differing id is RECORD_NOT_FOUND.
        """
        i = self.index(record_id)
        if i == NOT_FOUND or new_record.id != record_id:
            return self._reject("update", record_id, StoreStatus.RECORD_NOT_FOUND)

        current = self._records[i]
        status = evaluate_update(current, new_record, active_flag)
        if status is not StoreStatus.NO_ERROR:
            return self._reject("update", record_id, status)

        if not active_flag:
            self._records[i] = copy_record(current, active=True)
            return self._accept("reactivate", record_id)

        self._records[i] = new_record
        return self._accept("update", record_id)

    def remove(self, record_id: Hashable) -> StoreStatus:
        i = self.index(record_id)
        if i == NOT_FOUND:
            return self._reject("remove", record_id, StoreStatus.NO_DELETE)
        del self._records[i]
        del self._positions[record_id]
        for later in self._records[i:]:
            self._positions[later.id] -= 1
        return self._accept("remove", record_id)

    # --- Logging helpers ---------------------------------------------------------

    def _accept(self, operation: str, record_id: Hashable) -> StoreStatus:
        logger.debug("%s %s on '%s'", operation, record_id, self.name,
            extra={"store_name": self.name, "record_id": str(record_id),
                   "operation": operation, "status": StoreStatus.NO_ERROR.value})
        return StoreStatus.NO_ERROR

    def _reject(
        self, operation: str, record_id: Hashable, status: StoreStatus,
    ) -> StoreStatus:
        logger.info("%s %s rejected on '%s': %s", operation, record_id,
            self.name, status.value,
            extra={"store_name": self.name, "record_id": str(record_id),
                   "operation": operation, "status": status.value})
        return status
