"""Domain Types — closed status taxonomy and shared sentinels for the record store.

Invariants:
    - StoreStatus is a closed set: NO_ERROR plus exactly four failure outcomes
    - NOT_FOUND is the only "absent" position value returned by index lookups
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - str Enums: serialize to JSON without custom encoders (ADR: snapshot is JSON)
    - RecordId is a TypeVar, not a NewType: identifiers are chosen by the record type
"""

from enum import Enum
from typing import Hashable, TypeVar


# ─── Identity Types ──────────────────────────────────────────────

RecordId = TypeVar("RecordId", bound=Hashable)

NOT_FOUND: int = -1


# ─── Enums ───────────────────────────────────────────────────────

class StoreStatus(str, Enum):
    """Outcome of a store operation — returned, never raised."""
    NO_ERROR = "no_error"
    RECORD_EXISTS = "record_exists"
    RECORD_NOT_FOUND = "record_not_found"
    READ_ONLY = "read_only"
    NO_DELETE = "no_delete"

    @property
    def ok(self) -> bool:
        return self is StoreStatus.NO_ERROR


class RecordState(str, Enum):
    """Mutability of a single record, derived from its active flag."""
    EDITABLE = "editable"
    LOCKED = "locked"


class Locale(str, Enum):
    """Supported locales for user-facing status messages."""
    EN = "en"
    PT_BR = "pt-BR"
