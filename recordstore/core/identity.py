"""Identity Contract — structural capabilities every stored record must expose.

Invariants:
    - A record is Identified iff it exposes a readable `id` attribute
    - `id` values are hashable and compared with `==`; uniqueness is per store
    - Activatable adds a boolean `active` attribute used by the write guard
    - Nothing here runs at mutation time; conformance is checked once, at construction

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy (ADR: ExMA anti-pattern)
    - runtime_checkable: the store validates the owner-supplied blank record once
"""

from typing import Hashable, Protocol, runtime_checkable

from recordstore.core.domain_types import RecordState


@runtime_checkable
class Identified(Protocol):
    """Anything carrying a store-unique identifier."""

    @property
    def id(self) -> Hashable: ...


@runtime_checkable
class Activatable(Identified, Protocol):
    """Identified record that also carries an activity flag."""

    @property
    def active(self) -> bool: ...


def record_state(record: object) -> RecordState:
    """Editable unless the record explicitly carries active=False."""
    if getattr(record, "active", True):
        return RecordState.EDITABLE
    return RecordState.LOCKED
