"""recordstore — generic, identity-keyed, ordered record store.

Invariants:
    - Public surface re-exported here: RecordStore, StoreStatus, Identity Protocols
    - Importing the package performs no IO and configures no logging

Design Decisions:
    - Functional core (core/) + imperative shell (services/) split
"""

from recordstore.core.domain_types import NOT_FOUND, Locale, StoreStatus
from recordstore.core.identity import Activatable, Identified
from recordstore.services.record_store import RecordStore

__all__ = [
    "NOT_FOUND",
    "Activatable",
    "Identified",
    "Locale",
    "RecordStore",
    "StoreStatus",
]
