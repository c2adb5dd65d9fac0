"""Activity Enforcement — write guard for locked (inactive) records.

Invariants:
    - evaluate_update is PURE: returns a status, does NOT mutate anything
    - active_flag=True unlocks a full replace
    - active_flag=False allows only a pure reactivation: new record equals the
      current record with active=True, nothing else changed
    - Anything else under active_flag=False is READ_ONLY — never relaxed

Design Decisions:
    - Separated from record_ops: guard rules are business policy, navigation
      and lookup are mechanics (ADR: responsibility separation)
    - Equality of records is the record type's own `==` (dataclass / pydantic)
"""

from recordstore.core.domain_types import StoreStatus
from recordstore.core.record_copy import copy_record


def is_reactivation(current: object, new: object) -> bool:
    """True iff `new` is `current` with only the active flag switched on."""
    if getattr(new, "active", False) is not True:
        return False
    return copy_record(current, active=True) == new


def evaluate_update(current: object, new: object, active_flag: bool) -> StoreStatus:
    """Rule: locked records can only be reopened, not edited."""
    if active_flag:
        return StoreStatus.NO_ERROR
    if is_reactivation(current, new):
        return StoreStatus.NO_ERROR
    return StoreStatus.READ_ONLY
