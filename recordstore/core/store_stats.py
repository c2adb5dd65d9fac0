"""Store Stats — pure summary counts over a record sequence.

Invariants:
    - Never raises — records without an `active` attribute count as editable
    - editable + locked == total
"""

from typing import Sequence

from recordstore.core.domain_types import RecordState
from recordstore.core.identity import record_state


def compute_store_stats(records: Sequence[object]) -> dict:
    """Compute summary statistics for a record sequence. Pure, no IO."""
    locked = sum(1 for r in records if record_state(r) is RecordState.LOCKED)
    return {
        "total": len(records),
        "editable": len(records) - locked,
        "locked": locked,
    }
