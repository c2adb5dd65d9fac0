"""Error Hierarchy — typed exceptions for conditions a caller cannot recover from.

Invariants:
    - Expected outcomes (duplicate id, missing id, locked record) are StoreStatus
      values, NOT exceptions; store operations never raise them
    - Exceptions are reserved for malformed inputs at construction time, plus
      StoreStatusError which callers opt into via raise_for_status
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)

Design Decisions:
    - Single hierarchy with RecordStoreError base: one except clause catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Hashable

from recordstore.core.domain_types import StoreStatus


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    store_name: str | None = None
    record_id: Hashable | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class RecordStoreError(Exception):
    """Base exception for all record store errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_response(self) -> dict:
        """Convert to a standardized error envelope."""
        record_id = self.context.record_id
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "store_name": self.context.store_name,
                    "record_id": None if record_id is None else str(record_id),
                    "operation": self.context.operation,
                },
            }
        }


# ─── Construction Errors (caller-unrecoverable) ─────────────────

class InvalidRecordTypeError(RecordStoreError):
    """Record type does not satisfy the identity contract."""
    def __init__(self, type_name: str, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Record type {type_name} cannot be stored: {reason}",
            "INVALID_RECORD_TYPE", ErrorCategory.VALIDATION,
            ErrorSeverity.CRITICAL, context,
        )
        self.type_name = type_name


class DuplicateRecordError(RecordStoreError):
    """Initial record sequence contains colliding identifiers."""
    def __init__(self, duplicate_ids: list, context: ErrorContext | None = None):
        super().__init__(
            f"Duplicate record ids: {', '.join(str(i) for i in duplicate_ids)}",
            "DUPLICATE_RECORD_IDS", ErrorCategory.CONFLICT,
            ErrorSeverity.CRITICAL, context,
        )
        self.duplicate_ids = duplicate_ids


# ─── Opt-in status errors ───────────────────────────────────────

_STATUS_CATEGORY: dict[StoreStatus, ErrorCategory] = {
    StoreStatus.RECORD_EXISTS: ErrorCategory.CONFLICT,
    StoreStatus.RECORD_NOT_FOUND: ErrorCategory.RESOURCE_NOT_FOUND,
    StoreStatus.READ_ONLY: ErrorCategory.BUSINESS_RULE,
    StoreStatus.NO_DELETE: ErrorCategory.RESOURCE_NOT_FOUND,
}

# Absence is INFO; conflicts and guard rejections are WARNING
_STATUS_SEVERITY: dict[StoreStatus, ErrorSeverity] = {
    StoreStatus.RECORD_EXISTS: ErrorSeverity.WARNING,
    StoreStatus.RECORD_NOT_FOUND: ErrorSeverity.INFO,
    StoreStatus.READ_ONLY: ErrorSeverity.WARNING,
    StoreStatus.NO_DELETE: ErrorSeverity.INFO,
}


class StoreStatusError(RecordStoreError):
    """A store operation returned a non-success status."""
    def __init__(self, status: StoreStatus, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        super().__init__(
            f"Store operation failed with status {status.value} (record {ctx.record_id})",
            status.name, _STATUS_CATEGORY[status],
            _STATUS_SEVERITY[status], ctx,
        )
        self.status = status


def raise_for_status(
    status: StoreStatus,
    record_id: Hashable | None = None,
    context: ErrorContext | None = None,
) -> None:
    """Raise StoreStatusError unless `status` is NO_ERROR."""
    if status is StoreStatus.NO_ERROR:
        return
    ctx = context or ErrorContext()
    if record_id is not None:
        ctx.record_id = record_id
    raise StoreStatusError(status, ctx)
