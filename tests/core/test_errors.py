"""Error Hierarchy — tests for exception codes, envelopes and raise_for_status."""

import pytest

from recordstore.core.domain_types import StoreStatus
from recordstore.core.errors import (
    DuplicateRecordError, ErrorCategory, ErrorContext, ErrorSeverity,
    InvalidRecordTypeError, RecordStoreError, StoreStatusError, raise_for_status,
)


def test_invalid_record_type_error_fields():
    err = InvalidRecordTypeError("Foo", "no 'id' attribute")
    assert isinstance(err, RecordStoreError)
    assert err.code == "INVALID_RECORD_TYPE"
    assert err.category is ErrorCategory.VALIDATION
    assert err.severity is ErrorSeverity.CRITICAL
    assert "Foo" in err.message


def test_duplicate_record_error_lists_ids():
    err = DuplicateRecordError([1, 2])
    assert err.duplicate_ids == [1, 2]
    assert "1, 2" in str(err)


def test_to_response_envelope():
    ctx = ErrorContext(store_name="customers", record_id=5, operation="add")
    body = StoreStatusError(StoreStatus.RECORD_EXISTS, ctx).to_response()["error"]
    assert body["code"] == "RECORD_EXISTS"
    assert body["category"] == "conflict"
    assert body["context"] == {
        "store_name": "customers", "record_id": "5", "operation": "add",
    }


def test_raise_for_status_no_error_is_silent():
    raise_for_status(StoreStatus.NO_ERROR, record_id=1)


@pytest.mark.parametrize("status", [s for s in StoreStatus if s is not StoreStatus.NO_ERROR])
def test_raise_for_status_raises_for_failures(status):
    with pytest.raises(StoreStatusError) as exc_info:
        raise_for_status(status, record_id=3)
    assert exc_info.value.status is status
    assert exc_info.value.context.record_id == 3


def test_status_error_severity_per_status():
    assert StoreStatusError(StoreStatus.RECORD_NOT_FOUND).severity is ErrorSeverity.INFO
    assert StoreStatusError(StoreStatus.NO_DELETE).severity is ErrorSeverity.INFO
    assert StoreStatusError(StoreStatus.RECORD_EXISTS).severity is ErrorSeverity.WARNING
    assert StoreStatusError(StoreStatus.READ_ONLY).severity is ErrorSeverity.WARNING
