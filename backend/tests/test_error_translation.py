import pytest
from fastapi import HTTPException

from central_api.controllers._errors import translate_errors
from central_api.exceptions import (
    ParentNotFoundError,
    RecordNotFoundError,
    RecordValidationError,
    ReferentialIntegrityError,
)


def _status_and_detail(exc):
    with pytest.raises(HTTPException) as info:
        with translate_errors("add the module"):
            raise exc
    return info.value.status_code, info.value.detail


def test_validation_error_is_400_with_prefix():
    status, detail = _status_and_detail(RecordValidationError("Module could not be saved: NOT NULL"))
    assert status == 400
    assert detail == "Validation error: Module could not be saved: NOT NULL"


def test_not_found_and_parent_not_found():
    assert _status_and_detail(RecordNotFoundError("module", 3)) == (404, "No module found with id 3.")
    assert _status_and_detail(ParentNotFoundError("software", 9)) == (400, "Software 9 not found in the database.")


def test_unexpected_errors_are_500_with_message():
    status, detail = _status_and_detail(ReferentialIntegrityError("still referenced"))
    assert status == 500
    assert detail == "Error while trying to add the module. still referenced"


def test_http_exceptions_pass_through():
    assert _status_and_detail(HTTPException(status_code=418, detail="teapot")) == (418, "teapot")


def test_block_without_error_returns_normally():
    with translate_errors("list the modules"):
        value = 42
    assert value == 42
