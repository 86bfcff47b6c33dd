import pickle

import pytest
from b2_client.exceptions import (
    UPLOAD_PART_ERRORS,
    B2Error,
    BadAuthTokenError,
    BadRequestError,
    ExpiredAuthTokenError,
    RequestTimeoutError,
    ServiceUnavailableError,
    UnauthorizedError,
    UnexpectedUploadPartError,
    UploadPartError,
)
from b2_client.models.common import JsonErrorObj

DOCUMENTED_ERRORS = [
    (400, "bad_request", BadRequestError),
    (401, "unauthorized", UnauthorizedError),
    (401, "bad_auth_token", BadAuthTokenError),
    (401, "expired_auth_token", ExpiredAuthTokenError),
    (408, "request_timeout", RequestTimeoutError),
    (503, "service_unavailable", ServiceUnavailableError),
]


@pytest.mark.parametrize("status,code,expected_cls", DOCUMENTED_ERRORS, ids=[e[1] for e in DOCUMENTED_ERRORS])
def test_documented_error_mapped(status, code, expected_cls):
    raw_error = JsonErrorObj(status=status, code=code, message="something went wrong")

    error = UploadPartError.from_json_error(raw_error)

    assert type(error) is expected_cls
    assert error.raw_error is raw_error
    assert "something went wrong" in str(error)


@pytest.mark.parametrize(
    "status,code",
    [
        (400, "unauthorized"),  # known code, wrong status
        (401, "bad_request"),
        (405, "method_not_allowed"),
        (500, "internal_error"),
        (503, "bad_auth_token"),
        (400, "BAD_REQUEST"),
    ],
)
def test_undocumented_error_unexpected(status, code):
    raw_error = JsonErrorObj(status=status, code=code)

    error = UploadPartError.from_json_error(raw_error)

    assert type(error) is UnexpectedUploadPartError
    assert error.raw_error is raw_error


def test_table_covers_documented_errors():
    assert set(UPLOAD_PART_ERRORS) == {(status, code) for status, code, _ in DOCUMENTED_ERRORS}


@pytest.mark.parametrize(
    "error_cls,expected",
    [
        (BadRequestError, False),
        (UnauthorizedError, False),
        (BadAuthTokenError, True),
        (ExpiredAuthTokenError, True),
        (RequestTimeoutError, False),
        (ServiceUnavailableError, True),
        (UnexpectedUploadPartError, False),
    ],
)
def test_requires_new_upload_url(error_cls, expected):
    assert error_cls.requires_new_upload_url is expected


def test_hierarchy():
    for _, _, error_cls in DOCUMENTED_ERRORS:
        assert issubclass(error_cls, UploadPartError)
    assert issubclass(UnexpectedUploadPartError, UploadPartError)
    assert issubclass(UploadPartError, B2Error)


def test_unexpected_wraps_exception():
    cause = ConnectionError("connection reset")

    error = UnexpectedUploadPartError(cause)

    assert error.raw_error is cause
    assert str(error) == "connection reset"


@pytest.mark.parametrize("status,code,error_cls", DOCUMENTED_ERRORS, ids=[e[1] for e in DOCUMENTED_ERRORS])
def test_pickle_keeps_raw_error(status, code, error_cls):
    """Errors cross process boundaries, e.g. when parts are uploaded from a process pool."""
    raw_error = JsonErrorObj(status=status, code=code, message="something went wrong")

    restored = pickle.loads(pickle.dumps(error_cls(raw_error)))

    assert type(restored) is error_cls
    assert restored.raw_error == raw_error
    assert str(restored) == str(raw_error)
    assert restored.requires_new_upload_url is error_cls.requires_new_upload_url


def test_pickle_unexpected_keeps_message():
    cause = ValueError("Expecting value: line 1 column 1 (char 0)")
    error = UnexpectedUploadPartError(cause, "Invalid b2_upload_part response")

    restored = pickle.loads(pickle.dumps(error))

    assert isinstance(restored.raw_error, ValueError)
    assert str(restored.raw_error) == str(cause)
    assert str(restored) == "Invalid b2_upload_part response"
