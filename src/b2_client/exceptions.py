"""Exceptions raised by the B2 API operations."""

from __future__ import annotations

from typing import ClassVar

from .models.common import JsonErrorObj


class B2Error(Exception):
    """Base exception for all errors raised by b2-client."""


class UploadPartError(B2Error):
    """
    Raised when b2_upload_part failed.

    Subclasses correspond to the (status, code) pairs documented for the endpoint.
    Use :meth:`from_json_error` to build the matching subclass from an error response.
    """

    status: ClassVar[int | None] = None
    code: ClassVar[str | None] = None

    requires_new_upload_url: ClassVar[bool] = False
    """Whether the caller should get a new upload URL and token via b2_get_upload_part_url before retrying."""

    def __init__(self, raw_error: JsonErrorObj | Exception, message: str | None = None):
        self.raw_error = raw_error
        super().__init__(message or str(raw_error))

    def __reduce__(self):
        return self.__class__, (self.raw_error, str(self))

    @classmethod
    def from_json_error(cls, error: JsonErrorObj) -> UploadPartError:
        """
        Convert an error object returned by B2 into the matching exception.

        :param error: the error object from the response body
        :return: the mapped exception, or :class:`UnexpectedUploadPartError` for unknown pairs
        """
        error_cls = UPLOAD_PART_ERRORS.get((error.status, error.code))
        if error_cls is None:
            return UnexpectedUploadPartError(error)
        return error_cls(error)


class BadRequestError(UploadPartError):
    """The request had the wrong fields or illegal values."""

    status = 400
    code = "bad_request"


class UnauthorizedError(UploadPartError):
    """The auth token is valid but does not allow uploading parts."""

    status = 401
    code = "unauthorized"


class BadAuthTokenError(UploadPartError):
    """The auth token used is not valid."""

    status = 401
    code = "bad_auth_token"
    requires_new_upload_url = True


class ExpiredAuthTokenError(UploadPartError):
    """The auth token used has expired."""

    status = 401
    code = "expired_auth_token"
    requires_new_upload_url = True


class RequestTimeoutError(UploadPartError):
    """The service timed out reading the uploaded part."""

    status = 408
    code = "request_timeout"


class ServiceUnavailableError(UploadPartError):
    """The upload pod is busy or unavailable."""

    status = 503
    code = "service_unavailable"
    requires_new_upload_url = True


class UnexpectedUploadPartError(UploadPartError):
    """
    Raised for anything the endpoint does not document.

    ``raw_error`` is either the unmapped :class:`JsonErrorObj` or the transport or
    decoding exception that prevented a response from being read.
    """


# 405 method_not_allowed is documented as well but cannot happen as parts are always POSTed
UPLOAD_PART_ERRORS: dict[tuple[int, str], type[UploadPartError]] = {
    (error_cls.status, error_cls.code): error_cls  # type: ignore[misc]
    for error_cls in (
        BadRequestError,
        UnauthorizedError,
        BadAuthTokenError,
        ExpiredAuthTokenError,
        RequestTimeoutError,
        ServiceUnavailableError,
    )
}
