"""Client for uploading parts of large files to B2 cloud storage."""

from .exceptions import (
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
from .models import (
    EncryptionAlgorithm,
    EncryptionMode,
    JsonErrorObj,
    ServerSideEncryption,
    UploadPartOk,
    UploadPartParameters,
    UploadPartUrlParameters,
)
from .operations.upload_part import upload_part

__all__ = [
    "B2Error",
    "BadAuthTokenError",
    "BadRequestError",
    "EncryptionAlgorithm",
    "EncryptionMode",
    "ExpiredAuthTokenError",
    "JsonErrorObj",
    "RequestTimeoutError",
    "ServerSideEncryption",
    "ServiceUnavailableError",
    "UnauthorizedError",
    "UnexpectedUploadPartError",
    "UploadPartError",
    "UploadPartOk",
    "UploadPartParameters",
    "UploadPartUrlParameters",
    "upload_part",
]
