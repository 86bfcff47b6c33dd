"""Pydantic models for the B2 upload API."""

from .common import JsonErrorObj
from .encryption import EncryptionAlgorithm, EncryptionMode, ServerSideEncryption
from .upload_part import UploadPartOk, UploadPartParameters, UploadPartUrlParameters

__all__ = [
    "EncryptionAlgorithm",
    "EncryptionMode",
    "JsonErrorObj",
    "ServerSideEncryption",
    "UploadPartOk",
    "UploadPartParameters",
    "UploadPartUrlParameters",
]
