"""Server-side encryption settings of B2 files and parts."""

import base64
import binascii
from enum import StrEnum
from typing import Annotated

from pydantic import AfterValidator

from .base import ApiModel


class EncryptionAlgorithm(StrEnum):
    AES256 = "AES256"


class EncryptionMode(StrEnum):
    SSE_B2 = "SSE-B2"
    """Server-side encryption with keys managed by B2."""

    SSE_C = "SSE-C"
    """Server-side encryption with customer-supplied keys."""


def _base64_of_length(expected_length: int, what: str):
    def validate(value: str) -> str:
        try:
            decoded = base64.b64decode(value, validate=True)
        except binascii.Error as e:
            raise ValueError(f"{what} must be base64-encoded") from e
        if len(decoded) != expected_length:
            raise ValueError(f"{what} must decode to {expected_length} bytes, got {len(decoded)}")
        return value

    return validate


ServerSideEncryptionCustomerKey = Annotated[str, AfterValidator(_base64_of_length(32, "Customer key"))]
"""Base64 encoding of a 256-bit AES key."""

ServerSideEncryptionCustomerKeyMd5 = Annotated[str, AfterValidator(_base64_of_length(16, "Customer key MD5"))]
"""Base64 encoding of the binary MD5 digest of the customer key."""


class ServerSideEncryption(ApiModel):
    """Encryption settings as reported by B2 for an uploaded file or part."""

    mode: EncryptionMode | None = None
    algorithm: EncryptionAlgorithm | None = None
