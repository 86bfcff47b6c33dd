"""Models for the b2_upload_part request and response."""

from datetime import datetime
from typing import Self

from pydantic import AnyHttpUrl, ConfigDict, Field, model_validator

from ..constants import (
    CONTENT_LENGTH_HEADER,
    CONTENT_SHA1_HEADER,
    PART_NUMBER_HEADER,
    SSE_C_ALGORITHM_HEADER,
    SSE_C_KEY_HEADER,
    SSE_C_KEY_MD5_HEADER,
)
from ..utils.headers import model_to_headers
from .base import ApiModel, StrictBaseModel
from .common import FileId, Md5, PartNumber, Sha1, Timestamp, timestamp_to_datetime
from .encryption import (
    EncryptionAlgorithm,
    ServerSideEncryption,
    ServerSideEncryptionCustomerKey,
    ServerSideEncryptionCustomerKeyMd5,
)


class UploadPartUrlParameters(ApiModel):
    """
    Upload target for the parts of one large file, as returned by b2_get_upload_part_url.

    The URL and token may be replaced in place after the backend rejected the token.
    """

    file_id: FileId = Field(..., description="The unique ID of the large file the parts belong to.")
    upload_url: AnyHttpUrl = Field(..., description="The URL to POST parts to.")
    authorization_token: str = Field(
        ..., min_length=1, repr=False, description="The token that must be used when uploading parts to the URL."
    )


class UploadPartParameters(StrictBaseModel):
    """
    Per-request parameters of b2_upload_part. Each field is sent as one HTTP header.
    """

    model_config = ConfigDict(frozen=True)

    part_number: PartNumber = Field(..., serialization_alias=PART_NUMBER_HEADER)
    """
    A number from 1 to 10000.
    The parts uploaded for one file must have contiguous numbers, starting with 1.
    """

    content_length: int = Field(..., ge=0, serialization_alias=CONTENT_LENGTH_HEADER)
    """
    The number of bytes in the part being uploaded. Chunked encoding is not accepted.
    The minimum size of every part but the last one is 5 MB.
    When the SHA1 checksum is sent at the end, this is the part size plus the 40 bytes of hex checksum.
    """

    content_sha1: Sha1 = Field(..., serialization_alias=CONTENT_SHA1_HEADER)
    """
    The SHA1 checksum of this part, checked by B2 on arrival.
    The same checksum must be passed to b2_finish_large_file.
    Use ``hex_digits_at_end`` to append the checksum to the body instead.
    """

    server_side_encryption_algorithm: EncryptionAlgorithm | None = Field(
        None, serialization_alias=SSE_C_ALGORITHM_HEADER
    )
    """
    Required if the large file was started with SSE-C; must match the algorithm requested then.
    """

    server_side_encryption_customer_key: ServerSideEncryptionCustomerKey | None = Field(
        None, repr=False, serialization_alias=SSE_C_KEY_HEADER
    )
    """
    Required if the large file was started with SSE-C; must match the customer key requested then.
    """

    server_side_encryption_customer_key_md5: ServerSideEncryptionCustomerKeyMd5 | None = Field(
        None, repr=False, serialization_alias=SSE_C_KEY_MD5_HEADER
    )
    """
    Required if the large file was started with SSE-C; must match the customer key MD5 requested then.
    """

    @model_validator(mode="after")
    def check_sse_c_complete(self) -> Self:
        sse_c_fields = (
            self.server_side_encryption_algorithm,
            self.server_side_encryption_customer_key,
            self.server_side_encryption_customer_key_md5,
        )
        present = [v is not None for v in sse_c_fields]
        if any(present) and not all(present):
            raise ValueError(
                "server_side_encryption_algorithm, server_side_encryption_customer_key and "
                "server_side_encryption_customer_key_md5 must be given together."
            )
        return self

    @property
    def uses_customer_key(self) -> bool:
        return self.server_side_encryption_customer_key is not None

    def to_headers(self) -> dict[str, str]:
        """Serialize the parameters into request headers, omitting unset optional ones."""
        return model_to_headers(self)


class UploadPartOk(ApiModel):
    """Response of a successful b2_upload_part call."""

    model_config = ConfigDict(frozen=True)

    file_id: FileId
    part_number: PartNumber
    content_length: int = Field(..., ge=0)
    content_sha1: Sha1
    content_md5: Md5 | None = None
    server_side_encryption: ServerSideEncryption | None = None
    upload_timestamp: Timestamp

    @property
    def uploaded_at(self) -> datetime:
        """The upload timestamp as an aware UTC datetime."""
        return timestamp_to_datetime(self.upload_timestamp)
