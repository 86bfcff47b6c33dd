"""Scalar types shared by the B2 API models and the JSON error object."""

from datetime import UTC, datetime, timedelta
from typing import Annotated

from pydantic import ConfigDict, Field, StringConstraints

from ..constants import HEX_DIGITS_AT_END, MAX_PART_NUMBER, MIN_PART_NUMBER
from .base import ApiModel

FileId = Annotated[str, StringConstraints(min_length=1)]

PartNumber = Annotated[int, Field(ge=MIN_PART_NUMBER, le=MAX_PART_NUMBER)]

Sha1 = Annotated[str, StringConstraints(pattern=rf"^(?:[0-9a-fA-F]{{40}}|{HEX_DIGITS_AT_END})$")]

Md5 = Annotated[str, StringConstraints(pattern=r"^[0-9a-fA-F]{32}$")]

Timestamp = Annotated[int, Field(ge=0, description="Milliseconds since the UNIX epoch.")]


def timestamp_to_datetime(timestamp: int) -> datetime:
    """Convert a B2 millisecond timestamp into an aware UTC datetime."""
    return datetime.fromtimestamp(0, tz=UTC) + timedelta(milliseconds=timestamp)


class JsonErrorObj(ApiModel):
    """The error object B2 returns in the body of every non-200 response."""

    model_config = ConfigDict(extra="allow")

    status: int = Field(..., description="The numeric HTTP status code. Always matches the status in the response.")
    code: str = Field(..., description="A single-identifier code that identifies the error.")
    message: str | None = Field(None, description="A human-readable message, in English, saying what went wrong.")

    def __str__(self) -> str:
        if self.message:
            return f"{self.status} {self.code}: {self.message}"
        return f"{self.status} {self.code}"
