from os import PathLike
from pathlib import Path
from typing import Self

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from ..constants import DEFAULT_UPLOAD_TIMEOUT
from ..utils.config import read_and_merge_config_files
from .base import StrictBaseSettings
from .upload_part import UploadPartUrlParameters


class ClientConfig(StrictBaseSettings):
    model_config = SettingsConfigDict(env_prefix="b2_")

    upload_target: UploadPartUrlParameters
    """
    Upload URL, authorization token and file ID as returned by b2_get_upload_part_url.
    """

    timeout: float = Field(DEFAULT_UPLOAD_TIMEOUT, gt=0)
    """
    Timeout in seconds for a single part upload request.
    """

    @classmethod
    def from_path(cls, *paths: str | PathLike) -> Self:
        """
        Load the configuration from YAML files, merged in the given order.

        Values from ``B2_*`` environment variables are used for keys missing from the files.
        """
        return cls(**read_and_merge_config_files([Path(p) for p in paths]))
