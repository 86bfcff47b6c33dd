"""Command for uploading one part of a large file."""

import logging
import sys
from pathlib import Path

import click
from pydantic import ValidationError
from tqdm.auto import tqdm

from ..cli_options import (
    config_file,
    config_files_or_default,
    content_sha1,
    input_file,
    length,
    offset,
    part_number,
    progress,
    sse_c_key,
    sse_c_key_md5,
)
from ..constants import HEX_DIGITS_AT_END, MAX_PART_SIZE, MIN_PART_SIZE, TQDM_DEFAULTS
from ..exceptions import UploadPartError
from ..models.config import ClientConfig
from ..models.encryption import EncryptionAlgorithm
from ..models.upload_part import UploadPartParameters
from ..operations.upload_part import upload_part as upload_part_operation
from ..utils.io import FilePartReader, TqdmIOWrapper

log = logging.getLogger(__name__)


@click.command()
@config_file
@input_file
@part_number
@offset
@length
@content_sha1
@sse_c_key
@sse_c_key_md5
@progress
def upload_part(  # noqa: PLR0913
    config_files: tuple[Path, ...],
    input_file: Path,
    part_number: int,
    offset: int,
    length: int | None,
    content_sha1: str,
    sse_c_key: str | None,
    sse_c_key_md5: str | None,
    progress: bool,
):
    """
    Upload one part of a large file.

    The upload URL and token are read from the configuration. On success,
    the part as recorded by B2 is printed as JSON.
    """
    if content_sha1 == HEX_DIGITS_AT_END:
        raise click.BadParameter(
            "Sending the checksum after the part is not supported here, pass the SHA1 of the part.",
            param_hint="'--content-sha1'",
        )

    try:
        config = ClientConfig.from_path(*config_files_or_default(config_files))
    except ValidationError as e:
        raise click.UsageError(f"Invalid configuration:\n{e}") from e

    try:
        part = FilePartReader(input_file, offset=offset, length=length)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="'--offset' / '--length'") from e

    with part:
        try:
            part_params = UploadPartParameters(
                part_number=part_number,
                content_length=len(part),
                content_sha1=content_sha1,
                server_side_encryption_algorithm=EncryptionAlgorithm.AES256 if sse_c_key else None,
                server_side_encryption_customer_key=sse_c_key,
                server_side_encryption_customer_key_md5=sse_c_key_md5,
            )
        except ValidationError as e:
            raise click.UsageError(f"Invalid part parameters:\n{e}") from e

        if len(part) > MAX_PART_SIZE:
            log.warning(f"Part size of {len(part)} bytes exceeds the maximum of {MAX_PART_SIZE} bytes.")
        elif len(part) < MIN_PART_SIZE:
            log.warning(f"Parts smaller than {MIN_PART_SIZE} bytes are only accepted as the last part of a file.")

        log.info(f"Uploading part {part_number} of {input_file.name} ({len(part)} bytes)…")
        with tqdm(
            total=len(part),
            desc=f"PART {part_number:<5}",
            disable=not progress,
            **TQDM_DEFAULTS,  # type: ignore[arg-type]
        ) as pbar:
            try:
                result = upload_part_operation(
                    config.upload_target,
                    part_params,
                    TqdmIOWrapper(part, pbar),
                    timeout=config.timeout,
                )
            except UploadPartError as e:
                pbar.set_postfix_str("✗ ERROR", refresh=True)
                log.error(f"Upload failed: {e}")
                if e.requires_new_upload_url:
                    log.error("Request a new upload URL and token with b2_get_upload_part_url and try again.")
                sys.exit(1)
            pbar.set_postfix_str("✓ OK", refresh=True)

    click.echo(result.model_dump_json(by_alias=True, indent=2))
