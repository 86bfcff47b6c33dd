"""The b2_upload_part operation."""

from __future__ import annotations

import logging
from typing import IO

import requests
from requests.utils import super_len
from pydantic import ValidationError

from ..constants import AUTHORIZATION_HEADER, DEFAULT_UPLOAD_TIMEOUT
from ..exceptions import UnexpectedUploadPartError, UploadPartError
from ..models.common import JsonErrorObj
from ..models.upload_part import UploadPartOk, UploadPartParameters, UploadPartUrlParameters

log = logging.getLogger(__name__)

UploadBody = bytes | bytearray | memoryview | IO[bytes]


def _prepare_body(body: UploadBody, content_length: int) -> bytes | IO[bytes]:
    """
    Check that the body has a known size matching the declared content length.

    B2 does not accept chunked encoding, and requests replaces the Content-Length
    header with the size it determines for the body.

    :raises ValueError: if the size of the body is unknown or differs from content_length
    """
    if isinstance(body, bytearray | memoryview):
        body = bytes(body)
    if isinstance(body, bytes):
        body_length = len(body)
    elif hasattr(body, "read"):
        body_length = super_len(body)
    else:
        raise ValueError(
            f"Part body of type {type(body).__name__} has no known length; pass bytes or a readable file object."
        )

    if body_length != content_length:
        raise ValueError(f"Part body has {body_length} bytes but content_length is {content_length}.")
    return body


def _parse_response(response: requests.Response) -> UploadPartOk:
    if response.status_code == requests.codes.ok:
        try:
            return UploadPartOk.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            log.error(f"Could not read b2_upload_part response: {e}")
            raise UnexpectedUploadPartError(e, f"Invalid b2_upload_part response: {e}") from e

    try:
        raw_error = JsonErrorObj.model_validate(response.json())
    except (ValueError, ValidationError) as e:
        log.error(f"Could not read b2_upload_part error response (HTTP {response.status_code}): {response.text!r}")
        raise UnexpectedUploadPartError(
            e, f"Invalid b2_upload_part error response with HTTP status {response.status_code}: {e}"
        ) from e
    raise UploadPartError.from_json_error(raw_error)


def upload_part(
    url_params: UploadPartUrlParameters,
    part_params: UploadPartParameters,
    body: UploadBody,
    *,
    session: requests.Session | None = None,
    timeout: float | tuple[float, float] | None = DEFAULT_UPLOAD_TIMEOUT,
) -> UploadPartOk:
    """
    Upload one part of a large file.

    The body is streamed as-is. File-like bodies must have a size requests can
    determine, e.g. through ``len()`` and ``tell()`` (see
    :class:`b2_client.utils.io.FilePartReader`), so that no chunked encoding is used.

    :param url_params: upload URL and token from b2_get_upload_part_url
    :param part_params: part number, length, checksum and SSE-C headers for this part
    :param body: the part's bytes, or a readable binary file object positioned at the part
    :param session: session to send the request with; a new one is used if omitted
    :param timeout: requests timeout in seconds
    :return: the uploaded part as recorded by B2
    :raises UploadPartError: a subclass for each documented error, or
        :class:`UnexpectedUploadPartError` for anything else, including transport errors
    :raises ValueError: if the size of the body is unknown or differs from ``part_params.content_length``
    """
    body = _prepare_body(body, part_params.content_length)
    headers = {AUTHORIZATION_HEADER: url_params.authorization_token, **part_params.to_headers()}

    log.debug(
        f"Uploading part {part_params.part_number} ({part_params.content_length} bytes) "
        f"of file {url_params.file_id}…"
    )
    own_session = session is None
    if own_session:
        session = requests.Session()
    try:
        response = session.post(str(url_params.upload_url), headers=headers, data=body, timeout=timeout)
    except requests.RequestException as e:
        log.error(f"Upload of part {part_params.part_number} of file {url_params.file_id} failed: {e}")
        raise UnexpectedUploadPartError(e) from e
    finally:
        if own_session:
            session.close()

    try:
        result = _parse_response(response)
    except UploadPartError as e:
        log.warning(f"Upload of part {part_params.part_number} of file {url_params.file_id} was rejected: {e}")
        raise

    log.info(f"Uploaded part {result.part_number} of file {result.file_id} ({result.content_length} bytes).")
    return result
