import base64
import hashlib
import json
from unittest.mock import MagicMock

import pytest
import requests
import yaml
from b2_client.models.upload_part import UploadPartParameters, UploadPartUrlParameters

PART_DATA = b"0123456789abcdef" * 64

UPLOAD_URL = "https://pod-000-1016-09.backblaze.com/b2api/v2/b2_upload_part/4_ze73ede9c9c8412db49f60715_f200b4e93fbae6252_d20150824_m224353_c900_v8881000_t0001/0037"
AUTH_TOKEN = "3_20160409004829_42b8f80ba60fb4323dcaad98_ec81302316fccc2260201cbf17813247f312cf3b_000_uplg"
FILE_ID = "4_ze73ede9c9c8412db49f60715_f200b4e93fbae6252_d20150824_m224353_c900_v8881000_t0001"

CUSTOMER_KEY_BYTES = bytes(range(32))


@pytest.fixture
def part_data() -> bytes:
    return PART_DATA


@pytest.fixture
def part_sha1() -> str:
    return hashlib.sha1(PART_DATA).hexdigest()


@pytest.fixture
def customer_key() -> str:
    return base64.b64encode(CUSTOMER_KEY_BYTES).decode()


@pytest.fixture
def customer_key_md5() -> str:
    return base64.b64encode(hashlib.md5(CUSTOMER_KEY_BYTES).digest()).decode()


@pytest.fixture
def url_params() -> UploadPartUrlParameters:
    return UploadPartUrlParameters.model_validate(
        {"fileId": FILE_ID, "uploadUrl": UPLOAD_URL, "authorizationToken": AUTH_TOKEN}
    )


@pytest.fixture
def part_params(part_sha1) -> UploadPartParameters:
    return UploadPartParameters(part_number=1, content_length=len(PART_DATA), content_sha1=part_sha1)


@pytest.fixture
def upload_part_ok_json(part_sha1) -> dict:
    return {
        "fileId": FILE_ID,
        "partNumber": 1,
        "contentLength": len(PART_DATA),
        "contentSha1": part_sha1,
        "contentMd5": hashlib.md5(PART_DATA).hexdigest(),
        "serverSideEncryption": {"algorithm": "AES256", "mode": "SSE-B2"},
        "uploadTimestamp": 1700000000123,
    }


@pytest.fixture
def make_response():
    """Factory for requests.Response objects with a given status and body."""

    def _make_response(status_code: int, body) -> requests.Response:
        response = requests.Response()
        response.status_code = status_code
        response.encoding = "utf-8"
        response._content = body if isinstance(body, bytes) else json.dumps(body).encode()
        response.url = UPLOAD_URL
        return response

    return _make_response


@pytest.fixture
def mock_session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def temp_config_file_path(tmp_path):
    config_path = tmp_path / "config.yaml"
    with open(config_path, "w") as fd:
        yaml.dump(
            {
                "upload_target": {
                    "file_id": FILE_ID,
                    "upload_url": UPLOAD_URL,
                    "authorization_token": AUTH_TOKEN,
                },
                "timeout": 60,
            },
            fd,
        )
    return config_path
