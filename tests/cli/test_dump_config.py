import json

import yaml
from b2_client.cli import build_cli
from click.testing import CliRunner


def test_dump_config_redacts_token(temp_config_file_path):
    """
    GIVEN a configuration file containing an authorization token
    WHEN the dump-config command is called
    THEN the merged configuration is printed without the token
    """
    result = CliRunner().invoke(
        build_cli(), ["--log-level", "CRITICAL", "dump-config", "--config-file", str(temp_config_file_path)]
    )

    assert result.exit_code == 0, result.output
    dumped = json.loads(result.output)

    with open(temp_config_file_path) as fd:
        expected = yaml.safe_load(fd)
    expected["upload_target"]["authorization_token"] = "<redacted>"
    assert dumped == expected


def test_dump_config_merges_files(tmp_path, temp_config_file_path):
    override = tmp_path / "override.yaml"
    override.write_text(yaml.dump({"timeout": 5}))

    result = CliRunner().invoke(
        build_cli(),
        [
            "--log-level",
            "CRITICAL",
            "dump-config",
            "--config-file",
            str(temp_config_file_path),
            "--config-file",
            str(override),
        ],
    )

    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["timeout"] == 5
