"""
Common click options for the CLI commands.
"""

from pathlib import Path

import click
import platformdirs

DEFAULT_CONFIG_PATH = Path(platformdirs.user_config_dir("b2-client")) / "config.yaml"

# Aliases for path types for click options
# Naming convention: {DIR,FILE}_{Read,Write}_{Exists,Create}
FILE_R_E = click.Path(exists=True, file_okay=True, dir_okay=False, readable=True, resolve_path=True, path_type=Path)

config_file = click.option(
    "--config-file",
    "config_files",
    metavar="PATH",
    type=FILE_R_E,
    multiple=True,
    required=False,
    help="Path to config file. Can be given multiple times, later files take precedence.",
)

input_file = click.option(
    "--file",
    "input_file",
    metavar="PATH",
    type=FILE_R_E,
    required=True,
    help="Local file containing the part to upload.",
)

part_number = click.option(
    "--part-number",
    type=click.IntRange(1, 10000),
    required=True,
    help="Number of the part within the large file (1-10000).",
)

offset = click.option(
    "--offset",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="Byte offset of the part within the local file.",
)

length = click.option(
    "--length",
    type=click.IntRange(min=0),
    default=None,
    help="Size of the part in bytes. Defaults to the rest of the file.",
)

content_sha1 = click.option(
    "--content-sha1",
    metavar="HEX",
    type=str,
    required=True,
    help="SHA1 checksum of the part as 40 hex digits.",
)

sse_c_key = click.option(
    "--sse-c-key",
    metavar="BASE64",
    type=str,
    default=None,
    envvar="B2_SSE_C_KEY",
    help="Base64-encoded SSE-C customer key, if the large file was started with SSE-C.",
)

sse_c_key_md5 = click.option(
    "--sse-c-key-md5",
    metavar="BASE64",
    type=str,
    default=None,
    envvar="B2_SSE_C_KEY_MD5",
    help="Base64-encoded MD5 digest of the SSE-C customer key.",
)

progress = click.option("--progress/--no-progress", default=True, help="Show a progress bar while uploading.")


def config_files_or_default(config_files: tuple[Path, ...]) -> list[Path]:
    """Use the given config files, or the default config file if none were given and it exists."""
    if config_files:
        return list(config_files)
    if DEFAULT_CONFIG_PATH.is_file():
        return [DEFAULT_CONFIG_PATH]
    return []
