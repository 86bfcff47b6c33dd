"""Command for dumping the configuration."""

import json
import logging
from pathlib import Path

import click

from ..cli_options import config_file, config_files_or_default
from ..utils.config import read_and_merge_config_files, redact_secrets

log = logging.getLogger(__name__)


@click.command()
@config_file
def dump_config(config_files: tuple[Path, ...]):
    """
    Dump the merged configuration as read from config files, with secrets redacted.
    """
    files = config_files_or_default(config_files)
    log.info(f"Configuration files to load: {json.dumps([str(p.absolute()) for p in files])}")

    config = read_and_merge_config_files(files)
    click.echo(json.dumps(redact_secrets(config), indent=2))

    log.info(
        "Note this only dumps the merged configuration as read from the files. "
        "It does not validate the configuration and ignores any environment variables."
    )
