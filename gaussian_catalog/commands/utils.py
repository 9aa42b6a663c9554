"""
Utility functions used by CLI commands.
"""

import json
import sys
import traceback

import click

from gaussian_catalog.core.models import ENTITY_FAMILIES
from gaussian_catalog.utils.cli_utils import colored_echo
from gaussian_catalog.utils.config import get_config_value
from gaussian_catalog.utils.logging import get_logger

logger = get_logger(__name__)

# Accepts the entity family keys, e.g. "base_method"
ENTITY_CHOICE = click.Choice(sorted(ENTITY_FAMILIES))


def open_storage():
    """Open the catalog storage configured by DATABASE_URI."""
    from gaussian_catalog.storage import CatalogStorage

    database_uri = get_config_value("database_uri")
    logger.debug(f"Opening catalog storage at {database_uri}")
    return CatalogStorage(database_uri)


def echo_json(data):
    click.echo(json.dumps(data, indent=2))


def fail(message: str, verbose: bool = False):
    """Print an error in red and exit with status 1."""
    colored_echo(message, color="RED", bold=True, err=True)
    if verbose:
        colored_echo(traceback.format_exc(), color="RED", err=True)
    sys.exit(1)
