"""
Version command for gaussian-catalog CLI.
"""

import click

from gaussian_catalog import __version__
from gaussian_catalog.utils.cli_utils import colored_echo


@click.command()
def version():
    """Get the version of gaussian-catalog"""
    colored_echo(f"gaussian-catalog version {__version__}", color="INFO", bold=True)
