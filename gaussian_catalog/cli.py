"""
CLI interface for gaussian-catalog
"""

import click

from gaussian_catalog.utils.config import load_dotenv_once
from gaussian_catalog.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)

from gaussian_catalog.commands import (
    archive,
    create,
    init_db,
    list,
    migrate,
    serve,
    show,
    version,
)


@click.group()
def cli():
    """Gaussian method catalog CLI"""
    pass


# Register all commands
cli.add_command(version)
cli.add_command(init_db)
cli.add_command(migrate)
cli.add_command(list)
cli.add_command(show)
cli.add_command(create)
cli.add_command(archive)
cli.add_command(serve)


def main():
    # Load environment variables from .env file before reading the log settings
    load_dotenv_once()
    setup_logging()

    cli()


if __name__ == "__main__":
    main()
