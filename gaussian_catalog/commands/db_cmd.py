"""
Database management commands for gaussian-catalog CLI.
"""

import click
from alembic import command
from rich.console import Console
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError

from gaussian_catalog.commands.utils import fail
from gaussian_catalog.storage import CatalogStorage, alembic_config
from gaussian_catalog.storage.models import Base
from gaussian_catalog.utils.cli_utils import set_logging_level
from gaussian_catalog.utils.config import get_config_value
from gaussian_catalog.utils.logging import get_logger

logger = get_logger(__name__)
console = Console()


@click.command()
@click.option("--revision", help="Target revision (default: head)", default="head")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def migrate(revision, verbose):
    """Update the database schema to the latest version.

    This command applies Alembic migrations to update the database schema.

    You can specify a specific revision with --revision (default: head).
    """
    set_logging_level(verbose)
    database_uri = get_config_value("database_uri")

    try:
        logger.info("Running database migrations...")
        storage = CatalogStorage(database_uri, create_tables=False)
        try:
            success = storage.apply_migrations(revision)
        finally:
            storage.dispose()

        if not success:
            fail("Migration failed")
    except Exception as e:
        logger.error(f"Error running migrations: {e}")
        fail(f"Error running migrations: {e}", verbose)

    console.print("[green]Migrations completed successfully.[/green]")


@click.command()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def init_db(verbose):
    """Initialize the database schema and Alembic tracking."""
    set_logging_level(verbose)
    logger.info("Initializing database schema...")
    database_uri = get_config_value("database_uri")

    try:
        engine = create_engine(database_uri)
        try:
            logger.info("Creating database tables...")
            Base.metadata.create_all(engine)
            logger.info("Database tables created successfully.")
        finally:
            engine.dispose()

        logger.info("Stamping database with latest Alembic revision...")
        command.stamp(alembic_config(), "head")
        logger.info("Database stamped successfully.")
    except OperationalError as e:
        logger.error(f"Could not connect to the database: {e}")
        console.print(f"Check your DATABASE_URI in the .env file: {database_uri}")
        fail("Error: Could not connect to the database.", verbose)
    except Exception as e:
        logger.error(f"Error initializing database: {e}")
        fail(f"Error initializing database: {e}", verbose)

    console.print("[green]Database initialized successfully.[/green]")
