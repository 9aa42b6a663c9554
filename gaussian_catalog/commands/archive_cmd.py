"""
Command to archive (soft delete) an entity.
"""

import click

from gaussian_catalog.commands.utils import ENTITY_CHOICE, fail, open_storage
from gaussian_catalog.utils.cli_utils import colored_echo, set_logging_level
from gaussian_catalog.utils.logging import get_logger

logger = get_logger(__name__)


@click.command()
@click.argument("entity", type=ENTITY_CHOICE)
@click.argument("entity_id", type=int)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def archive(entity, entity_id, verbose):
    """Archive an entity.

    The row is kept and marked archived. Entities still referenced by
    non-archived entries cannot be archived.
    """
    set_logging_level(verbose)

    try:
        storage = open_storage()
        try:
            storage.service(entity).delete(entity_id)
        finally:
            storage.dispose()
    except Exception as e:
        logger.error(f"Error archiving {entity} {entity_id}: {e}")
        fail(str(e), verbose)

    colored_echo(f"Archived {entity} with ID {entity_id}", color="GREEN")
