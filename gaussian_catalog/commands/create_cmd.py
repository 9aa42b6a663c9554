"""
Command to add an entity to the catalog.
"""

import json

import click

from gaussian_catalog.commands.utils import ENTITY_CHOICE, echo_json, fail, open_storage
from gaussian_catalog.core.models import ENTITY_FAMILIES
from gaussian_catalog.utils.cli_utils import colored_echo, set_logging_level
from gaussian_catalog.utils.logging import get_logger

logger = get_logger(__name__)


@click.command()
@click.argument("entity", type=ENTITY_CHOICE)
@click.option(
    "--data",
    required=True,
    help="JSON object with the entity's fields (parents referenced by id)",
)
@click.option("--json", "output_json", is_flag=True, help="Output the stored entity as JSON")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def create(entity, data, output_json, verbose):
    """Create an entity from a JSON object.

    Examples:
        gaussian-catalog create method_family --data '{"name": "DFT"}'
        gaussian-catalog create base_method --data '{"keyword": "B3LYP", "method_family_id": 1}'
    """
    set_logging_level(verbose)

    try:
        values = json.loads(data)
    except json.JSONDecodeError as e:
        fail(f"Invalid JSON for --data: {e}")

    if not isinstance(values, dict):
        fail("--data must be a JSON object")

    try:
        model = ENTITY_FAMILIES[entity].input_model.from_dict(values)
    except (TypeError, ValueError) as e:
        fail(f"Invalid {entity}: {e}", verbose)

    try:
        storage = open_storage()
        try:
            stored = storage.service(entity).create(model)
        finally:
            storage.dispose()
    except Exception as e:
        logger.error(f"Error creating {entity}: {e}")
        fail(f"Error creating {entity}: {e}", verbose)

    if output_json:
        echo_json(stored.to_dict())
        return
    colored_echo(f"Created {entity} {stored} with ID {stored.id}", color="GREEN")
