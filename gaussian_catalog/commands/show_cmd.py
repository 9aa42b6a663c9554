"""
Command to display one catalog entity.
"""

import click
from rich.console import Console
from rich.table import Table

from gaussian_catalog.commands.utils import ENTITY_CHOICE, echo_json, fail, open_storage
from gaussian_catalog.utils.cli_utils import set_logging_level
from gaussian_catalog.utils.logging import get_logger

logger = get_logger(__name__)
console = Console()


@click.command()
@click.argument("entity", type=ENTITY_CHOICE)
@click.argument("entity_id", type=int)
@click.option("--json", "output_json", is_flag=True, help="Output in JSON format")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def show(entity, entity_id, output_json, verbose):
    """Display one entity as a Full model, including archived ones.

    Examples:
        gaussian-catalog show base_method 3
        gaussian-catalog show full_method 12 --json
    """
    set_logging_level(verbose)

    try:
        storage = open_storage()
        try:
            model = storage.service(entity).get_by_id(entity_id)
        finally:
            storage.dispose()
    except Exception as e:
        logger.error(f"Error getting {entity} {entity_id}: {e}")
        fail(f"Error getting {entity} {entity_id}: {e}", verbose)

    if model is None:
        fail(f"No {entity} exists with the supplied Id {entity_id}.")

    data = model.to_dict()
    if output_json:
        echo_json(data)
        return

    table = Table(title=f"{entity}: {model}", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for name, value in data.items():
        # Embedded parents are shown by their label
        if isinstance(value, dict):
            value = str(getattr(model, name))
        table.add_row(name, "" if value is None else str(value))
    console.print(table)
