"""
List command for gaussian-catalog CLI.
"""

import click
from rich.console import Console
from rich.table import Table

from gaussian_catalog.commands.utils import ENTITY_CHOICE, echo_json, fail, open_storage
from gaussian_catalog.core.models import ENTITY_FAMILIES
from gaussian_catalog.utils.cli_utils import colored_echo, set_logging_level
from gaussian_catalog.utils.logging import get_logger

logger = get_logger(__name__)
console = Console()

SHAPES = ["full", "simple", "intermediate", "records"]


def _fetch(service, shape):
    if shape == "records":
        return service.get_list()
    if shape == "simple":
        return service.get_all_simple()
    if shape == "intermediate":
        return service.get_all_intermediate()
    return service.get_all_full()


@click.command()
@click.argument("entity", type=ENTITY_CHOICE)
@click.option(
    "--shape",
    type=click.Choice(SHAPES),
    default="full",
    help="Shape of the listed entities",
)
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def list(entity, shape, output_json, verbose):
    """List the non-archived entities of one kind.

    Examples:
        gaussian-catalog list base_method
        gaussian-catalog list full_method --shape intermediate --json
    """
    set_logging_level(verbose)

    if shape in ("simple", "intermediate") and not ENTITY_FAMILIES[entity].has_relations:
        fail(f"{entity} has no {shape} shape; use --shape full or records")

    try:
        storage = open_storage()
        try:
            items = _fetch(storage.service(entity), shape)
        finally:
            storage.dispose()
    except Exception as e:
        logger.error(f"Error listing {entity}: {e}")
        fail(f"Error listing {entity}: {e}", verbose)

    if output_json:
        echo_json([item.to_dict() for item in items])
        return

    if not items:
        colored_echo(f"No {entity} entries found", color="YELLOW")
        return

    table = Table(title=f"{entity} ({shape})")
    table.add_column("ID", justify="right")
    table.add_column("Label")
    if shape != "records":
        table.add_column("Description")

    for item in items:
        row = [str(item.id), str(item)]
        if shape != "records":
            row.append(item.description_text or "")
        table.add_row(*row)

    console.print(table)
