"""
Command to run the catalog REST API.
"""

import click

from gaussian_catalog.utils.cli_utils import colored_echo, set_logging_level
from gaussian_catalog.utils.config import get_config_value


@click.command()
@click.option("--host", default=None, help="Interface to bind (default: API_HOST)")
@click.option("--port", type=int, default=None, help="Port to listen on (default: API_PORT)")
@click.option("--reload", is_flag=True, help="Reload on code changes")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def serve(host, port, reload, verbose):
    """Serve the catalog REST API with uvicorn."""
    set_logging_level(verbose)
    from gaussian_catalog.api.server import start_server

    host = host or get_config_value("api_host")
    port = port or get_config_value("api_port")
    colored_echo(f"Starting catalog API on http://{host}:{port}", color="INFO")
    start_server(host=host, port=port, reload=reload)
