"""
This package contains all the CLI commands for gaussian-catalog.
Each command is defined in its own module.
"""

from gaussian_catalog.commands.archive_cmd import archive
from gaussian_catalog.commands.create_cmd import create
from gaussian_catalog.commands.db_cmd import init_db, migrate
from gaussian_catalog.commands.list_cmd import list
from gaussian_catalog.commands.serve_cmd import serve
from gaussian_catalog.commands.show_cmd import show
from gaussian_catalog.commands.version_cmd import version

__all__ = [
    "archive",
    "create",
    "init_db",
    "migrate",
    "list",
    "serve",
    "show",
    "version",
]
