"""
Common utility functions for CLI commands
"""

import logging

import click

from gaussian_catalog.utils.logging import COLORS, get_logger

logger = get_logger(__name__)


def colored_echo(text, color=None, bold=False, err=False):
    """Echo text with color and styling.

    Args:
        text: The text to echo
        color: Color name (BLUE, GREEN, CYAN, RED, YELLOW) or a level name
        bold: Whether to make the text bold
        err: Write to stderr instead of stdout
    """
    color_mapping = {
        "BLUE": "INFO",
        "GREEN": "INFO",
        "CYAN": "DEBUG",
        "RED": "ERROR",
        "YELLOW": "WARNING",
    }

    prefix = ""
    if color in color_mapping:
        prefix += COLORS[color_mapping[color]]
    elif color in COLORS:
        prefix += COLORS[color]
    if bold:
        prefix += "\033[1m"

    suffix = COLORS["RESET"] if prefix else ""
    click.echo(f"{prefix}{text}{suffix}", err=err)


def set_logging_level(verbose: bool):
    """Set the package logging level based on the verbose flag.

    Args:
        verbose: Whether to enable verbose logging
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.getLogger("gaussian_catalog").setLevel(level)
    logger.debug("Verbose logging enabled")
