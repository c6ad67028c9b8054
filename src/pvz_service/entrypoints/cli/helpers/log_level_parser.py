"""Parse ``-L NAME=LEVEL`` logger overrides for the `pvz` command.

Values may be repeated on the command line or packed into one string
separated by commas and/or whitespace (as in ``PVZ_LOGGER_LEVEL``).
"""

import logging
import re

import click

DEFAULT_LIB_LEVELS = {
    "sqlalchemy": logging.WARNING,
    "alembic": logging.WARNING,
}

_SEPARATORS = re.compile(r"[,\s]+")


def split_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten one or many option values into non-empty NAME=LEVEL items."""
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _SEPARATORS.split(chunk) if item]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback turning NAME=LEVEL items into a logger-name → level map.

    The result starts from `DEFAULT_LIB_LEVELS`; later items win.

    Raises:
        click.BadParameter: If an item has no ``=`` or names an unknown level.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in split_items(value):
        name, sep, level_name = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        level = logging.getLevelName(level_name.strip().upper())
        if not isinstance(level, int):
            raise click.BadParameter(f"Invalid log level: {level_name}")
        levels[name.strip()] = level
    return levels
