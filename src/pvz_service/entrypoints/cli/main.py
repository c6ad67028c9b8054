"""PVZ service CLI entry point.

Defines the top-level ``pvz`` command (via Click-Extra) and registers the
command groups:

- ``pvz db``: forward-only database management (upgrade/current/heads/history/status).
- ``pvz pvz``: register pickup points, list them, show the nested view.
- ``pvz reception``: open and close receptions.
- ``pvz product``: add products and remove the last one.
- ``pvz user``: register users and check credentials.

Results are printed to stdout as JSON; logs and status lines go to stderr.

Examples
    $ pvz --version
    $ pvz db upgrade
    $ pvz pvz create --city Москва
    $ pvz pvz info --start 2025-01-01T00:00:00Z --page 2
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from pvz_service import __version__
from pvz_service.logging import (
    DEFAULT_FLIGHT_CAPACITY,
    LoggingSetup,
    configure_logging,
    log_startup,
)

from .db import db as db_group
from .helpers.log_level_parser import parse_log_level
from .product import product as product_group
from .pvz import pvz_group
from .reception import reception as reception_group
from .user import user as user_group

logger = logging.getLogger(__name__)

HELP = """PVZ service command-line interface.

    Manages pickup points (PVZ): registering them, opening and closing intake
    batches ("receptions"), and adding or removing products in the open batch.
    Every change runs in a single database transaction.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (timestamps and source locations in console logs).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path of the flight recorder log file.",
    default=lambda: Path(user_log_dir("pvz_service", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="PVZ_LOG_PATH",
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=DEFAULT_FLIGHT_CAPACITY,
    hidden=True,
    envvar="PVZ_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last N log records at DEBUG granularity in memory and write "
        "them to --log-path when a WARNING or ERROR occurs (or on exit with "
        "--force-flush). Console verbosity is unaffected."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Always write the flight recorder buffer to --log-path on exit.",
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set the minimum level of specific loggers (NAME=LEVEL). Applies to "
        "both console and flight recorder. Repeatable (e.g. -L sqlalchemy=INFO) "
        "or via PVZ_LOGGER_LEVEL (comma/space list)."
    ),
    default=("sqlalchemy=WARNING", "alembic=WARNING"),
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def pvz(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """PVZ service command-line interface."""

    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    setup = LoggingSetup(
        console_level=max(logging.DEBUG, min(logging.CRITICAL, level)),
        debug=debug,
        color=ctx.color is not False,
        flight_path=log_path if flight_recorder else None,
        flight_capacity=flight_recorder_capacity,
        flush_on_close=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(setup)
    log_startup(logger, setup, handlers, app_version=__version__)

    ctx.call_on_close(logging.shutdown)


pvz.add_command(db_group)
pvz.add_command(pvz_group)
pvz.add_command(reception_group)
pvz.add_command(product_group)
pvz.add_command(user_group)
