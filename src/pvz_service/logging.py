"""Logging setup for the PVZ CLI.

Two handlers hang off the root logger:

* a Rich console handler on stderr, so stdout stays clean for JSON output;
* an optional "flight recorder", a ``MemoryHandler`` that keeps the last few
  thousand records at DEBUG and writes them to a file once a WARNING (or
  worse) shows up, or on shutdown when forced.

Records from libraries (SQLAlchemy, Alembic, ...) are tagged with a short
``[library]`` prefix on the console.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from dataclasses import dataclass, field
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import Literal, TypeAlias

import alembic
import sqlalchemy
from rich.console import Console
from rich.logging import RichHandler

# pylint: disable=too-few-public-methods

PACKAGE_LOGGER = "pvz_service"

DEFAULT_FLIGHT_CAPACITY = 2000

FLIGHT_RECORD_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)

# matches click-extra's --color / --no-color
ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class LibraryPrefixFilter(logging.Filter):
    """Set ``record.prefix`` to ``[top-level logger]`` for non-package records."""

    def filter(self, record: logging.LogRecord) -> bool:
        top = record.name.split(".", 1)[0]
        record.prefix = "" if top == PACKAGE_LOGGER else f"[{top}]"
        return True


@dataclass(frozen=True, slots=True)
class LoggingSetup:
    """Everything the CLI decided about logging for this invocation."""

    console_level: int = logging.WARNING
    debug: bool = False
    color: bool = True
    flight_path: Path | None = None
    flight_capacity: int = DEFAULT_FLIGHT_CAPACITY
    flush_on_close: bool = False
    logger_levels: dict[str, int] = field(default_factory=dict)

    @property
    def flight_recorder(self) -> bool:
        return self.flight_path is not None


def console_handler(
    level: int = logging.INFO, debug: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    In debug mode the level drops to DEBUG, records carry their logger name
    and source location, and library prefixes are not added.
    """
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug,
        enable_link_path=debug,
    )
    if debug:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(LibraryPrefixFilter())
    return handler


def flight_recorder(
    path: Path,
    capacity: int = DEFAULT_FLIGHT_CAPACITY,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build the in-memory flight recorder writing to `path`.

    The target file is truncated when the handler is created, so every
    invocation starts a fresh log.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8")
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(FLIGHT_RECORD_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


def configure_logging(setup: LoggingSetup) -> list[logging.Handler]:
    """Install the handlers described by `setup` on the root logger.

    The root logger is opened to DEBUG; each handler filters on its own
    level. Per-logger overrides are applied afterwards.

    Returns:
        The handlers now attached to the root logger.
    """
    handlers: list[logging.Handler] = [
        console_handler(setup.console_level, debug=setup.debug, color=setup.color)
    ]
    if setup.flight_path is not None:
        handlers.append(
            flight_recorder(
                setup.flight_path,
                capacity=setup.flight_capacity,
                flush_on_close=setup.flush_on_close,
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in setup.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def log_startup(
    logger: logging.Logger,
    setup: LoggingSetup,
    handlers: list[logging.Handler],
    app_version: str,
) -> None:
    """Emit a one-line INFO summary, then environment details at DEBUG."""
    logger.info(
        "PVZ service %s: console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(setup.console_level),
        "ON" if setup.flight_recorder else "OFF",
    )

    details = {
        "Python": sys.version.split()[0],
        "Platform": f"{platform.system()} {platform.release()}",
        "PID": os.getpid(),
        "CWD": Path.cwd(),
        "Alembic": alembic.__version__,
        "SQLAlchemy": sqlalchemy.__version__,
        "Handlers": [type(h).__name__ for h in handlers],
    }
    for key, value in details.items():
        logger.debug("%s: %s", key, value)

    if setup.flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            setup.flight_path,
            setup.flight_capacity,
            setup.flush_on_close,
        )
    overrides = {
        name: logging.getLevelName(level)
        for name, level in setup.logger_levels.items()
    }
    logger.debug("Per-logger overrides: %s", overrides or "<none>")
