"""`pvz db` commands: forward-only Alembic wrappers.

Only forward operations are offered; ``downgrade`` and ``stamp`` are left to
Alembic itself. Alembic output goes to stdout, human-oriented notices to
stderr. Schema-changing actions ask for confirmation unless ``--force``.

``PVZ_DB_URL`` must be set for every command that touches the database.
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from alembic import command
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import text
from sqlalchemy.exc import ArgumentError, OperationalError

from pvz_service import config
from pvz_service.adapters.db.engine import make_engine

from .app import INVALID_URL_FORMAT_MSG, MISSING_DB_URL_MSG
from .helpers import error, sanitize_url, success, warn

if TYPE_CHECKING:
    from alembic.config import Config
    from sqlalchemy.engine import Engine

CANNOT_CONNECT_MSG = (
    "PVZ_DB_URL is set, but the database is not reachable.\n"
    "Please ensure the database is running and the URL is correct."
)

UPGRADE_SCHEMA_WARNING = (
    "This will upgrade the database schema to the latest version.\n"
    "Please ensure you have a backup before proceeding."
)

UPGRADE_SCHEMA_INSTRUCTIONS = "Run 'pvz db upgrade' to update the schema."


class MigrationStatus(Enum):
    """Where the database schema stands relative to the packaged migrations."""

    UP_TO_DATE = "up to date"
    OUT_OF_DATE = "out of date"
    UNINITIALIZED = "uninitialized"


def _get_url() -> str:
    try:
        url = config.get_db_url()
    except config.DatabaseUrlNotSetError as e:
        raise click.ClickException(MISSING_DB_URL_MSG) from e
    try:
        with make_engine(url).connect() as conn:
            conn.execute(text("SELECT 1"))
    except OperationalError as e:
        raise click.ClickException(CANNOT_CONNECT_MSG) from e
    except ArgumentError as e:
        raise click.ClickException(INVALID_URL_FORMAT_MSG) from e
    return url


def _current_revision(engine: Engine) -> str | None:
    with engine.connect() as conn:
        return MigrationContext.configure(conn).get_current_revision()


def _head_revision(cfg: Config) -> str | None:
    heads_ = ScriptDirectory.from_config(cfg).get_heads()
    return heads_[0] if heads_ else None


def migration_status(current_rev: str | None, head_rev: str | None) -> MigrationStatus:
    """Classify a database revision against the head revision."""
    if current_rev is None:
        return MigrationStatus.UNINITIALIZED
    if current_rev == head_rev:
        return MigrationStatus.UP_TO_DATE
    return MigrationStatus.OUT_OF_DATE


verbose_option = click.option(
    "--verbose", "-v", "verbose", is_flag=True, help="Show Alembic's verbose output."
)


@click.group(cls=clickx.ExtraGroup)
def db() -> None:
    """Database management commands."""


@db.command()
@verbose_option
def current(verbose: bool) -> None:
    """Show current DB revision."""
    cfg = config.build_alembic_config(db_url=_get_url(), stdout=sys.stdout)
    command.current(cfg, verbose=verbose)


@db.command()
@verbose_option
def heads(verbose: bool) -> None:
    """Show available head revisions."""
    command.heads(config.build_alembic_config(stdout=sys.stdout), verbose=verbose)


@db.command()
@verbose_option
@click.option(
    "--indicate-current",
    "-i",
    "indicate_current",
    is_flag=True,
    help="Indicate the current revision.",
)
def history(verbose: bool, indicate_current: bool) -> None:
    """Show revision history."""
    db_url = _get_url() if indicate_current else None
    cfg = config.build_alembic_config(db_url=db_url, stdout=sys.stdout)
    command.history(cfg, verbose=verbose, indicate_current=indicate_current)


@db.command()
@click.option("--sql", is_flag=True, help="Generate SQL without executing.")
@click.option("--force", is_flag=True, help="Upgrade without confirmation.")
def upgrade(sql: bool, force: bool) -> None:
    """Upgrade the database to the head revision."""
    url = _get_url()
    cfg = config.build_alembic_config(db_url=url, stdout=sys.stdout)
    if not force and not sql:
        warn(UPGRADE_SCHEMA_WARNING)
        click.secho(f"db: {click.style(sanitize_url(url), underline=True)}", err=True)
        click.confirm("Are you sure you want to proceed?", abort=True, err=True)
    command.upgrade(cfg, revision="head", sql=sql)
    success("Upgrade complete!")


@db.command()
def status() -> None:
    """Show database connection and schema status."""
    try:
        engine = make_engine(_get_url())
    except click.ClickException as e:
        error("Cannot connect to database")
        click.echo(e.message)
        return

    success("Database reachable")
    click.echo(f"Backend : {engine.dialect.name}")
    click.echo(f"URL     : {sanitize_url(engine.url.render_as_string(hide_password=False))}")
    cfg = config.build_alembic_config(
        db_url=engine.url.render_as_string(hide_password=False)
    )
    rev = _current_revision(engine)
    state = migration_status(rev, _head_revision(cfg))
    click.echo(f"Schema  : {f'{rev} ({state.value})' if rev else state.value}")
    if state is not MigrationStatus.UP_TO_DATE:
        warn(UPGRADE_SCHEMA_INSTRUCTIONS)
