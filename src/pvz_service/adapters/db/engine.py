"""Database engine factory.

All Engines used by the service come from `make_engine` so connections are
configured consistently:

- **SQLite**: connection PRAGMAs enforce foreign keys, enable WAL and tune
  durability/temporary storage. pysqlite's own transaction handling is
  switched off and SQLAlchemy emits ``BEGIN`` itself, so a transaction starts
  with its first statement, reads included. Units default to
  ``BEGIN IMMEDIATE`` (writers queue on the database lock and then read fresh
  state); snapshot read units use a deferred ``BEGIN``, which pins one WAL
  snapshot for the whole unit.
- **PostgreSQL**: default (READ COMMITTED) isolation for writes. The
  conditional close and the product delete rely on it: a blocked ``UPDATE`` or
  ``DELETE`` re-checks its predicate after the competing transaction commits
  and reports zero rows instead of a serialization failure. Snapshot read
  units run at REPEATABLE READ.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, make_url

from .dialects import DialectName

if TYPE_CHECKING:
    from sqlite3 import Connection as SQLiteConnection

    from sqlalchemy.engine import Connection, Engine

#: Connection execution option choosing how SQLite transactions begin.
SQLITE_BEGIN_OPTION = "sqlite_begin"
SQLITE_DEFAULT_BEGIN = "IMMEDIATE"
SQLITE_BEGIN_MODES = frozenset({"DEFERRED", "IMMEDIATE", "EXCLUSIVE"})

#: Execution options for read-only units that must see a single snapshot.
SNAPSHOT_OPTIONS: dict[DialectName, dict[str, Any]] = {
    DialectName.POSTGRES: {"isolation_level": "REPEATABLE READ"},
    DialectName.SQLITE: {SQLITE_BEGIN_OPTION: "DEFERRED"},
}


def is_sqlite(url: str | URL) -> bool:
    """Return True if the given SQLAlchemy URL or string corresponds to SQLite."""
    return DialectName.from_url(make_url(str(url))) is DialectName.SQLITE


def snapshot_execution_options(engine: Engine) -> dict[str, Any]:
    """Return the connection options giving a consistent multi-table read on `engine`."""
    return dict(SNAPSHOT_OPTIONS[DialectName.from_sqlalchemy(engine)])


def make_engine(url: str | URL, *, echo: bool = False) -> Engine:
    """Create a SQLAlchemy Engine for the given URL.

    For SQLite the following PRAGMAs are applied on every connection:
        - ``foreign_keys=ON`` (enforce referential integrity)
        - ``journal_mode=WAL`` (write-ahead logging for concurrency)
        - ``synchronous=NORMAL`` (balanced durability)
        - ``temp_store=MEMORY`` (reduce temp file I/O)

    and every transaction is opened explicitly with ``BEGIN <mode>``, where the
    mode comes from the connection's ``sqlite_begin`` execution option
    (``IMMEDIATE`` unless set).

    Args:
        url: Database connection URL (str or :class:`URL`).
        echo: If True, log SQL statements.

    Returns:
        Engine: Configured SQLAlchemy Engine.

    Raises:
        UnsupportedDialect: If the URL is neither PostgreSQL nor SQLite.
    """

    engine = create_engine(url, echo=echo)

    if is_sqlite(url):

        @event.listens_for(engine, "connect")
        def _sqlite_pragmas(dbapi_conn: SQLiteConnection, conn_record):  # type: ignore #pylint: disable=W0613
            # hand transaction control to the "begin" listener below
            dbapi_conn.isolation_level = None
            cur = dbapi_conn.cursor()
            cur.execute("PRAGMA foreign_keys=ON;")
            cur.execute("PRAGMA journal_mode=WAL;")
            cur.execute("PRAGMA synchronous=NORMAL;")
            cur.execute("PRAGMA temp_store=MEMORY;")
            cur.close()

        @event.listens_for(engine, "begin")
        def _sqlite_begin(conn: Connection) -> None:
            mode = conn.get_execution_options().get(
                SQLITE_BEGIN_OPTION, SQLITE_DEFAULT_BEGIN
            )
            if mode not in SQLITE_BEGIN_MODES:
                raise ValueError(f"Unsupported SQLite BEGIN mode: {mode!r}")
            conn.exec_driver_sql(f"BEGIN {mode}")

    return engine
