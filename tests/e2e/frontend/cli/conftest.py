"""Fixtures and helpers for end-to-end tests of the `pvz` CLI.

Provides a test-only `log-demo` command for the logging tests, a CliRunner,
an isolated filesystem, and a migrated SQLite database exposed through
``PVZ_DB_URL``.
"""

import json
import logging
from pathlib import Path

import click
import pytest
from click.testing import CliRunner

from pvz_service.entrypoints.cli.main import pvz

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit one message per level on a project logger and a third-party logger."""
    logger = logging.getLogger("pvz_service.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    # click-extra keeps extra per-section registries next to group.commands
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Attach `log-demo` to the `pvz` group for the duration of a test."""
    pvz.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(pvz, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated working directory."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def db_env(tmp_path: Path, runner) -> dict[str, str]:
    """Environment pointing the CLI at a fresh SQLite file migrated via `pvz db upgrade`."""
    env = {
        "PVZ_DB_URL": f"sqlite:///{tmp_path / 'pvz.db'}",
        "PVZ_LOG_PATH": str(tmp_path / "pvz.log"),
    }
    result = runner.invoke(pvz, ["db", "upgrade", "--force"], env=env)
    assert result.exit_code == 0, result.output
    return env


@pytest.fixture
def cli(runner, db_env):
    """Invoke `pvz` against the migrated database; return (result, parsed stdout)."""

    def _invoke(*args: str, expect_ok: bool = True):
        result = runner.invoke(pvz, list(args), env=db_env)
        if expect_ok:
            assert result.exit_code == 0, result.output
            return result, json.loads(result.stdout) if result.stdout.strip() else None
        return result, None

    return _invoke
