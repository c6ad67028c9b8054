"""Unit tests for the CLI application loader."""

import click
import pytest

from pvz_service.adapters.metrics import NullMetricsRecorder, PrometheusMetricsRecorder
from pvz_service.bootstrap import bootstrap
from pvz_service.entrypoints.cli.app import MISSING_DB_URL_MSG, load_app


def test_cli_app_discards_metrics(tmp_path, monkeypatch):
    """CLI runs have no exporter, so their recorder is the null one."""
    monkeypatch.setenv("PVZ_DB_URL", f"sqlite:///{tmp_path / 'pvz.db'}")
    app = load_app()
    assert isinstance(app.metrics, NullMetricsRecorder)


def test_library_bootstrap_keeps_prometheus(tmp_path):
    """Embedding hosts get a Prometheus recorder whose registry they can serve."""
    app = bootstrap(f"sqlite:///{tmp_path / 'pvz.db'}")
    assert isinstance(app.metrics, PrometheusMetricsRecorder)
    names = {metric.name for metric in app.metrics.registry.collect()}
    assert "created_pvz" in names


def test_missing_url_is_a_click_error(monkeypatch):
    """Without PVZ_DB_URL the loader explains how to set it."""
    monkeypatch.delenv("PVZ_DB_URL", raising=False)
    with pytest.raises(click.ClickException) as excinfo:
        load_app()
    assert excinfo.value.message == MISSING_DB_URL_MSG
