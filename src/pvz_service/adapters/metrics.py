"""Metrics recorders.

`PrometheusMetricsRecorder` owns its counters on a `CollectorRegistry` handed
in at construction time; it never touches prometheus_client's process-global
default registry, so several recorders (e.g. one per test) can coexist.
"""

from __future__ import annotations

from prometheus_client import CollectorRegistry, Counter

from pvz_service.domain import events
from pvz_service.domain.events import DomainEvent
from pvz_service.interfaces.metrics import MetricsRecorder

# pylint: disable=too-few-public-methods

# event type -> (metric name, help text)
COUNTED_EVENTS: dict[type[DomainEvent], tuple[str, str]] = {
    events.PVZCreated: ("created_pvz_total", "Number of pickup points registered"),
    events.ReceptionCreated: (
        "created_receptions_total",
        "Number of receptions opened",
    ),
    events.ReceptionClosed: ("closed_receptions_total", "Number of receptions closed"),
    events.ProductAdded: ("created_products_total", "Number of products added"),
    events.ProductRemoved: ("deleted_products_total", "Number of products removed"),
    events.UserRegistered: ("registered_users_total", "Number of users registered"),
}


class PrometheusMetricsRecorder(MetricsRecorder):
    """Counts domain events with Prometheus counters."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self.registry = registry if registry is not None else CollectorRegistry()
        self._counters: dict[type[DomainEvent], Counter] = {
            event_type: Counter(name, help_text, registry=self.registry)
            for event_type, (name, help_text) in COUNTED_EVENTS.items()
        }

    def record(self, event: DomainEvent) -> None:
        if (counter := self._counters.get(type(event))) is not None:
            counter.inc()


class InMemoryMetricsRecorder(MetricsRecorder):
    """Keeps every recorded event in a list. Intended for tests."""

    def __init__(self) -> None:
        self.events: list[DomainEvent] = []

    def record(self, event: DomainEvent) -> None:
        self.events.append(event)

    def names(self) -> list[str]:
        """Return the names of the recorded events, in order."""
        return [event.name for event in self.events]


class NullMetricsRecorder(MetricsRecorder):
    """Discards every event."""

    def record(self, event: DomainEvent) -> None:
        return None
