"""Interface for recording domain outcomes to an observability backend."""

import abc

from pvz_service.domain.events import DomainEvent

# pylint: disable=too-few-public-methods


class MetricsRecorder(abc.ABC):
    """Receives domain events after their unit of work has committed.

    Implementations are created once at startup and injected into the
    handlers; they must not raise for event types they do not track.
    """

    @abc.abstractmethod
    def record(self, event: DomainEvent) -> None:
        """Record a single domain event."""
