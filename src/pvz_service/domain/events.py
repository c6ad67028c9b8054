"""Domain events emitted after a successful state change.

Events are handed to the injected metrics recorder once the unit of work has
committed; they are never emitted for rolled-back work.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DomainEvent:
    """Base class for all domain events."""

    @property
    def name(self) -> str:
        """Event name used by observability adapters."""
        return type(self).__name__


@dataclass(frozen=True, slots=True)
class PVZCreated(DomainEvent):
    """A pickup point has been registered."""

    pvz_id: str
    city: str


@dataclass(frozen=True, slots=True)
class ReceptionCreated(DomainEvent):
    """A reception has been opened at a pickup point."""

    reception_id: str
    pvz_id: str


@dataclass(frozen=True, slots=True)
class ReceptionClosed(DomainEvent):
    """A reception has been closed."""

    reception_id: str
    pvz_id: str


@dataclass(frozen=True, slots=True)
class ProductAdded(DomainEvent):
    """A product has been recorded against an open reception."""

    product_id: str
    reception_id: str
    category: str


@dataclass(frozen=True, slots=True)
class ProductRemoved(DomainEvent):
    """The most recently added product of an open reception has been removed."""

    product_id: str
    reception_id: str


@dataclass(frozen=True, slots=True)
class UserRegistered(DomainEvent):
    """A user account has been created."""

    user_id: str
    role: str
