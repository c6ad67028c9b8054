"""Module defining Commands."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


# --- PVZ ---


@dataclass(frozen=True)
class CreatePVZ(Command):
    """Command to register a new pickup point."""

    city: str


# --- Receptions ---


@dataclass(frozen=True)
class OpenReception(Command):
    """Command to open a new reception at a pickup point."""

    pvz_id: str


@dataclass(frozen=True)
class CloseReception(Command):
    """Command to close the open reception of a pickup point."""

    pvz_id: str


# --- Products ---


@dataclass(frozen=True)
class AddProduct(Command):
    """Command to record a product against the open reception of a pickup point."""

    pvz_id: str
    category: str


@dataclass(frozen=True)
class DeleteLastProduct(Command):
    """Command to remove the most recently added product of the open reception."""

    pvz_id: str


# --- Users ---


@dataclass(frozen=True)
class RegisterUser(Command):
    """Command to create a user account."""

    email: str
    password: str = field(repr=False)
    role: str


@dataclass(frozen=True)
class AuthenticateUser(Command):
    """Command to check an email/password pair against the registered users."""

    email: str
    password: str = field(repr=False)
