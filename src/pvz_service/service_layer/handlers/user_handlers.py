"""User registration and credential checks.

Token issuance and role enforcement belong to the boundary layer; these
handlers only create accounts and verify email/password pairs.
"""

import logging
from collections.abc import Callable

from pvz_service.domain import rules
from pvz_service.domain.errors import EmailTaken, InvalidCredentials
from pvz_service.domain.events import UserRegistered
from pvz_service.domain.models import User
from pvz_service.interfaces.clock import Clock
from pvz_service.interfaces.id_generator import IdGenerator
from pvz_service.interfaces.metrics import MetricsRecorder
from pvz_service.interfaces.password_hasher import PasswordHasher
from pvz_service.interfaces.unit_of_work import AbstractUnitOfWork
from pvz_service.service_layer import commands

logger = logging.getLogger(__name__)

# pylint: disable=too-many-arguments,too-many-positional-arguments


def register_user(
    cmd: commands.RegisterUser,
    uow: AbstractUnitOfWork,
    id_generator: IdGenerator,
    clock: Clock,
    password_hasher: PasswordHasher,
    metrics: MetricsRecorder,
) -> User:
    """Create a user account with a unique email."""

    role = rules.validate_user_role(cmd.role)
    rules.validate_password(cmd.password)

    with uow:
        if uow.users.email_exists(cmd.email):
            raise EmailTaken(cmd.email)

        user = User(
            id=id_generator.new_id(),
            email=cmd.email,
            password_hash=password_hasher.hash(cmd.password),
            role=role,
            created_at=clock.now(),
        )
        uow.users.add(user)
        uow.commit()

    logger.info("User registered: id=%s, role=%s", user.id, role.value)
    metrics.record(UserRegistered(user_id=user.id, role=role.value))
    return user


def authenticate_user(
    cmd: commands.AuthenticateUser,
    uow: AbstractUnitOfWork,
    password_hasher: PasswordHasher,
) -> User:
    """Return the user matching the email/password pair.

    Unknown emails and wrong passwords fail identically.
    """

    with uow:
        user = uow.users.get_by_email(cmd.email)

    if user is None or not password_hasher.verify(cmd.password, user.password_hash):
        raise InvalidCredentials()

    logger.info("User authenticated: id=%s", user.id)
    return user


COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    commands.RegisterUser: register_user,
    commands.AuthenticateUser: authenticate_user,
}
