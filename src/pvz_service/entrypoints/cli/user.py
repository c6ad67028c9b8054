"""`pvz user` commands: register accounts and check credentials."""

import click
import click_extra as clickx

from pvz_service.domain.value_objects import UserRole
from pvz_service.service_layer import commands

from .app import load_app, reported_errors
from .helpers import echo_json
from .helpers.presenters import user_to_dict


@click.group(cls=clickx.ExtraGroup)
def user() -> None:
    """User commands."""


@user.command()
@click.option("--email", required=True, help="Login email; must be unused.")
@click.password_option(envvar="PVZ_USER_PASSWORD", help="Password for the new user.")
@click.option(
    "--role",
    required=True,
    help=f"User role ({', '.join(r.value for r in UserRole)}).",
)
def register(email: str, password: str, role: str) -> None:
    """Register a new user."""
    app = load_app()
    with reported_errors():
        registered = app.message_bus.handle(
            commands.RegisterUser(email=email, password=password, role=role)
        )
    echo_json(user_to_dict(registered))


@user.command()
@click.option("--email", required=True, help="Login email.")
@click.option(
    "--password",
    prompt=True,
    hide_input=True,
    envvar="PVZ_USER_PASSWORD",
    help="Password to check.",
)
def login(email: str, password: str) -> None:
    """Check a user's credentials and print the matching user."""
    app = load_app()
    with reported_errors():
        authenticated = app.message_bus.handle(
            commands.AuthenticateUser(email=email, password=password)
        )
    echo_json(user_to_dict(authenticated))
