"""Message bus implementation for handling commands."""

import logging
from collections.abc import Callable
from typing import Any

from pvz_service.domain.errors import DomainError
from pvz_service.interfaces.unit_of_work import AbstractUnitOfWork

from .commands import Command

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class NoHandlerForCommand(LookupError):
    """Exception raised when no handler is found for a command."""

    def __init__(self, cmd: Command) -> None:
        super().__init__(f"No handler found for command {type(cmd).__name__}")


class MessageBus:
    """Routes commands to their handlers.

    The bus logs each dispatch, logs and re-raises any handler exception
    unchanged (domain rule violations at WARNING, anything else with a
    traceback), and returns whatever the handler returned (e.g. the created
    reception). A bus only knows the commands it was built with, so an
    entrypoint that needs a single capability set (say, product operations)
    can be handed a bus restricted to those handlers.

    Args:
        uow: The unit of work injected into the handlers; exposed here for
            convenience (tests inspect it).
        command_handlers: A mapping of command types to their handlers. Handlers
            accept a single command argument; other dependencies are injected
            beforehand (see `pvz_service.bootstrap`).
    """

    def __init__(
        self,
        uow: AbstractUnitOfWork,
        command_handlers: dict[type[Command], Callable[..., Any]],
    ) -> None:
        self.uow = uow
        self._command_handlers = command_handlers

    def handle(self, cmd: Command) -> Any:
        """Handle a command by dispatching it to the appropriate handler.

        Args:
            cmd: The command to handle.

        Returns:
            The handler's result.

        Raises:
            NoHandlerForCommand: If no handler is found for the command type.
            Exception: If the handler raises an exception.
        """

        if handler := self._command_handlers.get(type(cmd)):
            handler_name = self._get_handler_name(handler)
            logger.debug("Handling command %s with handler %s", cmd, handler_name)
            try:
                return handler(cmd)
            except DomainError as e:
                logger.warning(
                    "Command %s rejected by handler %s: %s", cmd, handler_name, e
                )
                raise
            except Exception:  # pylint: disable=broad-except
                logger.exception(
                    "Exception handling command %s with handler %s", cmd, handler_name
                )
                raise
        logger.error("No handler found for command %s", type(cmd).__name__)
        raise NoHandlerForCommand(cmd)

    def handles(self, command_type: type[Command]) -> bool:
        """Return True if the bus has a handler for `command_type`."""
        return command_type in self._command_handlers

    @staticmethod
    def _get_handler_name(fn: Callable[..., Any]) -> str:
        if hasattr(fn, "__name__"):
            return fn.__name__
        if hasattr(fn, "func") and hasattr(fn.func, "__name__"):
            return fn.func.__name__
        return repr(fn)
