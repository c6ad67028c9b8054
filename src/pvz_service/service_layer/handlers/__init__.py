"""Service layer handlers, grouped by capability set.

Each module exposes the `COMMAND_HANDLERS` of one capability (PVZ, receptions,
products, users). `COMMAND_HANDLERS` here is the union used by the full
application bus.
"""

from collections.abc import Callable

from .product_handlers import COMMAND_HANDLERS as PRODUCT_COMMAND_HANDLERS
from .pvz_handlers import COMMAND_HANDLERS as PVZ_COMMAND_HANDLERS
from .reception_handlers import COMMAND_HANDLERS as RECEPTION_COMMAND_HANDLERS
from .user_handlers import COMMAND_HANDLERS as USER_COMMAND_HANDLERS

__all__ = [
    "COMMAND_HANDLERS",
    "PRODUCT_COMMAND_HANDLERS",
    "PVZ_COMMAND_HANDLERS",
    "RECEPTION_COMMAND_HANDLERS",
    "USER_COMMAND_HANDLERS",
]

COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    **PVZ_COMMAND_HANDLERS,
    **RECEPTION_COMMAND_HANDLERS,
    **PRODUCT_COMMAND_HANDLERS,
    **USER_COMMAND_HANDLERS,
}
