"""Bootstrap (composition root) for the PVZ service.

Assembles the application at runtime: wires concrete adapters to the
service-layer handlers and views, composes shared services (message bus, unit
of work, metrics recorder), and reads configuration.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `pvz_service.adapters`, `pvz_service.service_layer`,
  `pvz_service.interfaces`, `pvz_service.domain`, and `pvz_service.config`.
- Inner layers must not import `pvz_service.bootstrap`.

No business rules live here; this is assembly and lifecycle only.
"""

from .bootstrap import (
    AppContainer,
    bootstrap,
    build_message_bus,
    build_read_uow,
    build_write_uow,
    inject_dependencies,
)

__all__ = [
    "AppContainer",
    "bootstrap",
    "build_message_bus",
    "build_read_uow",
    "build_write_uow",
    "inject_dependencies",
]
