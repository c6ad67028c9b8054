"""Service layer for the PVZ service.

Implements application use-cases: command handlers, read views, orchestration
and transaction boundaries. Calls domain objects and the ports defined in
`pvz_service.interfaces`.

Dependency rule: may import `pvz_service.domain` and `pvz_service.interfaces`,
but not `pvz_service.adapters` or `pvz_service.entrypoints`.
"""
