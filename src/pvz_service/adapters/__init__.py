"""Adapters (infrastructure) for the PVZ service.

Provide concrete implementations of the ports (database-backed and in-memory
repositories, unit of work, clocks, ID generators, password hashing, metrics),
plus persistence mapping and related wiring (engines, metadata, migrations).

Dependency rule: may import `pvz_service.domain` and `pvz_service.interfaces`;
neither of those may import this package.
"""
