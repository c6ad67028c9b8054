"""Interfaces (application boundary) for the PVZ service.

Defines framework-free application contracts: repository ports, the unit of
work, clocks, ID generators, password hashing and metrics recording. Business
rules stay out of this package.

Dependency rule: may import `pvz_service.domain` only. It may be imported by
`pvz_service.service_layer`, `pvz_service.adapters`, and `pvz_service.bootstrap`.
"""
