"""Domain layer for the PVZ service.

Contains business rules: entities, value objects, validation rules and the
domain error taxonomy. This package is deliberately technology-agnostic.

Dependency rule: do not import from `pvz_service.adapters` or
`pvz_service.entrypoints`.
"""
