"""Entrypoints (inbound adapters) for the PVZ service.

Expose the application to the outside world: currently the `pvz` command line.
Parse and validate inputs, hand commands to the message bus or query the read
views, and present results.

Dependency rule: may import `pvz_service.bootstrap` and
`pvz_service.service_layer`; avoid importing `pvz_service.adapters` directly.
"""
