"""PVZ service test suite.

Folder taxonomy
- unit/         : single modules, no I/O beyond memory.
- contract/     : one behaviour, every adapter (in-memory, SQLite, Postgres).
- integration/  : real databases, migrations and the bootstrapped application.
- functional/   : user workflows driven through the installed CLI.
- e2e/          : CLI options and commands through Click's test runner.
- fixtures/     : shared fixtures (no tests here).

Postgres-backed tests start a container through testcontainers and are
skipped when Docker is unavailable.
"""
