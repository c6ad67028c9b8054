"""Packaged Alembic migration environment (see `pvz_service.config.build_alembic_config`)."""
