"""Database plumbing: engine factory, metadata, column types, schema and migrations."""
