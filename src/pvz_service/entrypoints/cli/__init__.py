"""Command-line interface for the PVZ service."""
