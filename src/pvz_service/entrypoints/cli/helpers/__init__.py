"""CLI helpers for the PVZ service.

Utilities used by the command-line interface: URL sanitization for safe display,
message emitters that write to stderr with emoji→ASCII fallbacks, and JSON
presenters for stdout.
"""

from .db_url import sanitize_url
from .messages import error, success, warn
from .presenters import echo_json

__all__ = ["echo_json", "error", "sanitize_url", "success", "warn"]
