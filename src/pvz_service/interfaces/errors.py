"""Errors raised at the port boundary."""


class StorageFailure(Exception):
    """Raised when the storage collaborator fails for any lower-level reason.

    Never a domain error: callers must not read a business outcome into it.
    The original driver exception is chained as ``__cause__``.
    """
