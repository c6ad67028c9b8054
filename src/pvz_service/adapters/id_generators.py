"""ID generators for PVZ, reception, product and user records."""

import threading
import uuid

from ulid import monotonic

from pvz_service.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class ULIDGenerator(IdGenerator):
    """Thread-safe monotonic ULID generator (the production default).

    ULIDs sort lexicographically in creation order, even within the same
    millisecond, which the product ledger relies on to break timestamp ties.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def new_id(self) -> str:
        """Generate a new ULID (serialized across threads)."""
        with self._lock:
            return str(monotonic.new())


class UUIDv4Generator(IdGenerator):
    """Random UUIDv4 generator. Ids carry no ordering."""

    def new_id(self) -> str:
        """Generate a new UUID."""
        return str(uuid.uuid4())


class SimpleIdGenerator(IdGenerator):
    """Sequential, zero-padded ids.

    Note:
        Not suitable for production use; primarily for testing and demos.
    """

    def __init__(self, length: int = 26) -> None:
        self._counter = 0
        self._length = length

    def new_id(self) -> str:
        """Generate a new unique identifier."""
        self._counter += 1
        return f"{self._counter:0{self._length}d}"
