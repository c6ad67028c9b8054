"""Interface for password hashing."""

import abc


class PasswordHasher(abc.ABC):
    """One-way hashing of user passwords."""

    @abc.abstractmethod
    def hash(self, password: str) -> str:
        """Return an encoded hash of `password` suitable for storage."""

    @abc.abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """Return True if `password` matches the stored `password_hash`."""
