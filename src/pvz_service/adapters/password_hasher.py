"""bcrypt password hashing.

Stored hashes are the standard modular-crypt strings (``$2b$<cost>$...``),
which carry their own salt and cost factor.
"""

import bcrypt

from pvz_service.interfaces.password_hasher import PasswordHasher

DEFAULT_ROUNDS = 12
MIN_ROUNDS = 4


class BcryptPasswordHasher(PasswordHasher):
    """Salted bcrypt hasher.

    Args:
        rounds: log2 of the work factor. Hashes made with another cost still
            verify, since the cost is read back from the stored hash.
    """

    def __init__(self, rounds: int = DEFAULT_ROUNDS) -> None:
        self.rounds = rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("ascii")

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("ascii"))
        except ValueError:
            # malformed or foreign hash
            return False
