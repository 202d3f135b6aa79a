"""bcrypt password hashing adapter."""

import bcrypt

from blog.domain.service.auth_service import PasswordHasher

BCRYPT_MAX_PASSWORD_BYTES = 72


def _password_bytes(plain: str) -> bytes:
    return plain.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


class BcryptPasswordHasher(PasswordHasher):
    """bcrypt password hasher.

    bcrypt only reads the first 72 bytes of a password; longer passwords are
    cut to that length before hashing and verifying.
    """

    def __init__(self, rounds: int = 12) -> None:
        """Initialize hasher.

        Args:
            rounds: bcrypt work factor (log2 of the iteration count)
        """
        self.rounds = rounds

    def hash(self, plain: str) -> str:
        """Return the bcrypt hash of a password, salted with a fresh salt."""
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_password_bytes(plain), salt).decode("utf-8")

    def verify(self, plain: str, hashed: str) -> bool:
        """Return True if the password matches the hash.

        A hash that bcrypt cannot parse never matches.
        """
        try:
            return bcrypt.checkpw(_password_bytes(plain), hashed.encode("utf-8"))
        except (ValueError, TypeError):
            return False
