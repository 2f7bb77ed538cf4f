"""Password hashing with bcrypt."""

import bcrypt

from core.config import settings


class BcryptPasswordHasher:
    """One-way password hashing with a configurable bcrypt cost.

    bcrypt only looks at the first 72 bytes of a password, so longer
    inputs are truncated explicitly before hashing and checking.
    """

    def __init__(self, rounds: int = settings.password_hash_rounds) -> None:
        self._rounds = rounds

    def hash(self, password: str) -> str:
        pw_bytes = password.encode("utf-8")[:72]
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(pw_bytes, salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(
                password.encode("utf-8")[:72],
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError):
            return False
