"""bcrypt implementation of PasswordHasher."""

from __future__ import annotations

import bcrypt

from marketplace.domain.exceptions import ValidationError
from marketplace.domain.security import PasswordHasher

# bcrypt only looks at the first 72 bytes of a secret.
MAX_SECRET_BYTES = 72


class BcryptPasswordHasher(PasswordHasher):

    def __init__(self, rounds: int = 12) -> None:
        self._rounds = rounds

    def hash(self, secret: str) -> str:
        raw = secret.encode("utf-8")
        if len(raw) > MAX_SECRET_BYTES:
            raise ValidationError(f"Password must be at most {MAX_SECRET_BYTES} bytes")
        return bcrypt.hashpw(raw, bcrypt.gensalt(rounds=self._rounds)).decode("ascii")

    def matches(self, secret: str, hashed: str) -> bool:
        raw = secret.encode("utf-8")
        if not hashed or len(raw) > MAX_SECRET_BYTES:
            return False
        try:
            return bcrypt.checkpw(raw, hashed.encode("ascii"))
        except ValueError:
            # Stored value is not a bcrypt hash.
            return False
