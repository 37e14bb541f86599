import logging

import bcrypt

from mentorship.core.errors import HashingError

logger = logging.getLogger(__name__)

DEFAULT_ROUNDS = 10
BCRYPT_MAX_BYTES = 72


class PasswordHasher:
    """bcrypt hashing with a fresh salt per call."""

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        self.rounds = rounds

    def hash(self, plaintext: str) -> str:
        try:
            salt = bcrypt.gensalt(rounds=self.rounds)
            return bcrypt.hashpw(plaintext.encode("utf-8"), salt).decode("utf-8")
        except (ValueError, TypeError) as exc:
            logger.error("Password hashing failed: %s", type(exc).__name__)
            raise HashingError("Failed to hash password") from exc

    def verify(self, plaintext: str, secret: str) -> bool:
        try:
            password_bytes = plaintext.encode("utf-8")
        except UnicodeEncodeError:
            return False
        if len(password_bytes) > BCRYPT_MAX_BYTES:
            return False
        try:
            return bcrypt.checkpw(password_bytes, secret.encode("utf-8"))
        except (ValueError, TypeError) as exc:
            logger.error("Password verification failed: %s", type(exc).__name__)
            raise HashingError("Failed to verify password") from exc
