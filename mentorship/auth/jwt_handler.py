from datetime import datetime, timedelta, timezone

import jwt

from mentorship.core.config import Settings
from mentorship.core.errors import InvalidTokenError


class TokenIssuer:
    def __init__(self, secret_key: str, algorithm: str = "HS256", expires_minutes: int | None = None):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_minutes = expires_minutes

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenIssuer":
        return cls(
            settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
            expires_minutes=settings.jwt_expires_minutes,
        )

    def issue(self, user_id: int) -> str:
        now = datetime.now(timezone.utc)
        payload = {"sub": str(user_id), "iat": now}
        if self.expires_minutes and self.expires_minutes > 0:
            payload["exp"] = now + timedelta(minutes=self.expires_minutes)
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def decode(self, token: str) -> int:
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except jwt.InvalidTokenError as exc:
            raise InvalidTokenError() from exc

        subject = payload.get("sub")
        try:
            return int(subject)
        except (TypeError, ValueError) as exc:
            raise InvalidTokenError("Invalid token subject") from exc
