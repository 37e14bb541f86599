"""Registration and sign-in orchestration.

The workflow owns no state of its own: each request builds one around a
database-backed identity store, the configured password hasher and the token
issuer. All failures leave as typed errors from ``mentorship.core.errors``;
``mentorship.main`` turns them into responses.
"""

import logging
from dataclasses import dataclass
from typing import Any

import pydantic

from mentorship.auth.jwt_handler import TokenIssuer
from mentorship.auth.passwords import PasswordHasher
from mentorship.auth.store import IdentityStore
from mentorship.core.config import Settings
from mentorship.core.errors import (
    ConflictError,
    InvalidCredentialsError,
    NotRegisteredError,
    ValidationError,
    field_errors,
)
from mentorship.models.user import User
from mentorship.schemas.auth import RegisterRequest, SignInRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthResult:
    token: str
    user: User


class AuthWorkflow:
    def __init__(
        self,
        store: IdentityStore,
        hasher: PasswordHasher,
        tokens: TokenIssuer,
        password_min_length: int = 6,
    ):
        self.store = store
        self.hasher = hasher
        self.tokens = tokens
        self.password_min_length = password_min_length

    @classmethod
    def from_settings(cls, store: IdentityStore, settings: Settings) -> "AuthWorkflow":
        return cls(
            store,
            PasswordHasher(rounds=settings.bcrypt_rounds),
            TokenIssuer.from_settings(settings),
            password_min_length=settings.password_min_length,
        )

    def register(self, payload: Any) -> AuthResult:
        data = self._validate(
            RegisterRequest,
            payload,
            context={"password_min_length": self.password_min_length},
        )

        if self.store.get_by_email(data.email) is not None:
            raise ConflictError()

        user = self.store.create(
            email=data.email,
            hashed_password=self.hasher.hash(data.password),
            first_name=data.first_name,
            last_name=data.last_name,
            phone=data.phone,
            role=data.role,
        )
        logger.info("Registered user %s with role %s", user.id, user.role)
        return AuthResult(token=self.tokens.issue(user.id), user=user)

    def sign_in(self, payload: Any) -> AuthResult:
        data = self._validate(SignInRequest, payload)

        user = self.store.get_by_email(data.email)
        if user is None:
            raise NotRegisteredError()

        if not self.hasher.verify(data.password, user.hashed_password):
            logger.warning("Rejected sign-in for %s: invalid password", data.email)
            raise InvalidCredentialsError()

        return AuthResult(token=self.tokens.issue(user.id), user=user)

    def who_am_i(self, user_id: int) -> User | None:
        return self.store.get_by_id(user_id)

    @staticmethod
    def _validate(model: type[pydantic.BaseModel], payload: Any, context: dict | None = None):
        try:
            return model.model_validate(payload, context=context)
        except pydantic.ValidationError as exc:
            raise ValidationError(field_errors(exc.errors())) from exc
