from fastapi import Cookie, Depends
from sqlalchemy.orm import Session

from mentorship.auth.jwt_handler import TokenIssuer
from mentorship.auth.store import SqlAlchemyIdentityStore
from mentorship.auth.workflow import AuthWorkflow
from mentorship.core.config import Settings, get_settings
from mentorship.core.errors import UnauthenticatedError
from mentorship.database import get_db

TOKEN_COOKIE = "token"


def get_auth_workflow(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> AuthWorkflow:
    return AuthWorkflow.from_settings(SqlAlchemyIdentityStore(db), settings)


def get_current_user_id(
    token: str | None = Cookie(default=None),
    settings: Settings = Depends(get_settings),
) -> int:
    if not token:
        raise UnauthenticatedError()
    return TokenIssuer.from_settings(settings).decode(token)
