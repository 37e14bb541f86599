from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status

from mentorship.auth.dependencies import TOKEN_COOKIE, get_auth_workflow, get_current_user_id
from mentorship.auth.workflow import AuthWorkflow
from mentorship.core.config import Settings, get_settings
from mentorship.schemas.auth import MessageResponse, ProfileResponse, RegisterResponse

router = APIRouter(tags=['auth'])

ID_COOKIE = 'id'


def set_session_cookie(response: Response, name: str, value: str, settings: Settings) -> None:
    response.set_cookie(
        key=name,
        value=value,
        max_age=settings.token_max_age_seconds,
        httponly=True,
        secure=settings.is_production,
        samesite='strict' if settings.is_production else 'lax',
    )


@router.post('/signin', response_model=ProfileResponse)
def signin(
    response: Response,
    payload: Any = Body(default=None),
    workflow: AuthWorkflow = Depends(get_auth_workflow),
    settings: Settings = Depends(get_settings),
):
    result = workflow.sign_in(payload)
    set_session_cookie(response, TOKEN_COOKIE, result.token, settings)
    return result.user.public_profile()


@router.post('/signup', response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def signup(
    response: Response,
    payload: Any = Body(default=None),
    workflow: AuthWorkflow = Depends(get_auth_workflow),
    settings: Settings = Depends(get_settings),
):
    result = workflow.register(payload)
    set_session_cookie(response, TOKEN_COOKIE, result.token, settings)
    # Legacy clients read this; the server only ever trusts the signed token.
    set_session_cookie(response, ID_COOKIE, str(result.user.id), settings)
    return {'message': 'User registered successfully', 'user': result.user.public_profile()}


@router.post('/', response_model=ProfileResponse | None)
def who_am_i(
    user_id: int = Depends(get_current_user_id),
    workflow: AuthWorkflow = Depends(get_auth_workflow),
):
    user = workflow.who_am_i(user_id)
    if user is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return user.public_profile()


@router.post('/logout', response_model=MessageResponse)
def logout(
    response: Response,
    _user_id: int = Depends(get_current_user_id),
    settings: Settings = Depends(get_settings),
):
    response.delete_cookie(
        TOKEN_COOKIE,
        httponly=True,
        secure=settings.is_production,
        samesite='strict' if settings.is_production else 'lax',
    )
    return {'message': 'Logged out successfully'}
