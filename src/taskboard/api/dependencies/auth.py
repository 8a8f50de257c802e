"""Bearer token authentication."""

from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from src.taskboard.api.dependencies.services import UserServiceDep
from src.taskboard.core.logging import bind_user_context
from src.taskboard.core.security import InvalidTokenError, read_access_token
from src.taskboard.models import User

BEARER_PREFIX = "Bearer "


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    user_service: UserServiceDep,
    authorization: Annotated[str | None, Header()] = None,
) -> User:
    """Resolve the Bearer access token to an active user, or answer 401."""
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise _unauthorized("Missing or invalid authorization header")

    try:
        user_id = read_access_token(authorization.removeprefix(BEARER_PREFIX))
    except InvalidTokenError as e:
        raise _unauthorized(str(e)) from e

    user = await user_service.get_by_id(user_id)
    if user is None or not user.is_active:
        raise _unauthorized("User not found or inactive")

    bind_user_context(user.id, user.email)
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]
