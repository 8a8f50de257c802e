"""Current user endpoint."""

from fastapi import APIRouter

from src.taskboard.api.dependencies import CurrentUser
from src.taskboard.schemas.user import UserRead

router = APIRouter(prefix="/users", tags=["users"])


@router.get(
    "/me",
    response_model=UserRead,
    summary="Current user",
    description="Profile of the user named by the bearer token.",
    responses={401: {"description": "Missing, invalid or expired token"}},
)
async def read_current_user(current_user: CurrentUser) -> UserRead:
    return UserRead.model_validate(current_user)
