"""Achievement endpoints."""

from fastapi import APIRouter, HTTPException, status

from ictlearn.core.storage import get_storage
from ictlearn.web.schemas import AchievementCreate, AchievementResponse, invalid_request

router = APIRouter(prefix="/api/user", tags=["achievements"])


@router.get("/{user_id}/achievements", response_model=list[AchievementResponse])
async def list_user_achievements(user_id: int) -> list[AchievementResponse]:
    """List achievements earned by a user."""
    achievements = get_storage().get_user_achievements(user_id)
    return [AchievementResponse.model_validate(a) for a in achievements]


@router.post(
    "/{user_id}/achievements",
    response_model=AchievementResponse,
    status_code=status.HTTP_201_CREATED,
    openapi_extra=invalid_request("Invalid achievement data"),
)
async def add_user_achievement(user_id: int, body: AchievementCreate) -> AchievementResponse:
    """Award an achievement to a user."""
    storage = get_storage()
    if storage.get_user(user_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    achievement = storage.add_achievement(user_id=user_id, **body.model_dump())
    return AchievementResponse.model_validate(achievement)
