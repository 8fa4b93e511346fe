"""Progress endpoints."""

from fastapi import APIRouter, HTTPException, status

from ictlearn.core.storage import get_storage
from ictlearn.web.schemas import ProgressResponse, ProgressUpdate, invalid_request

router = APIRouter(prefix="/api/user", tags=["progress"])


@router.get("/{user_id}/progress", response_model=list[ProgressResponse])
async def get_user_progress(user_id: int) -> list[ProgressResponse]:
    """List progress rows for a user (empty for unknown users)."""
    rows = get_storage().get_user_progress(user_id)
    return [ProgressResponse.model_validate(r) for r in rows]


@router.put(
    "/{user_id}/progress/{topic_id}",
    response_model=ProgressResponse,
    openapi_extra=invalid_request("Invalid progress data"),
)
async def update_progress(
    user_id: int,
    topic_id: int,
    body: ProgressUpdate,
) -> ProgressResponse:
    """Set the progress percentage for one topic."""
    storage = get_storage()

    if storage.get_user(user_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    if storage.get_topic(topic_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Topic not found")

    row = storage.update_progress(user_id, topic_id, body.progress)
    return ProgressResponse.model_validate(row)
