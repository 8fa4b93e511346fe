"""User endpoints."""

from fastapi import APIRouter, HTTPException, status

from ictlearn.core.storage import DuplicateRecordError, get_storage
from ictlearn.web.schemas import (
    UserCreate,
    UserResponse,
    UserSummaryResponse,
    UserUpdate,
    invalid_request,
)

router = APIRouter(prefix="/api", tags=["users"])


def _user_not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="User not found",
    )


@router.get("/user/{user_id}", response_model=UserResponse)
async def get_user(user_id: int) -> UserResponse:
    """Get a user by ID."""
    user = get_storage().get_user(user_id)
    if user is None:
        raise _user_not_found()
    return UserResponse.model_validate(user)


@router.put(
    "/user/{user_id}",
    response_model=UserResponse,
    openapi_extra=invalid_request("Invalid user data"),
)
async def update_user(user_id: int, updates: UserUpdate) -> UserResponse:
    """Apply a partial update to a user."""
    changes = updates.model_dump(exclude_unset=True, exclude_none=True)

    try:
        user = get_storage().update_user(user_id, changes)
    except DuplicateRecordError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

    if user is None:
        raise _user_not_found()
    return UserResponse.model_validate(user)


@router.post(
    "/users",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    openapi_extra=invalid_request("Invalid user data"),
)
async def create_user(user_data: UserCreate) -> UserResponse:
    """Create a new user."""
    try:
        user = get_storage().create_user(**user_data.model_dump())
    except DuplicateRecordError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return UserResponse.model_validate(user)


@router.get("/user/{user_id}/summary", response_model=UserSummaryResponse)
async def get_user_summary(user_id: int) -> UserSummaryResponse:
    """Dashboard numbers for a user."""
    summary = get_storage().get_user_summary(user_id)
    if summary is None:
        raise _user_not_found()
    return UserSummaryResponse.model_validate(summary)
