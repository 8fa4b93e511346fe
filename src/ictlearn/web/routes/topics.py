"""Topic endpoints."""

from fastapi import APIRouter, HTTPException, status

from ictlearn.core.storage import get_storage
from ictlearn.web.schemas import QuizResponse, TopicCreate, TopicResponse, invalid_request

router = APIRouter(prefix="/api/topics", tags=["topics"])


@router.get("", response_model=list[TopicResponse])
async def list_topics() -> list[TopicResponse]:
    """List all topics."""
    return [TopicResponse.model_validate(t) for t in get_storage().get_all_topics()]


@router.get("/{topic_id}", response_model=TopicResponse)
async def get_topic(topic_id: int) -> TopicResponse:
    """Get a specific topic by ID."""
    topic = get_storage().get_topic(topic_id)
    if topic is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Topic not found",
        )
    return TopicResponse.model_validate(topic)


@router.post(
    "",
    response_model=TopicResponse,
    status_code=status.HTTP_201_CREATED,
    openapi_extra=invalid_request("Invalid topic data"),
)
async def create_topic(topic_data: TopicCreate) -> TopicResponse:
    """Create a new topic."""
    storage = get_storage()

    if topic_data.prerequisite_id is not None and storage.get_topic(topic_data.prerequisite_id) is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Prerequisite topic {topic_data.prerequisite_id} does not exist",
        )

    topic = storage.create_topic(**topic_data.model_dump())
    return TopicResponse.model_validate(topic)


@router.get("/{topic_id}/quizzes", response_model=list[QuizResponse])
async def list_topic_quizzes(topic_id: int) -> list[QuizResponse]:
    """List the quiz questions of a topic (empty for unknown topics)."""
    return [QuizResponse.model_validate(q) for q in get_storage().get_quizzes_by_topic(topic_id)]
