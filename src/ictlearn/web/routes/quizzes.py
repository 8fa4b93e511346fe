"""Quiz and quiz result endpoints."""

from fastapi import APIRouter, HTTPException, status

from ictlearn.core.storage import get_storage
from ictlearn.web.schemas import (
    QuizResponse,
    QuizResultCreate,
    QuizResultResponse,
    invalid_request,
)

INVALID_RESULT = "Invalid quiz result data"

router = APIRouter(prefix="/api", tags=["quizzes"])


@router.get("/quizzes/{quiz_id}", response_model=QuizResponse)
async def get_quiz(quiz_id: int) -> QuizResponse:
    """Get a quiz question by ID."""
    quiz = get_storage().get_quiz(quiz_id)
    if quiz is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Quiz not found",
        )
    return QuizResponse.model_validate(quiz)


@router.post(
    "/quiz-results",
    response_model=QuizResultResponse,
    openapi_extra=invalid_request(INVALID_RESULT),
)
async def submit_quiz_result(data: QuizResultCreate) -> QuizResultResponse:
    """Record an answered quiz question."""
    storage = get_storage()
    if storage.get_user(data.user_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    quiz = storage.get_quiz(data.quiz_id)
    if quiz is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Quiz not found")
    if data.selected_answer >= len(quiz.options):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=INVALID_RESULT,
        )

    is_correct = data.is_correct
    if is_correct is None:
        is_correct = quiz.is_correct(data.selected_answer)

    result = storage.submit_quiz_result(
        user_id=data.user_id,
        quiz_id=data.quiz_id,
        selected_answer=data.selected_answer,
        is_correct=is_correct,
        time_spent=data.time_spent,
    )
    return QuizResultResponse.model_validate(result)


@router.get("/user/{user_id}/quiz-results", response_model=list[QuizResultResponse])
async def list_user_quiz_results(user_id: int) -> list[QuizResultResponse]:
    """List quiz results for a user."""
    results = get_storage().get_user_quiz_results(user_id)
    return [QuizResultResponse.model_validate(r) for r in results]
