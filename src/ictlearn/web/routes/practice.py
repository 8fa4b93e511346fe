"""Lesson practice endpoints: the IP quiz and conversion drills."""

from fastapi import APIRouter, HTTPException, status

from ictlearn.core import practice
from ictlearn.core.lessons import ConversionError
from ictlearn.web.schemas import (
    ConversionDrillResponse,
    DrillAnswerRequest,
    DrillAnswerResponse,
    LessonQuestionResponse,
    invalid_request,
)

router = APIRouter(prefix="/api/practice", tags=["practice"])


@router.get("/ip-quiz", response_model=list[LessonQuestionResponse])
async def ip_quiz() -> list[LessonQuestionResponse]:
    """Questions from the IP Addressing lesson quiz."""
    return [LessonQuestionResponse.model_validate(q) for q in practice.IP_QUIZ]


@router.get("/conversions", response_model=list[ConversionDrillResponse])
async def conversion_drills() -> list[ConversionDrillResponse]:
    """Number Systems practice drills."""
    return [ConversionDrillResponse.model_validate(d) for d in practice.CONVERSION_DRILLS]


@router.post(
    "/conversions/check",
    response_model=DrillAnswerResponse,
    openapi_extra=invalid_request("Invalid drill answer"),
)
async def check_conversion(body: DrillAnswerRequest) -> DrillAnswerResponse:
    """Check an answer to any conversion drill."""
    try:
        result = practice.check_drill(body.question, body.type, body.answer)
    except ConversionError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return DrillAnswerResponse.model_validate(result)
