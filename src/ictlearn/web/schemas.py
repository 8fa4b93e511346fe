"""Pydantic schemas for the Web API.

Records go over the wire with camelCase keys (totalPoints, isLocked, ...)
so the browser client can use them as-is. Request bodies accept either
camelCase or snake_case.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ictlearn import __version__

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

# openapi_extra key holding the 400 message of a route
INVALID_REQUEST_KEY = "x-invalid-request-message"
DEFAULT_INVALID_REQUEST = "Invalid request data"


def invalid_request(message: str) -> dict[str, str]:
    """Route option naming the detail sent when the request fails validation."""
    return {INVALID_REQUEST_KEY: message}


class ApiModel(BaseModel):
    """Base for every API schema."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# =============================================================================
# USER SCHEMAS
# =============================================================================


class UserCreate(ApiModel):
    """Request body for creating a user."""

    username: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=200, pattern=EMAIL_PATTERN)
    level: int = Field(default=1, ge=1)
    total_points: int = Field(default=0, ge=0)
    streak: int = Field(default=0, ge=0)
    time_spent: int = Field(default=0, ge=0)
    completed_topics: int = Field(default=0, ge=0)


class UserUpdate(ApiModel):
    """Partial update of a user. Only fields present in the body change."""

    username: str | None = Field(default=None, min_length=1, max_length=100)
    email: str | None = Field(default=None, min_length=3, max_length=200, pattern=EMAIL_PATTERN)
    level: int | None = Field(default=None, ge=1)
    total_points: int | None = Field(default=None, ge=0)
    streak: int | None = Field(default=None, ge=0)
    time_spent: int | None = Field(default=None, ge=0)
    completed_topics: int | None = Field(default=None, ge=0)


class UserResponse(ApiModel):
    """Response for a user."""

    id: int
    username: str
    email: str
    level: int
    total_points: int
    streak: int
    time_spent: int
    completed_topics: int
    created_at: datetime


class UserSummaryResponse(ApiModel):
    """Dashboard numbers for a user."""

    user_id: int
    topics_total: int
    topics_completed: int
    average_progress: float
    quizzes_answered: int
    quizzes_correct: int
    quiz_accuracy: float
    achievements: int
    total_points: int
    streak: int
    hours_spent: int
    best_scores: dict[int, int]


# =============================================================================
# TOPIC & PROGRESS SCHEMAS
# =============================================================================


class TopicCreate(ApiModel):
    """Request body for creating a topic."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    difficulty: str = Field(..., min_length=1, max_length=50)
    duration: int = Field(..., ge=0)
    rating: int = Field(default=0, ge=0, le=50)
    icon: str = Field(..., min_length=1)
    gradient: str = Field(..., min_length=1)
    is_locked: bool = False
    prerequisite_id: int | None = None


class TopicResponse(ApiModel):
    """Response for a topic."""

    id: int
    title: str
    description: str
    difficulty: str
    duration: int
    rating: int
    icon: str
    gradient: str
    is_locked: bool
    prerequisite_id: int | None


class ProgressUpdate(ApiModel):
    """Request body for PUT progress."""

    progress: int = Field(..., ge=0, le=100)


class ProgressResponse(ApiModel):
    """Response for one progress row."""

    id: int
    user_id: int
    topic_id: int
    progress: int
    completed: bool
    last_accessed: datetime


# =============================================================================
# QUIZ SCHEMAS
# =============================================================================


class QuizResponse(ApiModel):
    """Response for a quiz question."""

    id: int
    topic_id: int
    question: str
    options: list[str]
    correct_answer: int
    difficulty: str


class QuizResultCreate(ApiModel):
    """Request body for recording a quiz answer.

    is_correct is derived from the quiz's answer key when omitted.
    """

    user_id: int
    quiz_id: int
    selected_answer: int = Field(..., ge=0)
    is_correct: bool | None = None
    time_spent: int = Field(..., ge=0)


class QuizResultResponse(ApiModel):
    """Response for a recorded quiz answer."""

    id: int
    user_id: int
    quiz_id: int
    selected_answer: int
    is_correct: bool
    time_spent: int
    completed_at: datetime


# =============================================================================
# ACHIEVEMENT SCHEMAS
# =============================================================================


class AchievementCreate(ApiModel):
    """Request body for awarding an achievement."""

    title: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1)
    icon: str = Field(default="medal", min_length=1)
    color: str = Field(default="emerald", min_length=1)


class AchievementResponse(ApiModel):
    """Response for an achievement."""

    id: int
    user_id: int
    title: str
    description: str
    icon: str
    color: str
    earned_at: datetime


# =============================================================================
# GAME SCHEMAS
# =============================================================================


class GameResponse(ApiModel):
    """Response for a game."""

    id: int
    title: str
    description: str
    type: str
    high_score: int
    times_played: int
    gradient: str
    icon: str


class GameScoreCreate(ApiModel):
    """Request body for recording a game score."""

    game_id: int
    score: int = Field(..., ge=0)


class GameScoreResponse(ApiModel):
    """Response for a recorded game score."""

    id: int
    user_id: int
    game_id: int
    score: int
    played_at: datetime


class RaceQuestionResponse(ApiModel):
    """A Binary Race question."""

    decimal: int
    binary: str
    type: str
    prompt: str


class RaceQuestionListResponse(ApiModel):
    """A batch of Binary Race questions."""

    questions: list[RaceQuestionResponse]
    count: int


class RaceAnswerRequest(ApiModel):
    """An answer to a Binary Race question."""

    decimal: int = Field(..., ge=1, le=255)
    type: str = Field(..., pattern=r"^(bin-to-dec|dec-to-bin)$")
    answer: str = Field(..., max_length=16)
    streak: int = Field(default=0, ge=0)
    time_left: int = Field(default=60, ge=0, le=60)


class RaceAnswerResponse(ApiModel):
    """Scoring for a Binary Race answer."""

    is_correct: bool
    correct_answer: str
    points: int
    streak: int
    bonus_seconds: int
    time_left: int


class PuzzleResponse(ApiModel):
    """A Logic Puzzle with its target truth table."""

    id: int
    title: str
    description: str
    difficulty: str
    input_count: int
    input_names: list[str]
    targets: list[list[bool]]
    max_gates: int
    allowed_gates: list[str]
    hints: list[str]
    points: int


class CircuitGateRequest(ApiModel):
    """One gate of a submitted circuit."""

    type: str = Field(..., min_length=1)
    inputs: list[str] = Field(..., min_length=1, max_length=8)


class CircuitRequest(ApiModel):
    """A circuit submitted for a Logic Puzzle.

    Gates are numbered G1, G2, ... in order; outputs defaults to the last gate.
    """

    gates: list[CircuitGateRequest] = Field(..., max_length=32)
    outputs: list[str] | None = None


class PuzzleResultResponse(ApiModel):
    """Outcome of checking a circuit."""

    puzzle_id: int
    solved: bool
    outputs: list[list[bool]]
    points: int
    feedback: list[str]


class ScenarioResponse(ApiModel):
    """A Network Builder scenario."""

    id: int
    title: str
    description: str
    objective: str
    required_devices: dict[str, int]
    required_connections: int
    hints: list[str]
    points: int


class DeviceRequest(ApiModel):
    """A placed network device."""

    id: str = Field(..., min_length=1, max_length=64)
    type: str


class ConnectionRequest(ApiModel):
    """A link between two devices."""

    from_device: str
    to_device: str


class NetworkRequest(ApiModel):
    """A network submitted for a scenario."""

    devices: list[DeviceRequest] = Field(..., max_length=64)
    connections: list[ConnectionRequest] = Field(default_factory=list, max_length=256)


class NetworkCheckResponse(ApiModel):
    """Outcome of checking a network."""

    scenario_id: int
    complete: bool
    points: int
    feedback: list[str]
    device_counts: dict[str, int]
    addresses: dict[str, str]


# =============================================================================
# PRACTICE SCHEMAS
# =============================================================================


class LessonQuestionResponse(ApiModel):
    """A multiple choice lesson question with its explanation."""

    question: str
    options: list[str]
    correct_answer: int
    explanation: str


class ConversionDrillResponse(ApiModel):
    """A conversion drill."""

    question: str
    answer: str
    type: str


class DrillAnswerRequest(ApiModel):
    """An answer to a conversion drill."""

    question: str = Field(..., min_length=1, max_length=64)
    type: str = Field(..., pattern=r"^(bin-to-dec|dec-to-bin|hex-to-dec|dec-to-hex)$")
    answer: str = Field(..., max_length=64)


class DrillAnswerResponse(ApiModel):
    """Result of a conversion drill answer."""

    is_correct: bool
    correct_answer: str


# =============================================================================
# LESSON TOOL SCHEMAS
# =============================================================================


class ConversionResponse(ApiModel):
    """Result of a base conversion."""

    value: str
    from_base: int
    to_base: int
    result: str


class NetworkInfoResponse(ApiModel):
    """Address breakdown for an IP and mask."""

    ip: str
    subnet_mask: str
    ip_class: str
    network: str
    broadcast: str
    first_host: str
    last_host: str
    prefix_length: int
    usable_hosts: int
    is_private: bool


class SubnetResponse(ApiModel):
    """One calculated subnet."""

    network: str
    first_host: str
    last_host: str
    broadcast: str
    subnet_mask: str
    wildcard_mask: str
    prefix_length: int
    total_hosts: int
    usable_hosts: int
    required_hosts: int | None = None


class SubnetListResponse(ApiModel):
    """A subnet plan."""

    subnets: list[SubnetResponse]
    count: int


class VlsmRequest(ApiModel):
    """Request body for a VLSM plan."""

    network: str
    hosts: list[int] = Field(..., min_length=1, max_length=64)


class LogicGateRequest(ApiModel):
    """Request body for evaluating a gate."""

    gate: str
    inputs: list[bool] = Field(..., min_length=1, max_length=8)


class LogicGateResponse(ApiModel):
    """Output of a gate."""

    gate: str
    inputs: list[bool]
    output: bool
    description: str


class TruthTableRow(ApiModel):
    """One line of a truth table."""

    inputs: list[bool]
    output: bool


class TruthTableResponse(ApiModel):
    """Full truth table for a gate."""

    gate: str
    description: str
    rows: list[TruthTableRow]


# =============================================================================
# HEALTH SCHEMAS
# =============================================================================


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
    version: str = __version__
    timestamp: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
