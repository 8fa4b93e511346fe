"""Game endpoints and the rules of the three browser games."""

from fastapi import APIRouter, HTTPException, Query, status

from ictlearn.core import binary_race, logic_puzzle, network_builder
from ictlearn.core.storage import RecordNotFoundError, get_storage
from ictlearn.web.schemas import (
    CircuitRequest,
    GameResponse,
    GameScoreCreate,
    GameScoreResponse,
    NetworkCheckResponse,
    NetworkRequest,
    PuzzleResponse,
    PuzzleResultResponse,
    RaceAnswerRequest,
    RaceAnswerResponse,
    RaceQuestionListResponse,
    RaceQuestionResponse,
    ScenarioResponse,
    invalid_request,
)

router = APIRouter(prefix="/api", tags=["games"])


@router.get("/games", response_model=list[GameResponse])
async def list_games() -> list[GameResponse]:
    """List all games."""
    return [GameResponse.model_validate(g) for g in get_storage().get_all_games()]


# Binary Race routes are declared before /games/{game_id} so the literal
# path wins the match.
@router.get(
    "/games/binary-race/questions",
    response_model=RaceQuestionListResponse,
    openapi_extra=invalid_request("Invalid question request"),
)
async def binary_race_questions(
    count: int = Query(default=10, ge=1, le=100),
    seed: int | None = Query(default=None),
) -> RaceQuestionListResponse:
    """Generate a batch of Binary Race questions."""
    questions = [
        RaceQuestionResponse(
            decimal=q.decimal,
            binary=q.binary,
            type=q.type,
            prompt=q.prompt,
        )
        for q in binary_race.generate_questions(count, seed=seed)
    ]
    return RaceQuestionListResponse(questions=questions, count=len(questions))


@router.post(
    "/games/binary-race/answer",
    response_model=RaceAnswerResponse,
    openapi_extra=invalid_request("Invalid answer data"),
)
async def binary_race_answer(body: RaceAnswerRequest) -> RaceAnswerResponse:
    """Check and score a Binary Race answer."""
    question = binary_race.RaceQuestion(
        decimal=body.decimal,
        binary=format(body.decimal, "b"),
        type=body.type,
    )
    result = binary_race.score_answer(
        question,
        body.answer,
        streak=body.streak,
        time_left=body.time_left,
    )
    return RaceAnswerResponse.model_validate(result)


def _puzzle_or_404(puzzle_id: int) -> logic_puzzle.Puzzle:
    puzzle = logic_puzzle.get_puzzle(puzzle_id)
    if puzzle is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Puzzle not found")
    return puzzle


@router.get("/games/logic-puzzle/puzzles", response_model=list[PuzzleResponse])
async def list_puzzles() -> list[PuzzleResponse]:
    """List Logic Puzzle levels."""
    return [PuzzleResponse.model_validate(p) for p in logic_puzzle.PUZZLES]


@router.get("/games/logic-puzzle/puzzles/{puzzle_id}", response_model=PuzzleResponse)
async def get_puzzle(puzzle_id: int) -> PuzzleResponse:
    """Get a Logic Puzzle level."""
    return PuzzleResponse.model_validate(_puzzle_or_404(puzzle_id))


@router.post(
    "/games/logic-puzzle/puzzles/{puzzle_id}/check",
    response_model=PuzzleResultResponse,
    openapi_extra=invalid_request("Invalid circuit data"),
)
async def check_puzzle(puzzle_id: int, body: CircuitRequest) -> PuzzleResultResponse:
    """Run a circuit against a puzzle's truth table."""
    puzzle = _puzzle_or_404(puzzle_id)
    gates = [logic_puzzle.CircuitGate(type=g.type, inputs=g.inputs) for g in body.gates]
    try:
        result = logic_puzzle.check_circuit(puzzle, gates, body.outputs)
    except logic_puzzle.CircuitError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return PuzzleResultResponse.model_validate(result)


def _scenario_or_404(scenario_id: int) -> network_builder.Scenario:
    scenario = network_builder.get_scenario(scenario_id)
    if scenario is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Scenario not found")
    return scenario


@router.get("/games/network-builder/scenarios", response_model=list[ScenarioResponse])
async def list_scenarios() -> list[ScenarioResponse]:
    """List Network Builder scenarios."""
    return [ScenarioResponse.model_validate(s) for s in network_builder.SCENARIOS]


@router.get("/games/network-builder/scenarios/{scenario_id}", response_model=ScenarioResponse)
async def get_scenario(scenario_id: int) -> ScenarioResponse:
    """Get a Network Builder scenario."""
    return ScenarioResponse.model_validate(_scenario_or_404(scenario_id))


@router.post(
    "/games/network-builder/scenarios/{scenario_id}/check",
    response_model=NetworkCheckResponse,
    openapi_extra=invalid_request("Invalid network data"),
)
async def check_scenario(scenario_id: int, body: NetworkRequest) -> NetworkCheckResponse:
    """Check a built network against a scenario."""
    scenario = _scenario_or_404(scenario_id)
    devices = [network_builder.Device(id=d.id, type=d.type) for d in body.devices]
    connections = [
        network_builder.Connection(from_device=c.from_device, to_device=c.to_device)
        for c in body.connections
    ]
    try:
        result = network_builder.check_network(scenario, devices, connections)
    except network_builder.NetworkError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return NetworkCheckResponse.model_validate(result)


@router.get("/games/{game_id}", response_model=GameResponse)
async def get_game(game_id: int) -> GameResponse:
    """Get a game by ID."""
    game = get_storage().get_game(game_id)
    if game is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Game not found",
        )
    return GameResponse.model_validate(game)


@router.get("/user/{user_id}/game-scores", response_model=list[GameScoreResponse])
async def list_user_game_scores(user_id: int) -> list[GameScoreResponse]:
    """List game scores for a user."""
    scores = get_storage().get_user_game_scores(user_id)
    return [GameScoreResponse.model_validate(s) for s in scores]


@router.post(
    "/user/{user_id}/game-scores",
    response_model=GameScoreResponse,
    status_code=status.HTTP_201_CREATED,
    openapi_extra=invalid_request("Invalid game score data"),
)
async def add_user_game_score(user_id: int, body: GameScoreCreate) -> GameScoreResponse:
    """Record a finished game round."""
    storage = get_storage()
    if storage.get_user(user_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    try:
        entry = storage.add_game_score(user_id=user_id, game_id=body.game_id, score=body.score)
    except RecordNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Game not found")
    return GameScoreResponse.model_validate(entry)
