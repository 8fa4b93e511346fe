"""Logic Puzzle game rules.

Each puzzle gives a truth table to reproduce with a limited number of
gates from an allowed set. A submitted circuit is a list of gates wired
feed-forward: every gate reads the puzzle inputs (A, B, ...) or the
output of an earlier gate (G1, G2, ...). The circuit is run against
every input combination and its outputs compared with the target.
"""

from __future__ import annotations

import itertools
import string
from dataclasses import dataclass, field

import structlog

from ictlearn.core.lessons import GateError, evaluate_gate

logger = structlog.get_logger(__name__)

DIFFICULTY_POINTS = {"Easy": 100, "Medium": 200, "Hard": 300}


class CircuitError(Exception):
    """Submitted circuit is malformed or breaks the puzzle's rules."""

    pass


@dataclass
class Puzzle:
    """A truth table to reproduce.

    targets holds one column per circuit output, each with one value per
    input combination in binary counting order (00, 01, 10, 11).
    """

    id: int
    title: str
    description: str
    difficulty: str
    input_count: int
    targets: list[list[bool]]
    max_gates: int
    allowed_gates: list[str]
    hints: list[str] = field(default_factory=list)

    @property
    def points(self) -> int:
        return DIFFICULTY_POINTS[self.difficulty]

    @property
    def input_names(self) -> list[str]:
        return list(string.ascii_uppercase[: self.input_count])

    def input_combinations(self) -> list[list[bool]]:
        return [list(c) for c in itertools.product([False, True], repeat=self.input_count)]


@dataclass
class CircuitGate:
    """One placed gate and the signals wired into it."""

    type: str
    inputs: list[str]


@dataclass
class PuzzleResult:
    """Outcome of checking a circuit."""

    puzzle_id: int
    solved: bool
    outputs: list[list[bool]]
    points: int
    feedback: list[str]


PUZZLES: list[Puzzle] = [
    Puzzle(
        id=1,
        title="Simple AND Gate",
        description="Create a circuit that outputs TRUE only when both inputs are TRUE",
        difficulty="Easy",
        input_count=2,
        targets=[[False, False, False, True]],
        max_gates=1,
        allowed_gates=["AND", "OR", "NOT"],
        hints=[
            "You need an AND gate",
            "Connect both inputs to the AND gate",
            "The output should be TRUE only when both inputs are TRUE",
        ],
    ),
    Puzzle(
        id=2,
        title="NOT Gate Chain",
        description="Create a circuit that inverts the input signal",
        difficulty="Easy",
        input_count=1,
        targets=[[True, False]],
        max_gates=1,
        allowed_gates=["NOT", "AND", "OR"],
        hints=[
            "Use a NOT gate to invert the signal",
            "Connect the input to the NOT gate",
            "The output should be opposite of the input",
        ],
    ),
    Puzzle(
        id=3,
        title="XOR Implementation",
        description="Build an XOR gate using AND, OR, and NOT gates",
        difficulty="Medium",
        input_count=2,
        targets=[[False, True, True, False]],
        max_gates=5,
        allowed_gates=["AND", "OR", "NOT"],
        hints=[
            "XOR is TRUE when inputs are different",
            "Use (A AND NOT B) OR (NOT A AND B)",
            "You'll need AND, OR, and NOT gates",
        ],
    ),
    Puzzle(
        id=4,
        title="Half Adder",
        description="Create a half adder that adds two bits and produces sum and carry",
        difficulty="Hard",
        input_count=2,
        # sum, carry
        targets=[[False, True, True, False], [False, False, False, True]],
        max_gates=8,
        allowed_gates=["AND", "OR", "NOT"],
        hints=[
            "A half adder has two outputs: sum and carry",
            "Sum = A XOR B, Carry = A AND B",
            "You need to implement XOR using basic gates",
        ],
    ),
]


def get_puzzle(puzzle_id: int) -> Puzzle | None:
    for puzzle in PUZZLES:
        if puzzle.id == puzzle_id:
            return puzzle
    return None


def _validate(puzzle: Puzzle, gates: list[CircuitGate], outputs: list[str]) -> None:
    if not gates:
        raise CircuitError("Circuit has no gates")
    if len(gates) > puzzle.max_gates:
        raise CircuitError(f"Maximum {puzzle.max_gates} gates allowed for this puzzle")

    known = set(puzzle.input_names)
    for i, gate in enumerate(gates, start=1):
        name = gate.type.strip().upper()
        if name not in puzzle.allowed_gates:
            raise CircuitError(f"G{i}: {name} is not allowed here ({', '.join(puzzle.allowed_gates)})")
        for signal in gate.inputs:
            if signal not in known:
                raise CircuitError(f"G{i}: unknown or later signal '{signal}'")
        known.add(f"G{i}")

    if len(outputs) != len(puzzle.targets):
        raise CircuitError(f"Circuit must have {len(puzzle.targets)} output(s), got {len(outputs)}")
    for signal in outputs:
        if signal not in known:
            raise CircuitError(f"Unknown output signal '{signal}'")


def run_circuit(
    puzzle: Puzzle,
    gates: list[CircuitGate],
    outputs: list[str] | None = None,
) -> list[list[bool]]:
    """Output columns of a circuit over every input combination.

    outputs names the signals read as circuit outputs; defaults to the
    last gate.

    Raises:
        CircuitError: If the circuit is malformed or breaks the puzzle's limits
    """
    outputs = outputs or [f"G{len(gates)}"]
    _validate(puzzle, gates, outputs)

    columns: list[list[bool]] = [[] for _ in outputs]
    for combo in puzzle.input_combinations():
        signals = dict(zip(puzzle.input_names, combo))
        for i, gate in enumerate(gates, start=1):
            try:
                signals[f"G{i}"] = evaluate_gate(gate.type, [signals[s] for s in gate.inputs])
            except GateError as e:
                raise CircuitError(f"G{i}: {e}") from e
        for column, signal in zip(columns, outputs):
            column.append(signals[signal])
    return columns


def check_circuit(
    puzzle: Puzzle,
    gates: list[CircuitGate],
    outputs: list[str] | None = None,
) -> PuzzleResult:
    """Run a circuit and compare it with the puzzle's targets."""
    actual = run_circuit(puzzle, gates, outputs)

    feedback = []
    for n, (got, want) in enumerate(zip(actual, puzzle.targets), start=1):
        wrong = [
            "".join(str(int(v)) for v in combo)
            for combo, g, w in zip(puzzle.input_combinations(), got, want)
            if g != w
        ]
        if wrong:
            feedback.append(f"Output {n} is wrong for inputs {', '.join(wrong)}")

    solved = not feedback
    logger.info(
        "logic_puzzle_checked",
        puzzle_id=puzzle.id,
        gates=len(gates),
        solved=solved,
    )
    return PuzzleResult(
        puzzle_id=puzzle.id,
        solved=solved,
        outputs=actual,
        points=puzzle.points if solved else 0,
        feedback=feedback,
    )
