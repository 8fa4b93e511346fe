"""Tests for the Logic Puzzle rules."""

import pytest

from ictlearn.core.logic_puzzle import (
    PUZZLES,
    CircuitError,
    CircuitGate,
    check_circuit,
    get_puzzle,
    run_circuit,
)

XOR_GATES = [
    CircuitGate("NOT", ["A"]),
    CircuitGate("NOT", ["B"]),
    CircuitGate("AND", ["A", "G2"]),
    CircuitGate("AND", ["G1", "B"]),
    CircuitGate("OR", ["G3", "G4"]),
]


class TestPuzzles:
    """Tests for the puzzle list."""

    def test_four_puzzles(self):
        """Levels and their scoring."""
        assert [p.title for p in PUZZLES] == [
            "Simple AND Gate",
            "NOT Gate Chain",
            "XOR Implementation",
            "Half Adder",
        ]
        assert [p.points for p in PUZZLES] == [100, 100, 200, 300]

    def test_targets_cover_every_combination(self):
        """Each target column has one value per input combination."""
        for puzzle in PUZZLES:
            for column in puzzle.targets:
                assert len(column) == 2**puzzle.input_count

    def test_get_puzzle(self):
        """Lookup by id."""
        assert get_puzzle(2).input_names == ["A"]
        assert get_puzzle(99) is None


class TestCheckCircuit:
    """Tests for running and checking circuits."""

    def test_and_solves_first_puzzle(self):
        """A single AND gate."""
        result = check_circuit(get_puzzle(1), [CircuitGate("AND", ["A", "B"])])
        assert result.solved is True
        assert result.points == 100
        assert result.feedback == []

    def test_wrong_circuit(self):
        """OR differs on the mixed inputs."""
        result = check_circuit(get_puzzle(1), [CircuitGate("or", ["A", "B"])])
        assert result.solved is False
        assert result.points == 0
        assert result.outputs == [[False, True, True, True]]
        assert result.feedback == ["Output 1 is wrong for inputs 01, 10"]

    def test_not_inverts(self):
        """Single input puzzle."""
        assert check_circuit(get_puzzle(2), [CircuitGate("NOT", ["A"])]).solved is True

    def test_xor_from_basic_gates(self):
        """Five basic gates build XOR."""
        result = check_circuit(get_puzzle(3), XOR_GATES)
        assert result.solved is True
        assert result.points == 200

    def test_half_adder(self):
        """Two named outputs: sum and carry."""
        gates = XOR_GATES + [CircuitGate("AND", ["A", "B"])]
        result = check_circuit(get_puzzle(4), gates, outputs=["G5", "G6"])
        assert result.solved is True
        assert result.points == 300

    def test_output_count_must_match(self):
        """The half adder needs two outputs."""
        with pytest.raises(CircuitError, match="2 output"):
            run_circuit(get_puzzle(4), XOR_GATES)

    def test_gate_not_allowed(self):
        """XOR is not in the XOR puzzle's toolbox."""
        with pytest.raises(CircuitError, match="not allowed"):
            check_circuit(get_puzzle(3), [CircuitGate("XOR", ["A", "B"])])

    def test_gate_limit(self):
        """More gates than the puzzle allows."""
        gates = [CircuitGate("AND", ["A", "B"]), CircuitGate("AND", ["A", "G1"])]
        with pytest.raises(CircuitError, match="Maximum 1 gates"):
            check_circuit(get_puzzle(1), gates)

    def test_forward_reference(self):
        """Gates may only read earlier signals."""
        gates = [CircuitGate("AND", ["A", "G2"]), CircuitGate("NOT", ["B"])]
        with pytest.raises(CircuitError, match="G1"):
            check_circuit(get_puzzle(3), gates)

    def test_wrong_input_count(self):
        """NOT with two inputs is rejected."""
        with pytest.raises(CircuitError, match="exactly one input"):
            check_circuit(get_puzzle(1), [CircuitGate("NOT", ["A", "B"])])

    def test_empty_circuit(self):
        """A circuit needs at least one gate."""
        with pytest.raises(CircuitError):
            check_circuit(get_puzzle(1), [])
