"""Tests for Binary Race rules."""

from ictlearn.core.binary_race import (
    RaceQuestion,
    check_answer,
    generate_questions,
    score_answer,
)


def _question(decimal: int, direction: str) -> RaceQuestion:
    return RaceQuestion(decimal=decimal, binary=format(decimal, "b"), type=direction)


class TestGenerateQuestions:
    """Tests for question generation."""

    def test_count_and_range(self):
        """Questions are within 1..255 with matching binary."""
        questions = generate_questions(50, seed=7)
        assert len(questions) == 50
        for q in questions:
            assert 1 <= q.decimal <= 255
            assert int(q.binary, 2) == q.decimal
            assert q.type in ("bin-to-dec", "dec-to-bin")

    def test_seed_is_deterministic(self):
        """Same seed, same questions."""
        assert generate_questions(10, seed=3) == generate_questions(10, seed=3)

    def test_prompt_and_expected(self):
        """Prompt shows the source form, expected the target form."""
        q = _question(10, "bin-to-dec")
        assert q.prompt == "1010"
        assert q.expected == "10"
        q = _question(10, "dec-to-bin")
        assert q.prompt == "10"
        assert q.expected == "1010"


class TestCheckAnswer:
    """Tests for answer checking."""

    def test_bin_to_dec(self):
        """Decimal answers compare as integers."""
        q = _question(13, "bin-to-dec")
        assert check_answer(q, "13")
        assert check_answer(q, " 013 ")
        assert not check_answer(q, "12")
        assert not check_answer(q, "thirteen")

    def test_non_ascii_digits_are_wrong(self):
        """Unicode digits are scored as wrong, not parsed."""
        q = _question(2, "bin-to-dec")
        assert not check_answer(q, "\u00b2")
        assert not check_answer(q, "\uff12")
        assert not check_answer(q, "\u0662")

    def test_dec_to_bin(self):
        """Binary answers ignore leading zeros."""
        q = _question(5, "dec-to-bin")
        assert check_answer(q, "101")
        assert check_answer(q, "00000101")
        assert not check_answer(q, "110")
        assert not check_answer(q, "1012")

    def test_blank(self):
        """Blank answers are wrong."""
        assert not check_answer(_question(5, "dec-to-bin"), "   ")


class TestScoreAnswer:
    """Tests for scoring."""

    def test_first_correct(self):
        """First correct answer scores 10."""
        result = score_answer(_question(5, "bin-to-dec"), "5")
        assert result.is_correct
        assert result.points == 10
        assert result.streak == 1
        assert result.bonus_seconds == 0

    def test_streak_bonus_points(self):
        """Each answer already in the streak adds 2 points."""
        result = score_answer(_question(5, "bin-to-dec"), "5", streak=3, time_left=40)
        assert result.points == 16
        assert result.streak == 4
        assert result.time_left == 40

    def test_bonus_seconds_from_fifth(self):
        """Reaching a streak of five adds 2 seconds."""
        result = score_answer(_question(5, "bin-to-dec"), "5", streak=4, time_left=30)
        assert result.points == 18
        assert result.bonus_seconds == 2
        assert result.time_left == 32

    def test_clock_capped(self):
        """Bonus time never exceeds 60 seconds."""
        result = score_answer(_question(5, "bin-to-dec"), "5", streak=9, time_left=59)
        assert result.time_left == 60

    def test_wrong_resets_streak(self):
        """Wrong answer scores nothing and resets the streak."""
        result = score_answer(_question(5, "dec-to-bin"), "111", streak=6, time_left=20)
        assert not result.is_correct
        assert result.points == 0
        assert result.streak == 0
        assert result.correct_answer == "101"
        assert result.time_left == 20
