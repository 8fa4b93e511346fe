"""Practice question banks from the lesson pages.

The IP Addressing lesson ends with a short multiple choice quiz, and the
Number Systems lesson has conversion drills in all four directions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from ictlearn.core.lessons import ConversionError, convert_number

DrillType = Literal["bin-to-dec", "dec-to-bin", "hex-to-dec", "dec-to-hex"]

DRILL_BASES: dict[str, tuple[int, int]] = {
    "bin-to-dec": (2, 10),
    "dec-to-bin": (10, 2),
    "hex-to-dec": (16, 10),
    "dec-to-hex": (10, 16),
}


@dataclass
class LessonQuestion:
    question: str
    options: list[str]
    correct_answer: int
    explanation: str


@dataclass
class ConversionDrill:
    question: str
    answer: str
    type: DrillType


@dataclass
class DrillResult:
    is_correct: bool
    correct_answer: str


IP_QUIZ: list[LessonQuestion] = [
    LessonQuestion(
        question="What class does the IP address 192.168.1.1 belong to?",
        options=["Class A", "Class B", "Class C", "Class D"],
        correct_answer=2,
        explanation="IP addresses starting with 192 are Class C addresses (192.0.0.0 to 223.255.255.255)",
    ),
    LessonQuestion(
        question="What is the default subnet mask for a Class B network?",
        options=["255.0.0.0", "255.255.0.0", "255.255.255.0", "255.255.255.255"],
        correct_answer=1,
        explanation="Class B networks use 255.255.0.0 as the default subnet mask",
    ),
    LessonQuestion(
        question="Which IP address is reserved for loopback testing?",
        options=["192.168.1.1", "10.0.0.1", "127.0.0.1", "172.16.0.1"],
        correct_answer=2,
        explanation="127.0.0.1 is the standard loopback address used for testing network software",
    ),
    LessonQuestion(
        question="What does DHCP stand for?",
        options=[
            "Dynamic Host Control Protocol",
            "Dynamic Host Configuration Protocol",
            "Direct Host Configuration Protocol",
            "Dynamic Hardware Configuration Protocol",
        ],
        correct_answer=1,
        explanation="DHCP stands for Dynamic Host Configuration Protocol, which automatically assigns IP addresses",
    ),
]

CONVERSION_DRILLS: list[ConversionDrill] = [
    ConversionDrill(question="1011", answer="11", type="bin-to-dec"),
    ConversionDrill(question="25", answer="11001", type="dec-to-bin"),
    ConversionDrill(question="FF", answer="255", type="hex-to-dec"),
    ConversionDrill(question="100", answer="64", type="dec-to-hex"),
    ConversionDrill(question="1101", answer="13", type="bin-to-dec"),
    ConversionDrill(question="42", answer="101010", type="dec-to-bin"),
]


def _normalize(value: str) -> str:
    return value.strip().upper().lstrip("0") or "0"


def check_drill(question: str, drill_type: str, answer: str) -> DrillResult:
    """Check a conversion answer. Case and leading zeros are ignored.

    Raises:
        ConversionError: If the drill type is unknown or question is malformed
    """
    if drill_type not in DRILL_BASES:
        raise ConversionError(f"Unknown drill type '{drill_type}'")
    from_base, to_base = DRILL_BASES[drill_type]
    expected = convert_number(question, from_base, to_base)
    return DrillResult(
        is_correct=bool(answer.strip()) and _normalize(answer) == expected,
        correct_answer=expected,
    )
