"""Core business logic.

Modules:
- models: record dataclasses
- seed: demo data
- storage: in-memory store
- lessons: number system, IP, subnet and logic gate calculators
- binary_race: Binary Race game rules
"""

__all__ = [
    "models",
    "seed",
    "storage",
    "lessons",
    "binary_race",
]
