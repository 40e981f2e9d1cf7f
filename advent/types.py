from __future__ import annotations

import enum
import typing as t
from dataclasses import dataclass

FIRST_YEAR = 2015
DAYS = range(1, 26)


@dataclass(frozen=True, order=True)
class DayKey:
    """Identifies one puzzle: a year (2015+) and a day (1-25)"""

    year: int
    day: int

    def __post_init__(self) -> None:
        if self.year < FIRST_YEAR:
            raise ValueError(f"year must be {FIRST_YEAR} or later, got {self.year}")
        if self.day not in DAYS:
            raise ValueError(f"day must be 1-25, got {self.day}")

    def __str__(self) -> str:
        return f"{self.year}/{self.day:02d}"


class Part(enum.Enum):
    """Which half of a day's puzzle to run"""

    ONE = "a"
    TWO = "b"
    UNSPECIFIED = None

    @classmethod
    def from_letter(cls, letter: str) -> Part:
        return cls(letter.lower())

    def resolve(self) -> Part:
        if self is Part.UNSPECIFIED:
            return Part.ONE
        return self


class Verb(enum.Enum):
    RUN = "run"
    SCAFFOLD = "scaffold"


@dataclass(frozen=True)
class Request:
    verb: Verb
    key: DayKey
    part: Part = Part.UNSPECIFIED


@dataclass(frozen=True)
class Solved:
    result: str


@dataclass(frozen=True)
class NotSolved:
    """The puzzle implementation has no answer yet. Expected, not an error."""


@dataclass(frozen=True)
class Failed:
    error: str


Outcome = t.Union[Solved, NotSolved, Failed]

NOT_SOLVED: t.Final = NotSolved()
"""Returned by a part function which has not been implemented yet"""
