from __future__ import annotations

import typing as t
from dataclasses import dataclass

from .types import DayKey
from .types import NOT_SOLVED


class Solution:
    """
    Base class for one day's puzzle solution. Subclasses override `part_one` and
    `part_two`, which receive the puzzle input as a string and return the answer
    (a string or a number). A part with no answer yet returns `NOT_SOLVED`, which is
    also what the base class does.

    Solutions which don't need any puzzle input should set `needs_input = False`;
    they'll be called with an empty string and no input is ever downloaded for them.
    """

    needs_input: bool = True
    key: DayKey

    def part_one(self, data: str) -> t.Any:
        return NOT_SOLVED

    def part_two(self, data: str) -> t.Any:
        return NOT_SOLVED

    def __repr__(self):
        key = getattr(self, "key", None)
        return f"<{type(self).__name__}({key})>"


@dataclass(frozen=True)
class SolutionDescriptor:
    key: DayKey
    needs_input: bool
    factory: t.Callable[[], Solution]
