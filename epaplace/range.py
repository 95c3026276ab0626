"""Ranges of non-gap sites within an aligned sequence."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Range:
    begin: int = 0
    span: int = 0

    def __bool__(self) -> bool:
        return self.span > 0

    def __str__(self) -> str:
        return f" begin {self.begin} span {self.span}"


def get_valid_range(sequence: str) -> Range:
    """Range outside of which ``sequence`` holds only gap characters.

    ``begin`` is the first non-gap position; ``begin + span`` is the first
    position after the last non-gap character.
    """
    if not sequence:
        raise ValueError("cannot compute the valid range of an empty sequence")
    stripped_left = sequence.lstrip("-")
    lower = len(sequence) - len(stripped_left)
    upper = lower + len(stripped_left.rstrip("-"))
    return Range(lower, upper - lower)