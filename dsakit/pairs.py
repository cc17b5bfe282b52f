"""A pair of integers that adds component-wise."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class IntPair:
    """Two integers; ``+`` adds them component by component."""

    first: int = 2
    second: int = 2

    def __add__(self, other: object) -> "IntPair":
        if not isinstance(other, IntPair):
            return NotImplemented
        return IntPair(self.first + other.first, self.second + other.second)

    def __str__(self) -> str:
        return f"{self.first} + i{self.second}"