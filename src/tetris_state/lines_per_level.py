"""Policies deciding how many cleared lines make up a level."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol, Union


class LinesPerLevel(Protocol):
    def evaluate(self, level: int) -> int:
        ...


@dataclass(frozen=True)
class ConstantLinesPerLevel:
    """The same number of lines for every level."""

    lines: int

    def __post_init__(self) -> None:
        if self.lines <= 0:
            raise ValueError("lines per level must be positive")

    def evaluate(self, level: int) -> int:
        return self.lines


@dataclass(frozen=True)
class FunctionLinesPerLevel:
    """Lines per level computed from the current level."""

    func: Callable[[int], int]

    def evaluate(self, level: int) -> int:
        return int(self.func(level))


LinesPerLevelLike = Union[int, Callable[[int], int], LinesPerLevel]


def as_lines_per_level(value: LinesPerLevelLike) -> LinesPerLevel:
    """Normalise ``value`` into a :class:`LinesPerLevel` policy.

    Integers become :class:`ConstantLinesPerLevel`, plain callables become
    :class:`FunctionLinesPerLevel` and existing policies pass through.
    """

    if isinstance(value, (ConstantLinesPerLevel, FunctionLinesPerLevel)):
        return value
    if isinstance(value, bool):
        raise TypeError("lines per level must be an int, a callable or a policy")
    if isinstance(value, int):
        return ConstantLinesPerLevel(value)
    if callable(getattr(value, "evaluate", None)):
        return value  # type: ignore[return-value]
    if callable(value):
        return FunctionLinesPerLevel(value)
    raise TypeError("lines per level must be an int, a callable or a policy")


__all__ = [
    "ConstantLinesPerLevel",
    "FunctionLinesPerLevel",
    "LinesPerLevel",
    "as_lines_per_level",
]
