"""A small two-dimensional vector."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

Number = Union[int, float]


def _like(template: Number, value: Number) -> Number:
    """Convert value to the numeric kind of template, truncating to int."""
    if isinstance(template, int):
        return int(value)
    return float(value)


@dataclass(frozen=True, order=True)
class Vec2:
    """Immutable 2-D vector; ordered and compared as the tuple (x, y)."""

    x: Number = 0
    y: Number = 0

    def to_tuple(self) -> tuple[Number, Number]:
        return (self.x, self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(
            self.x + _like(self.x, other.x),
            self.y + _like(self.y, other.y),
        )

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return self + other * -1

    def __mul__(self, other: Vec2 | Number) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        if isinstance(other, (int, float)):
            return Vec2(_like(self.x, self.x * other), _like(self.y, self.y * other))
        return NotImplemented

    def __rmul__(self, other: Number) -> Vec2:
        if isinstance(other, (int, float)):
            return self * other
        return NotImplemented

    def __str__(self) -> str:
        return f"( {self.x}, {self.y} )"


UNIT = Vec2(1, 1)
UNIT_X = Vec2(1, 0)
UNIT_Y = Vec2(0, 1)