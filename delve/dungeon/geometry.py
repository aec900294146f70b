"""Integer geometry primitives shared by the generator and the rasterizer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, NamedTuple, Tuple


class Vec2D(NamedTuple):
    x: int
    y: int

    def __add__(self, other: "Vec2D") -> "Vec2D":  # type: ignore[override]
        return Vec2D(self.x + other[0], self.y + other[1])

    def __mul__(self, k: int) -> "Vec2D":  # type: ignore[override]
        return Vec2D(self.x * k, self.y * k)

    __rmul__ = __mul__


class Direction(Enum):
    N = (0, -1)
    S = (0, 1)
    E = (1, 0)
    W = (-1, 0)

    @property
    def offset(self) -> Vec2D:
        return Vec2D(*self.value)


# Fixed enumeration order; only affects collection order before a random choice.
DIRECTIONS: Tuple[Direction, ...] = (Direction.N, Direction.S, Direction.E, Direction.W)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle of lattice points.

    Iterating a Rect yields every contained point in row-major order.
    """

    x: int
    y: int
    width: int
    height: int

    def __iter__(self) -> Iterator[Vec2D]:
        for j in range(self.y, self.y + self.height):
            for i in range(self.x, self.x + self.width):
                yield Vec2D(i, j)

    def __len__(self) -> int:
        return self.width * self.height

    def is_outside_of(self, other: "Rect") -> bool:
        # Strict comparison keeps at least one empty cell between the two rects.
        return (
            self.x + self.width < other.x
            or self.y + self.height < other.y
            or other.x + other.width < self.x
            or other.y + other.height < self.y
        )

    def contains(self, point) -> bool:
        i, j = point
        return self.x <= i < self.x + self.width and self.y <= j < self.y + self.height

    def corners(self) -> Tuple[Vec2D, Vec2D, Vec2D, Vec2D]:
        right = self.x + self.width - 1
        bottom = self.y + self.height - 1
        return (
            Vec2D(self.x, self.y),
            Vec2D(right, self.y),
            Vec2D(self.x, bottom),
            Vec2D(right, bottom),
        )


__all__ = ["Vec2D", "Direction", "DIRECTIONS", "Rect"]
