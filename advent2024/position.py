"""Grid coordinates, offsets and compass directions."""

from __future__ import annotations

import enum
from typing import Iterator, NamedTuple, Optional


class RotationalDirection(enum.Enum):
    """Sense of a quarter turn."""

    CLOCKWISE = enum.auto()
    ANTICLOCKWISE = enum.auto()


def _truncating_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


class PositionOffset(NamedTuple):
    """A signed displacement in rows (y) and columns (x)."""

    y: int
    x: int

    def rotated(self, rotational_direction: RotationalDirection) -> PositionOffset:
        """Return the offset turned by a quarter in the given sense."""
        if rotational_direction is RotationalDirection.CLOCKWISE:
            return PositionOffset(self.x, -self.y)
        return PositionOffset(-self.x, self.y)

    def inverted(self) -> PositionOffset:
        """Return the offset pointing the opposite way."""
        return PositionOffset(-self.y, -self.x)

    def __mul__(self, factor):
        if not isinstance(factor, int):
            return NotImplemented
        return PositionOffset(self.y * factor, self.x * factor)

    __rmul__ = __mul__

    def __neg__(self) -> PositionOffset:
        return self.inverted()

    def __floordiv__(self, divisor):
        """Divide both components, truncating towards zero."""
        if not isinstance(divisor, int):
            return NotImplemented
        return PositionOffset(
            _truncating_div(self.y, divisor), _truncating_div(self.x, divisor)
        )


class Dimensions(NamedTuple):
    """Size of a grid as (height, width)."""

    height: int
    width: int


class Direction(enum.Enum):
    """One of the four axis-aligned directions."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    def rotated(self, rotational_direction: RotationalDirection) -> Direction:
        """Return the direction after a quarter turn."""
        step = 1 if rotational_direction is RotationalDirection.CLOCKWISE else 3
        return Direction((self.value + step) % 4)

    def inverted(self) -> Direction:
        """Return the opposite direction."""
        return Direction((self.value + 2) % 4)

    def offset(self) -> PositionOffset:
        """Return the unit offset of one step in this direction."""
        return _DIRECTION_OFFSETS[self]


_DIRECTION_OFFSETS = {
    Direction.UP: PositionOffset(-1, 0),
    Direction.RIGHT: PositionOffset(0, 1),
    Direction.DOWN: PositionOffset(1, 0),
    Direction.LEFT: PositionOffset(0, -1),
}

DIRECTIONS = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


class Position(NamedTuple):
    """A cell coordinate as (y, x), row first."""

    y: int
    x: int

    def moved(self, direction: Direction) -> Position:
        """Step once in a direction, without bounds checks."""
        return self.offset(direction.offset())

    def checked_moved(
        self, dimensions: Dimensions, direction: Direction
    ) -> Optional[Position]:
        """Step once in a direction, or None if that leaves the grid."""
        return self.checked_offset(dimensions, direction.offset())

    def offset(self, offset: PositionOffset) -> Position:
        """Apply an offset, without bounds checks."""
        return Position(self.y + offset[0], self.x + offset[1])

    def checked_offset(
        self, dimensions: Dimensions, offset: PositionOffset
    ) -> Optional[Position]:
        """Apply an offset, or return None if the result is outside the grid."""
        y = self.y + offset[0]
        x = self.x + offset[1]
        if 0 <= y < dimensions[0] and 0 <= x < dimensions[1]:
            return Position(y, x)
        return None

    def wrapping_offset(self, dimensions: Dimensions, offset: PositionOffset) -> Position:
        """Apply an offset, wrapping around the grid edges."""
        return Position(
            (self.y + offset[0]) % dimensions[0], (self.x + offset[1]) % dimensions[1]
        )

    def positions(self, dimensions: Dimensions, direction: Direction) -> Iterator[Position]:
        """Yield every position from the next one up to the grid edge."""
        if direction is Direction.UP:
            steps = self.y
        elif direction is Direction.RIGHT:
            steps = dimensions[1] - self.x - 1
        elif direction is Direction.DOWN:
            steps = dimensions[0] - self.y - 1
        else:
            steps = self.x
        dy, dx = direction.offset()
        y, x = self
        return (Position(y + dy * i, x + dx * i) for i in range(1, steps + 1))

    def positions_steps(
        self, dimensions: Dimensions, offset: PositionOffset
    ) -> Iterator[Position]:
        """Yield positions reached by repeated offsets while inside the grid."""
        dy, dx = offset
        if dy == 0 and dx == 0:
            raise ValueError("offset must not be zero")
        limits = []
        if dy > 0:
            limits.append((dimensions[0] - 1 - self.y) // dy)
        elif dy < 0:
            limits.append(self.y // -dy)
        if dx > 0:
            limits.append((dimensions[1] - 1 - self.x) // dx)
        elif dx < 0:
            limits.append(self.x // -dx)
        steps = min(limits)
        offset = PositionOffset(dy, dx)
        return (self + offset * i for i in range(1, steps + 1))

    def manhattan_distance(self, other: Position) -> int:
        """Return the taxicab distance to another position."""
        return abs(self.y - other.y) + abs(self.x - other.x)

    def __add__(self, offset):
        if not isinstance(offset, PositionOffset):
            return NotImplemented
        y = self.y + offset.y
        x = self.x + offset.x
        if y < 0 or x < 0:
            raise ValueError(f"{self} + {offset} has a negative coordinate")
        return Position(y, x)

    def __sub__(self, other):
        if not isinstance(other, Position):
            return NotImplemented
        return PositionOffset(self.y - other.y, self.x - other.x)