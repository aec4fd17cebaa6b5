"""Dense two-dimensional grids stored in row-major order."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, Sequence, TypeVar

from advent2024.position import Dimensions, Position

T = TypeVar("T")


def _bool_glyph(value: Any) -> str:
    return "█" if value else " "


class Grid(Generic[T]):
    """A rectangular grid of cells addressed by Position."""

    __slots__ = ("dimensions", "_data")

    def __init__(self, dimensions: Iterable[int], data: List[T]):
        dimensions = Dimensions(*dimensions)
        if len(data) != dimensions.height * dimensions.width:
            raise ValueError(
                f"{len(data)} cells do not fill a grid of {tuple(dimensions)}"
            )
        self.dimensions = dimensions
        self._data = data

    @classmethod
    def from_dimensions(cls, dimensions: Iterable[int], value: T) -> Grid[T]:
        """Create a grid with every cell set to value."""
        dimensions = Dimensions(*dimensions)
        return cls(dimensions, [value] * (dimensions.height * dimensions.width))

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[T]]) -> Grid[T]:
        """Create a grid from rows; the first row fixes the width."""
        data: List[T] = []
        width: Optional[int] = None
        for row in rows:
            data.extend(row)
            if width is None:
                width = len(data)
        if width is None:
            return cls(Dimensions(0, 0), data)
        if width == 0 or len(data) % width:
            raise ValueError("rows do not form a rectangular grid")
        return cls(Dimensions(len(data) // width, width), data)

    @classmethod
    def from_positions(cls, dimensions: Iterable[int], positions: Iterable[Position]) -> Grid[bool]:
        """Create a boolean grid with the given positions set."""
        grid = cls.from_dimensions(dimensions, False)
        grid.update(positions)
        return grid

    @classmethod
    def from_points(cls, points: Iterable[Iterable[int]]) -> Grid[bool]:
        """Create the smallest boolean grid holding every (y, x) point."""
        points = [Position(*point) for point in points]
        if not points:
            return cls(Dimensions(0, 0), [])
        height = max(point.y for point in points) + 1
        width = max(point.x for point in points) + 1
        return cls.from_positions(Dimensions(height, width), points)

    def _index(self, pos: Iterable[int]) -> int:
        y, x = pos
        height, width = self.dimensions
        if not (0 <= y < height and 0 <= x < width):
            raise IndexError(f"position {(y, x)} outside grid of {tuple(self.dimensions)}")
        return y * width + x

    def _position(self, index: int) -> Position:
        return Position(*divmod(index, self.dimensions.width))

    def size(self) -> int:
        """Return the number of cells."""
        return self.dimensions.height * self.dimensions.width

    def items(self) -> Iterator[tuple[Position, T]]:
        """Yield (position, value) pairs in row-major order."""
        for index, value in enumerate(self._data):
            yield self._position(index), value

    def values(self) -> Iterator[T]:
        """Yield every cell value in row-major order."""
        return iter(self._data)

    def positions(self) -> Iterator[Position]:
        """Yield every position in row-major order."""
        return (self._position(index) for index in range(len(self._data)))

    def positions_where(self, predicate: Callable[[T], bool]) -> Iterator[Position]:
        """Yield the positions whose value satisfies predicate."""
        return (
            self._position(index)
            for index, value in enumerate(self._data)
            if predicate(value)
        )

    def get(self, pos: Iterable[int]) -> T:
        """Return the value at a position."""
        return self._data[self._index(pos)]

    def set(self, pos: Iterable[int], value: T) -> None:
        """Store a value at a position."""
        self._data[self._index(pos)] = value

    def rows(self) -> Iterator[List[T]]:
        """Yield each row as a list."""
        width = self.dimensions.width
        if width == 0:
            return
        for start in range(0, len(self._data), width):
            yield self._data[start:start + width]

    def row(self, y: int) -> List[T]:
        """Return row y as a list."""
        height, width = self.dimensions
        if not 0 <= y < height:
            raise IndexError(f"row {y} outside grid of height {height}")
        return self._data[y * width:(y + 1) * width]

    def transposed(self) -> Grid[T]:
        """Return the grid mirrored along its main diagonal."""
        return Grid.from_rows(self.columns())

    def contains(self, pos: Iterable[int]) -> bool:
        """Return whether the cell at pos is set."""
        return bool(self.get(pos))

    def insert(self, pos: Iterable[int]) -> bool:
        """Set the cell at pos; return True if it was not set before."""
        index = self._index(pos)
        if self._data[index]:
            return False
        self._data[index] = True
        return True

    def remove(self, pos: Iterable[int]) -> bool:
        """Clear the cell at pos; return True if it was set before."""
        index = self._index(pos)
        if self._data[index]:
            self._data[index] = False
            return True
        return False

    def update(self, positions: Iterable[Iterable[int]]) -> None:
        """Set every given position."""
        for pos in positions:
            self._data[self._index(pos)] = True

    def union_update(self, other: Grid[bool]) -> None:
        """Set every cell that is set in another grid of the same size."""
        if self.dimensions != other.dimensions:
            raise ValueError(
                f"dimensions differ: {tuple(self.dimensions)} and {tuple(other.dimensions)}"
            )
        self._data = [bool(mine or theirs) for mine, theirs in zip(self._data, other._data)]

    def clear(self) -> None:
        """Clear every cell."""
        self._data = [False] * len(self._data)

    def count(self) -> int:
        """Return the number of set cells."""
        return sum(1 for value in self._data if value)

    def render(self, glyph: Optional[Callable[[T], str]] = None) -> str:
        """Draw the grid, one line per row, using glyph for each cell."""
        glyph = glyph or _bool_glyph
        return "".join("".join(glyph(value) for value in row) + "\n" for row in self.rows())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Grid({tuple(self.dimensions)!r}, {self._data!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.dimensions == other.dimensions and self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __copy__(self) -> Grid[T]:
        return Grid(self.dimensions, list(self._data))

    def iter_windows3(self) -> Iterator[GridWindow3[T]]:
        """Yield a 3x3 window around every cell not on the border."""
        height, width = self.dimensions
        for y in range(1, height - 1):
            for x in range(1, width - 1):
                yield GridWindow3(self, y * width + x)

    def iter_windows3_where(self, predicate: Callable[[T], bool]) -> Iterator[GridWindow3[T]]:
        """Yield windows around inner cells whose value satisfies predicate."""
        width = self.dimensions.width
        data = self._data
        for index in range(width + 1, len(data) - width - 1):
            if not predicate(data[index]):
                continue
            x = index % width
            if x != 0 and x != width - 1:
                yield GridWindow3(self, index)

    def columns(self) -> Iterator[List[T]]:
        """Yield each column as a list, top to bottom."""
        height, width = self.dimensions
        for x in range(width):
            yield [self._data[y * width + x] for y in range(height)]

    def _smallest_side(self) -> int:
        return min(self.dimensions)

    def diagonals_lower(self) -> Iterator[List[T]]:
        """Yield the main diagonal and those below it, each top-left to bottom-right."""
        smallest = self._smallest_side()
        for y_start in range(smallest):
            yield [self.get(Position(y_start + i, i)) for i in range(smallest - y_start)]

    def diagonals_upper(self) -> Iterator[List[T]]:
        """Yield the main diagonal and those right of it, each top-left to bottom-right."""
        smallest = self._smallest_side()
        for x_start in range(smallest):
            yield [self.get(Position(i, x_start + i)) for i in range(smallest - x_start)]

    def anti_diagonals_upper(self) -> Iterator[List[T]]:
        """Yield anti-diagonals starting on the left column, each bottom-left to top-right."""
        smallest = self._smallest_side()
        for y_start in range(smallest):
            yield [self.get(Position(y_start - i, i)) for i in range(y_start + 1)]

    def anti_diagonals_lower(self) -> Iterator[List[T]]:
        """Yield anti-diagonals starting on the bottom row, each bottom-left to top-right."""
        smallest = self._smallest_side()
        bottom = self.dimensions.height - 1
        for x_start in range(smallest):
            yield [
                self.get(Position(bottom - i, x_start + i))
                for i in range(smallest - x_start)
            ]


@dataclass(frozen=True)
class GridWindow3(Generic[T]):
    """The 3x3 neighbourhood of one inner grid cell."""

    grid: Grid[T]
    index: int

    def _at(self, dy: int, dx: int) -> T:
        return self.grid._data[self.index + dy * self.grid.dimensions.width + dx]

    def center(self) -> T:
        return self._at(0, 0)

    def top_left(self) -> T:
        return self._at(-1, -1)

    def top(self) -> T:
        return self._at(-1, 0)

    def top_right(self) -> T:
        return self._at(-1, 1)

    def right(self) -> T:
        return self._at(0, 1)

    def bottom_right(self) -> T:
        return self._at(1, 1)

    def bottom(self) -> T:
        return self._at(1, 0)

    def bottom_left(self) -> T:
        return self._at(1, -1)

    def left(self) -> T:
        return self._at(0, -1)


class BackedGrid(Generic[T]):
    """A read-only grid view over a flat sequence with a row separator."""

    __slots__ = ("data", "dimensions", "_row_stride")

    def __init__(self, data: Sequence[T], dimensions: Dimensions, row_stride: int):
        self.data = data
        self.dimensions = dimensions
        self._row_stride = row_stride

    @classmethod
    def from_data_and_row_separator(cls, data: Sequence[T], separator: Any) -> BackedGrid[T]:
        """Wrap data whose rows are split by separator; the first row fixes the width."""
        try:
            width = data.index(separator)
        except ValueError:
            width = len(data)
        row_stride = width + 1
        height = -(-len(data) // row_stride)
        return cls(data, Dimensions(height, width), row_stride)

    def get(self, pos: Iterable[int]) -> T:
        """Return the value at a position."""
        y, x = pos
        height, width = self.dimensions
        index = y * self._row_stride + x
        if not (0 <= y < height and 0 <= x < width) or index >= len(self.data):
            raise IndexError(f"position {(y, x)} outside grid of {tuple(self.dimensions)}")
        return self.data[index]

    def items(self) -> Iterator[tuple[Position, T]]:
        """Yield (position, value) pairs, skipping separators."""
        width = self.dimensions.width
        for index, value in enumerate(self.data):
            y, x = divmod(index, self._row_stride)
            if x < width:
                yield Position(y, x), value

    def positions(self) -> Iterator[Position]:
        """Yield every cell position, skipping separators."""
        return (pos for pos, _ in self.items())