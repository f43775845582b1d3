"""Grid geometry: points, cardinal directions and axis-aligned segments."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

BOARD_SIZE = 10


@dataclass(frozen=True)
class Point:
    """Immutable grid cell. ``x`` is the column, ``y`` the row (0 is the top)."""

    x: int
    y: int


class Direction(Enum):
    """Cardinal directions, declared in probe order."""

    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)

    @property
    def delta(self) -> tuple[int, int]:
        return self.value

    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.EAST: Direction.WEST,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST: Direction.EAST,
}


def in_bounds(point: Point, size: int = BOARD_SIZE) -> bool:
    """Check whether a point lies on a ``size`` x ``size`` grid."""
    return 0 <= point.x < size and 0 <= point.y < size


def adjacent_point(point: Point, direction: Direction) -> Point:
    """Return the neighbouring cell; the result may be off the grid."""
    dx, dy = direction.delta
    return Point(point.x + dx, point.y + dy)


def direction_between(origin: Point, target: Point) -> Direction | None:
    """Return the direction that steps from ``origin`` onto ``target``.

    Only defined for orthogonally adjacent cells; anything else yields ``None``.
    """
    offset = (target.x - origin.x, target.y - origin.y)
    for direction in Direction:
        if direction.delta == offset:
            return direction
    return None


def range_contains(n: int, a: int, b: int) -> bool:
    """Inclusive range test with the bounds given in either order."""
    return min(a, b) <= n <= max(a, b)


def point_in_segment(point: Point, start: Point, end: Point) -> bool:
    """Return True if ``point`` is one of the cells of an axis-aligned segment."""
    if start.x == end.x == point.x and range_contains(point.y, start.y, end.y):
        return True
    return start.y == end.y == point.y and range_contains(point.x, start.x, end.x)


def segment_cells(start: Point, end: Point) -> Iterator[Point]:
    """Yield every cell from ``start`` to ``end`` inclusive."""
    if start.x != end.x and start.y != end.y:
        raise ValueError("Segments must be horizontal or vertical.")
    step_x = (end.x > start.x) - (end.x < start.x)
    step_y = (end.y > start.y) - (end.y < start.y)
    length = max(abs(end.x - start.x), abs(end.y - start.y))
    for offset in range(length + 1):
        yield Point(start.x + step_x * offset, start.y + step_y * offset)


def segments_intersect(a_start: Point, a_end: Point, b_start: Point, b_end: Point) -> bool:
    """Return True if the two axis-aligned segments share at least one cell."""
    return any(
        point_in_segment(cell, b_start, b_end) for cell in segment_cells(a_start, a_end)
    )
