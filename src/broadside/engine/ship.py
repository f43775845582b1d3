"""Ship domain model for the Broadside engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .geometry import Point, point_in_segment, segment_cells, segments_intersect


class ShipClass(Enum):
    """Fleet ship classes keyed by the number of cells they occupy."""

    PATROL_BOAT = 2
    DESTROYER = 3
    SUBMARINE = 4
    BATTLESHIP = 5
    AIRCRAFT_CARRIER = 6

    @property
    def size(self) -> int:
        return self.value

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()


@dataclass
class Ship:
    """A straight run of cells from ``start`` to ``end`` inclusive."""

    start: Point
    end: Point
    hits: set[Point] = field(init=False, default_factory=set)
    _cells: tuple[Point, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._cells = tuple(segment_cells(self.start, self.end))

    @classmethod
    def from_class(cls, ship_class: ShipClass, start: Point, horizontal: bool) -> Ship:
        span = ship_class.size - 1
        if horizontal:
            end = Point(start.x + span, start.y)
        else:
            end = Point(start.x, start.y + span)
        return cls(start, end)

    @property
    def size(self) -> int:
        return len(self._cells)

    @property
    def ship_class(self) -> ShipClass | None:
        try:
            return ShipClass(self.size)
        except ValueError:
            return None

    @property
    def num_hits(self) -> int:
        return len(self.hits)

    @property
    def is_sunken(self) -> bool:
        return self.num_hits == self.size

    def cells(self) -> list[Point]:
        """Return the occupied cells in order from ``start`` to ``end``."""
        return list(self._cells)

    def contains(self, point: Point) -> bool:
        return point_in_segment(point, self.start, self.end)

    def intersects(self, start: Point, end: Point) -> bool:
        """Return True if a candidate segment would share a cell with this ship."""
        return segments_intersect(start, end, self.start, self.end)

    def register_hit(self, point: Point) -> bool:
        """Record damage at ``point``; repeated or off-ship cells are ignored."""
        if not self.contains(point) or point in self.hits:
            return False
        self.hits.add(point)
        return True
