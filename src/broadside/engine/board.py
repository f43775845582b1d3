"""Single-player board management for the Broadside engine."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from broadside.errors import FleetPlacementError
from broadside.telemetry import get_meter, get_tracer

from .geometry import BOARD_SIZE, Point, in_bounds
from .ship import Ship, ShipClass

logger = logging.getLogger(__name__)
tracer = get_tracer("broadside.engine.board")
meter = get_meter("broadside.engine.board")

PLACEMENT_COUNTER = meter.create_counter(
    "broadside_ship_placements",
    unit="1",
    description="Ship placement attempts by result",
)

FLEET: tuple[ShipClass, ...] = tuple(
    sorted(ShipClass, key=lambda ship_class: ship_class.size, reverse=True)
)
DEFAULT_PLACEMENT_ATTEMPTS = 1000


@dataclass
class Board:
    """A player's grid and the fleet placed on it."""

    size: int = BOARD_SIZE
    ships: list[Ship] = field(default_factory=list)
    owner: str = "unknown"

    def in_bounds(self, point: Point) -> bool:
        return in_bounds(point, self.size)

    def can_place(self, start: Point, end: Point) -> bool:
        """Return True if the segment does not cross any ship already placed."""
        for ship in self.ships:
            if ship.intersects(start, end):
                return False
        return True

    def place_ship(self, ship: Ship) -> bool:
        """Add a ship if it fits on the grid, its class is free and nothing overlaps."""
        placed_classes = {existing.ship_class for existing in self.ships}
        fits = self.in_bounds(ship.start) and self.in_bounds(ship.end)
        if (
            fits
            and ship.ship_class is not None
            and ship.ship_class not in placed_classes
            and self.can_place(ship.start, ship.end)
        ):
            self.ships.append(ship)
            PLACEMENT_COUNTER.add(1, attributes={"result": "success", "owner": self.owner})
            logger.info(
                "ship_placed",
                extra={
                    "owner": self.owner,
                    "size": ship.size,
                    "start": (ship.start.x, ship.start.y),
                    "end": (ship.end.x, ship.end.y),
                },
            )
            return True
        PLACEMENT_COUNTER.add(1, attributes={"result": "rejected", "owner": self.owner})
        logger.warning(
            "ship_placement_rejected",
            extra={
                "owner": self.owner,
                "size": ship.size,
                "start": (ship.start.x, ship.start.y),
                "end": (ship.end.x, ship.end.y),
            },
        )
        return False

    def place_fleet(
        self, rng: random.Random, max_attempts: int = DEFAULT_PLACEMENT_ATTEMPTS
    ) -> None:
        """Randomly place the whole fleet, largest ship first.

        Every sampled start leaves room for the ship in both orientations, so a
        candidate is only rejected when it crosses a ship already on the board.
        """
        with tracer.start_as_current_span("board.place_fleet") as span:
            span.set_attribute("board.owner", self.owner)
            self.ships.clear()
            for ship_class in FLEET:
                span_length = ship_class.size - 1
                for attempt in range(1, max_attempts + 1):
                    start = Point(
                        rng.randrange(self.size - span_length),
                        rng.randrange(self.size - span_length),
                    )
                    candidate = Ship.from_class(ship_class, start, horizontal=rng.randrange(2) == 1)
                    if self.can_place(candidate.start, candidate.end):
                        self.ships.append(candidate)
                        PLACEMENT_COUNTER.add(
                            1, attributes={"result": "success", "owner": self.owner}
                        )
                        logger.debug(
                            "random_ship_placed",
                            extra={
                                "owner": self.owner,
                                "ship_class": ship_class.name,
                                "attempts": attempt,
                            },
                        )
                        break
                    PLACEMENT_COUNTER.add(1, attributes={"result": "collision", "owner": self.owner})
                else:
                    logger.error(
                        "fleet_placement_failed",
                        extra={
                            "owner": self.owner,
                            "ship_class": ship_class.name,
                            "attempts": max_attempts,
                        },
                    )
                    span.set_attribute("placement.failed", ship_class.name)
                    raise FleetPlacementError(ship_class, max_attempts)
            span.set_attribute("board.ships", len(self.ships))

    def ship_at(self, point: Point) -> Ship | None:
        """Return the ship occupying ``point``, if any."""
        for ship in self.ships:
            if ship.contains(point):
                return ship
        return None

    def all_ships_sunk(self) -> bool:
        """Check whether a placed fleet has been wiped out."""
        return bool(self.ships) and all(ship.is_sunken for ship in self.ships)

    def remaining_ships(self) -> list[Ship]:
        return [ship for ship in self.ships if not ship.is_sunken]
