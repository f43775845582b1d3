"""Exception types raised by the Broadside engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from broadside.engine.geometry import Point
    from broadside.engine.ship import ShipClass


class BroadsideError(Exception):
    """Base class for all engine errors."""


class InvalidMoveError(BroadsideError, ValueError):
    """An attack targeted a cell outside the board."""

    def __init__(self, point: Point, board_size: int) -> None:
        super().__init__(
            f"({point.x}, {point.y}) is outside the {board_size}x{board_size} board."
        )
        self.point = point
        self.board_size = board_size


class GameOverError(BroadsideError, RuntimeError):
    """A move was attempted after the game was decided."""


class FleetPlacementError(BroadsideError, RuntimeError):
    """A ship could not be placed within the retry budget."""

    def __init__(self, ship_class: ShipClass, attempts: int) -> None:
        super().__init__(
            f"Could not place {ship_class.name.lower()} after {attempts} attempts."
        )
        self.ship_class = ship_class
        self.attempts = attempts
