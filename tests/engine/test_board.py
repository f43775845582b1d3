"""Tests for the Board mechanics."""

import itertools
import random

import pytest
from broadside.engine.board import FLEET, Board
from broadside.engine.geometry import Point, segments_intersect
from broadside.engine.ship import Ship, ShipClass
from broadside.errors import FleetPlacementError


class ZeroRandom(random.Random):
    """Always samples the top-left cell, vertically."""

    def randrange(self, *args, **kwargs) -> int:
        return 0


def test_fleet_is_largest_first() -> None:
    assert [ship_class.size for ship_class in FLEET] == [6, 5, 4, 3, 2]


def test_can_place_detects_crossing_segments() -> None:
    board = Board()
    board.place_ship(Ship(Point(2, 0), Point(2, 4)))
    assert not board.can_place(Point(0, 3), Point(4, 3))
    assert board.can_place(Point(3, 0), Point(3, 4))


def test_place_ship_rejects_overlap_bounds_and_duplicate_class() -> None:
    board = Board()
    assert board.place_ship(Ship(Point(0, 0), Point(2, 0)))
    assert not board.place_ship(Ship(Point(1, 0), Point(1, 4)))
    assert not board.place_ship(Ship(Point(8, 9), Point(10, 9)))
    assert not board.place_ship(Ship(Point(5, 5), Point(5, 7)))
    assert len(board.ships) == 1


def test_random_placement_populates_full_fleet_without_overlap() -> None:
    for seed in range(20):
        board = Board()
        board.place_fleet(random.Random(seed))
        assert [ship.size for ship in board.ships] == [6, 5, 4, 3, 2]
        for ship in board.ships:
            assert board.in_bounds(ship.start) and board.in_bounds(ship.end)
        for first, second in itertools.combinations(board.ships, 2):
            assert not segments_intersect(first.start, first.end, second.start, second.end)


def test_place_fleet_replaces_previous_layout() -> None:
    board = Board()
    board.place_fleet(random.Random(1))
    board.place_fleet(random.Random(2))
    assert len(board.ships) == len(ShipClass)


def test_place_fleet_gives_up_after_retry_budget() -> None:
    board = Board()
    with pytest.raises(FleetPlacementError) as excinfo:
        board.place_fleet(ZeroRandom(), max_attempts=5)
    assert excinfo.value.ship_class is ShipClass.BATTLESHIP
    assert excinfo.value.attempts == 5


def test_ship_at_tolerates_partial_fleet() -> None:
    board = Board()
    assert board.ship_at(Point(0, 0)) is None
    ship = Ship(Point(0, 0), Point(0, 3))
    board.place_ship(ship)
    assert board.ship_at(Point(0, 2)) is ship
    assert board.ship_at(Point(5, 5)) is None


def test_all_ships_sunk_requires_a_fleet() -> None:
    board = Board()
    assert not board.all_ships_sunk()
    ship = Ship(Point(4, 4), Point(5, 4))
    board.place_ship(ship)
    ship.register_hit(Point(4, 4))
    assert board.remaining_ships() == [ship]
    ship.register_hit(Point(5, 4))
    assert board.all_ships_sunk()
    assert board.remaining_ships() == []
