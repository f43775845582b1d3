"""Tests for the hunt/target attacking AI."""

import random

from broadside.ai.targeting import TargetingAI, TargetMode, find_streak
from broadside.engine.board import Board
from broadside.engine.geometry import Point
from broadside.engine.player import Attack, AttackResult, Player
from broadside.engine.ship import Ship

HIT = AttackResult.HIT
MISS = AttackResult.MISS


class ScriptedRandom(random.Random):
    """Returns queued values from ``randrange``."""

    def __init__(self, values: list[int]) -> None:
        super().__init__(0)
        self._values = list(values)

    def randrange(self, *args, **kwargs) -> int:
        return self._values.pop(0)


def _attacker(*entries: tuple[tuple[int, int], AttackResult]) -> Player:
    player = Player("computer")
    for (x, y), result in entries:
        player.append_attack(Attack(Point(x, y), result))
    return player


def _target(*ships: Ship) -> Player:
    board = Board()
    for ship in ships:
        assert board.place_ship(ship)
    return Player("human", board)


def test_find_streak_allows_index_zero() -> None:
    log = [Attack(Point(0, 0), HIT), Attack(Point(0, 1), HIT)]
    assert find_streak(log) == (0, 1)


def test_find_streak_skips_trailing_misses() -> None:
    log = [
        Attack(Point(0, 0), MISS),
        Attack(Point(1, 0), HIT),
        Attack(Point(2, 0), HIT),
        Attack(Point(3, 0), MISS),
        Attack(Point(0, 5), MISS),
    ]
    assert find_streak(log) == (1, 2)
    assert find_streak(log[:1]) is None
    assert find_streak([]) is None


def test_find_streak_respects_floor() -> None:
    log = [
        Attack(Point(0, 0), HIT),
        Attack(Point(0, 1), HIT),
        Attack(Point(0, 2), HIT),
    ]
    assert find_streak(log, floor=1) == (1, 2)
    assert find_streak(log[:1] + [Attack(Point(5, 5), MISS)], floor=1) is None


def test_hunt_hit_switches_to_target_mode() -> None:
    defense = _target(Ship(Point(3, 3), Point(3, 4)))
    offense = Player("computer")
    ai = TargetingAI(rng=ScriptedRandom([3, 3]))

    outcome = ai.take_turn(offense, defense)
    assert outcome is not None and outcome.hit
    assert outcome.point == Point(3, 3)
    assert ai.mode is TargetMode.TARGET
    assert ai.streak_floor == 0


def test_target_mode_probes_north_east_south_west() -> None:
    defense = _target(Ship(Point(3, 3), Point(3, 4)))
    offense = Player("computer")
    ai = TargetingAI(rng=ScriptedRandom([3, 3]))
    ai.take_turn(offense, defense)

    probes = [ai.take_turn(offense, defense) for _ in range(3)]
    assert [outcome.point for outcome in probes] == [Point(3, 2), Point(4, 3), Point(3, 4)]
    assert [outcome.result for outcome in probes] == [MISS, MISS, HIT]
    assert probes[-1].sunk


def test_target_mode_skips_attacked_neighbours() -> None:
    offense = _attacker(((3, 2), MISS), ((3, 3), HIT))
    ai = TargetingAI(mode=TargetMode.TARGET, streak_floor=1)
    assert ai.follow_up(offense, 10) == Point(4, 3)


def test_target_mode_skips_off_grid_neighbours() -> None:
    offense = _attacker(((0, 0), HIT))
    ai = TargetingAI(mode=TargetMode.TARGET)
    assert ai.follow_up(offense, 10) == Point(1, 0)


def test_miss_after_streak_reverses_from_streak_start() -> None:
    offense = _attacker(((2, 2), HIT), ((2, 3), HIT), ((2, 4), MISS))
    defense = _target(Ship(Point(2, 1), Point(2, 3)))
    ai = TargetingAI(mode=TargetMode.TARGET)

    assert ai.follow_up(offense, 10) == Point(2, 1)
    outcome = ai.take_turn(offense, defense)
    assert outcome is not None
    assert outcome.point == Point(2, 1)
    assert outcome.hit
    assert ai.mode is TargetMode.TARGET


def test_hit_streak_continues_in_heading() -> None:
    offense = _attacker(((5, 5), HIT), ((6, 5), HIT))
    ai = TargetingAI(mode=TargetMode.TARGET)
    assert ai.follow_up(offense, 10) == Point(7, 5)


def test_blocked_heading_falls_back_to_opposite_side() -> None:
    ai = TargetingAI(mode=TargetMode.TARGET)
    edge = _attacker(((8, 5), HIT), ((9, 5), HIT))
    assert ai.follow_up(edge, 10) == Point(7, 5)

    blocked = _attacker(((7, 5), MISS), ((5, 5), HIT), ((6, 5), HIT))
    ai.streak_floor = 1
    assert ai.follow_up(blocked, 10) == Point(4, 5)


def test_exhausted_streak_falls_back_to_hunt() -> None:
    offense = _attacker(((0, 0), HIT), ((1, 0), HIT), ((2, 0), MISS))
    defense = _target()
    ai = TargetingAI(rng=ScriptedRandom([7, 7]), mode=TargetMode.TARGET)

    assert ai.follow_up(offense, 10) is None
    outcome = ai.take_turn(offense, defense)
    assert outcome is not None
    assert outcome.point == Point(7, 7)
    assert ai.mode is TargetMode.HUNT


def test_hunt_never_repeats_and_stops_when_grid_is_exhausted() -> None:
    offense = Player("computer")
    defense = _target()
    ai = TargetingAI(rng=random.Random(99))
    seen: set[Point] = set()
    for _ in range(100):
        outcome = ai.take_turn(offense, defense)
        assert outcome is not None
        assert outcome.point not in seen
        seen.add(outcome.point)
    assert ai.take_turn(offense, defense) is None
    assert offense.attack_count == 100


def test_hunt_resamples_attacked_cells() -> None:
    offense = _attacker(((1, 1), MISS))
    ai = TargetingAI(rng=ScriptedRandom([1, 1, 2, 2]))
    assert ai.hunt(offense, 10) == Point(2, 2)


def test_reversed_streak_keeps_walking_away_from_start() -> None:
    offense = _attacker(
        ((5, 3), HIT), ((5, 2), HIT), ((5, 1), HIT), ((5, 0), HIT), ((5, 4), HIT)
    )
    ai = TargetingAI(mode=TargetMode.TARGET)
    assert ai.follow_up(offense, 10) == Point(5, 5)


def test_target_mode_sinks_ship_on_both_sides_of_first_hit() -> None:
    ship = Ship(Point(5, 0), Point(5, 5))
    defense = _target(ship)
    offense = Player("computer")
    ai = TargetingAI(rng=ScriptedRandom([5, 3]))

    points = []
    for _ in range(6):
        outcome = ai.take_turn(offense, defense)
        assert outcome is not None and outcome.hit
        points.append(outcome.point)
        assert ai.mode is TargetMode.TARGET
    assert points == [
        Point(5, 3),
        Point(5, 2),
        Point(5, 1),
        Point(5, 0),
        Point(5, 4),
        Point(5, 5),
    ]
    assert ship.is_sunken
