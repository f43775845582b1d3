"""Hunt/target attacking AI for the computer side."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from broadside.engine.combat import AttackOutcome, attack_player
from broadside.engine.geometry import (
    Direction,
    Point,
    adjacent_point,
    direction_between,
    in_bounds,
)
from broadside.engine.player import Attack, Player
from broadside.telemetry import get_meter, get_tracer

logger = logging.getLogger(__name__)
tracer = get_tracer("broadside.ai.targeting")
meter = get_meter("broadside.ai.targeting")

MODE_SWITCH_COUNTER = meter.create_counter(
    "broadside_ai_mode_switches",
    unit="1",
    description="Transitions between hunt and target mode",
)


class TargetMode(Enum):
    """What the AI is doing this turn."""

    HUNT = "hunt"
    TARGET = "target"


def find_streak(attacks: Sequence[Attack], floor: int = 0) -> tuple[int, int] | None:
    """Locate the most recent run of consecutive hits in an attack log.

    Trailing misses are skipped, then the run is extended backwards over
    contiguous hits. Returns ``(first, last)`` indices, never reaching below
    ``floor``, or None when no hit remains in range.
    """
    last = len(attacks) - 1
    while last >= floor and not attacks[last].is_hit:
        last -= 1
    if last < floor:
        return None
    first = last
    while first > floor and attacks[first - 1].is_hit:
        first -= 1
    return first, last


@dataclass
class TargetingAI:
    """Two-mode attacker: random hunting, then probing around a known hit."""

    rng: random.Random = field(default_factory=random.Random)
    mode: TargetMode = TargetMode.HUNT
    streak_floor: int = 0

    def take_turn(self, offense: Player, defense: Player) -> AttackOutcome | None:
        """Make one attack for ``offense``; None once every cell has been tried."""
        size = defense.board.size
        if not offense.has_moves_left(size):
            return None

        with tracer.start_as_current_span("targeting.take_turn") as span:
            point = None
            if self.mode is TargetMode.TARGET:
                point = self.follow_up(offense, size)
                if point is None:
                    self._switch(TargetMode.HUNT, offense)
            hunting = point is None
            if hunting:
                point = self.hunt(offense, size)

            span.set_attribute("ai.mode", "hunt" if hunting else "target")
            span.set_attribute("point.x", point.x)
            span.set_attribute("point.y", point.y)
            outcome = attack_player(offense, defense, point)

            if hunting and outcome.hit:
                self.streak_floor = offense.attack_count - 1
                self._switch(TargetMode.TARGET, offense)
            return outcome

    def hunt(self, offense: Player, size: int) -> Point:
        """Sample cells uniformly until one the offense has not attacked yet."""
        while True:
            candidate = Point(self.rng.randrange(size), self.rng.randrange(size))
            if not offense.has_attacked(candidate):
                return candidate

    def follow_up(self, offense: Player, size: int) -> Point | None:
        """Pick the next probe around the current hit streak, if one is left."""
        attacks = offense.attacks
        streak = find_streak(attacks, self.streak_floor)
        if streak is None:
            return None
        first, last = streak
        origin = attacks[first].point

        def usable(point: Point) -> bool:
            return in_bounds(point, size) and not offense.has_attacked(point)

        heading = direction_between(origin, attacks[first + 1].point) if first != last else None
        if heading is None:
            for direction in Direction:
                candidate = adjacent_point(origin, direction)
                if usable(candidate):
                    return candidate
            return None

        latest = attacks[-1]
        if latest.is_hit:
            # Once the streak has wrapped past its start, keep walking away from it.
            dx, dy = heading.delta
            reversed_leg = (latest.point.x - origin.x) * dx + (latest.point.y - origin.y) * dy < 0
            step = heading.opposite() if reversed_leg else heading
            candidate = adjacent_point(latest.point, step)
            if usable(candidate):
                return candidate
        candidate = adjacent_point(origin, heading.opposite())
        return candidate if usable(candidate) else None

    def _switch(self, mode: TargetMode, offense: Player) -> None:
        MODE_SWITCH_COUNTER.add(1, attributes={"to": mode.value})
        logger.debug(
            "ai_mode_switch",
            extra={"player": offense.name, "from": self.mode.value, "to": mode.value},
        )
        self.mode = mode
