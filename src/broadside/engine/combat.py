"""Attack resolution between two players."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from broadside.errors import InvalidMoveError
from broadside.telemetry import get_meter, get_tracer

from .geometry import Point
from .player import Attack, AttackResult, Player
from .ship import Ship

logger = logging.getLogger(__name__)
tracer = get_tracer("broadside.engine.combat")
meter = get_meter("broadside.engine.combat")

ATTACK_COUNTER = meter.create_counter(
    "broadside_attacks",
    unit="1",
    description="Attacks resolved, by outcome",
)


@dataclass(frozen=True)
class AttackOutcome:
    """Result of ``attack_player`` as seen by the attacker."""

    point: Point
    result: AttackResult
    ship: Ship | None = None
    sunk: bool = False
    repeated: bool = False

    @property
    def hit(self) -> bool:
        return self.result is AttackResult.HIT


def attack_player(offense: Player, defense: Player, point: Point) -> AttackOutcome:
    """Fire at ``point`` on the defender's board and log it for the attacker.

    Repeating an earlier attack returns the stored result and changes nothing.
    """
    with tracer.start_as_current_span("combat.attack_player") as span:
        span.set_attribute("offense", offense.name)
        span.set_attribute("point.x", point.x)
        span.set_attribute("point.y", point.y)
        board = defense.board
        if not board.in_bounds(point):
            logger.warning(
                "attack_out_of_bounds",
                extra={"offense": offense.name, "x": point.x, "y": point.y},
            )
            raise InvalidMoveError(point, board.size)

        previous = offense.find_attack(point)
        if previous is not None:
            ship = board.ship_at(point) if previous.is_hit else None
            span.set_attribute("attack.repeated", True)
            ATTACK_COUNTER.add(1, attributes={"outcome": "repeat", "offense": offense.name})
            logger.debug(
                "attack_repeated",
                extra={"offense": offense.name, "x": point.x, "y": point.y},
            )
            return AttackOutcome(
                point,
                previous.result,
                ship=ship,
                sunk=bool(ship and ship.is_sunken),
                repeated=True,
            )

        ship = board.ship_at(point)
        result = AttackResult.HIT if ship is not None else AttackResult.MISS
        offense.append_attack(Attack(point, result))
        if ship is not None:
            ship.register_hit(point)

        sunk = bool(ship and ship.is_sunken)
        span.set_attribute("attack.result", result.value)
        span.set_attribute("attack.sunk", sunk)
        ATTACK_COUNTER.add(1, attributes={"outcome": result.value, "offense": offense.name})
        logger.info(
            "attack_resolved",
            extra={
                "offense": offense.name,
                "defense": defense.name,
                "x": point.x,
                "y": point.y,
                "result": result.value,
                "sunk": sunk,
            },
        )
        return AttackOutcome(point, result, ship=ship, sunk=sunk)
