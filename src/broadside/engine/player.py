"""Players and the log of attacks they issue."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .board import Board
from .geometry import Point


class AttackResult(Enum):
    """Outcome of a single attack."""

    MISS = "miss"
    HIT = "hit"


@dataclass(frozen=True)
class Attack:
    """A resolved attack against the opponent's board."""

    point: Point
    result: AttackResult

    @property
    def is_hit(self) -> bool:
        return self.result is AttackResult.HIT


@dataclass
class Player:
    """A named side with its own fleet and the ordered attacks it has made."""

    name: str
    board: Board = field(default_factory=Board)
    attacks: list[Attack] = field(default_factory=list)
    _by_point: dict[Point, Attack] = field(init=False, repr=False, default_factory=dict)

    def __post_init__(self) -> None:
        if self.board.owner == "unknown":
            self.board.owner = self.name
        self._by_point = {attack.point: attack for attack in self.attacks}

    @property
    def attack_count(self) -> int:
        return len(self.attacks)

    @property
    def latest_attack(self) -> Attack | None:
        return self.attacks[-1] if self.attacks else None

    def find_attack(self, point: Point) -> Attack | None:
        """Return the earlier attack on ``point``, or None if it was never targeted."""
        return self._by_point.get(point)

    def has_attacked(self, point: Point) -> bool:
        return point in self._by_point

    def append_attack(self, attack: Attack) -> None:
        """Add a freshly resolved attack to the end of the log."""
        if attack.point in self._by_point:
            raise ValueError("Cell has already been attacked.")
        if self.attack_count >= self.board.size * self.board.size:
            raise ValueError("Attack log is full.")
        self.attacks.append(attack)
        self._by_point[attack.point] = attack

    def has_moves_left(self, grid_size: int | None = None) -> bool:
        """Return True while some cell of the opponent's grid is still untouched."""
        size = grid_size or self.board.size
        return self.attack_count < size * size
