"""Human-versus-computer Broadside game controller."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from broadside.ai.targeting import TargetingAI
from broadside.errors import GameOverError
from broadside.telemetry import get_meter, get_tracer

from .board import DEFAULT_PLACEMENT_ATTEMPTS, Board
from .combat import AttackOutcome, attack_player
from .geometry import Point
from .player import Player

logger = logging.getLogger(__name__)
tracer = get_tracer("broadside.engine.game")
meter = get_meter("broadside.engine.game")

TURN_COUNTER = meter.create_counter(
    "broadside_turns",
    unit="1",
    description="Turns played, by side",
)

COMPUTER_NAMES: tuple[str, ...] = (
    "Sinkin' About You",
    "Shipwreck Steve",
    "Admiral Ackbar-ish",
    "The Kraken's Cousin",
    "Torpedo Tuesday",
)


@dataclass
class Game:
    """Pairs the human player with the computer and the computer's targeting AI."""

    human: Player
    computer: Player
    rng: random.Random = field(default_factory=random.Random)
    targeting: TargetingAI = field(init=False)
    last_ai_outcome: AttackOutcome | None = field(init=False, default=None)

    def __post_init__(self) -> None:
        self.targeting = TargetingAI(rng=self.rng)

    @classmethod
    def create(
        cls,
        human_name: str,
        computer_name: str | None = None,
        rng: random.Random | None = None,
    ) -> Game:
        """Set up both players; the computer gets a random name unless one is given."""
        rng = rng or random.Random()
        name = computer_name or rng.choice(COMPUTER_NAMES)
        game = cls(
            human=Player(human_name, Board(owner=human_name)),
            computer=Player(name, Board(owner=name)),
            rng=rng,
        )
        logger.info("game_created", extra={"human": human_name, "computer": name})
        return game

    def place_fleets(self, max_attempts: int = DEFAULT_PLACEMENT_ATTEMPTS) -> None:
        with tracer.start_as_current_span("game.place_fleets"):
            for player in (self.human, self.computer):
                player.board.place_fleet(self.rng, max_attempts=max_attempts)

    @property
    def winner(self) -> Player | None:
        if self.computer.board.all_ships_sunk():
            return self.human
        if self.human.board.all_ships_sunk():
            return self.computer
        return None

    @property
    def is_over(self) -> bool:
        if self.winner is not None:
            return True
        return not (
            self.human.has_moves_left(self.computer.board.size)
            or self.computer.has_moves_left(self.human.board.size)
        )

    def human_attack(self, point: Point) -> AttackOutcome:
        """Resolve the human's shot at the computer's fleet."""
        if self.winner is not None:
            raise GameOverError("The game is already decided.")
        outcome = attack_player(self.human, self.computer, point)
        if not outcome.repeated:
            TURN_COUNTER.add(1, attributes={"side": "human"})
        self._log_if_decided()
        return outcome

    def ai_attack(self) -> bool:
        """Play one computer turn. Returns False when the computer cannot move."""
        with tracer.start_as_current_span("game.ai_attack") as span:
            if self.winner is not None:
                span.set_attribute("game.decided", True)
                return False
            outcome = self.targeting.take_turn(self.computer, self.human)
            if outcome is None:
                logger.info("ai_out_of_moves", extra={"computer": self.computer.name})
                return False
            self.last_ai_outcome = outcome
            TURN_COUNTER.add(1, attributes={"side": "computer"})
            span.set_attribute("ai.result", outcome.result.value)
            self._log_if_decided()
            return True

    def _log_if_decided(self) -> None:
        winner = self.winner
        if winner is not None:
            logger.info(
                "game_finished",
                extra={
                    "winner": winner.name,
                    "human_attacks": self.human.attack_count,
                    "computer_attacks": self.computer.attack_count,
                },
            )
