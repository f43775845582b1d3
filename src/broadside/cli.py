"""Command-line driver for playing Broadside against the computer."""

from __future__ import annotations

import argparse
import random
from typing import Sequence

from broadside.engine.board import Board
from broadside.engine.combat import AttackOutcome
from broadside.engine.game import Game
from broadside.engine.geometry import Point
from broadside.engine.player import Player
from broadside.errors import InvalidMoveError
from broadside.settings import GameSettings, load_settings
from broadside.telemetry import TelemetryConfig, init_telemetry

ROW_LABELS = "ABCDEFGHIJ"


def parse_point(text: str) -> Point:
    """Parse `B7` (row letter, column number) or `x y` (zero-based) into a Point."""
    cleaned = text.strip().upper()
    if not cleaned:
        raise ValueError("Empty coordinate.")
    if cleaned[0].isalpha():
        if cleaned[0] not in ROW_LABELS:
            raise ValueError("Row must be between A and J.")
        y = ROW_LABELS.index(cleaned[0])
        try:
            x = int(cleaned[1:]) - 1
        except ValueError as exc:
            raise ValueError("Column must be a number between 1 and 10.") from exc
    else:
        parts = cleaned.split()
        if len(parts) != 2:
            raise ValueError("Use formats like B7 or '6 1'.")
        try:
            x, y = map(int, parts)
        except ValueError as exc:
            raise ValueError("Coordinates must be whole numbers.") from exc
    return Point(x, y)


def format_point(point: Point) -> str:
    return f"{ROW_LABELS[point.y]}{point.x + 1}"


def format_board(board: Board, attacker: Player, show_ships: bool) -> str:
    """Render a board with the attacker's shots; ships only when ``show_ships``."""
    ship_cells: set[Point] = set()
    if show_ships:
        for ship in board.ships:
            ship_cells.update(ship.cells())

    header = "    " + " ".join(f"{x + 1:>2}" for x in range(board.size))
    rows = [header]
    for y in range(board.size):
        symbols = []
        for x in range(board.size):
            point = Point(x, y)
            attack = attacker.find_attack(point)
            if attack is not None:
                symbol = "X" if attack.is_hit else "o"
            else:
                symbol = "S" if point in ship_cells else "."
            symbols.append(f"{symbol:>2}")
        rows.append(f"{ROW_LABELS[y]} |" + " ".join(symbols))
    return "\n".join(rows)


def describe_attack(player: Player, outcome: AttackOutcome) -> str:
    label = format_point(outcome.point)
    if outcome.repeated:
        return f"{player.name} already fired at {label}: {outcome.result.value}"
    text = "hit" if outcome.hit else "miss"
    if outcome.sunk and outcome.ship is not None and outcome.ship.ship_class is not None:
        text = f"sank the {outcome.ship.ship_class.label.lower()}!"
    return f"{player.name} fired at {label}: {text}"


def _prompt_for_point(game: Game) -> AttackOutcome:
    while True:
        raw = input("Enter target coordinate (e.g., B7) or 'q' to quit: ").strip()
        if raw.lower() == "q":
            raise SystemExit("Goodbye!")
        try:
            return game.human_attack(parse_point(raw))
        except InvalidMoveError as exc:
            print(f"Invalid move: {exc}")
        except ValueError as exc:
            print(f"Invalid input: {exc}")


def _random_untried(player: Player, size: int, rng: random.Random) -> Point:
    cells = (Point(x, y) for y in range(size) for x in range(size))
    choices = [point for point in cells if not player.has_attacked(point)]
    return rng.choice(choices)


def play_game(settings: GameSettings, auto: bool = False) -> Game:
    rng = random.Random(settings.seed)
    game = Game.create(settings.player_name, settings.computer_name, rng=rng)
    game.place_fleets(max_attempts=settings.placement_attempts)
    print(f"Welcome to Broadside! Your opponent is {game.computer.name}.\n")

    size = game.computer.board.size
    while not game.is_over:
        if game.human.has_moves_left(size):
            print("\nYour Board:")
            print(format_board(game.human.board, game.computer, show_ships=True))
            print("\nEnemy Waters:")
            print(format_board(game.computer.board, game.human, show_ships=False))
            if auto:
                outcome = game.human_attack(_random_untried(game.human, size, rng))
            else:
                outcome = _prompt_for_point(game)
            print(describe_attack(game.human, outcome))
            if outcome.repeated:
                continue
        if game.ai_attack() and game.last_ai_outcome is not None:
            print(describe_attack(game.computer, game.last_ai_outcome))

    winner = game.winner
    if winner is game.human:
        print("\nCongratulations, you won!")
    elif winner is game.computer:
        print(f"\n{game.computer.name} won this time. Better luck next battle!")
    else:
        print("\nEvery cell has been fired upon. It's a draw.")
    return game


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Play Broadside via the CLI.")
    parser.add_argument(
        "--seed", type=int, default=None, help="Optional RNG seed for reproducibility."
    )
    parser.add_argument("--name", default=None, help="Your display name.")
    parser.add_argument("--computer-name", default=None, help="Name for the computer side.")
    parser.add_argument("--log-level", default=None, help="Logging level (default WARNING).")
    parser.add_argument(
        "--auto", action="store_true", help="Fire your shots at random and watch the game."
    )
    args = parser.parse_args(argv)

    overrides = {
        "seed": args.seed,
        "player_name": args.name,
        "computer_name": args.computer_name,
        "log_level": args.log_level,
    }
    settings = load_settings().model_copy(
        update={key: value for key, value in overrides.items() if value is not None}
    )
    init_telemetry(TelemetryConfig.from_env(log_level=settings.log_level))
    play_game(settings, auto=args.auto)


if __name__ == "__main__":
    main()
