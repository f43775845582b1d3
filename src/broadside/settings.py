"""Game settings loaded from the environment."""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Any, Dict

from pydantic import BaseModel, Field

from broadside.engine.board import DEFAULT_PLACEMENT_ATTEMPTS


class GameSettings(BaseModel):
    """Knobs for a single game session."""

    seed: int | None = None
    player_name: str = "Player"
    computer_name: str | None = None
    placement_attempts: int = Field(default=DEFAULT_PLACEMENT_ATTEMPTS, gt=0)
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, **overrides: Any) -> "GameSettings":
        """Read `BROADSIDE_*` variables; non-None overrides take precedence."""

        env_names = {
            "seed": "BROADSIDE_SEED",
            "player_name": "BROADSIDE_PLAYER_NAME",
            "computer_name": "BROADSIDE_COMPUTER_NAME",
            "placement_attempts": "BROADSIDE_PLACEMENT_ATTEMPTS",
            "log_level": "BROADSIDE_LOG_LEVEL",
        }
        data: Dict[str, Any] = {}
        for field, env_name in env_names.items():
            value = os.getenv(env_name)
            if value:
                data[field] = value.strip()
        data.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**data)


@lru_cache(maxsize=1)
def load_settings() -> GameSettings:
    """Load and cache settings from the environment."""

    return GameSettings.from_env()
