"""Runtime settings for the WarTycoon shell."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from wartycoon.domain.rules_config import DEFAULT_RULES


class Settings(BaseSettings):
    """Settings read from the environment (``WARTYCOON_*``) or a ``.env`` file."""

    model_config = SettingsConfigDict(
        env_prefix="WARTYCOON_", env_file=".env", env_file_encoding="utf-8"
    )

    rounds: int = Field(
        default=DEFAULT_RULES.game.default_rounds,
        ge=DEFAULT_RULES.game.min_rounds,
        description="Number of rounds in a match",
    )
    player_names: list[str] = Field(
        default_factory=lambda: ["Player 1", "Player 2"],
        description="Default nicknames offered when starting a match",
    )
    log_level: str = Field(default="WARNING", description="Root logging level")
    turn_pause_seconds: float = Field(
        default=0.0,
        ge=0.0,
        description="Pause after each turn so players can read the result",
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
