from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from wartycoon.domain.rules_config import DEFAULT_RULES


class GameSetup(BaseModel):
    player_names: list[str] = Field(
        ...,
        min_length=DEFAULT_RULES.game.player_count,
        max_length=DEFAULT_RULES.game.player_count,
        description="Nicknames in turn order",
    )
    rounds: int = Field(
        default=DEFAULT_RULES.game.default_rounds,
        ge=DEFAULT_RULES.game.min_rounds,
        description="Number of rounds to play",
    )

    @field_validator("player_names")
    @classmethod
    def _strip_names(cls, names: list[str]) -> list[str]:
        stripped = [name.strip() for name in names]
        if any(not name for name in stripped):
            raise ValueError("player names must not be blank")
        return stripped

    @model_validator(mode="after")
    def _unique_names(self) -> GameSetup:
        if len(set(self.player_names)) != len(self.player_names):
            raise ValueError("player with this name already exists")
        return self
