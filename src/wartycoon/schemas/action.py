"""Validation of raw player commands typed into the shell."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from wartycoon.domain.actions import Action, BuildBase, Deploy, Harvest, Quit, Train
from wartycoon.domain.enums import ActionKind, UnitType

ACTION_ALIASES: dict[str, ActionKind] = {
    "1": ActionKind.BUILD_BASE,
    "build": ActionKind.BUILD_BASE,
    "build_base": ActionKind.BUILD_BASE,
    "2": ActionKind.HARVEST,
    "harvest": ActionKind.HARVEST,
    "3": ActionKind.TRAIN,
    "train": ActionKind.TRAIN,
    "4": ActionKind.DEPLOY,
    "deploy": ActionKind.DEPLOY,
    "conquer": ActionKind.DEPLOY,
    "5": ActionKind.QUIT,
    "q": ActionKind.QUIT,
    "quit": ActionKind.QUIT,
}


def normalize_action_kind(raw: str) -> ActionKind | None:
    key = (raw or "").strip().lower().replace("-", "_").replace(" ", "_")
    return ACTION_ALIASES.get(key)


class ActionRequest(BaseModel):
    kind: ActionKind = Field(..., description="Action to perform")
    unit_type: UnitType | None = Field(None, description="Unit type for train/deploy")
    count: int | None = Field(None, ge=1, description="Number of units for train/deploy")

    @field_validator("kind", mode="before")
    @classmethod
    def _parse_kind(cls, value: Any) -> Any:
        if isinstance(value, str):
            kind = normalize_action_kind(value)
            if kind is None:
                raise ValueError(f"unknown action: {value!r}")
            return kind
        return value

    @field_validator("unit_type", mode="before")
    @classmethod
    def _parse_unit_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower().removesuffix("s") or None
        return value

    @model_validator(mode="after")
    def _require_units(self) -> ActionRequest:
        if self.kind in (ActionKind.TRAIN, ActionKind.DEPLOY):
            if self.unit_type is None:
                raise ValueError(f"{self.kind} requires a unit type")
            if self.count is None:
                if self.kind is ActionKind.DEPLOY:
                    raise ValueError("deploy requires a unit count")
                self.count = 1
        return self

    def to_action(self) -> Action:
        """Convert the validated request into a domain action."""

        if self.kind is ActionKind.HARVEST:
            return Harvest()
        if self.kind is ActionKind.BUILD_BASE:
            return BuildBase()
        if self.kind is ActionKind.QUIT:
            return Quit()
        if self.unit_type is None or self.count is None:
            raise ValueError(f"{self.kind} requires a unit type and a count")
        if self.kind is ActionKind.TRAIN:
            return Train(unit_type=self.unit_type, count=self.count)
        return Deploy(unit_type=self.unit_type, count=self.count)
