"""Action values a player submits on their turn."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .enums import ActionKind, UnitType


def _units_label(unit_type: UnitType, count: int) -> str:
    plural = "" if count == 1 else "S"
    return f"{count} {unit_type.upper()}{plural}"


@dataclass(frozen=True, slots=True)
class Harvest:
    kind: ClassVar[ActionKind] = ActionKind.HARVEST

    def __str__(self) -> str:
        return "Harvest resources"


@dataclass(frozen=True, slots=True)
class BuildBase:
    kind: ClassVar[ActionKind] = ActionKind.BUILD_BASE

    def __str__(self) -> str:
        return "Build BASE"


@dataclass(frozen=True, slots=True)
class Train:
    """Train ``count`` units of ``unit_type``."""

    kind: ClassVar[ActionKind] = ActionKind.TRAIN

    unit_type: UnitType
    count: int = 1

    def __str__(self) -> str:
        return f"Train {_units_label(self.unit_type, self.count)}"


@dataclass(frozen=True, slots=True)
class Deploy:
    """Send ``count`` trained units of ``unit_type`` to the battlefield."""

    kind: ClassVar[ActionKind] = ActionKind.DEPLOY

    unit_type: UnitType
    count: int

    def __str__(self) -> str:
        return f"Deploy {_units_label(self.unit_type, self.count)} to the battlefield"


@dataclass(frozen=True, slots=True)
class Quit:
    kind: ClassVar[ActionKind] = ActionKind.QUIT

    def __str__(self) -> str:
        return "Quit game"


Action = Harvest | BuildBase | Train | Deploy | Quit
