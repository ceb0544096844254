"""Declarative rule configuration for WarTycoon."""

from __future__ import annotations

from dataclasses import dataclass, field

from .enums import UnitType


@dataclass(frozen=True, slots=True)
class EconomyRules:
    """Harvest yields."""

    harvest_wood: int = 200
    harvest_gold: int = 120


@dataclass(frozen=True, slots=True)
class BaseRules:
    """Base construction cost and capacity."""

    capacity: int = 200
    wood_cost: int = 220
    gold_cost: int = 100
    # False counts only the roster, as the first release of the game did
    deployed_units_use_capacity: bool = True


@dataclass(frozen=True, slots=True)
class UnitStats:
    """Per-unit training cost and battlefield strength (in tenths)."""

    wood_cost: int
    gold_cost: int
    strength_tenths: int

    @property
    def strength(self) -> float:
        return self.strength_tenths / 10


def _default_unit_stats() -> dict[UnitType, UnitStats]:
    return {
        UnitType.ARCHER: UnitStats(wood_cost=0, gold_cost=10, strength_tenths=19),
        UnitType.WARRIOR: UnitStats(wood_cost=10, gold_cost=5, strength_tenths=12),
    }


@dataclass(frozen=True, slots=True)
class UnitRules:
    """Lookup table of unit statistics."""

    stats: dict[UnitType, UnitStats] = field(default_factory=_default_unit_stats)

    def for_type(self, unit_type: UnitType) -> UnitStats:
        return self.stats[unit_type]


@dataclass(frozen=True, slots=True)
class GameRules:
    """Match structure."""

    player_count: int = 2
    default_rounds: int = 10
    min_rounds: int = 10
    quit_ends_game_after_round: bool = False


@dataclass(frozen=True, slots=True)
class RulesConfig:
    """Top-level configuration container for all subsystems."""

    economy: EconomyRules = EconomyRules()
    bases: BaseRules = BaseRules()
    units: UnitRules = field(default_factory=UnitRules)
    game: GameRules = GameRules()


DEFAULT_RULES = RulesConfig()
