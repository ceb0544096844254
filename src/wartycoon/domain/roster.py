"""Unit roster: training units under base capacity."""

from __future__ import annotations

from . import bases, economy
from .enums import UnitType
from .errors import BaseCapacityExceeded, NoActiveBase
from .models import Battlefield, Player
from .rules_config import DEFAULT_RULES, RulesConfig


def unit_cost(
    unit_type: UnitType, count: int = 1, *, rules: RulesConfig = DEFAULT_RULES
) -> tuple[int, int]:
    """Return the ``(wood, gold)`` price of ``count`` units."""

    stats = rules.units.for_type(unit_type)
    return stats.wood_cost * count, stats.gold_cost * count


def trained_units(player: Player) -> int:
    return sum(player.roster.values())


def units_in_use(
    player: Player, battlefield: Battlefield, *, rules: RulesConfig = DEFAULT_RULES
) -> int:
    """Units occupying base slots: the roster plus, by default, deployed troops."""

    total = trained_units(player)
    if rules.bases.deployed_units_use_capacity:
        total += sum(battlefield.counts(player.id).values())
    return total


def remaining_capacity(
    player: Player, battlefield: Battlefield, *, rules: RulesConfig = DEFAULT_RULES
) -> int:
    used = units_in_use(player, battlefield, rules=rules)
    return max(0, bases.capacity(player, rules=rules) - used)


def train(
    player: Player,
    unit_type: UnitType,
    count: int = 1,
    *,
    battlefield: Battlefield,
    rules: RulesConfig = DEFAULT_RULES,
) -> int:
    """Train ``count`` units and return the new roster count for ``unit_type``.

    Capacity is checked before any resources are debited, so a rejected
    request never costs the player anything.
    """

    if count < 1:
        raise ValueError("count must be at least 1")
    if bases.base_count(player) == 0:
        raise NoActiveBase()

    limit = bases.capacity(player, rules=rules)
    attempted_total = units_in_use(player, battlefield, rules=rules) + count
    if attempted_total > limit:
        raise BaseCapacityExceeded(capacity=limit, attempted_total=attempted_total)

    wood, gold = unit_cost(unit_type, count, rules=rules)
    economy.try_spend(player, wood, gold)
    player.roster[unit_type] += count
    return player.roster[unit_type]


def train_max_units(
    player: Player,
    unit_type: UnitType,
    *,
    battlefield: Battlefield,
    rules: RulesConfig = DEFAULT_RULES,
) -> int:
    """Largest count of ``unit_type`` a training request could currently get."""

    stats = rules.units.for_type(unit_type)
    limits = [remaining_capacity(player, battlefield, rules=rules)]
    if stats.wood_cost:
        limits.append(player.balance.wood // stats.wood_cost)
    if stats.gold_cost:
        limits.append(player.balance.gold // stats.gold_cost)
    return min(limits)
