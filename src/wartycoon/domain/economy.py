"""Economy ledger: wood and gold balances."""

from __future__ import annotations

from .enums import ResourceType
from .errors import InsufficientResources, Shortfall
from .models import Player
from .rules_config import DEFAULT_RULES, RulesConfig


def credit(player: Player, wood_delta: int, gold_delta: int) -> None:
    """Add resources to a player's warehouse."""

    if wood_delta < 0 or gold_delta < 0:
        raise ValueError("credited amounts must be non-negative")
    player.balance.wood += wood_delta
    player.balance.gold += gold_delta


def can_afford(player: Player, wood_cost: int, gold_cost: int) -> bool:
    return player.balance.wood >= wood_cost and player.balance.gold >= gold_cost


def try_spend(player: Player, wood_cost: int, gold_cost: int) -> None:
    """Deduct both costs or nothing at all.

    Raises :class:`InsufficientResources` naming every resource that fell
    short; the balance is untouched in that case.
    """

    if wood_cost < 0 or gold_cost < 0:
        raise ValueError("costs must be non-negative")

    shortfalls: list[Shortfall] = []
    if player.balance.wood < wood_cost:
        shortfalls.append(Shortfall(ResourceType.WOOD, wood_cost, player.balance.wood))
    if player.balance.gold < gold_cost:
        shortfalls.append(Shortfall(ResourceType.GOLD, gold_cost, player.balance.gold))
    if shortfalls:
        raise InsufficientResources(shortfalls)

    player.balance.wood -= wood_cost
    player.balance.gold -= gold_cost


def harvest(player: Player, *, rules: RulesConfig = DEFAULT_RULES) -> tuple[int, int]:
    """Credit the fixed harvest yield and return ``(wood, gold)`` gained."""

    wood = rules.economy.harvest_wood
    gold = rules.economy.harvest_gold
    credit(player, wood, gold)
    return wood, gold
