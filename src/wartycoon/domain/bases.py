"""Base registry: construction and training capacity."""

from __future__ import annotations

from . import economy
from .models import Player
from .rules_config import DEFAULT_RULES, RulesConfig


def build_base(player: Player, *, rules: RulesConfig = DEFAULT_RULES) -> int:
    """Pay for a new base and return the player's updated base count."""

    economy.try_spend(player, rules.bases.wood_cost, rules.bases.gold_cost)
    player.bases += 1
    return player.bases


def base_count(player: Player) -> int:
    return player.bases


def capacity(player: Player, *, rules: RulesConfig = DEFAULT_RULES) -> int:
    """Total unit slots granted by the player's bases."""

    return rules.bases.capacity * base_count(player)
