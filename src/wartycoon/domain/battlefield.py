"""Battlefield commitments and end-of-game scoring."""

from __future__ import annotations

from collections.abc import Iterable

from .enums import UnitType
from .errors import InsufficientTrainedUnits
from .models import Battlefield, GameResult, Player, PlayerID
from .rules_config import DEFAULT_RULES, RulesConfig


def deploy(
    player: Player, unit_type: UnitType, count: int, *, battlefield: Battlefield
) -> int:
    """Move trained units onto the field and return the new commitment.

    Deployment is one-way; there is no withdrawal.
    """

    if count < 1:
        raise ValueError("count must be at least 1")
    available = player.roster[unit_type]
    if available < count:
        raise InsufficientTrainedUnits(unit_type, requested=count, available=available)

    player.roster[unit_type] -= count
    committed = battlefield.committed(player.id)
    committed[unit_type] += count
    return committed[unit_type]


def send_max_units(player: Player, unit_type: UnitType) -> int:
    return player.roster[unit_type]


def strength_tenths(
    battlefield: Battlefield, player_id: PlayerID, *, rules: RulesConfig = DEFAULT_RULES
) -> int:
    """Exact committed strength, scaled by ten."""

    committed = battlefield.commitments.get(player_id, {})
    return sum(
        count * rules.units.for_type(unit_type).strength_tenths
        for unit_type, count in committed.items()
    )


def total_strength(
    battlefield: Battlefield, player_id: PlayerID, *, rules: RulesConfig = DEFAULT_RULES
) -> float:
    return strength_tenths(battlefield, player_id, rules=rules) / 10


def resolve(
    battlefield: Battlefield,
    player_ids: Iterable[PlayerID],
    *,
    rules: RulesConfig = DEFAULT_RULES,
) -> GameResult:
    """Score the field: the single strongest player wins, any tie is a draw."""

    scores = {pid: strength_tenths(battlefield, pid, rules=rules) for pid in player_ids}
    strengths = {pid: score / 10 for pid, score in scores.items()}
    if not scores:
        return GameResult(winner=None, strengths=strengths)

    best = max(scores.values())
    leaders = [pid for pid, score in scores.items() if score == best]
    winner = leaders[0] if len(leaders) == 1 else None
    return GameResult(winner=winner, strengths=strengths)
