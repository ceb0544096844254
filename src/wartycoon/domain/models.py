"""Dataclasses describing the WarTycoon game state.

Every rule function operates on these in-memory types.  The whole match lives
in a single :class:`GameState` aggregate owned by the turn engine; nothing is
kept at module level.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NewType

from .enums import GamePhase, UnitType

PlayerID = NewType("PlayerID", int)


def _empty_unit_counts() -> dict[UnitType, int]:
    return {unit_type: 0 for unit_type in UnitType}


@dataclass(slots=True)
class ResourceBalance:
    """Wood and gold held by one player."""

    wood: int = 0
    gold: int = 0


@dataclass(slots=True)
class Player:
    """A participant and everything they own outside the battlefield."""

    id: PlayerID
    nick: str
    balance: ResourceBalance = field(default_factory=ResourceBalance)
    bases: int = 0
    roster: dict[UnitType, int] = field(default_factory=_empty_unit_counts)
    active: bool = True


@dataclass(slots=True)
class Battlefield:
    """The single contested field and the troops committed to it."""

    commitments: dict[PlayerID, dict[UnitType, int]] = field(default_factory=dict)

    def committed(self, player_id: PlayerID) -> dict[UnitType, int]:
        """Return (creating on first use) the commitment table of a player."""

        return self.commitments.setdefault(player_id, _empty_unit_counts())

    def counts(self, player_id: PlayerID) -> dict[UnitType, int]:
        """Copy of a player's commitments; never adds an entry."""

        return dict(self.commitments.get(player_id) or _empty_unit_counts())


@dataclass(frozen=True, slots=True)
class GameResult:
    """Final outcome; ``winner`` is ``None`` for a draw."""

    winner: PlayerID | None
    strengths: dict[PlayerID, float]

    @property
    def is_draw(self) -> bool:
        return self.winner is None


@dataclass(frozen=True, slots=True)
class PlayerSnapshot:
    """Read-only view of a player handed back to the shell."""

    player_id: PlayerID
    nick: str
    wood: int
    gold: int
    bases: int
    capacity: int
    units_in_use: int
    roster: dict[UnitType, int]
    committed: dict[UnitType, int]
    strength: float
    active: bool


@dataclass(slots=True)
class GameState:
    """Root aggregate representing an entire match."""

    players: list[Player]
    total_rounds: int
    battlefield: Battlefield = field(default_factory=Battlefield)
    current_round: int = 1
    current_index: int = 0
    phase: GamePhase = GamePhase.AWAITING_ACTION
    result: GameResult | None = None
    quit_this_round: bool = False

    def player(self, player_id: PlayerID) -> Player:
        return self.players[int(player_id)]

    @property
    def active_players(self) -> list[Player]:
        return [player for player in self.players if player.active]
