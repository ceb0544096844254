"""Rejections raised by the rule modules.

Every subclass of :class:`ActionRejected` is recoverable: the turn engine
turns it into a rejected outcome and the acting player simply picks another
action.
"""

from __future__ import annotations

from dataclasses import dataclass

from .enums import ResourceType, UnitType


class ActionRejected(RuntimeError):
    """Raised when a player action cannot be applied."""


@dataclass(frozen=True, slots=True)
class Shortfall:
    """One resource that could not cover a cost."""

    resource: ResourceType
    needed: int
    available: int


class InsufficientResources(ActionRejected):
    """The player's warehouse cannot pay for the action."""

    def __init__(self, shortfalls: list[Shortfall]) -> None:
        if not shortfalls:
            raise ValueError("at least one shortfall is required")
        self.shortfalls = tuple(shortfalls)
        detail = "; ".join(
            f"not enough {s.resource} (needed {s.needed}, available {s.available})"
            for s in self.shortfalls
        )
        super().__init__(detail)

    @property
    def resource(self) -> ResourceType:
        return self.shortfalls[0].resource

    @property
    def needed(self) -> int:
        return self.shortfalls[0].needed

    @property
    def available(self) -> int:
        return self.shortfalls[0].available


class BaseCapacityExceeded(ActionRejected):
    """Training would push the player's unit count over base capacity."""

    def __init__(self, capacity: int, attempted_total: int) -> None:
        self.capacity = capacity
        self.attempted_total = attempted_total
        super().__init__(
            f"{attempted_total} units requested in total, capacity is {capacity}; "
            "consider building a new base"
        )


class InsufficientTrainedUnits(ActionRejected):
    """Deployment asked for more units than the roster holds."""

    def __init__(self, unit_type: UnitType, requested: int, available: int) -> None:
        self.unit_type = unit_type
        self.requested = requested
        self.available = available
        super().__init__(
            f"cannot deploy {requested} {unit_type} units, only {available} available"
        )


class NoActiveBase(ActionRejected):
    """Training needs at least one base."""

    def __init__(self) -> None:
        super().__init__("a base is required before units can be trained")


class PlayerInactive(ActionRejected):
    """The acting player has already quit the game."""

    def __init__(self, nick: str) -> None:
        self.nick = nick
        super().__init__(f"{nick} has left the game")


class NotPlayersTurn(ActionRejected):
    """An action was submitted for a player who is not up."""

    def __init__(self, nick: str, current_nick: str) -> None:
        self.nick = nick
        self.current_nick = current_nick
        super().__init__(f"it is {current_nick}'s turn, not {nick}'s")


class GameOverError(RuntimeError):
    """Raised when an action is submitted after the game has ended."""
