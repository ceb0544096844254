"""Enumerations used across the WarTycoon domain."""

from __future__ import annotations

from enum import StrEnum


class UnitType(StrEnum):
    """Trainable unit kinds."""

    ARCHER = "archer"
    WARRIOR = "warrior"


class ResourceType(StrEnum):
    """Resources held in a player's warehouse."""

    WOOD = "wood"
    GOLD = "gold"


class ActionKind(StrEnum):
    """Actions a player may take on their turn."""

    HARVEST = "harvest"
    BUILD_BASE = "build_base"
    TRAIN = "train"
    DEPLOY = "deploy"
    QUIT = "quit"


class GamePhase(StrEnum):
    """Engine state machine phases."""

    AWAITING_ACTION = "awaiting_action"
    ENDED = "ended"
