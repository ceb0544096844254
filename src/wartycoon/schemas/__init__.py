from .action import ActionRequest, normalize_action_kind
from .game import GameSetup

__all__ = [
    "ActionRequest",
    "GameSetup",
    "normalize_action_kind",
]
