"""Rules layer for WarTycoon.

The package operates purely in memory on a single :class:`models.GameState`
aggregate:

* :mod:`economy` keeps wood and gold balances and enforces spending.
* :mod:`bases` builds bases and derives training capacity.
* :mod:`roster` trains units under that capacity.
* :mod:`battlefield` commits troops and scores the field.
* :mod:`turns` dispatches actions, advances rounds and ends the game.
"""

from . import (
    actions,
    bases,
    battlefield,
    economy,
    enums,
    errors,
    models,
    roster,
    rules_config,
    turns,
)

__all__ = [
    "actions",
    "bases",
    "battlefield",
    "economy",
    "enums",
    "errors",
    "models",
    "roster",
    "rules_config",
    "turns",
]
