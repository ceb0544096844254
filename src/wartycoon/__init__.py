"""WarTycoon: a two-player, round-based resource and battle game."""

__version__ = "0.1.0"
