"""
Typed views over Hypixel player statistics.

A player's `stats` object maps category names (one per mini-game or server
area) to loosely-typed JSON. `StatsCategory` wraps one of those objects.
"""

from .category import StatsCategory
from .player import HypixelApiError, PlayerReply, PlayerStats

__all__ = ["StatsCategory", "PlayerStats", "PlayerReply", "HypixelApiError"]
