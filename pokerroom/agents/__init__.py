"""
PokerRoom Agents - Computer Strategies and Player Construction

Strategies are plain functions from a game state snapshot to a Decision;
create_player() builds human and computer seats.
"""

from pokerroom.agents.strategies import (
    Difficulty,
    cautious_betting,
    balanced_betting,
    aggressive_betting,
    get_strategy,
)
from pokerroom.agents.factory import PlayerType, create_player

__all__ = [
    "Difficulty",
    "cautious_betting",
    "balanced_betting",
    "aggressive_betting",
    "get_strategy",
    "PlayerType",
    "create_player",
]
