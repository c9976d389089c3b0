"""
PokerRoom - Single-Table Poker Simulation

A small Texas Hold'em style table with:
- A pure Python phase state machine and flat-amount betting
- Human and strategy-driven computer players
- In-memory accounts, game history and a leaderboard
- A FastAPI HTTP layer for driving the table

Usage:
    from pokerroom.core import Game, GameState, AccountManager
    from pokerroom.agents import create_player, get_strategy
    from pokerroom.room import GameRoom
"""

__version__ = "0.1.0"

from pokerroom.core.card import Card, Deck
from pokerroom.core.player import Player, HumanPlayer, ComputerPlayer
from pokerroom.core.game import Game, HandResult
from pokerroom.core.state import GameState
from pokerroom.core.accounts import AccountManager

__all__ = [
    "Card",
    "Deck",
    "Player",
    "HumanPlayer",
    "ComputerPlayer",
    "Game",
    "HandResult",
    "GameState",
    "AccountManager",
    "__version__",
]
