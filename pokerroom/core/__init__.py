"""
PokerRoom Core - Pure Python Table Engine

This module contains all game logic without any network dependencies.
"""

from pokerroom.core.card import Card, Deck, Rank, Suit
from pokerroom.core.player import Player, HumanPlayer, ComputerPlayer
from pokerroom.core.rules import GamePhase, Decision
from pokerroom.core.betting import BettingRound
from pokerroom.core.state import GameState
from pokerroom.core.accounts import AccountManager, PlayerAccount, GameHistory
from pokerroom.core.game import Game, HandResult, score_hand

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "Player",
    "HumanPlayer",
    "ComputerPlayer",
    "GamePhase",
    "Decision",
    "BettingRound",
    "GameState",
    "AccountManager",
    "PlayerAccount",
    "GameHistory",
    "Game",
    "HandResult",
    "score_hand",
]
