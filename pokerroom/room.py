"""
Pre-game table configuration.

A GameRoom holds the computer seats and the table difficulty between hands,
and starts a Game once a human player sits down.
"""

from __future__ import annotations
from typing import List, Optional, Union
import logging

from pokerroom.agents.factory import PlayerType, create_player
from pokerroom.agents.strategies import Difficulty, get_strategy, parse_difficulty, strategy_name
from pokerroom.core.accounts import AccountManager
from pokerroom.core.game import Game
from pokerroom.core.player import ComputerPlayer, Player
from pokerroom.core.rules import MAX_PLAYERS
from pokerroom.core.state import GameState


logger = logging.getLogger(__name__)


class GameRoom:
    """
    Computer seat setup and game start.

    Usage:
        room = GameRoom(accounts)
        room.set_ai_players(2)
        room.modify_ai_strategy(0, "Hard")
        game = room.start_game(human)
        game.play_game()
    """

    def __init__(self, accounts: Optional[AccountManager] = None):
        self.accounts = accounts if accounts is not None else AccountManager()
        self.ai_players: List[ComputerPlayer] = []
        self.game_difficulty = Difficulty.MEDIUM
        self.state = GameState()
        self.current_game: Optional[Game] = None

    @property
    def num_ai_players(self) -> int:
        return len(self.ai_players)

    def set_ai_players(self, count: int) -> None:
        """
        Replace the computer seats with `count` new players using the room
        difficulty's strategy.
        """
        if count < 0 or count > MAX_PLAYERS - 1:
            raise ValueError(f"Number of AI players must be 0-{MAX_PLAYERS - 1}")

        strategy = get_strategy(self.game_difficulty)
        self.ai_players = [
            create_player(PlayerType.COMPUTER, f"AI_Player_{i + 1}", strategy=strategy)
            for i in range(count)
        ]
        logger.info(f"Seated {count} AI players ({self.game_difficulty.value})")

    def modify_ai_strategy(self, player_index: int, difficulty: Union[str, Difficulty, None]) -> None:
        """
        Change the strategy of one computer seat.

        Raises:
            UnknownStrategyType: If the difficulty is not recognised.
        """
        strategy = get_strategy(difficulty)
        if 0 <= player_index < len(self.ai_players):
            player = self.ai_players[player_index]
            player.strategy = strategy
            logger.info(f"{player.name} is now using {strategy_name(strategy)} betting")

    def remove_ai_player(self, player_index: int) -> None:
        """Remove a computer seat. Out-of-range indices are ignored."""
        if 0 <= player_index < len(self.ai_players):
            removed = self.ai_players.pop(player_index)
            logger.info(f"Removed {removed.name}")

    def set_game_difficulty(self, difficulty: Union[str, Difficulty]) -> None:
        """Set the table difficulty and apply it to every computer seat."""
        self.game_difficulty = parse_difficulty(difficulty)
        for index in range(len(self.ai_players)):
            self.modify_ai_strategy(index, self.game_difficulty)

    def start_game(self, human_player: Player) -> Game:
        """
        Start a hand with the human first, then the computer seats.

        The game settles against the room's accounts and mirrors into the
        room's table state.
        """
        players = [human_player, *self.ai_players]
        self.current_game = Game(players, accounts=self.accounts, state=self.state)
        return self.current_game
