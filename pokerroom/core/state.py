"""
Table state tracker.

GameState mirrors the current game's phase and its non-folded players, and
decides when a hand is over. Each table owns its own GameState; nothing here
is process-global, so several tables can run side by side.
"""

from __future__ import annotations
from typing import List, Optional, Dict, Any, TYPE_CHECKING
import logging

from pokerroom.core.player import Player
from pokerroom.core.rules import GamePhase

if TYPE_CHECKING:
    from pokerroom.core.game import Game


logger = logging.getLogger(__name__)


class GameState:
    """
    Per-table view of the hand in progress.

    Attributes:
        current_game: The game being played, or None between hands
        active_players: Players that have not folded, in seat order
        round_number: Betting rounds completed in the current hand
        phase: Current phase of the hand
    """

    def __init__(self):
        self.current_game: Optional[Game] = None
        self.active_players: List[Player] = []
        self.round_number = 0
        self.phase = GamePhase.PRE_FLOP

    def register(self, game: Game) -> None:
        """Make `game` the current game and mirror its players and phase."""
        self.current_game = game
        self.active_players = list(game.players)
        self.round_number = 0
        self.phase = game.phase

    def reset_game(self) -> None:
        """Reset to the between-hands defaults."""
        self.current_game = None
        self.active_players = []
        self.round_number = 0
        self.phase = GamePhase.PRE_FLOP

    def update_phase(self, phase: GamePhase) -> None:
        """Overwrite the current phase. The caller is trusted to follow the phase order."""
        self.phase = phase

    def update_active_players(self, players: List[Player]) -> None:
        """Keep only the players that have not folded."""
        self.active_players = [p for p in players if not p.folded]

    def check_end_conditions(self) -> bool:
        """
        Check whether the hand should end.

        The hand ends when the phase is showdown or at most one active
        player remains.
        """
        logger.debug(f"Phase: {self.phase.value}, Active players: {len(self.active_players)}")
        return self.phase == GamePhase.SHOWDOWN or len(self.active_players) <= 1

    @property
    def has_game(self) -> bool:
        return self.current_game is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "game_id": self.current_game.game_id if self.current_game else None,
            "phase": self.phase.value,
            "round_number": self.round_number,
            "active_players": [p.name for p in self.active_players],
        }
