"""
Betting round mechanics for a single phase.

A BettingRound lives for exactly one phase. It records the current bet level
and who put in what, and is closed by process_actions() before the game
moves on. It does not enforce call or raise discipline: every bet simply
becomes the new current bet.
"""

from __future__ import annotations
from typing import List, Dict, Optional
from dataclasses import dataclass
import logging

from pokerroom.core.errors import GameError
from pokerroom.core.player import Player
from pokerroom.core.rules import GamePhase


logger = logging.getLogger(__name__)


@dataclass
class BetRecord:
    """A single bet placed during a round."""
    player_name: str
    amount: int
    phase: Optional[GamePhase]


class BettingRound:
    """
    Betting state for one phase.

    Usage:
        round = BettingRound(GamePhase.FLOP, players)
        round.place_bet(player, 50)
        round.process_actions()
    """

    def __init__(self, phase: Optional[GamePhase] = None, players: Optional[List[Player]] = None):
        self.phase = phase
        self.current_bet = 0
        self.players_in_round: List[Player] = [p for p in (players or []) if not p.folded]
        self.bets: List[BetRecord] = []
        self.closed = False

    def place_bet(self, player: Player, amount: int) -> None:
        """
        Record a bet and make it the round's current bet.

        Raises:
            GameError: If the round has already been closed.
        """
        if self.closed:
            raise GameError("Cannot bet into a closed betting round")

        self.current_bet = amount
        self.bets.append(BetRecord(player.name, amount, self.phase))
        logger.info(f"{player.name} placed a bet of {amount}")

    def process_actions(self) -> None:
        """Close the round. No further bets are accepted afterwards."""
        self.closed = True
        logger.debug(
            f"Closing {self.phase.value if self.phase else 'betting'} round: "
            f"{len(self.bets)} bets, {self.total} chips"
        )

    def contribution(self, player_name: str) -> int:
        """Chips a player put in during this round."""
        return sum(b.amount for b in self.bets if b.player_name == player_name)

    @property
    def contributions(self) -> Dict[str, int]:
        result: Dict[str, int] = {}
        for bet in self.bets:
            result[bet.player_name] = result.get(bet.player_name, 0) + bet.amount
        return result

    @property
    def total(self) -> int:
        """Total chips bet in this round."""
        return sum(b.amount for b in self.bets)

    def __repr__(self) -> str:
        return f"BettingRound(phase={self.phase}, current_bet={self.current_bet}, bets={len(self.bets)})"
