"""
PokerRoom Game Engine - Phase State Machine.

This module drives a single hand at one table:
- Dealing hole cards and community cards
- One betting round per phase (pre-flop, flop, turn, river)
- Phase progression up to the showdown
- Winner selection and settlement against player accounts

Winner selection uses a placeholder score over the two hole cards, not real
hand ranking: (sum of rank ordinals) * 10 + (sum of suit weights).
"""

from __future__ import annotations
from typing import List, Dict, Optional, Any
from dataclasses import dataclass, field
from datetime import datetime, timezone
import logging
import uuid

from pokerroom.core.accounts import AccountManager
from pokerroom.core.betting import BettingRound
from pokerroom.core.card import Card, Deck
from pokerroom.core.errors import DeckExhausted, GameError, InsufficientChips, InvalidPhaseTransition
from pokerroom.core.player import Player, HumanPlayer
from pokerroom.core.rules import (
    GamePhase, Decision, BETTING_DECISIONS,
    get_next_phase, COMMUNITY_CARDS_FOR_PHASE,
    BET_AMOUNT, LOSS_PENALTY, MIN_PLAYERS, MAX_PLAYERS, HOLE_CARDS,
)
from pokerroom.core.state import GameState


logger = logging.getLogger(__name__)


@dataclass
class HandResult:
    """Outcome of a settled hand."""
    game_id: str
    winner: str
    winning_hand: List[Card]
    score: int
    pot: int
    phase: GamePhase
    date_time: str
    payouts: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "game_id": self.game_id,
            "winner": self.winner,
            "winning_hand": [c.to_dict() for c in self.winning_hand],
            "score": self.score,
            "pot": self.pot,
            "phase": self.phase.value,
            "date_time": self.date_time,
            "payouts": dict(self.payouts),
        }


def score_hand(hand: List[Card]) -> int:
    """
    Placeholder hand score.

    Rank ordinals are summed and weighted by 10, suit weights break ties.
    This is not poker hand ranking.
    """
    return sum(c.rank_value for c in hand) * 10 + sum(c.suit_value for c in hand)


class Game:
    """
    One hand of poker, implemented as a linear phase state machine.

    Usage:
        accounts = AccountManager()
        game = Game(players, accounts=accounts)
        result = game.play_game()

    Or step by step:
        game.deal_cards()
        while not game.state.check_end_conditions():
            game.betting_round()
            game.next_phase()
        result = game.end_game()
    """

    def __init__(
        self,
        players: List[Player],
        accounts: Optional[AccountManager] = None,
        state: Optional[GameState] = None,
        deck: Optional[Deck] = None,
        bet_amount: int = BET_AMOUNT,
        loss_penalty: int = LOSS_PENALTY,
        game_id: Optional[str] = None,
    ):
        """
        Initialize a new hand and register it with the table state.

        Args:
            players: Seated players in acting order (2-22, unique names)
            accounts: Account store settled at the end of the hand
            state: Table state to mirror into (a fresh one if omitted)
            deck: Deck to deal from (a freshly shuffled one if omitted)
            bet_amount: Chips put in by every bet or raise
            loss_penalty: Chips debited from every losing player
            game_id: Identifier for this hand (random if omitted)
        """
        if len(players) < MIN_PLAYERS or len(players) > MAX_PLAYERS:
            raise GameError(f"Number of players must be {MIN_PLAYERS}-{MAX_PLAYERS}")

        names = [p.name for p in players]
        if len(set(names)) != len(names):
            raise GameError(f"Player names must be unique: {names}")

        self.game_id = game_id or uuid.uuid4().hex[:8]
        self.players: List[Player] = list(players)
        self.accounts = accounts if accounts is not None else AccountManager()
        self.state = state if state is not None else GameState()
        self.deck = deck if deck is not None else Deck()
        self.bet_amount = bet_amount
        self.loss_penalty = loss_penalty

        self.community_cards: List[Card] = []
        self.pot = 0
        self.dealer_position = 0
        self.phase = GamePhase.PRE_FLOP

        self.cards_dealt = False
        self.settled = False
        self.result: Optional[HandResult] = None
        self.rounds: List[BettingRound] = []

        # Hand history for replay
        self.hand_history: List[Dict[str, Any]] = []

        for player in self.players:
            player.reset_for_new_hand()

        self.state.register(self)
        logger.info(f"Game {self.game_id} created with {self.num_players} players")

    @property
    def num_players(self) -> int:
        """Number of players at the table."""
        return len(self.players)

    @property
    def active_players(self) -> List[Player]:
        """Players that have not folded, in seat order."""
        return [p for p in self.players if not p.folded]

    @property
    def dealer(self) -> Player:
        return self.players[self.dealer_position]

    def deal_cards(self) -> None:
        """
        Deal two hole cards to each player, in seat order.

        Raises:
            GameError: If cards were already dealt this hand.
            DeckExhausted: If the deck cannot cover every player.
        """
        self._ensure_not_settled()
        if self.cards_dealt:
            raise GameError("Hole cards have already been dealt")

        needed = HOLE_CARDS * self.num_players
        if self.deck.remaining < needed:
            raise DeckExhausted(f"Need {needed} cards to deal, only {self.deck.remaining} remain")

        for player in self.players:
            player.deal([self.deck.draw() for _ in range(HOLE_CARDS)])

        self.cards_dealt = True
        self._log_action("DEAL", {"players": [p.name for p in self.players]})

    def betting_round(self) -> BettingRound:
        """
        Run one betting round for the current phase.

        Every non-folded player is asked for a decision in seat order. A bet
        or raise puts the flat bet amount into the pot, a fold takes the
        player out of the hand, anything else passes. A bet the player cannot
        cover is rejected and treated as a check.

        Returns:
            The closed BettingRound
        """
        self._ensure_not_settled()
        logger.info(f"Starting {self.phase.value} betting round...")

        betting_round = BettingRound(self.phase, self.players)
        for player in betting_round.players_in_round:
            decision = player.make_decision(self.get_state(for_player=player))

            if decision in BETTING_DECISIONS:
                try:
                    player.place_bet(self.bet_amount)
                except InsufficientChips as e:
                    logger.warning(f"Bet rejected: {e}")
                    self._log_action("REJECTED", {"player": player.name, "amount": self.bet_amount})
                    continue
                betting_round.place_bet(player, self.bet_amount)
                self.pot += self.bet_amount
            elif decision == Decision.FOLD:
                player.fold()

            self._log_action(decision.name, {
                "player": player.name,
                "amount": self.bet_amount if decision in BETTING_DECISIONS else 0,
            })

        betting_round.process_actions()
        self.rounds.append(betting_round)

        self.state.round_number += 1
        self.state.update_active_players(self.players)
        return betting_round

    def next_phase(self) -> GamePhase:
        """
        Advance one phase and deal that phase's community cards.

        Returns:
            The new phase

        Raises:
            InvalidPhaseTransition: If the hand is already at the showdown.
        """
        self._ensure_not_settled()
        new_phase = get_next_phase(self.phase)
        if new_phase is None:
            raise InvalidPhaseTransition(f"Cannot advance past {self.phase.value}")

        count = COMMUNITY_CARDS_FOR_PHASE.get(new_phase, 0)
        if count:
            self.deck.burn()
            self.community_cards.extend(self.deck.deal(count))

        self.phase = new_phase
        self.state.update_phase(new_phase)
        self._log_action("PHASE", {"cards": [str(c) for c in self.community_cards]})
        return new_phase

    def determine_winner(self) -> Player:
        """
        Pick the player with the highest placeholder score.

        Every seated player is scored, folded or not. Folding only stops a
        player from betting. Ties go to the player seated first.

        Raises:
            GameError: If hole cards have not been dealt.
        """
        if not self.cards_dealt:
            raise GameError("Cannot determine a winner before cards are dealt")

        winner: Optional[Player] = None
        best_score = -1
        for player in self.players:
            score = score_hand(player.hand)
            if score > best_score:
                best_score = score
                winner = player
        return winner

    def end_game(self) -> HandResult:
        """
        Settle the hand.

        The winner is credited the whole pot, every other player is debited
        the loss penalty, and each human player gets a history record. The
        table state is reset afterwards.

        Raises:
            GameError: If the hand was already settled.
        """
        self._ensure_not_settled()
        winner = self.determine_winner()
        logger.info(f"The winner is {winner.name}!")
        logger.info(f"Hand: {', '.join(str(c) for c in winner.hand)}")
        logger.info(f"Win the pot of {self.pot} chips.")

        date_time = datetime.now(timezone.utc).isoformat()
        payouts: Dict[str, int] = {}
        for player in self.players:
            amount = self.pot if player is winner else -self.loss_penalty
            payouts[player.name] = amount
            self.accounts.update_chips(player.name, amount)

        for player in self.players:
            if isinstance(player, HumanPlayer):
                self.accounts.save_game_result(
                    player.name,
                    self.game_id,
                    date_time,
                    self.num_players,
                    payouts[player.name],
                )

        self.result = HandResult(
            game_id=self.game_id,
            winner=winner.name,
            winning_hand=list(winner.hand),
            score=score_hand(winner.hand),
            pot=self.pot,
            phase=self.phase,
            date_time=date_time,
            payouts=payouts,
        )
        self.settled = True
        self._log_action("SETTLE", {"winner": winner.name, "amount": self.pot})

        self.state.reset_game()
        return self.result

    def play_game(self) -> HandResult:
        """
        Play the hand to the end.

        Deals (unless already dealt), then checks the end conditions before
        every betting round, so no round is played once the hand is over.
        """
        self._ensure_not_settled()
        if not self.cards_dealt:
            self.deal_cards()

        while not self.state.check_end_conditions():
            self.betting_round()
            self.next_phase()

        return self.end_game()

    def get_state(self, for_player: Optional[Player] = None) -> Dict[str, Any]:
        """
        Get a snapshot of the hand.

        Args:
            for_player: If given, include that player's private information

        Returns:
            Dictionary with public_info and private_info
        """
        public_info = {
            "game_id": self.game_id,
            "phase": self.phase.value,
            "round_number": self.state.round_number,
            "pot": self.pot,
            "bet_amount": self.bet_amount,
            "board": [c.to_dict() for c in self.community_cards],
            "dealer": self.dealer.name,
            "players": [p.to_dict() for p in self.players],
            "active_players": [p.name for p in self.active_players],
        }

        private_info = {}
        if for_player is not None:
            private_info = {
                "name": for_player.name,
                "hand": [c.to_dict() for c in for_player.hand],
                "chips": for_player.chips,
            }

        return {
            "public_info": public_info,
            "private_info": private_info,
        }

    def _ensure_not_settled(self) -> None:
        if self.settled:
            raise GameError(f"Game {self.game_id} has already been settled")

    def _log_action(self, action: str, details: Dict[str, Any]) -> None:
        """Log an action to hand history."""
        self.hand_history.append({
            "action": action,
            "phase": self.phase.value,
            **details
        })

    def __repr__(self) -> str:
        return f"Game({self.game_id}, phase={self.phase.value}, pot={self.pot}, players={self.num_players})"
