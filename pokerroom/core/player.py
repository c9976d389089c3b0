"""
Player classes for PokerRoom.

Player is abstract: a seat is always either a HumanPlayer, whose decisions
come from outside the engine, or a ComputerPlayer, whose decisions come from
its betting strategy. Both track, for the current hand:
- Chip delta (chips put in minus chips won, starts at 0)
- Hole cards
- Fold status
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Optional, Dict, Any, Callable, TYPE_CHECKING
from dataclasses import dataclass, field

from pokerroom.core.card import Card
from pokerroom.core.errors import InsufficientChips, InvalidPlayerConstruction
from pokerroom.core.rules import Decision

if TYPE_CHECKING:
    from pokerroom.core.accounts import PlayerAccount


# A decision policy: game state snapshot in, decision out
DecisionSource = Callable[[Dict[str, Any]], Decision]


@dataclass(eq=False)
class Player(ABC):
    """
    A seat at the table.

    Attributes:
        name: Player name, unique within a game
        chips: Chip delta for the current hand (negative once bets are placed)
        hand: The player's hole cards (0 or 2)
        folded: True once the player has folded this hand
    """
    name: str
    chips: int = 0
    hand: List[Card] = field(default_factory=list)
    folded: bool = False

    def __new__(cls, *args, **kwargs):
        if cls is Player:
            raise InvalidPlayerConstruction("Cannot construct Player instances directly")
        return super().__new__(cls)

    @abstractmethod
    def make_decision(self, game_state: Dict[str, Any]) -> Decision:
        """
        Choose a decision for the current betting round.

        Args:
            game_state: Snapshot from Game.get_state() for this player
        """

    def deal(self, cards: List[Card]) -> None:
        """Give the player their hole cards."""
        self.hand = list(cards)

    def place_bet(self, amount: int) -> None:
        """Take `amount` off the chip delta. No lower bound is enforced."""
        self.chips -= amount

    def fold(self) -> None:
        """Fold the hand. Folding twice has no further effect."""
        self.folded = True

    def reset_for_new_hand(self) -> None:
        """Reset player state for a new hand."""
        self.chips = 0
        self.hand = []
        self.folded = False

    @property
    def is_active(self) -> bool:
        """True while the player has not folded."""
        return not self.folded

    @property
    def player_type(self) -> str:
        return "player"

    def to_dict(self, hide_cards: bool = True) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Args:
            hide_cards: If True, don't include hole cards
        """
        result = {
            "name": self.name,
            "type": self.player_type,
            "chips": self.chips,
            "folded": self.folded,
        }

        if not hide_cards and self.hand:
            result["cards"] = [card.to_dict() for card in self.hand]

        return result

    def __str__(self) -> str:
        cards_str = ", ".join(str(c) for c in self.hand) if self.hand else "??"
        return f"{self.name} [{cards_str}]"


@dataclass(eq=False)
class HumanPlayer(Player):
    """
    A player controlled by a person.

    Decisions come from `decision_source` (a UI or input collaborator); with
    none attached the player always calls.
    """
    account: Optional[PlayerAccount] = None
    decision_source: Optional[DecisionSource] = field(default=None, repr=False)

    def make_decision(self, game_state: Dict[str, Any]) -> Decision:
        if self.decision_source is None:
            return Decision.CALL
        return Decision(self.decision_source(game_state))

    def place_bet(self, amount: int) -> None:
        """
        Bet against the linked account.

        Raises:
            InsufficientChips: If the account cannot cover the bet on top of
                what was already committed this hand.
        """
        if self.account is not None:
            available = self.account.chips + self.chips
            if amount > available:
                raise InsufficientChips(self.name, amount, available)
        super().place_bet(amount)

    @property
    def player_type(self) -> str:
        return "human"


@dataclass(eq=False)
class ComputerPlayer(Player):
    """A player whose decisions come from a betting strategy."""
    strategy: Optional[DecisionSource] = field(default=None, repr=False)

    def __post_init__(self):
        if self.strategy is None:
            raise InvalidPlayerConstruction(f"Computer player {self.name} needs a strategy")

    def make_decision(self, game_state: Dict[str, Any]) -> Decision:
        return Decision(self.strategy(game_state))

    @property
    def player_type(self) -> str:
        return "computer"
