"""
Card and Deck classes for PokerRoom.

Ranks carry their poker ordinal (2-14, Ace high). Suits carry a weight
(Clubs=1 up to Spades=4) that is only used to break ties in the table's
placeholder scoring; it has no meaning in real poker.
"""

from __future__ import annotations
import random
from typing import List, Optional
from enum import IntEnum

from pokerroom.core.errors import DeckExhausted


class Suit(IntEnum):
    """Card suits, valued by their tie-break weight."""
    CLUBS = 1     # ♣
    DIAMONDS = 2  # ♦
    HEARTS = 3    # ♥
    SPADES = 4    # ♠


class Rank(IntEnum):
    """Card ranks, valued by their ordinal (Ace high)."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


# String mappings
SUIT_NAMES = {
    Suit.CLUBS: "Clubs",
    Suit.DIAMONDS: "Diamonds",
    Suit.HEARTS: "Hearts",
    Suit.SPADES: "Spades",
}

SUIT_SYMBOLS = {
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
}

SUIT_CHARS = {
    Suit.CLUBS: "c",
    Suit.DIAMONDS: "d",
    Suit.HEARTS: "h",
    Suit.SPADES: "s",
}

RANK_CHARS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

# Reverse mappings
CHAR_TO_RANK = {v: k for k, v in RANK_CHARS.items()}
CHAR_TO_RANK["T"] = Rank.TEN  # Also accept "T"
CHAR_TO_SUIT = {v: k for k, v in SUIT_CHARS.items()}
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}


class Card:
    """
    An immutable playing card.

    Build one directly or parse it:
        Card(Rank.ACE, Suit.SPADES)
        Card.from_string("As"), Card.from_string("10♥")

    Two cards are equal when rank and suit match.
    """

    __slots__ = ("_rank", "_suit")

    def __init__(self, rank: Rank, suit: Suit):
        self._rank = Rank(rank)
        self._suit = Suit(suit)

    @classmethod
    def from_string(cls, s: str) -> Card:
        """
        Parse a rank followed by a suit letter or symbol.

        Accepts formats:
        - "As", "Kh", "10d", "Td", "2c" (rank + suit char)
        - "A♠", "K♥", "10♦", "2♣" (rank + suit symbol)
        """
        s = s.strip()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_part = s[:-1].upper()
        suit_part = s[-1]

        if rank_part not in CHAR_TO_RANK:
            raise ValueError(f"Invalid rank: {rank_part}")

        rank = CHAR_TO_RANK[rank_part]

        # Letter or symbol
        if suit_part.lower() in CHAR_TO_SUIT:
            suit = CHAR_TO_SUIT[suit_part.lower()]
        elif suit_part in SYMBOL_TO_SUIT:
            suit = SYMBOL_TO_SUIT[suit_part]
        else:
            raise ValueError(f"Invalid suit: {suit_part}")

        return cls(rank, suit)

    @property
    def rank(self) -> Rank:
        return self._rank

    @property
    def suit(self) -> Suit:
        return self._suit

    @property
    def rank_value(self) -> int:
        """Rank ordinal, 2 through 14 (Ace)."""
        return int(self._rank)

    @property
    def suit_value(self) -> int:
        """Suit weight, Clubs=1 through Spades=4."""
        return int(self._suit)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Card):
            return self._rank == other._rank and self._suit == other._suit
        return False

    def __hash__(self) -> int:
        return hash((self._rank, self._suit))

    def __repr__(self) -> str:
        return f"Card({self.short_str})"

    def __str__(self) -> str:
        return f"{RANK_CHARS[self._rank]} of {SUIT_NAMES[self._suit]}"

    @property
    def short_str(self) -> str:
        """Short string like 'As', '10h'."""
        return f"{RANK_CHARS[self._rank]}{SUIT_CHARS[self._suit]}"

    @property
    def symbol_str(self) -> str:
        """Symbol string like 'A♠'."""
        return f"{RANK_CHARS[self._rank]}{SUIT_SYMBOLS[self._suit]}"

    @property
    def color(self) -> str:
        """Display colour of the suit."""
        return "red" if self._suit in (Suit.HEARTS, Suit.DIAMONDS) else "black"

    def to_dict(self) -> dict:
        """Serializable view used by the HTTP layer."""
        return {
            "rank": RANK_CHARS[self._rank],
            "suit": SUIT_NAMES[self._suit],
            "text": str(self),
            "symbol": self.symbol_str,
            "color": self.color,
        }


class Deck:
    """
    A standard 52-card deck. The top of the deck is the front of the list.

    Usage:
        deck = Deck()
        hole_cards = deck.deal(2)
        card = deck.draw()
    """

    def __init__(self, shuffle: bool = True, rng: Optional[random.Random] = None):
        """
        Initialize a new deck.

        Args:
            shuffle: Shuffle the deck after building it
            rng: Random source for shuffling (a fresh one if omitted)
        """
        self._rng = rng or random.Random()
        self.reset()
        if shuffle:
            self.shuffle()

    def reset(self) -> None:
        """Rebuild all 52 cards, suit by suit, twos first."""
        self._cards: List[Card] = [
            Card(rank, suit)
            for suit in Suit
            for rank in Rank
        ]
        self._dealt: List[Card] = []

    def shuffle(self) -> None:
        """Shuffle the remaining cards with a uniform (Fisher-Yates) permutation."""
        self._rng.shuffle(self._cards)

    def draw(self) -> Card:
        """
        Remove and return the top card.

        Raises:
            DeckExhausted: If the deck is empty.
        """
        if not self._cards:
            raise DeckExhausted("Cannot draw from an empty deck")

        card = self._cards.pop(0)
        self._dealt.append(card)
        return card

    def deal(self, n: int = 1) -> List[Card]:
        """
        Draw n cards at once, all or nothing.

        Raises:
            DeckExhausted: If not enough cards remain.
        """
        if n > len(self._cards):
            raise DeckExhausted(f"Cannot deal {n} cards, only {len(self._cards)} remain")

        return [self.draw() for _ in range(n)]

    def burn(self) -> Card:
        """Discard the top card face down."""
        return self.draw()

    @property
    def cards(self) -> List[Card]:
        """Remaining cards, top first."""
        return self._cards.copy()

    @property
    def remaining(self) -> int:
        """Cards left to draw."""
        return len(self._cards)

    @property
    def dealt_cards(self) -> List[Card]:
        """Cards drawn so far, in draw order."""
        return self._dealt.copy()

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Deck(remaining={self.remaining})"


def parse_cards(cards_str: str) -> List[Card]:
    """
    Parse space-separated cards, e.g. "As 10h Kd".

    Returns:
        List of Card objects
    """
    return [Card.from_string(s) for s in cards_str.split()]
