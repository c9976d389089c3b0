"""
Table rules and constants for PokerRoom.

The betting model is deliberately simple and non-competitive:

1. Every bet or raise is a flat BET_AMOUNT; there is no call-up-to-current-bet,
   no minimum raise, no side pots and no all-in handling.

2. At settlement the winner is credited the whole pot and every other player
   is debited LOSS_PENALTY, whatever they contributed. Chips are therefore not
   conserved across a hand.

3. Phases advance linearly: pre-flop, flop, turn, river, showdown.
"""

from enum import Enum
from typing import Optional


class GamePhase(Enum):
    """Phases of a hand, in the order they are played."""
    PRE_FLOP = "pre-flop"
    FLOP = "flop"
    TURN = "turn"
    RIVER = "river"
    SHOWDOWN = "showdown"


class Decision(Enum):
    """Decisions a player can hand back to the engine."""
    CHECK = "check"
    CALL = "call"
    BET = "bet"
    RAISE = "raise"
    FOLD = "fold"


# Decisions that put chips into the pot
BETTING_DECISIONS = (Decision.BET, Decision.RAISE)

PHASE_ORDER = (
    GamePhase.PRE_FLOP,
    GamePhase.FLOP,
    GamePhase.TURN,
    GamePhase.RIVER,
    GamePhase.SHOWDOWN,
)

# Default table settings
BET_AMOUNT = 50
LOSS_PENALTY = 25
DEFAULT_STARTING_CHIPS = 10000
MIN_AGE = 21
MIN_PLAYERS = 2

# Cards per phase
HOLE_CARDS = 2
FLOP_CARDS = 3
TURN_CARDS = 1
RIVER_CARDS = 1
TOTAL_COMMUNITY_CARDS = 5
BURN_CARDS = 3
DECK_SIZE = 52

# Seats the deck can serve through the river (22)
MAX_PLAYERS = (DECK_SIZE - BURN_CARDS - TOTAL_COMMUNITY_CARDS) // HOLE_CARDS

# Community cards dealt when entering each phase
COMMUNITY_CARDS_FOR_PHASE = {
    GamePhase.FLOP: FLOP_CARDS,
    GamePhase.TURN: TURN_CARDS,
    GamePhase.RIVER: RIVER_CARDS,
}


def get_next_phase(phase: GamePhase) -> Optional[GamePhase]:
    """
    Get the phase that follows `phase`.

    Returns:
        The next phase, or None when `phase` is the showdown
    """
    index = PHASE_ORDER.index(phase)
    if index + 1 >= len(PHASE_ORDER):
        return None
    return PHASE_ORDER[index + 1]
