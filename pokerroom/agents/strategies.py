"""
Betting strategies for computer players.

A strategy is a plain function taking the game state snapshot a player sees
(see Game.get_state) and returning a Decision. Strategies hold no state, so
a single function can back any number of players.

Difficulty levels map onto strategies:
    Easy   -> cautious_betting   (always checks)
    Medium -> balanced_betting   (always calls)
    Hard   -> aggressive_betting (always raises)
"""

from enum import Enum
from typing import Dict, Any, Optional, Union
import logging

from pokerroom.core.errors import UnknownStrategyType
from pokerroom.core.player import DecisionSource
from pokerroom.core.rules import Decision


logger = logging.getLogger(__name__)


class Difficulty(Enum):
    """Table difficulty, selecting the strategy of computer players."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


DEFAULT_DIFFICULTY = Difficulty.MEDIUM


def cautious_betting(game_state: Dict[str, Any]) -> Decision:
    """A decision-maker unwilling to take risks."""
    logger.debug("Make a cautious bet.")
    return Decision.CHECK


def balanced_betting(game_state: Dict[str, Any]) -> Decision:
    """A decision-maker that balances risk-taking."""
    logger.debug("Make a balanced bet.")
    return Decision.CALL


def aggressive_betting(game_state: Dict[str, Any]) -> Decision:
    """A decision-maker willing to take risks."""
    logger.debug("Make an aggressive bet.")
    return Decision.RAISE


STRATEGIES: Dict[Difficulty, DecisionSource] = {
    Difficulty.EASY: cautious_betting,
    Difficulty.MEDIUM: balanced_betting,
    Difficulty.HARD: aggressive_betting,
}

STRATEGY_NAMES = {
    cautious_betting: "cautious",
    balanced_betting: "balanced",
    aggressive_betting: "aggressive",
}


def parse_difficulty(difficulty: Union[str, Difficulty, None]) -> Difficulty:
    """
    Normalise a difficulty given as an enum or a case-insensitive name.

    Raises:
        UnknownStrategyType: If the name is not a known difficulty.
    """
    if difficulty is None:
        return DEFAULT_DIFFICULTY
    if isinstance(difficulty, Difficulty):
        return difficulty
    try:
        return Difficulty(str(difficulty).strip().lower())
    except ValueError:
        raise UnknownStrategyType(f"Unknown strategy type: {difficulty}") from None


def get_strategy(difficulty: Union[str, Difficulty, None] = None) -> DecisionSource:
    """
    Get the strategy for a difficulty level (Medium when omitted).

    Raises:
        UnknownStrategyType: If the difficulty is not recognised.
    """
    return STRATEGIES[parse_difficulty(difficulty)]


def strategy_name(strategy: Optional[DecisionSource]) -> str:
    """Display name of a strategy; 'custom' for functions not listed here."""
    return STRATEGY_NAMES.get(strategy, "custom")
