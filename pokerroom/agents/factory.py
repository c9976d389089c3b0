"""
Player construction.

Callers never instantiate HumanPlayer or ComputerPlayer by hand; they ask
create_player() for a seat of a given type.
"""

from enum import Enum
from typing import Optional, Union
import logging

from pokerroom.agents.strategies import balanced_betting
from pokerroom.core.accounts import AccountManager
from pokerroom.core.errors import UnknownPlayerType
from pokerroom.core.player import ComputerPlayer, DecisionSource, HumanPlayer, Player


logger = logging.getLogger(__name__)


class PlayerType(Enum):
    """Kinds of seat a table can hold."""
    HUMAN = "human"
    COMPUTER = "computer"


def create_player(
    player_type: Union[str, PlayerType],
    name: str,
    strategy: Optional[DecisionSource] = None,
    accounts: Optional[AccountManager] = None,
    decision_source: Optional[DecisionSource] = None,
) -> Player:
    """
    Create a player of the given type.

    Args:
        player_type: "human" or "computer"
        name: Player name
        strategy: Betting strategy for computer players (balanced if omitted)
        accounts: Account store used to link a human player to their account
        decision_source: Optional decision policy for a human player

    Returns:
        A new HumanPlayer or ComputerPlayer

    Raises:
        UnknownPlayerType: If player_type is not recognised.
    """
    try:
        kind = PlayerType(player_type)
    except ValueError:
        raise UnknownPlayerType(f"Unknown player type: {player_type}") from None

    if kind == PlayerType.HUMAN:
        account = accounts.get_player_account(name) if accounts is not None else None
        if account is None:
            logger.warning(f"Human player {name} has no account")
        return HumanPlayer(name=name, account=account, decision_source=decision_source)

    return ComputerPlayer(name=name, strategy=strategy or balanced_betting)
