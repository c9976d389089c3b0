"""
In-memory player accounts.

Accounts hold the persistent chip balance and game history of human players.
The engine only talks to AccountManager through three calls:
get_player_account(), update_chips() and save_game_result().
"""

from __future__ import annotations
from typing import Dict, List, Optional, Any
from dataclasses import dataclass, field
from datetime import date
import logging

from pokerroom.core.errors import AgeRestriction
from pokerroom.core.rules import DEFAULT_STARTING_CHIPS, MIN_AGE


logger = logging.getLogger(__name__)


@dataclass
class GameHistory:
    """Record of one settled hand, from a single player's point of view."""
    game_id: str
    date_time: str
    num_players: int
    final_win_loss: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "game_id": self.game_id,
            "date_time": self.date_time,
            "num_players": self.num_players,
            "final_win_loss": self.final_win_loss,
        }

    def __str__(self) -> str:
        return (
            f"Game: {self.game_id}| Date: {self.date_time}| "
            f"Total Players: {self.num_players}| Win/Loss: {self.final_win_loss}"
        )


@dataclass
class PlayerAccount:
    """
    Persistent account data for a human player.

    Attributes:
        player_name: Unique account name
        email: Contact address
        password: Account password (kept out of repr)
        birthday: ISO date of birth
        chips: Current chip balance; may go negative
        history: Settled hands, oldest first
    """
    player_name: str
    email: str
    password: str = field(repr=False)
    birthday: str
    chips: int = DEFAULT_STARTING_CHIPS
    history: List[GameHistory] = field(default_factory=list)

    def add_chips(self, amount: int) -> None:
        self.chips += amount

    def deduct_chips(self, amount: int) -> None:
        self.chips -= amount

    def save_game_result(
        self,
        game_id: str,
        date_time: str,
        num_players: int,
        final_win_loss: int,
    ) -> GameHistory:
        """Append a history record for a settled hand."""
        record = GameHistory(game_id, date_time, num_players, final_win_loss)
        self.history.append(record)
        return record

    def get_chip_balance(self) -> int:
        return self.chips

    def get_history(self) -> List[GameHistory]:
        return list(self.history)

    def to_dict(self) -> Dict[str, Any]:
        """Public account information (no password)."""
        return {
            "player_name": self.player_name,
            "email": self.email,
            "chips": self.chips,
            "history": [record.to_dict() for record in self.get_history()],
        }


def calculate_age(birthday: date, today: date) -> int:
    """Age in whole years on `today`."""
    age = today.year - birthday.year
    if (today.month, today.day) < (birthday.month, birthday.day):
        age -= 1
    return age


class AccountManager:
    """
    Store of all human player accounts, indexed by player name.

    One instance is created by the caller and shared by every game that
    should settle against the same balances.
    """

    def __init__(self):
        self.accounts: Dict[str, PlayerAccount] = {}

    def create_account(
        self,
        player_name: str,
        email: str,
        password: str,
        birthday: str,
        initial_chips: int = DEFAULT_STARTING_CHIPS,
        today: Optional[date] = None,
    ) -> PlayerAccount:
        """
        Create an account for a new player.

        Creating an account for a name that already exists leaves the
        existing account untouched and returns it.

        Args:
            player_name: Unique player name
            email: Contact address
            password: Account password
            birthday: Date of birth as "YYYY-MM-DD"
            initial_chips: Starting balance
            today: Reference date for the age check (defaults to today)

        Raises:
            AgeRestriction: If the player is younger than MIN_AGE.
            ValueError: If birthday is not an ISO date.
        """
        age = calculate_age(date.fromisoformat(birthday), today or date.today())
        if age < MIN_AGE:
            raise AgeRestriction(f"Player must be at least {MIN_AGE} years old")

        if player_name in self.accounts:
            logger.debug(f"Account for {player_name} already exists")
            return self.accounts[player_name]

        account = PlayerAccount(
            player_name=player_name,
            email=email,
            password=password,
            birthday=birthday,
            chips=initial_chips,
        )
        self.accounts[player_name] = account
        logger.info(f"Created account for {player_name} with {initial_chips} chips")
        return account

    def get_player_account(self, player_name: str) -> Optional[PlayerAccount]:
        """Get a player's account, or None if there is none."""
        return self.accounts.get(player_name)

    def update_chips(self, player_name: str, amount: int) -> None:
        """
        Apply a signed chip change to a player's balance.

        Positive amounts credit, zero or negative amounts debit. Names
        without an account (computer players) are ignored.
        """
        account = self.get_player_account(player_name)
        if account is None:
            return

        if amount > 0:
            account.add_chips(amount)
        else:
            account.deduct_chips(abs(amount))

    def save_game_result(
        self,
        player_name: str,
        game_id: str,
        date_time: str,
        num_players: int,
        final_win_loss: int,
    ) -> None:
        """Record a settled hand in a player's history, if they have an account."""
        account = self.get_player_account(player_name)
        if account is not None:
            account.save_game_result(game_id, date_time, num_players, final_win_loss)

    def __len__(self) -> int:
        return len(self.accounts)
