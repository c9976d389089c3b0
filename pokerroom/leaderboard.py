"""
Leaderboard of player accounts ranked by chip balance.
"""

from typing import List, Dict, Any

from pokerroom.core.accounts import AccountManager, PlayerAccount


class Leaderboard:
    """Read-only rankings over an AccountManager."""

    def __init__(self, accounts: AccountManager):
        self.accounts = accounts

    def get_rankings(self) -> List[PlayerAccount]:
        """Accounts sorted by chip balance, highest first."""
        return sorted(self.accounts.accounts.values(), key=lambda a: a.get_chip_balance(), reverse=True)

    def display_leaderboard(self) -> str:
        """One line per account: '<rank>. <name> - <chips> chips'."""
        return "\n".join(
            f"{index}. {account.player_name} - {account.chips} chips"
            for index, account in enumerate(self.get_rankings(), start=1)
        )

    def to_list(self) -> List[Dict[str, Any]]:
        return [
            {"rank": index, "player_name": account.player_name, "chips": account.chips}
            for index, account in enumerate(self.get_rankings(), start=1)
        ]
