"""
Tests for player accounts and the account store.
"""

from datetime import date
import pytest
from pokerroom.core.accounts import AccountManager, GameHistory, PlayerAccount, calculate_age
from pokerroom.core.errors import AgeRestriction


class TestCreateAccount:
    """Tests for opening accounts."""

    def test_create_account(self):
        """Test opening an account with the default balance."""
        manager = AccountManager()
        account = manager.create_account("Mark", "mark@email.com", "password", "1990-01-01")

        assert account.player_name == "Mark"
        assert account.chips == 10000
        assert account.history == []
        assert manager.get_player_account("Mark") is account
        assert len(manager) == 1

    def test_initial_chips(self):
        """Test a custom starting balance."""
        manager = AccountManager()
        account = manager.create_account("Ann", "ann@email.com", "pw", "1980-03-02", initial_chips=500)
        assert account.chips == 500

    def test_existing_name_returned_unchanged(self, accounts):
        """Test re-creating an account returns the existing one untouched."""
        original = accounts.get_player_account("Mark")
        original.chips = 1234

        again = accounts.create_account("Mark", "other@email.com", "other", "1970-01-01")
        assert again is original
        assert again.email == "mark@email.com"
        assert again.chips == 1234
        assert len(accounts) == 1

    def test_underage_rejected(self):
        """Test players under 21 cannot open an account."""
        manager = AccountManager()
        with pytest.raises(AgeRestriction):
            manager.create_account("Kid", "kid@email.com", "pw", "2010-05-01", today=date(2026, 1, 1))
        assert manager.get_player_account("Kid") is None

    def test_age_boundary(self):
        """Test the 21st birthday is the first accepted day."""
        manager = AccountManager()
        with pytest.raises(AgeRestriction):
            manager.create_account("Almost", "a@email.com", "pw", "2000-06-15", today=date(2021, 6, 14))

        account = manager.create_account("Birthday", "b@email.com", "pw", "2000-06-15", today=date(2021, 6, 15))
        assert account.player_name == "Birthday"

    def test_age_restriction_is_value_error(self):
        """Test AgeRestriction is caught by ValueError handlers."""
        with pytest.raises(ValueError):
            AccountManager().create_account("Kid", "kid@email.com", "pw", "2020-01-01")

    def test_invalid_birthday(self):
        """Test a malformed birthday is rejected."""
        with pytest.raises(ValueError):
            AccountManager().create_account("Mark", "mark@email.com", "pw", "not-a-date")

    def test_calculate_age(self):
        """Test age counts whole years only."""
        assert calculate_age(date(1990, 1, 1), date(2020, 1, 1)) == 30
        assert calculate_age(date(1990, 12, 31), date(2020, 12, 30)) == 29


class TestChipUpdates:
    """Tests for signed chip changes."""

    def test_credit(self, accounts):
        """Test a positive update credits the balance."""
        accounts.update_chips("Mark", 300)
        assert accounts.get_player_account("Mark").chips == 10300

    def test_debit(self, accounts):
        """Test a negative update debits the balance."""
        accounts.update_chips("Mark", -25)
        assert accounts.get_player_account("Mark").chips == 9975

    def test_zero_is_noop(self, accounts):
        """Test a zero update leaves the balance alone."""
        accounts.update_chips("Mark", 0)
        assert accounts.get_player_account("Mark").chips == 10000

    def test_balance_may_go_negative(self, accounts):
        """Test balances are allowed below zero."""
        accounts.update_chips("Mark", -10025)
        assert accounts.get_player_account("Mark").get_chip_balance() == -25

    def test_unknown_name_ignored(self, accounts):
        """Test names without an account are ignored."""
        accounts.update_chips("AI_Player_1", 100)
        assert accounts.get_player_account("AI_Player_1") is None


class TestHistory:
    """Tests for per-hand history records."""

    def test_save_game_result(self, accounts):
        """Test saving a settled hand to an account."""
        accounts.save_game_result("Mark", "g1", "2026-01-01T00:00:00+00:00", 3, -25)
        history = accounts.get_player_account("Mark").get_history()

        assert history == [GameHistory("g1", "2026-01-01T00:00:00+00:00", 3, -25)]

    def test_history_is_ordered(self, accounts):
        """Test history keeps the oldest hand first."""
        account = accounts.get_player_account("Mark")
        account.save_game_result("g1", "t1", 2, -25)
        account.save_game_result("g2", "t2", 4, 150)
        assert [r.game_id for r in account.history] == ["g1", "g2"]

    def test_get_history_returns_copy(self, accounts):
        """Test callers cannot modify history through get_history."""
        account = accounts.get_player_account("Mark")
        account.get_history().append("junk")
        assert account.history == []

    def test_unknown_name_ignored(self, accounts):
        """Test names without an account are ignored."""
        accounts.save_game_result("Nobody", "g1", "t1", 2, 0)
        assert accounts.get_player_account("Nobody") is None

    def test_history_str(self):
        """Test the history line format."""
        record = GameHistory("g1", "2026-01-01", 3, -25)
        assert str(record) == "Game: g1| Date: 2026-01-01| Total Players: 3| Win/Loss: -25"


class TestPlayerAccount:
    """Tests for account serialisation."""

    def test_password_hidden(self):
        """Test the password never leaves the account."""
        account = PlayerAccount("Mark", "mark@email.com", "secret", "1990-01-01")
        assert "secret" not in repr(account)
        assert "password" not in account.to_dict()

    def test_to_dict(self, accounts):
        """Test account serialization."""
        account = accounts.get_player_account("Mark")
        account.save_game_result("g1", "t1", 2, 50)
        assert account.to_dict() == {
            "player_name": "Mark",
            "email": "mark@email.com",
            "chips": 10000,
            "history": [{"game_id": "g1", "date_time": "t1", "num_players": 2, "final_win_loss": 50}],
        }
