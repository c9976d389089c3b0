"""
Tests for the player classes.
"""

import pytest
from pokerroom.agents.strategies import aggressive_betting, cautious_betting
from pokerroom.core.errors import InsufficientChips, InvalidPlayerConstruction
from pokerroom.core.player import ComputerPlayer, HumanPlayer, Player
from pokerroom.core.rules import Decision


class TestPlayerConstruction:
    """Only the concrete variants can be instantiated."""

    def test_abstract_player_rejected(self):
        """Test Player cannot be instantiated."""
        with pytest.raises(InvalidPlayerConstruction):
            Player(name="nobody")

    def test_rejection_is_type_error(self):
        """Test the construction error is a TypeError."""
        with pytest.raises(TypeError):
            Player("nobody")

    def test_new_player_defaults(self):
        """Test a new player's defaults."""
        player = HumanPlayer(name="Mark")
        assert player.chips == 0
        assert player.hand == []
        assert player.folded is False
        assert player.is_active

    def test_computer_requires_strategy(self):
        """Test a computer player needs a strategy."""
        with pytest.raises(InvalidPlayerConstruction):
            ComputerPlayer(name="AI")


class TestPlayerActions:
    """Tests for fold, bet and dealing."""

    def test_fold_is_idempotent(self):
        """Test folding twice."""
        player = ComputerPlayer(name="AI", strategy=cautious_betting)
        player.fold()
        player.fold()
        assert player.folded
        assert not player.is_active

    def test_place_bet_reduces_delta(self):
        """Test bets lower the chip delta."""
        player = ComputerPlayer(name="AI", strategy=cautious_betting)
        player.place_bet(50)
        player.place_bet(50)
        assert player.chips == -100

    def test_reset_for_new_hand(self, ace_king):
        """Test resetting a player between hands."""
        player = ComputerPlayer(name="AI", strategy=cautious_betting)
        player.deal(ace_king)
        player.place_bet(50)
        player.fold()

        player.reset_for_new_hand()
        assert player.hand == []
        assert player.chips == 0
        assert not player.folded

    def test_deal_copies_cards(self, ace_king):
        """Test the dealt hand is a copy."""
        player = HumanPlayer(name="Mark")
        player.deal(ace_king)
        ace_king.pop()
        assert len(player.hand) == 2


class TestHumanPlayer:
    """Tests for human decisions and account-backed bets."""

    def test_default_decision_is_call(self, human):
        """Test a human without a decision source calls."""
        assert human.make_decision({}) == Decision.CALL

    def test_decision_source(self, human):
        """Test a human follows its decision source."""
        human.decision_source = lambda state: Decision.FOLD
        assert human.make_decision({}) == Decision.FOLD

    def test_decision_source_may_return_string(self, human):
        """Test decision names are converted to decisions."""
        human.decision_source = lambda state: "raise"
        assert human.make_decision({}) == Decision.RAISE

    def test_bet_within_balance(self, human):
        """Test a covered bet leaves the account untouched."""
        human.place_bet(50)
        assert human.chips == -50
        # The account is only touched at settlement
        assert human.account.chips == 10000

    def test_bet_exceeding_balance_rejected(self, human):
        """Test a bet beyond the uncommitted balance."""
        human.account.chips = 80
        human.place_bet(50)

        with pytest.raises(InsufficientChips) as exc_info:
            human.place_bet(50)

        assert exc_info.value.available == 30
        assert human.chips == -50

    def test_bet_without_account(self):
        """Test a human without an account can always bet."""
        player = HumanPlayer(name="Guest")
        player.place_bet(50)
        assert player.chips == -50

    def test_to_dict_hides_cards(self, human, ace_king):
        """Test player serialization hides hole cards by default."""
        human.deal(ace_king)
        assert "cards" not in human.to_dict()
        assert len(human.to_dict(hide_cards=False)["cards"]) == 2
        assert human.to_dict()["type"] == "human"


class TestComputerPlayer:
    """Computer decisions come from the bound strategy."""

    def test_delegates_to_strategy(self):
        """Test a computer decides through its strategy."""
        player = ComputerPlayer(name="AI", strategy=aggressive_betting)
        assert player.make_decision({"public_info": {}}) == Decision.RAISE

    def test_strategy_receives_snapshot(self):
        """Test the strategy is given the state snapshot."""
        seen = []

        def recording_strategy(game_state):
            seen.append(game_state)
            return Decision.CHECK

        player = ComputerPlayer(name="AI", strategy=recording_strategy)
        snapshot = {"public_info": {"phase": "flop"}}
        assert player.make_decision(snapshot) == Decision.CHECK
        assert seen == [snapshot]

    def test_strategy_can_be_swapped(self):
        """Test replacing a computer's strategy."""
        player = ComputerPlayer(name="AI", strategy=cautious_betting)
        player.strategy = aggressive_betting
        assert player.make_decision({}) == Decision.RAISE
