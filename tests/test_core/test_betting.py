"""
Tests for BettingRound.
"""

import pytest
from pokerroom.agents.strategies import balanced_betting
from pokerroom.core.betting import BettingRound
from pokerroom.core.errors import GameError
from pokerroom.core.player import ComputerPlayer
from pokerroom.core.rules import GamePhase


@pytest.fixture
def players():
    return [
        ComputerPlayer(name="A", strategy=balanced_betting),
        ComputerPlayer(name="B", strategy=balanced_betting),
        ComputerPlayer(name="C", strategy=balanced_betting),
    ]


class TestBettingRound:
    """Tests for bet recording and round closing."""

    def test_initial_state(self, players):
        """Test a new round has no bets."""
        round_ = BettingRound(GamePhase.PRE_FLOP, players)
        assert round_.current_bet == 0
        assert round_.players_in_round == players
        assert round_.total == 0
        assert not round_.closed

    def test_folded_players_not_in_round(self, players):
        """Test folded players are left out of the round."""
        players[1].fold()
        round_ = BettingRound(GamePhase.FLOP, players)
        assert [p.name for p in round_.players_in_round] == ["A", "C"]

    def test_place_bet_sets_current_bet(self, players):
        """Test a bet becomes the current bet."""
        round_ = BettingRound(GamePhase.FLOP, players)
        round_.place_bet(players[0], 50)
        assert round_.current_bet == 50
        assert round_.contribution("A") == 50

    def test_no_call_discipline(self, players):
        """A smaller bet simply becomes the new current bet."""
        round_ = BettingRound(GamePhase.FLOP, players)
        round_.place_bet(players[0], 100)
        round_.place_bet(players[1], 50)
        assert round_.current_bet == 50
        assert round_.contributions == {"A": 100, "B": 50}
        assert round_.total == 150

    def test_bets_record_phase(self, players):
        """Test each bet records its phase and player."""
        round_ = BettingRound(GamePhase.TURN, players)
        round_.place_bet(players[2], 50)
        assert round_.bets[0].phase == GamePhase.TURN
        assert round_.bets[0].player_name == "C"

    def test_process_actions_closes_round(self, players):
        """Test betting into a closed round fails."""
        round_ = BettingRound(GamePhase.RIVER, players)
        round_.place_bet(players[0], 50)
        round_.process_actions()
        assert round_.closed

        with pytest.raises(GameError):
            round_.place_bet(players[1], 50)
        assert round_.total == 50

    def test_round_without_players(self):
        """Test an empty round can still be closed."""
        round_ = BettingRound()
        round_.process_actions()
        assert round_.closed
        assert round_.players_in_round == []
