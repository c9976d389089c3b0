"""
Pytest configuration and shared fixtures for PokerRoom tests.
"""

import pytest
from pokerroom.agents.strategies import balanced_betting
from pokerroom.core.accounts import AccountManager
from pokerroom.core.card import Card, Deck, Rank, Suit
from pokerroom.core.game import Game
from pokerroom.core.player import ComputerPlayer, HumanPlayer
from pokerroom.core.state import GameState


@pytest.fixture
def deck():
    """Create a fresh shuffled deck."""
    return Deck(shuffle=True)


@pytest.fixture
def unshuffled_deck():
    """
    Create a fresh unshuffled deck.

    Cards come off the top in suit order (clubs, diamonds, hearts, spades),
    each suit from 2 up to Ace.
    """
    return Deck(shuffle=False)


@pytest.fixture
def accounts():
    """Account store with one adult player, Mark, holding 10000 chips."""
    manager = AccountManager()
    manager.create_account("Mark", "mark@email.com", "password", "1990-01-01")
    return manager


@pytest.fixture
def human(accounts):
    """Human player linked to Mark's account."""
    return HumanPlayer(name="Mark", account=accounts.get_player_account("Mark"))


@pytest.fixture
def computers():
    """Two computer players on the balanced strategy."""
    return [
        ComputerPlayer(name="AI_Player_1", strategy=balanced_betting),
        ComputerPlayer(name="AI_Player_2", strategy=balanced_betting),
    ]


@pytest.fixture
def state():
    """A fresh table state."""
    return GameState()


@pytest.fixture
def three_player_game(human, computers, accounts, state, unshuffled_deck):
    """
    Human plus two balanced computers, dealing from an unshuffled deck.

    After deal_cards(): Mark holds 2♣ 3♣, AI_Player_1 4♣ 5♣,
    AI_Player_2 6♣ 7♣.
    """
    return Game(
        [human, *computers],
        accounts=accounts,
        state=state,
        deck=unshuffled_deck,
        game_id="hand-1",
    )


@pytest.fixture
def ace_king():
    """Ace of spades and king of hearts."""
    return [Card(Rank.ACE, Suit.SPADES), Card(Rank.KING, Suit.HEARTS)]
