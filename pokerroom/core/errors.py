"""
Exceptions raised by the PokerRoom engine and its collaborators.

Errors that callers may reasonably branch on also derive from the built-in
exception they refine (ValueError, TypeError), so existing handlers keep
working.
"""


class PokerError(Exception):
    """Base class for all PokerRoom errors."""


class DeckExhausted(PokerError, ValueError):
    """A card was drawn from an empty deck. Fatal to the current hand."""


class InvalidPlayerConstruction(PokerError, TypeError):
    """The abstract Player was instantiated instead of a concrete variant."""


class InsufficientChips(PokerError):
    """A human player tried to bet more than their account can cover."""

    def __init__(self, player_name: str, amount: int, available: int):
        super().__init__(
            f"{player_name} cannot bet {amount} chips, only {available} available"
        )
        self.player_name = player_name
        self.amount = amount
        self.available = available


class UnknownPlayerType(PokerError, ValueError):
    """The player factory was given an unrecognised type tag."""


class UnknownStrategyType(PokerError, ValueError):
    """Strategy selection was given an unrecognised difficulty."""


class AgeRestriction(PokerError, ValueError):
    """An account was requested for a player below the minimum age."""


class GameError(PokerError):
    """The engine was driven in a way its state does not allow."""


class InvalidPhaseTransition(GameError):
    """next_phase() was called with no phase left to advance to."""
