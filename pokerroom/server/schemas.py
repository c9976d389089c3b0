"""
Pydantic schemas for API request/response validation.
"""

from datetime import date
from typing import List, Optional, Dict
from pydantic import BaseModel, Field

from pokerroom.core.rules import DEFAULT_STARTING_CHIPS, MAX_PLAYERS


# ============= Request Schemas =============

class CreateAccountRequest(BaseModel):
    """Request to open a player account."""
    player_name: str = Field(..., min_length=1)
    email: str
    password: str = Field(..., min_length=1)
    birthday: date
    initial_chips: int = Field(default=DEFAULT_STARTING_CHIPS, ge=0)


class SetAIPlayersRequest(BaseModel):
    """Request to (re)seat the computer players."""
    count: int = Field(ge=0, le=MAX_PLAYERS - 1, default=2)


class DifficultyRequest(BaseModel):
    """Request to change a difficulty level."""
    difficulty: str = Field(..., description="Difficulty: Easy, Medium or Hard")


class PlayRequest(BaseModel):
    """Request to play one hand."""
    player_name: str
    decision: str = Field(default="call", description="Decision the human makes every round: check, call, bet, raise, fold")


# ============= Response Schemas =============

class CardSchema(BaseModel):
    """Card representation."""
    rank: str
    suit: str
    text: str
    symbol: str
    color: str


class GameHistorySchema(BaseModel):
    """One settled hand in an account's history."""
    game_id: str
    date_time: str
    num_players: int
    final_win_loss: int


class AccountSchema(BaseModel):
    """Public account information."""
    player_name: str
    email: str
    chips: int
    history: List[GameHistorySchema] = []


class AIPlayerSchema(BaseModel):
    """A computer seat."""
    name: str
    strategy: str


class RoomInfoSchema(BaseModel):
    """Room configuration."""
    difficulty: str
    ai_players: List[AIPlayerSchema]


class HandResultSchema(BaseModel):
    """Outcome of a settled hand."""
    game_id: str
    winner: str
    winning_hand: List[CardSchema]
    score: int
    pot: int
    phase: str
    date_time: str
    payouts: Dict[str, int]


class LeaderboardEntrySchema(BaseModel):
    """A leaderboard line."""
    rank: int
    player_name: str
    chips: int


class MessageSchema(BaseModel):
    """Plain acknowledgement."""
    success: bool = True
    message: Optional[str] = None
