"""
HTTP API Routes for PokerRoom.

Each application instance keeps one account store and one room on
`app.state`; routes reach them through the request.
"""

from typing import List
from fastapi import APIRouter, HTTPException, Request

from pokerroom.agents.factory import PlayerType, create_player
from pokerroom.agents.strategies import strategy_name
from pokerroom.core.accounts import AccountManager
from pokerroom.core.errors import AgeRestriction, PokerError, UnknownStrategyType
from pokerroom.core.rules import Decision
from pokerroom.leaderboard import Leaderboard
from pokerroom.room import GameRoom
from pokerroom.server.schemas import (
    CreateAccountRequest, SetAIPlayersRequest, DifficultyRequest, PlayRequest,
    AccountSchema, RoomInfoSchema, HandResultSchema, LeaderboardEntrySchema,
    MessageSchema,
)

router = APIRouter()


def get_accounts(request: Request) -> AccountManager:
    """Get the application's account store."""
    return request.app.state.accounts


def get_room(request: Request) -> GameRoom:
    """Get the application's game room."""
    return request.app.state.room


def room_info(room: GameRoom) -> RoomInfoSchema:
    return RoomInfoSchema(
        difficulty=room.game_difficulty.value,
        ai_players=[
            {"name": p.name, "strategy": strategy_name(p.strategy)}
            for p in room.ai_players
        ],
    )


# ============= Accounts =============

@router.post("/accounts", response_model=AccountSchema)
async def create_account(req: CreateAccountRequest, request: Request):
    """Open an account. Existing names are returned unchanged."""
    accounts = get_accounts(request)
    try:
        account = accounts.create_account(
            req.player_name,
            req.email,
            req.password,
            req.birthday.isoformat(),
            initial_chips=req.initial_chips,
        )
    except AgeRestriction as e:
        raise HTTPException(status_code=400, detail=str(e))

    return account.to_dict()


@router.get("/accounts/{player_name}", response_model=AccountSchema)
async def get_account(player_name: str, request: Request):
    """Get an account's balance and history."""
    account = get_accounts(request).get_player_account(player_name)
    if account is None:
        raise HTTPException(status_code=404, detail=f"No account for {player_name}")
    return account.to_dict()


# ============= Room =============

@router.get("/room", response_model=RoomInfoSchema)
async def get_room_info(request: Request):
    """Get the room configuration."""
    return room_info(get_room(request))


@router.post("/room/ai_players", response_model=RoomInfoSchema)
async def set_ai_players(req: SetAIPlayersRequest, request: Request):
    """Seat a fresh set of computer players."""
    room = get_room(request)
    room.set_ai_players(req.count)
    return room_info(room)


@router.post("/room/difficulty", response_model=RoomInfoSchema)
async def set_difficulty(req: DifficultyRequest, request: Request):
    """Set the table difficulty for every computer seat."""
    room = get_room(request)
    try:
        room.set_game_difficulty(req.difficulty)
    except UnknownStrategyType as e:
        raise HTTPException(status_code=400, detail=str(e))
    return room_info(room)


@router.post("/room/ai_players/{index}/strategy", response_model=RoomInfoSchema)
async def modify_ai_strategy(index: int, req: DifficultyRequest, request: Request):
    """Change one computer seat's strategy."""
    room = get_room(request)
    if not 0 <= index < room.num_ai_players:
        raise HTTPException(status_code=404, detail=f"No AI player at index {index}")
    try:
        room.modify_ai_strategy(index, req.difficulty)
    except UnknownStrategyType as e:
        raise HTTPException(status_code=400, detail=str(e))
    return room_info(room)


@router.delete("/room/ai_players/{index}", response_model=RoomInfoSchema)
async def remove_ai_player(index: int, request: Request):
    """Remove a computer seat."""
    room = get_room(request)
    if not 0 <= index < room.num_ai_players:
        raise HTTPException(status_code=404, detail=f"No AI player at index {index}")
    room.remove_ai_player(index)
    return room_info(room)


# ============= Play =============

@router.post("/play", response_model=HandResultSchema)
async def play(req: PlayRequest, request: Request):
    """
    Play one full hand for a human account against the seated computers.

    The human makes the same decision in every betting round.
    """
    accounts = get_accounts(request)
    room = get_room(request)

    if accounts.get_player_account(req.player_name) is None:
        raise HTTPException(status_code=404, detail=f"No account for {req.player_name}")

    try:
        decision = Decision(req.decision.strip().lower())
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid decision: {req.decision}")

    human = create_player(
        PlayerType.HUMAN,
        req.player_name,
        accounts=accounts,
        decision_source=lambda state: decision,
    )

    try:
        game = room.start_game(human)
        result = game.play_game()
    except PokerError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return result.to_dict()


@router.get("/leaderboard", response_model=List[LeaderboardEntrySchema])
async def leaderboard(request: Request):
    """Accounts ranked by chip balance."""
    return Leaderboard(get_accounts(request)).to_list()


@router.post("/reset", response_model=MessageSchema)
async def reset(request: Request):
    """
    Reset the room and drop all accounts (for development/testing).
    """
    request.app.state.accounts = AccountManager()
    request.app.state.room = GameRoom(request.app.state.accounts)
    return MessageSchema(message="Room reset")
