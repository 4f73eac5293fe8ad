"""Matchmaking queue REST endpoints.

POST /queue/join         : enter a game's waiting pool
POST /queue/leave        : leave the pool (always ok)
POST /queue/check        : poll for a match
GET  /queue/count        : players searching across all games
GET  /queue/count/{game} : players searching in one game
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.mm_common.response import ApiResponse, success_response
from src.mm_matching.application.schemas import (
    CheckMatchResponse,
    JoinQueueRequest,
    MatchOut,
    OkResponse,
    PlayerGameRequest,
    SearchingByGameResponse,
    TotalSearchingResponse,
)
from src.mm_matching.application.service import get_matchmaking_engine
from src.mm_matching.engine.engine import MatchmakingEngine

router = APIRouter(prefix="/queue", tags=["queue"])

EngineDep = Annotated[MatchmakingEngine, Depends(get_matchmaking_engine)]


def _respond(request: Request, data: object) -> ApiResponse:
    return success_response(data, getattr(request.state, "request_id", None))


@router.post("/join")
async def join_queue(req: JoinQueueRequest, request: Request, engine: EngineDep) -> ApiResponse:
    await engine.join(req.uid, req.game, req.params, req.ignored)
    return _respond(request, OkResponse().model_dump())


@router.post("/leave")
async def leave_queue(req: PlayerGameRequest, request: Request, engine: EngineDep) -> ApiResponse:
    await engine.leave(req.uid, req.game)
    return _respond(request, OkResponse().model_dump())


@router.post("/check")
async def check_match(req: PlayerGameRequest, request: Request, engine: EngineDep) -> ApiResponse:
    result = await engine.poll(req.uid, req.game)
    match = MatchOut.from_domain(result) if result is not None else None
    return _respond(request, CheckMatchResponse(match=match).model_dump())


@router.get("/count")
async def total_searching(request: Request, engine: EngineDep) -> ApiResponse:
    return _respond(request, TotalSearchingResponse(total=engine.count_total()).model_dump())


@router.get("/count/{game}")
async def searching_by_game(game: str, request: Request, engine: EngineDep) -> ApiResponse:
    count = engine.count_by_game(game)
    return _respond(request, SearchingByGameResponse(game=game, count=count).model_dump())
