"""Pydantic schemas for the matchmaking queue API.

``uid`` and ``game`` are optional on purpose: a missing value reaches the
engine and comes back as InvalidRequest (HTTP 400, code 1xxx), the same as an
unknown game. Numeric ids are read as strings; any other malformed body is
mapped to InvalidRequest by the validation handler in src/main.py.
"""

from typing import Any

from pydantic import BaseModel, field_validator

from src.mm_matching.domain.models import MatchResult
from src.mm_matching.domain.params import params_to_dict


def _identity_to_str(v: Any) -> Any:
    # some clients send numeric player ids; bool is not an id
    if isinstance(v, int) and not isinstance(v, bool):
        return str(v)
    return v


class JoinQueueRequest(BaseModel):
    uid: str | None = None
    game: str | None = None
    params: dict[str, Any] | None = None
    ignored: list[Any] | None = None

    @field_validator("uid", mode="before")
    @classmethod
    def uid_as_str(cls, v: Any) -> Any:
        return _identity_to_str(v)

    @field_validator("ignored", mode="before")
    @classmethod
    def ignored_ids_as_str(cls, v: Any) -> Any:
        if isinstance(v, list):
            return [_identity_to_str(i) for i in v]
        return v


class PlayerGameRequest(BaseModel):
    """Body shared by /leave and /check."""

    uid: str | None = None
    game: str | None = None

    @field_validator("uid", mode="before")
    @classmethod
    def uid_as_str(cls, v: Any) -> Any:
        return _identity_to_str(v)


class OkResponse(BaseModel):
    ok: bool = True


class MatchOut(BaseModel):
    match_id: str
    game: str
    opponent_uid: str
    opponent_params: dict[str, Any]
    matched_at: str

    @classmethod
    def from_domain(cls, result: MatchResult) -> "MatchOut":
        return cls(
            match_id=result.match_id,
            game=result.game.value,
            opponent_uid=result.opponent_identity,
            opponent_params=params_to_dict(result.opponent_params),
            matched_at=result.matched_at.isoformat(),
        )


class CheckMatchResponse(BaseModel):
    match: MatchOut | None


class TotalSearchingResponse(BaseModel):
    total: int


class SearchingByGameResponse(BaseModel):
    game: str
    count: int
