"""Per-game search attributes, one frozen dataclass per GameKey.

Parsing is lenient: an absent or unparseable attribute becomes None and the
game's rule treats it as "cannot compare" rather than raising.
"""
import math
from collections.abc import Callable, Mapping
from dataclasses import asdict, dataclass
from typing import Any, Union

from src.mm_common.enums import GameKey


def _to_float(value: Any) -> float | None:
    # bool is an int subclass; {"elo": true} is not a rating
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def _to_label(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


@dataclass(frozen=True)
class DeadlockParams:
    rank: str | None = None

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "DeadlockParams":
        return cls(rank=_to_label(raw.get("rank")))


@dataclass(frozen=True)
class Dota2Params:
    rating: float | None = None  # MMR

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "Dota2Params":
        return cls(rating=_to_float(raw.get("rating")))


@dataclass(frozen=True)
class CS2Params:
    elo: float | None = None

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "CS2Params":
        return cls(elo=_to_float(raw.get("elo")))


@dataclass(frozen=True)
class ValorantParams:
    rank: str | int | None = None  # tier label ("GOLD_2") or ladder ordinal

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "ValorantParams":
        value = raw.get("rank")
        if isinstance(value, str) and value.strip().isdigit():
            value = int(value.strip())
        elif isinstance(value, float) and value.is_integer():
            value = int(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(rank=value)
        return cls(rank=_to_label(value))


@dataclass(frozen=True)
class RustParams:
    hours: float | None = None

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "RustParams":
        return cls(hours=_to_float(raw.get("hours")))


@dataclass(frozen=True)
class PubgParams:
    kd: float | None = None

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "PubgParams":
        return cls(kd=_to_float(raw.get("kd")))


GameParams = Union[DeadlockParams, Dota2Params, CS2Params, ValorantParams, RustParams, PubgParams]

PARAMS_BY_GAME: dict[GameKey, Callable[[Mapping[str, Any]], GameParams]] = {
    GameKey.DEADLOCK: DeadlockParams.from_raw,
    GameKey.DOTA2: Dota2Params.from_raw,
    GameKey.CS2: CS2Params.from_raw,
    GameKey.VALORANT: ValorantParams.from_raw,
    GameKey.RUST: RustParams.from_raw,
    GameKey.PUBG: PubgParams.from_raw,
}


def parse_params(game: GameKey, raw: Mapping[str, Any] | None) -> GameParams:
    """Build the params variant selected by ``game``. Never raises on bad values."""
    if not isinstance(raw, Mapping):
        raw = {}
    return PARAMS_BY_GAME[game](raw)


def params_to_dict(params: GameParams) -> dict[str, Any]:
    return asdict(params)
