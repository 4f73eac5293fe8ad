"""Per-game compatibility rules and their tolerance schedules.

Each rule compares two params variants of the same game and answers whether
their distance fits the tolerance for the initiator's elapsed search time.
A missing or unparseable attribute on either side yields False.
"""
from collections.abc import Callable
from typing import Any

from src.mm_common.enums import GameKey
from src.mm_matching.domain.params import (
    CS2Params,
    DeadlockParams,
    Dota2Params,
    PubgParams,
    RustParams,
    ValorantParams,
)
from src.mm_rules.ranks import DEADLOCK_RANK_ORDER, VALORANT_RANK_ORDER, rank_ordinal
from src.mm_rules.schedule import ToleranceSchedule

DEADLOCK_SCHEDULE = ToleranceSchedule(steps=((20, 1), (40, 2), (60, 3)), cap=5)
DOTA2_SCHEDULE = ToleranceSchedule(steps=((20, 250), (40, 500), (60, 750)), cap=1000)
CS2_SCHEDULE = ToleranceSchedule(steps=((20, 100), (40, 200), (60, 300)), cap=500)
VALORANT_SCHEDULE = ToleranceSchedule(steps=((20, 2), (40, 3), (60, 4)), cap=6)
RUST_SCHEDULE = ToleranceSchedule(steps=((20, 0.20), (40, 0.35), (60, 0.50)), cap=0.75)
PUBG_SCHEDULE = ToleranceSchedule(steps=((20, 0.5), (40, 0.75), (60, 1.0)), cap=1.5)

SCHEDULES: dict[GameKey, ToleranceSchedule] = {
    GameKey.DEADLOCK: DEADLOCK_SCHEDULE,
    GameKey.DOTA2: DOTA2_SCHEDULE,
    GameKey.CS2: CS2_SCHEDULE,
    GameKey.VALORANT: VALORANT_SCHEDULE,
    GameKey.RUST: RUST_SCHEDULE,
    GameKey.PUBG: PUBG_SCHEDULE,
}


def _within(distance: float, schedule: ToleranceSchedule, search_time: float) -> bool:
    return distance <= schedule.tolerance(search_time)


def _absolute(a: float | None, b: float | None) -> float | None:
    if a is None or b is None:
        return None
    return abs(a - b)


def match_deadlock(me: DeadlockParams, other: DeadlockParams, search_time: float) -> bool:
    distance = _absolute(
        rank_ordinal(DEADLOCK_RANK_ORDER, me.rank),
        rank_ordinal(DEADLOCK_RANK_ORDER, other.rank),
    )
    return distance is not None and _within(distance, DEADLOCK_SCHEDULE, search_time)


def match_dota2(me: Dota2Params, other: Dota2Params, search_time: float) -> bool:
    distance = _absolute(me.rating, other.rating)
    return distance is not None and _within(distance, DOTA2_SCHEDULE, search_time)


def match_cs2(me: CS2Params, other: CS2Params, search_time: float) -> bool:
    distance = _absolute(me.elo, other.elo)
    return distance is not None and _within(distance, CS2_SCHEDULE, search_time)


def _valorant_ordinal(rank: str | int | None) -> int | None:
    if isinstance(rank, int):
        return rank if 1 <= rank <= len(VALORANT_RANK_ORDER) else None
    return rank_ordinal(VALORANT_RANK_ORDER, rank)


def match_valorant(me: ValorantParams, other: ValorantParams, search_time: float) -> bool:
    distance = _absolute(_valorant_ordinal(me.rank), _valorant_ordinal(other.rank))
    return distance is not None and _within(distance, VALORANT_SCHEDULE, search_time)


def match_rust(me: RustParams, other: RustParams, search_time: float) -> bool:
    """Relative difference of hours played; both sides need positive hours."""
    h1, h2 = me.hours, other.hours
    if h1 is None or h2 is None or h1 <= 0 or h2 <= 0:
        return False
    distance = abs(h1 - h2) / max(h1, h2)
    return _within(distance, RUST_SCHEDULE, search_time)


def match_pubg(me: PubgParams, other: PubgParams, search_time: float) -> bool:
    distance = _absolute(me.kd, other.kd)
    return distance is not None and _within(distance, PUBG_SCHEDULE, search_time)


GAME_RULES: dict[GameKey, Callable[[Any, Any, float], bool]] = {
    GameKey.DEADLOCK: match_deadlock,
    GameKey.DOTA2: match_dota2,
    GameKey.CS2: match_cs2,
    GameKey.VALORANT: match_valorant,
    GameKey.RUST: match_rust,
    GameKey.PUBG: match_pubg,
}
