"""MatchmakingEngine: stateful orchestrator for per-game waiting pools."""
import asyncio
import logging
import uuid
from collections.abc import Callable, Iterable, Mapping
from datetime import datetime
from typing import Any

from src.mm_common.datetime_utils import seconds_since, utc_now
from src.mm_common.enums import GameKey, parse_game
from src.mm_common.errors import MissingIdentityError, UnknownGameError
from src.mm_matching.domain.models import Entry, MatchResult
from src.mm_matching.domain.params import parse_params
from src.mm_matching.engine.matching_algo import find_opponent, remove_pair
from src.mm_matching.engine.pending_buffer import PendingBuffer
from src.mm_matching.engine.waiting_pool import WaitingPool

logger = logging.getLogger(__name__)


def _require_identity(identity: str | None) -> str:
    if not isinstance(identity, str) or not identity.strip():
        raise MissingIdentityError()
    return identity


def _new_match_id() -> str:
    return f"match_{uuid.uuid4().hex[:12]}"


class MatchmakingEngine:
    """Join / leave / poll over one waiting pool per game.

    Every call touching a pool holds that game's lock for its whole duration,
    so the scan-and-remove inside ``poll`` cannot race another join, leave or
    poll on the same pool. The pending buffer is locked separately.
    """

    def __init__(self, clock: Callable[[], datetime] = utc_now) -> None:
        self._clock = clock
        self._pools: dict[GameKey, WaitingPool] = {game: WaitingPool(game=game) for game in GameKey}
        self._pool_locks: dict[GameKey, asyncio.Lock] = {game: asyncio.Lock() for game in GameKey}
        self._pending = PendingBuffer()

    def _get_pool(self, game: GameKey) -> WaitingPool:
        return self._pools[game]

    async def join(
        self,
        identity: str | None,
        game: str | GameKey | None,
        params: Mapping[str, Any] | None = None,
        ignored: Iterable[str] | None = None,
    ) -> None:
        """Start (or restart) a search. A rejoin voids any undelivered match."""
        identity = _require_identity(identity)
        game_key = parse_game(game)
        entry = Entry(
            identity=identity,
            game=game_key,
            params=parse_params(game_key, params),
            enqueued_at=self._clock(),
            ignored=frozenset(i for i in (ignored or ()) if isinstance(i, str)),
        )
        async with self._pool_locks[game_key]:
            if self._pending.discard(identity):
                logger.info(
                    "Player %s rejoined %s; dropped undelivered match", identity, game_key.value
                )
            self._get_pool(game_key).insert(entry)
        logger.debug("Player %s joined %s", identity, game_key.value)

    async def leave(self, identity: str | None, game: str | GameKey | None) -> None:
        """Stop searching. Always succeeds, even for unknown players or games."""
        if not isinstance(identity, str) or not identity:
            return
        game_key: GameKey | None
        try:
            game_key = parse_game(game)
        except UnknownGameError:
            game_key = None
        if game_key is not None:
            async with self._pool_locks[game_key]:
                self._get_pool(game_key).remove_by_identity(identity)
        self._pending.discard(identity)
        logger.debug("Player %s left %s", identity, game)

    async def poll(self, identity: str | None, game: str | GameKey | None) -> MatchResult | None:
        """Return this player's match, forming one if a compatible opponent waits.

        A result already waiting in the pending buffer is delivered first,
        whatever ``game`` is passed.
        """
        identity = _require_identity(identity)
        pending = self._pending.consume(identity)
        if pending is not None:
            logger.debug("Delivered pending match %s to %s", pending.match_id, identity)
            return pending

        game_key = parse_game(game)
        async with self._pool_locks[game_key]:
            pool = self._get_pool(game_key)
            me = pool.find(identity)
            if me is None:
                return None

            now = self._clock()
            search_time = seconds_since(me.enqueued_at, now)
            other = find_opponent(me, pool, search_time)
            if other is None:
                return None

            match_id = _new_match_id()
            mine = MatchResult(
                match_id=match_id,
                game=game_key,
                opponent_identity=other.identity,
                opponent_params=other.params,
                matched_at=now,
            )
            theirs = MatchResult(
                match_id=match_id,
                game=game_key,
                opponent_identity=me.identity,
                opponent_params=me.params,
                matched_at=now,
            )
            remove_pair(pool, me, other)
            self._pending.put(other.identity, theirs)

        logger.info(
            "MATCH FOUND: %s + %s in %s after %.1fs (%s)",
            me.identity,
            other.identity,
            game_key.value,
            search_time,
            match_id,
        )
        return mine

    def find_entry(self, identity: str, game: str | GameKey | None) -> Entry | None:
        """The searching entry for ``identity`` in ``game``, or None."""
        return self._get_pool(parse_game(game)).find(identity)

    def count_by_game(self, game: str | GameKey | None) -> int:
        return len(self._get_pool(parse_game(game)))

    def count_total(self) -> int:
        return sum(len(pool) for pool in self._pools.values())

    def pending_count(self) -> int:
        return len(self._pending)
