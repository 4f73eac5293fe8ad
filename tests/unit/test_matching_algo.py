from datetime import UTC, datetime
from typing import Any

from src.mm_common.enums import GameKey
from src.mm_matching.domain.models import Entry
from src.mm_matching.domain.params import parse_params
from src.mm_matching.engine.matching_algo import find_opponent, remove_pair
from src.mm_matching.engine.waiting_pool import WaitingPool


def _e(identity: str, ignored: tuple[str, ...] = (), **params: Any) -> Entry:
    return Entry(
        identity=identity,
        game=GameKey.CS2,
        params=parse_params(GameKey.CS2, params),
        enqueued_at=datetime(2026, 1, 1, tzinfo=UTC),
        ignored=frozenset(ignored),
    )


def _pool(*entries: Entry) -> WaitingPool:
    pool = WaitingPool(game=GameKey.CS2)
    for entry in entries:
        pool.insert(entry)
    return pool


class TestFindOpponent:
    def test_skips_self(self) -> None:
        me = _e("a", elo=1000)
        assert find_opponent(me, _pool(me), 0) is None

    def test_first_compatible_wins_over_closest(self) -> None:
        me = _e("a", elo=1000)
        far_but_first = _e("b", elo=1090)
        exact = _e("c", elo=1000)
        found = find_opponent(me, _pool(me, far_but_first, exact), 0)
        assert found is not None
        assert found.identity == "b"

    def test_skips_incompatible_and_ignored(self) -> None:
        me = _e("a", ignored=("b",), elo=1000)
        pool = _pool(_e("b", elo=1000), _e("x", elo=2000), me, _e("c", elo=1050))
        found = find_opponent(me, pool, 0)
        assert found is not None
        assert found.identity == "c"

    def test_unparseable_candidate_does_not_abort_scan(self) -> None:
        me = _e("a", elo=1000)
        pool = _pool(me, _e("broken", elo="n/a"), _e("ok", elo=1000))
        found = find_opponent(me, pool, 0)
        assert found is not None
        assert found.identity == "ok"

    def test_no_candidates(self) -> None:
        me = _e("a", elo=1000)
        assert find_opponent(me, _pool(me, _e("b", elo=5000)), 0) is None


class TestRemovePair:
    def test_keeps_others_in_order(self) -> None:
        a, b, c, d = (_e(n, elo=1000) for n in "abcd")
        pool = _pool(a, b, c, d)
        remove_pair(pool, c, a)
        assert [e.identity for e in pool.scan()] == ["b", "d"]
