"""First-compatible pairing scan over a single waiting pool."""
from src.mm_matching.domain.models import Entry
from src.mm_matching.engine.waiting_pool import WaitingPool
from src.mm_rules.compatibility import is_compatible


def find_opponent(me: Entry, pool: WaitingPool, search_time: float) -> Entry | None:
    """Return the first compatible entry in insertion order, skipping ``me``.

    No ranking by closeness: the earliest compatible entry wins.
    """
    for other in pool.scan():
        if other.identity == me.identity:
            continue
        if is_compatible(me, other, search_time):
            return other
    return None


def remove_pair(pool: WaitingPool, me: Entry, other: Entry) -> None:
    """Rewrite the pool without the two matched entries."""
    matched = {me.identity, other.identity}
    pool.replace_all(e for e in pool.scan() if e.identity not in matched)
