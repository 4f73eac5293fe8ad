"""Mutual ignore filter.

A block declared by either player prevents the pair from ever being matched,
whatever the game or the elapsed search time.
"""
from src.mm_matching.domain.models import Entry


def is_mutually_ignored(me: Entry, other: Entry) -> bool:
    """Predicate used by is_compatible before any game rule runs."""
    return other.identity in me.ignored or me.identity in other.ignored
