"""Compatibility rule set entry point used by the pairing scan."""
from src.mm_matching.domain.models import Entry
from src.mm_rules.games import GAME_RULES
from src.mm_rules.ignore import is_mutually_ignored


def is_compatible(me: Entry, other: Entry, search_time: float) -> bool:
    """True if ``other`` may be paired with ``me`` after ``search_time`` seconds.

    The mutual ignore filter is applied first and wins regardless of game.
    Entries from different games are never compatible.
    """
    if is_mutually_ignored(me, other):
        return False
    if me.game != other.game:
        return False
    rule = GAME_RULES[me.game]
    return rule(me.params, other.params, search_time)
