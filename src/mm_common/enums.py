"""Global enums shared by the rule set, the engine and the API layer."""

from enum import Enum

from src.mm_common.errors import UnknownGameError


class GameKey(str, Enum):
    """Supported games. Each value owns exactly one waiting pool."""
    DEADLOCK = "deadlock"
    DOTA2 = "dota2"
    CS2 = "cs2"
    VALORANT = "valorant"
    RUST = "rust"
    PUBG = "pubg"


def parse_game(value: object) -> GameKey:
    """Resolve a raw game value, raising UnknownGameError (400) if unsupported."""
    if isinstance(value, GameKey):
        return value
    if not isinstance(value, str) or not value:
        raise UnknownGameError(value)
    try:
        return GameKey(value)
    except ValueError:
        raise UnknownGameError(value) from None
