"""Domain models for mm_matching: pure dataclasses, no business logic."""
from dataclasses import dataclass, field
from datetime import datetime

from src.mm_common.enums import GameKey
from src.mm_matching.domain.params import GameParams


@dataclass
class Entry:
    """A player's active search record inside one game's waiting pool."""

    identity: str
    game: GameKey
    params: GameParams
    enqueued_at: datetime
    ignored: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class MatchResult:
    """One player's view of a formed match; produced in symmetric pairs."""

    match_id: str  # shared by both halves of the pair
    game: GameKey
    opponent_identity: str
    opponent_params: GameParams
    matched_at: datetime
