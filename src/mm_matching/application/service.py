# src/mm_matching/application/service.py
from src.mm_matching.engine.engine import MatchmakingEngine

_engine: MatchmakingEngine | None = None


def get_matchmaking_engine() -> MatchmakingEngine:
    global _engine  # noqa: PLW0603
    if _engine is None:
        _engine = MatchmakingEngine()
    return _engine


def reset_matchmaking_engine() -> None:
    """Drop the process-wide engine; pools start empty on next use."""
    global _engine  # noqa: PLW0603
    _engine = None
