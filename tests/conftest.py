"""Shared test fixtures."""

from collections.abc import AsyncIterator
from datetime import UTC, datetime, timedelta

import pytest
from httpx import ASGITransport, AsyncClient

from src.main import app
from src.mm_matching.application.service import get_matchmaking_engine
from src.mm_matching.engine.engine import MatchmakingEngine


class FakeClock:
    """Manually advanced UTC clock for pinning search-time boundaries."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2026, 1, 1, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def engine(clock: FakeClock) -> MatchmakingEngine:
    return MatchmakingEngine(clock=clock)


@pytest.fixture
async def client(engine: MatchmakingEngine) -> AsyncIterator[AsyncClient]:
    """Async HTTP client for testing FastAPI endpoints against a fresh engine."""
    app.dependency_overrides[get_matchmaking_engine] = lambda: engine
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
