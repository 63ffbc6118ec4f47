"""Shared test fixtures."""

from datetime import datetime, timedelta, timezone

import pytest
from httpx import ASGITransport, AsyncClient

from loop_insights.schemas.record import InteractionRecord

NOW = datetime(2026, 3, 31, 12, 0, tzinfo=timezone.utc)


def _build_record(days_ago: float, mood: str = "Happy", content: str = "", person: str = "Mom"):
    return InteractionRecord(
        date=NOW - timedelta(days=days_ago),
        mood=mood,
        content=content or f"Memory from {days_ago} days ago",
        person=person,
    )


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def make_record():
    """Factory for records dated ``days_ago`` days before ``now``."""
    return _build_record


@pytest.fixture
def sample_records():
    """Four weekly records, newest first: Happy, Grateful, Happy, Nostalgic."""
    return [
        _build_record(7, "Happy", "Great day together"),
        _build_record(14, "Grateful", "Long phone call"),
        _build_record(21, "Happy", "Dinner downtown"),
        _build_record(28, "Nostalgic", "Looked at old photos"),
    ]


@pytest.fixture
async def client():
    """Async HTTP test client against the ASGI app."""
    from loop_insights.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
