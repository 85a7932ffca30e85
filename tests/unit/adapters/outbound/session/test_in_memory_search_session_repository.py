"""Unit tests for in-memory search session repository."""

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

from marketplace_search.adapters.outbound.session.in_memory_search_session_repository import (
    InMemorySearchSessionRepository,
)


@pytest.mark.asyncio
async def test_save_and_get():
    """Test a saved engine is returned."""
    repository = InMemorySearchSessionRepository(ttl_seconds=60)
    engine = MagicMock()

    await repository.save("s1", engine)

    assert await repository.get("s1") is engine
    assert await repository.get("s2") is None


@pytest.mark.asyncio
async def test_idle_sessions_expire():
    """Test sessions idle past the TTL are purged."""
    repository = InMemorySearchSessionRepository(ttl_seconds=60)
    await repository.save("s1", MagicMock())
    await repository.save("s2", MagicMock())
    repository._last_seen["s1"] = datetime.now(timezone.utc) - timedelta(seconds=120)

    assert await repository.get("s1") is None
    assert await repository.get("s2") is not None
    assert "s1" not in repository._storage


@pytest.mark.asyncio
async def test_delete():
    """Test delete removes the session and tolerates unknown ids."""
    repository = InMemorySearchSessionRepository(ttl_seconds=60)
    await repository.save("s1", MagicMock())

    await repository.delete("s1")
    await repository.delete("unknown")

    assert await repository.get("s1") is None
