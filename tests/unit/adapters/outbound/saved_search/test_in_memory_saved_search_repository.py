"""Unit tests for in-memory saved search repository."""

from datetime import datetime, timezone

import pytest

from marketplace_search.adapters.outbound.saved_search.in_memory_saved_search_repository import (
    InMemorySavedSearchRepository,
)
from marketplace_search.application.dtos.saved_search import SavedSearch


def make_saved(search_id: str, owner_id: str, day: int) -> SavedSearch:
    """Create a saved search."""
    return SavedSearch(
        id=search_id,
        owner_id=owner_id,
        name=search_id,
        filters={},
        created_at=datetime(2025, 2, day, tzinfo=timezone.utc),
    )


@pytest.mark.asyncio
async def test_owners_are_isolated():
    """Test each owner only sees their own searches."""
    repository = InMemorySavedSearchRepository()
    await repository.save(make_saved("a", "user_1", 1))
    await repository.save(make_saved("b", "user_2", 2))

    assert [s.id for s in await repository.list("user_1")] == ["a"]
    assert await repository.get("user_2", "a") is None


@pytest.mark.asyncio
async def test_save_replaces_existing():
    """Test saving the same id replaces it."""
    repository = InMemorySavedSearchRepository()
    saved = make_saved("a", "user_1", 1)
    await repository.save(saved)
    await repository.save(saved.model_copy(update={"new_results_count": 4}))

    stored = await repository.list("user_1")
    assert len(stored) == 1
    assert stored[0].new_results_count == 4


@pytest.mark.asyncio
async def test_delete_missing_returns_false():
    """Test deleting unknown ids."""
    repository = InMemorySavedSearchRepository()

    assert await repository.delete("nobody", "a") is False
