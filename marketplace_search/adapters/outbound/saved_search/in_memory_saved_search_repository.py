"""In-memory saved search repository adapter."""

from typing import Optional

from marketplace_search.application.dtos.saved_search import SavedSearch
from marketplace_search.application.ports.saved_search_repository import SavedSearchRepository


class InMemorySavedSearchRepository(SavedSearchRepository):
    """In-memory implementation of saved search repository."""

    def __init__(self) -> None:
        """Initialize in-memory storage."""
        self._storage: dict[str, dict[str, SavedSearch]] = {}

    async def list(self, owner_id: str) -> list[SavedSearch]:
        """List saved searches of an owner, newest first."""
        searches = self._storage.get(owner_id, {}).values()
        return sorted(searches, key=lambda search: search.created_at, reverse=True)

    async def get(self, owner_id: str, search_id: str) -> Optional[SavedSearch]:
        """Get one saved search."""
        return self._storage.get(owner_id, {}).get(search_id)

    async def save(self, search: SavedSearch) -> None:
        """Insert or replace a saved search."""
        self._storage.setdefault(search.owner_id, {})[search.id] = search

    async def delete(self, owner_id: str, search_id: str) -> bool:
        """Delete a saved search."""
        return self._storage.get(owner_id, {}).pop(search_id, None) is not None
