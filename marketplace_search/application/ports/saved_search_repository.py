"""Saved search repository port."""

from abc import ABC, abstractmethod
from typing import Optional

from marketplace_search.application.dtos.saved_search import SavedSearch


class SavedSearchRepository(ABC):
    """Port interface for saved search persistence."""

    @abstractmethod
    async def list(self, owner_id: str) -> list[SavedSearch]:
        """
        List saved searches of an owner, newest first.

        Args:
            owner_id: Owner identifier

        Returns:
            Saved searches
        """
        pass

    @abstractmethod
    async def get(self, owner_id: str, search_id: str) -> Optional[SavedSearch]:
        """
        Get one saved search.

        Args:
            owner_id: Owner identifier
            search_id: Saved search identifier

        Returns:
            The saved search, or None if not found
        """
        pass

    @abstractmethod
    async def save(self, search: SavedSearch) -> None:
        """
        Insert or replace a saved search.

        Args:
            search: Saved search to store
        """
        pass

    @abstractmethod
    async def delete(self, owner_id: str, search_id: str) -> bool:
        """
        Delete a saved search.

        Args:
            owner_id: Owner identifier
            search_id: Saved search identifier

        Returns:
            True if something was deleted
        """
        pass
