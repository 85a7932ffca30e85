"""Search session repository port."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from marketplace_search.application.use_cases.search_filter_engine import SearchFilterEngine


class SearchSessionRepository(ABC):
    """Port interface for live search sessions (one per page view)."""

    @abstractmethod
    async def get(self, session_id: str) -> Optional["SearchFilterEngine"]:
        """
        Get the engine of a session.

        Args:
            session_id: Session identifier

        Returns:
            The engine, or None if not found or expired
        """
        pass

    @abstractmethod
    async def save(self, session_id: str, engine: "SearchFilterEngine") -> None:
        """
        Store the engine of a session.

        Args:
            session_id: Session identifier
            engine: Engine to store
        """
        pass

    @abstractmethod
    async def delete(self, session_id: str) -> None:
        """
        Delete a session.

        Args:
            session_id: Session identifier
        """
        pass
