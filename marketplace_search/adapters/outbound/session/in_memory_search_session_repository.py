"""In-memory search session repository adapter."""

from datetime import datetime, timezone
from typing import Optional

from marketplace_search.application.ports.search_session_repository import (
    SearchSessionRepository,
)
from marketplace_search.application.use_cases.search_filter_engine import SearchFilterEngine
from marketplace_search.infrastructure.config.settings import settings


class InMemorySearchSessionRepository(SearchSessionRepository):
    """In-memory implementation of search session repository with TTL cleanup."""

    def __init__(self, ttl_seconds: Optional[int] = None) -> None:
        """
        Initialize in-memory repository.

        Args:
            ttl_seconds: Idle time-to-live in seconds for sessions
            (defaults to settings.session_ttl_seconds).
        """
        self._storage: dict[str, SearchFilterEngine] = {}
        self._last_seen: dict[str, datetime] = {}
        self._ttl_seconds = ttl_seconds or settings.session_ttl_seconds

    def _is_expired(self, session_id: str, now: datetime) -> bool:
        """Check whether a session has been idle longer than the TTL."""
        return (now - self._last_seen[session_id]).total_seconds() > self._ttl_seconds

    def _purge_expired(self) -> None:
        """Remove expired sessions from storage."""
        now = datetime.now(timezone.utc)
        expired_sessions = [
            session_id for session_id in self._storage if self._is_expired(session_id, now)
        ]
        for session_id in expired_sessions:
            del self._storage[session_id]
            del self._last_seen[session_id]

    async def get(self, session_id: str) -> Optional[SearchFilterEngine]:
        """
        Get the engine of a session and refresh its idle timer.

        Args:
            session_id: Session identifier

        Returns:
            The engine, or None if not found or expired
        """
        self._purge_expired()
        engine = self._storage.get(session_id)
        if engine is not None:
            self._last_seen[session_id] = datetime.now(timezone.utc)
        return engine

    async def save(self, session_id: str, engine: SearchFilterEngine) -> None:
        """
        Store the engine of a session.

        Args:
            session_id: Session identifier
            engine: Engine to store
        """
        self._storage[session_id] = engine
        self._last_seen[session_id] = datetime.now(timezone.utc)

    async def delete(self, session_id: str) -> None:
        """
        Delete a session.

        Args:
            session_id: Session identifier
        """
        self._storage.pop(session_id, None)
        self._last_seen.pop(session_id, None)
