"""Redis saved search repository adapter."""

from typing import Optional

from redis import asyncio as aioredis

from marketplace_search.application.dtos.saved_search import SavedSearch
from marketplace_search.application.ports.saved_search_repository import SavedSearchRepository


class RedisSavedSearchRepository(SavedSearchRepository):
    """Redis adapter storing each owner's saved searches in one hash."""

    KEY_PREFIX = "saved_searches:"

    def __init__(self, redis_url: str) -> None:
        """
        Initialize Redis saved search repository.

        Args:
            redis_url: Redis connection URL
        """
        self._redis_url = redis_url
        self._client: Optional[aioredis.Redis] = None

    def _get_client(self) -> aioredis.Redis:
        """
        Get or create Redis client.

        Returns:
            Redis client instance
        """
        if self._client is None:
            self._client = aioredis.from_url(
                self._redis_url,
                encoding="utf-8",
                decode_responses=True,
            )
        return self._client

    def _make_key(self, owner_id: str) -> str:
        """
        Make Redis key for an owner's saved searches.

        Args:
            owner_id: Owner identifier

        Returns:
            Redis key string
        """
        return f"{self.KEY_PREFIX}{owner_id}"

    async def list(self, owner_id: str) -> list[SavedSearch]:
        """List saved searches of an owner, newest first."""
        client = self._get_client()
        stored = await client.hgetall(self._make_key(owner_id))
        searches = [SavedSearch.model_validate_json(payload) for payload in stored.values()]
        return sorted(searches, key=lambda search: search.created_at, reverse=True)

    async def get(self, owner_id: str, search_id: str) -> Optional[SavedSearch]:
        """Get one saved search."""
        client = self._get_client()
        payload = await client.hget(self._make_key(owner_id), search_id)
        if payload is None:
            return None
        return SavedSearch.model_validate_json(payload)

    async def save(self, search: SavedSearch) -> None:
        """Insert or replace a saved search."""
        client = self._get_client()
        await client.hset(self._make_key(search.owner_id), search.id, search.model_dump_json())

    async def delete(self, owner_id: str, search_id: str) -> bool:
        """Delete a saved search."""
        client = self._get_client()
        removed = await client.hdel(self._make_key(owner_id), search_id)
        return removed > 0

    async def close(self) -> None:
        """Close Redis connection."""
        if self._client:
            await self._client.aclose()
            self._client = None
