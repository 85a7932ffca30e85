"""Search suggestions use case."""

from typing import Any, Callable, Optional

from marketplace_search.application.dtos.suggestion import Suggestion, TrendingSearches
from marketplace_search.application.ports.search_gateway import SearchGateway, SearchGatewayError

SUGGESTION_TYPES = ("all", "makes", "models", "locations", "features")
MAX_SUGGESTIONS = 20
SHORT_QUERY_LENGTH = 2  # queries this short also list recent searches
RECENT_SHOWN = 3
MATCHES_SHOWN_WITH_RECENT = 5
TRENDING_SHOWN = 5


class SuggestSearches:
    """
    Type-ahead suggestions.

    Blank queries list trending and recent searches, short queries get recent
    searches ahead of their matches, and queries without matches fall back to
    trending ones. Endpoint failures degrade to no suggestions.
    """

    def __init__(
        self,
        gateway: SearchGateway,
        logger: Optional[Callable[..., None]] = None,
    ) -> None:
        """
        Initialize suggestions use case.

        Args:
            gateway: Search endpoint gateway
            logger: Optional logger function (session_id, request_id, component, **kwargs)
        """
        self._gateway = gateway
        self._logger = logger

    async def execute(
        self,
        query: str,
        suggestion_type: str = "all",
        limit: int = 10,
        session_id: str = "anonymous",
    ) -> list[Suggestion]:
        """
        Fetch suggestions for a partial query.

        Args:
            query: Partial query text
            suggestion_type: One of SUGGESTION_TYPES
            limit: Maximum suggestions, clamped to 1..20
            session_id: Session identifier used in logs

        Returns:
            Suggestions, empty when the endpoint fails

        Raises:
            ValueError: If the suggestion type is unknown
        """
        if suggestion_type not in SUGGESTION_TYPES:
            raise ValueError(f"type must be one of {', '.join(SUGGESTION_TYPES)}")

        query = query.strip()
        limit = max(1, min(limit, MAX_SUGGESTIONS))
        if not query:
            popular = await self._popular(limit, session_id)
            if popular is None:
                return []
            return _dedupe(_terms(popular.trending, "trending") + _terms(popular.recent, "recent"))[:limit]

        try:
            suggestions = await self._gateway.suggest(query, suggestion_type, limit)
        except SearchGatewayError as e:
            self._log(session_id, action="failure", error=str(e))
            return []
        self._log(session_id, action="response", suggestions_count=len(suggestions))

        if len(query) <= SHORT_QUERY_LENGTH:
            popular = await self._popular(limit, session_id)
            if popular is not None:
                recent = _terms(popular.recent[:RECENT_SHOWN], "recent")
                suggestions = recent + suggestions[:MATCHES_SHOWN_WITH_RECENT]

        if not suggestions:
            popular = await self._popular(limit, session_id)
            if popular is not None:
                suggestions = _terms(popular.trending[:TRENDING_SHOWN], "trending")

        return _dedupe(suggestions)[:limit]

    async def trending(self, limit: int = 10, session_id: str = "anonymous") -> TrendingSearches:
        """
        Trending and recent searches, empty when the endpoint fails.

        Args:
            limit: Maximum trending entries, clamped to 1..20
            session_id: Session identifier used in logs
        """
        popular = await self._popular(max(1, min(limit, MAX_SUGGESTIONS)), session_id)
        return popular if popular is not None else TrendingSearches(trending=[])

    async def _popular(self, limit: int, session_id: str) -> Optional[TrendingSearches]:
        """Fetch trending searches, None on failure."""
        try:
            return await self._gateway.trending(limit)
        except SearchGatewayError as e:
            self._log(session_id, action="trending_failure", error=str(e))
            return None

    def _log(self, session_id: str, **kwargs: Any) -> None:
        """Log event if logger is available."""
        if self._logger:
            self._logger(session_id, "-", "suggestions", **kwargs)


def _terms(values: list[str], suggestion_type: str) -> list[Suggestion]:
    return [Suggestion(value=value, type=suggestion_type) for value in values]


def _dedupe(suggestions: list[Suggestion]) -> list[Suggestion]:
    """Drop later suggestions repeating an earlier value (case-insensitive)."""
    seen: set[str] = set()
    unique = []
    for suggestion in suggestions:
        key = suggestion.value.lower()
        if key not in seen:
            seen.add(key)
            unique.append(suggestion)
    return unique
