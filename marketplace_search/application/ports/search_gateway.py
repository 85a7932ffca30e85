"""Search gateway port."""

from abc import ABC, abstractmethod

from marketplace_search.application.dtos.search import SearchResponse
from marketplace_search.application.dtos.suggestion import Suggestion, TrendingSearches


class SearchGatewayError(Exception):
    """Search endpoint unreachable, non-2xx, or returned a malformed body."""


class SearchGateway(ABC):
    """Port interface for the remote search endpoint."""

    @abstractmethod
    async def search(self, params: list[tuple[str, str]]) -> SearchResponse:
        """
        Run a search.

        Args:
            params: Ordered query parameters, page and limit included

        Returns:
            Parsed search response

        Raises:
            SearchGatewayError: On transport failure, non-2xx status or malformed JSON
        """
        pass

    @abstractmethod
    async def suggest(self, query: str, suggestion_type: str, limit: int) -> list[Suggestion]:
        """
        Fetch type-ahead suggestions.

        Args:
            query: Partial query text
            suggestion_type: all, makes, models, locations or features
            limit: Maximum number of suggestions

        Returns:
            Suggestions ordered by the endpoint

        Raises:
            SearchGatewayError: On transport failure, non-2xx status or malformed JSON
        """
        pass

    @abstractmethod
    async def trending(self, limit: int) -> TrendingSearches:
        """
        Fetch trending and recently popular searches.

        Args:
            limit: Maximum number of trending entries

        Returns:
            Trending and recent search terms

        Raises:
            SearchGatewayError: On transport failure, non-2xx status or malformed JSON
        """
        pass
