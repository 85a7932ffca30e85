"""HTTP search gateway adapter."""

from typing import Any, Optional

import httpx
from pydantic import ValidationError

from marketplace_search.application.dtos.search import SearchResponse
from marketplace_search.application.dtos.suggestion import (
    Suggestion,
    SuggestionsResponse,
    TrendingSearches,
)
from marketplace_search.application.ports.search_gateway import SearchGateway, SearchGatewayError
from marketplace_search.domain.value_objects.filter_query import to_query_string
from marketplace_search.infrastructure.config.settings import settings


class HttpxSearchGateway(SearchGateway):
    """Search gateway calling the marketplace REST API with httpx."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        search_path: Optional[str] = None,
        suggestions_path: Optional[str] = None,
        trending_path: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize HTTP search gateway.

        Args:
            base_url: API base URL (defaults to settings.search_api_base_url)
            search_path: Search endpoint path (defaults to settings.search_api_path)
            suggestions_path: Suggestions endpoint path (defaults to settings.suggestions_api_path)
            trending_path: Trending endpoint path (defaults to settings.trending_api_path)
            timeout_seconds: Request timeout (defaults to settings.search_timeout_seconds)
            transport: Optional httpx transport (tests inject a MockTransport)
        """
        self._base_url = base_url or settings.search_api_base_url
        self._search_path = search_path or settings.search_api_path
        self._suggestions_path = suggestions_path or settings.suggestions_api_path
        self._trending_path = trending_path or settings.trending_api_path
        self._timeout = timeout_seconds or settings.search_timeout_seconds
        self._transport = transport

    async def _get_json(self, path: str, params: list[tuple[str, str]]) -> Any:
        """
        GET a path and decode its JSON body.

        Args:
            path: Endpoint path
            params: Ordered query parameters

        Returns:
            Decoded JSON body

        Raises:
            SearchGatewayError: On transport failure, non-2xx status or malformed JSON
        """
        url = f"{path}?{to_query_string(params)}" if params else path
        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            raise SearchGatewayError(
                f"Search endpoint returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise SearchGatewayError(f"Search endpoint unreachable: {str(e)}") from e
        except ValueError as e:
            raise SearchGatewayError(f"Search endpoint returned malformed JSON: {str(e)}") from e

    async def search(self, params: list[tuple[str, str]]) -> SearchResponse:
        """
        Run a search.

        Args:
            params: Ordered query parameters, page and limit included

        Returns:
            Parsed search response
        """
        data = await self._get_json(self._search_path, params)
        try:
            return SearchResponse.model_validate(data)
        except ValidationError as e:
            raise SearchGatewayError(f"Unexpected search response shape: {str(e)}") from e

    async def suggest(self, query: str, suggestion_type: str, limit: int) -> list[Suggestion]:
        """
        Fetch type-ahead suggestions.

        Args:
            query: Partial query text
            suggestion_type: all, makes, models, locations or features
            limit: Maximum number of suggestions

        Returns:
            Suggestions ordered by the endpoint
        """
        params = [("q", query), ("type", suggestion_type), ("limit", str(limit))]
        data = await self._get_json(self._suggestions_path, params)
        try:
            return SuggestionsResponse.model_validate(data).suggestions
        except ValidationError as e:
            raise SearchGatewayError(f"Unexpected suggestions response shape: {str(e)}") from e

    async def trending(self, limit: int) -> TrendingSearches:
        """
        Fetch trending and recently popular searches.

        Args:
            limit: Maximum number of trending entries

        Returns:
            Trending and recent search terms
        """
        params = [("limit", str(limit)), ("period", "day")]
        data = await self._get_json(self._trending_path, params)
        try:
            return TrendingSearches.model_validate(data)
        except ValidationError as e:
            raise SearchGatewayError(f"Unexpected trending response shape: {str(e)}") from e
