"""Search page view DTOs."""

from typing import Any, Optional

from pydantic import Field

from marketplace_search.application.dtos.base import CamelDTO
from marketplace_search.application.dtos.search import SearchFacets, SearchResult


class PaginationView(CamelDTO):
    """Pagination controls."""

    current_page: int
    total_pages: int
    pages: list[int] = Field(default_factory=list)
    has_previous: bool = False
    has_next: bool = False


class ResultCard(CamelDTO):
    """One result with its display strings."""

    listing: SearchResult
    display_title: str
    price_label: str
    mileage_label: str


class SearchView(CamelDTO):
    """Everything the search page renders for one state."""

    session_id: Optional[str] = None
    url: str
    filters: dict[str, Any]
    applied_filters_count: int
    results: list[ResultCard] = Field(default_factory=list)
    facets: Optional[SearchFacets] = None
    total_results: int = 0
    search_time_ms: int = 0
    summary: str = ""
    pagination: PaginationView
    loading: bool = False
    error: Optional[str] = None
    notifications: list[str] = Field(default_factory=list)
