"""Search view state entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

from marketplace_search.domain.value_objects.search_filters import SearchFilters


@dataclass
class SearchViewState:
    """Everything the search page renders, owned by one engine."""

    filters: SearchFilters = field(default_factory=SearchFilters)
    results: tuple[Any, ...] = ()  # SearchResult DTOs of the latest accepted response
    facets: Optional[Any] = None  # SearchFacets DTO, None until the first success
    total_results: int = 0
    current_page: int = 1
    total_pages: int = 1
    search_time_ms: int = 0
    loading: bool = False
    last_error: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def touch(self) -> None:
        """Update the updated_at timestamp."""
        self.updated_at = datetime.now(timezone.utc)

    def has_results(self) -> bool:
        """Check if the latest accepted response returned any listing."""
        return len(self.results) > 0
