"""Saved searches use case."""

from datetime import datetime, timezone
from typing import Callable, Optional
from uuid import uuid4

from marketplace_search.application.dtos.saved_search import SavedSearch
from marketplace_search.application.ports.saved_search_repository import SavedSearchRepository
from marketplace_search.application.use_cases.search_page_formatter import (
    CURRENCY_PREFIX,
    format_number,
)
from marketplace_search.application.use_cases.user_messages import UserMessages
from marketplace_search.domain.value_objects.filter_fields import (
    PRICE_CEILING,
    PRICE_FLOOR,
    YEAR_FLOOR,
    current_year,
)
from marketplace_search.domain.value_objects.filter_query import decode_filters, encode_filters
from marketplace_search.domain.value_objects.search_filters import SearchFilters

SUMMARY_PARTS = 3


class ManageSavedSearches:
    """Save, list, load and delete named filter sets."""

    def __init__(
        self,
        repository: SavedSearchRepository,
        year: Optional[int] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        """
        Initialize saved searches use case.

        Args:
            repository: Saved search repository
            year: Current year override
            clock: Optional clock returning aware datetimes (defaults to UTC now)
        """
        self._repository = repository
        self._year = year if year is not None else current_year()
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    async def save(self, owner_id: str, name: str, filters: SearchFilters) -> SavedSearch:
        """
        Save the given filters under a name.

        Args:
            owner_id: Owner identifier
            name: Display name (surrounding whitespace is dropped)
            filters: Filters to keep

        Returns:
            The stored saved search

        Raises:
            ValueError: If the name is blank
        """
        name = name.strip()
        if not name:
            raise ValueError(UserMessages.SAVED_SEARCH_NAME_REQUIRED)

        saved = SavedSearch(
            id=uuid4().hex,
            owner_id=owner_id,
            name=name,
            filters=dict(encode_filters(filters, self._year)),
            created_at=self._clock(),
        )
        await self._repository.save(saved)
        return saved

    async def list(self, owner_id: str) -> list[SavedSearch]:
        """List saved searches of an owner, newest first."""
        return await self._repository.list(owner_id)

    async def delete(self, owner_id: str, search_id: str) -> bool:
        """Delete a saved search; returns False if it did not exist."""
        return await self._repository.delete(owner_id, search_id)

    async def load(self, owner_id: str, search_id: str) -> SearchFilters:
        """
        Load the filters of a saved search and mark it as checked.

        Args:
            owner_id: Owner identifier
            search_id: Saved search identifier

        Returns:
            Decoded filters

        Raises:
            LookupError: If the saved search does not exist
        """
        saved = await self._repository.get(owner_id, search_id)
        if saved is None:
            raise LookupError(UserMessages.SAVED_SEARCH_NOT_FOUND)

        await self._repository.save(
            saved.model_copy(update={"last_checked": self._clock(), "new_results_count": 0})
        )
        return decode_filters(saved.filters, self._year)

    def describe(self, filters: SearchFilters) -> str:
        """
        Short human summary of a filter set.

        Args:
            filters: Filters to describe

        Returns:
            e.g. ``Toyota • Camry • KSh 500,000 - 2,000,000 +2 more``
        """
        parts: list[str] = []
        if filters.make:
            parts.append(filters.make)
        if filters.model:
            parts.append(filters.model)
        if filters.min_price != PRICE_FLOOR or filters.max_price != PRICE_CEILING:
            parts.append(
                f"{CURRENCY_PREFIX} {format_number(filters.min_price)} - "
                f"{format_number(filters.max_price)}"
            )
        if filters.min_year != YEAR_FLOOR or filters.max_year != self._year:
            parts.append(f"{filters.min_year} - {filters.max_year}")
        if filters.location:
            parts.append(filters.location)
        for selected in (filters.body_type, filters.fuel_type, filters.transmission):
            if selected:
                parts.append(", ".join(selected))

        summary = " • ".join(parts[:SUMMARY_PARTS])
        if len(parts) > SUMMARY_PARTS:
            summary += f" +{len(parts) - SUMMARY_PARTS} more"
        return summary
