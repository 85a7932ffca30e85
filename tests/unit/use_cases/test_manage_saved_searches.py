"""Unit tests for ManageSavedSearches."""

from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest

from marketplace_search.adapters.outbound.saved_search.in_memory_saved_search_repository import (
    InMemorySavedSearchRepository,
)
from marketplace_search.application.use_cases.manage_saved_searches import ManageSavedSearches
from marketplace_search.domain.value_objects.search_filters import SearchFilters

YEAR = 2025


class SteppingClock:
    """Clock advancing one minute per call."""

    def __init__(self) -> None:
        """Start at a fixed instant."""
        self._now = datetime(2025, 3, 1, 9, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        """Return the next instant."""
        self._now += timedelta(minutes=1)
        return self._now


@pytest.fixture
def use_case() -> ManageSavedSearches:
    """Use case over an in-memory repository."""
    return ManageSavedSearches(InMemorySavedSearchRepository(), year=YEAR, clock=SteppingClock())


@pytest.mark.asyncio
async def test_save_and_list_newest_first(use_case):
    """Test saved searches are listed newest first."""
    first = await use_case.save("user_1", "Cheap", SearchFilters(max_price=500000, max_year=YEAR))
    second = await use_case.save("user_1", "  SUVs  ", SearchFilters(body_type=("SUV",), max_year=YEAR))

    saved = await use_case.list("user_1")

    assert [search.id for search in saved] == [second.id, first.id]
    assert second.name == "SUVs"
    assert second.filters == {"bodyType": "SUV"}
    assert await use_case.list("user_2") == []


@pytest.mark.asyncio
async def test_save_rejects_blank_name(use_case):
    """Test blank names are rejected."""
    with pytest.raises(ValueError, match="name is required"):
        await use_case.save("user_1", "   ", SearchFilters.defaults(YEAR))


@pytest.mark.asyncio
async def test_load_returns_filters_and_marks_checked(use_case):
    """Test load decodes the filters and stamps last_checked."""
    filters = replace(SearchFilters.defaults(YEAR), make="Toyota", features=("Sunroof",))
    saved = await use_case.save("user_1", "Toyotas", filters)
    assert saved.last_checked is None

    loaded = await use_case.load("user_1", saved.id)

    assert loaded == filters
    stored = (await use_case.list("user_1"))[0]
    assert stored.last_checked is not None
    assert stored.last_checked > stored.created_at
    assert stored.new_results_count == 0


@pytest.mark.asyncio
async def test_load_unknown_raises_lookup_error(use_case):
    """Test loading a missing saved search."""
    with pytest.raises(LookupError):
        await use_case.load("user_1", "missing")


@pytest.mark.asyncio
async def test_delete(use_case):
    """Test delete reports whether something was removed."""
    saved = await use_case.save("user_1", "Any", SearchFilters.defaults(YEAR))

    assert await use_case.delete("user_1", saved.id) is True
    assert await use_case.delete("user_1", saved.id) is False
    assert await use_case.list("user_1") == []


def test_describe_limits_parts(use_case):
    """Test summaries show three parts and count the rest."""
    filters = replace(
        SearchFilters.defaults(YEAR),
        make="Toyota",
        model="Camry",
        min_price=500000,
        max_price=2000000,
        location="Nairobi",
        body_type=("Sedan",),
    )

    assert use_case.describe(filters) == "Toyota • Camry • KSh 500,000 - 2,000,000 +2 more"


def test_describe_year_range_and_defaults(use_case):
    """Test year range part and empty summary for defaults."""
    assert use_case.describe(SearchFilters.defaults(YEAR)) == ""
    assert use_case.describe(replace(SearchFilters.defaults(YEAR), min_year=2015)) == "2015 - 2025"
