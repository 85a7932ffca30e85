"""Unit tests for search page formatting."""

import pytest

from marketplace_search.application.dtos.search import SearchResult
from marketplace_search.application.use_cases.search_page_formatter import (
    build_view,
    format_number,
    format_price,
    listing_title,
    page_window,
    price_label,
    results_summary,
)
from marketplace_search.domain.entities.search_view_state import SearchViewState
from marketplace_search.domain.value_objects.search_filters import SearchFilters


@pytest.fixture
def sale_result() -> SearchResult:
    """Sale listing."""
    return SearchResult(
        id="lst_1",
        title="Camry",
        make="Toyota",
        model="Camry",
        year=2019,
        price=2450000,
        mileage=48000,
        location="Nairobi",
        body_type="Sedan",
        fuel_type="Petrol",
        transmission="Automatic",
        images=[],
        views=5,
        listing_type="standard",
        type="sale",
        user={"id": "usr_1", "name": "Jane"},
    )


@pytest.fixture
def rental_result() -> SearchResult:
    """Rental listing."""
    return SearchResult.model_validate(
        {
            "id": "rnt_1",
            "title": "Prado for hire",
            "make": "Toyota",
            "model": "Prado",
            "year": 2021,
            "price": 0,
            "pricePerDay": 8500,
            "mileage": 12000,
            "location": "Mombasa",
            "bodyType": "SUV",
            "fuelType": "Diesel",
            "transmission": "Automatic",
            "images": [],
            "views": 0,
            "listingType": "featured",
            "type": "rental",
            "user": {"id": "usr_2", "name": "Hire Co", "profile": {"isCompanyVerified": True}},
        }
    )


def test_format_number_and_price():
    """Test thousands separators and currency prefix."""
    assert format_number(1234567) == "1,234,567"
    assert format_number(999) == "999"
    assert format_price(1250000.0) == "KSh 1,250,000"


def test_price_label_for_sale_and_rental(sale_result, rental_result):
    """Test rentals show a daily rate."""
    assert price_label(sale_result) == "KSh 2,450,000"
    assert price_label(rental_result) == "KSh 8,500/day"


def test_listing_title(sale_result):
    """Test card heading."""
    assert listing_title(sale_result) == "2019 Toyota Camry"


def test_results_summary():
    """Test summary with and without a query."""
    assert results_summary(1234, "camry", 45) == '1,234 results found for "camry" (45ms)'
    assert results_summary(0, "", 3) == "0 results found (3ms)"


@pytest.mark.parametrize(
    "current_page,total_pages,expected",
    [
        (1, 1, [1]),
        (1, 10, [1, 2, 3, 4, 5]),
        (5, 10, [3, 4, 5, 6, 7]),
        (10, 10, [8, 9, 10]),
        (2, 3, [1, 2, 3]),
        (1, 0, []),
    ],
)
def test_page_window(current_page, total_pages, expected):
    """Test pagination buttons start two pages back and stop at the last page."""
    assert page_window(current_page, total_pages) == expected


def test_build_view(sale_result):
    """Test view assembly from engine state."""
    filters = SearchFilters.defaults(2025)
    state = SearchViewState(
        filters=SearchFilters(query="camry", max_year=2025),
        results=(sale_result,),
        total_results=13,
        current_page=1,
        total_pages=2,
        search_time_ms=12,
    )

    view = build_view(state, "/search?q=camry&page=1&limit=12", 2025, session_id="s1")

    assert view.session_id == "s1"
    assert view.applied_filters_count == 1
    assert view.results[0].display_title == "2019 Toyota Camry"
    assert view.results[0].mileage_label == "48,000 km"
    assert view.summary == '13 results found for "camry" (12ms)'
    assert view.pagination.pages == [1, 2]
    assert view.pagination.has_previous is False
    assert view.pagination.has_next is True
    assert view.filters["q"] == "camry"
    assert filters.query == ""

    dumped = view.model_dump(by_alias=True)
    assert "appliedFiltersCount" in dumped
    assert dumped["results"][0]["listing"]["listingType"] == "standard"
