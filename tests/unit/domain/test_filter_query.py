"""Unit tests for filter query string conversion."""

from dataclasses import replace

import pytest

from marketplace_search.domain.value_objects.filter_query import (
    decode_url,
    encode_filters,
    page_from_query,
    parse_query,
    search_params,
    search_url,
    to_query_string,
)
from marketplace_search.domain.value_objects.search_filters import SearchFilters

YEAR = 2025


@pytest.fixture
def defaults() -> SearchFilters:
    """Default filters pinned to a fixed year."""
    return SearchFilters.defaults(YEAR)


def test_defaults_serialize_to_nothing(defaults):
    """Test default filters produce no parameters."""
    assert encode_filters(defaults, YEAR) == []


def test_make_and_price_scenario():
    """Test the make + price range request query."""
    filters = SearchFilters(make="Toyota", min_price=500000, max_price=2000000)

    query = to_query_string(search_params(filters, page=1, limit=12))

    assert query == "make=Toyota&minPrice=500000&maxPrice=2000000&page=1&limit=12"
    assert "minYear" not in query
    assert "maxYear" not in query


def test_non_default_fields_are_included(defaults):
    """Test every non-default field is serialized in table order."""
    filters = replace(
        defaults,
        query="family car",
        min_year=2015,
        max_year=2020,
        max_mileage=80000,
        location="Nairobi",
        body_type=("SUV", "Sedan"),
        listing_type=("premium",),
        sort_by="price",
        sort_order="asc",
        include_rentals=True,
    )

    assert encode_filters(filters, YEAR) == [
        ("q", "family car"),
        ("minYear", "2015"),
        ("maxYear", "2020"),
        ("maxMileage", "80000"),
        ("location", "Nairobi"),
        ("bodyType", "SUV,Sedan"),
        ("listingType", "premium"),
        ("sortBy", "price"),
        ("sortOrder", "asc"),
        ("includeRentals", "true"),
    ]


def test_zero_values_are_omitted(defaults):
    """Test zero-valued bounds are dropped even when not the default."""
    filters = replace(defaults, min_year=0, max_mileage=0)

    assert encode_filters(filters, YEAR) == []


def test_comma_kept_readable_in_query_string():
    """Test multi-select commas are not percent-encoded."""
    assert to_query_string([("bodyType", "SUV,Sedan"), ("q", "land rover")]) == (
        "bodyType=SUV,Sedan&q=land+rover"
    )


def test_search_url_prefixes_page_path():
    """Test address bar URL shape."""
    assert search_url([("make", "Toyota"), ("page", "2"), ("limit", "12")]) == (
        "/search?make=Toyota&page=2&limit=12"
    )


def test_hydrate_from_url_scenario(defaults):
    """Test hydration of query and multi-select from an incoming URL."""
    filters = decode_url("?q=camry&bodyType=SUV,Sedan", YEAR)

    assert filters == replace(defaults, query="camry", body_type=("SUV", "Sedan"))


def test_hydrate_falls_back_on_bad_values(defaults):
    """Test unparsable or unknown values hydrate as defaults."""
    filters = decode_url(
        "/search?minPrice=cheap&sortBy=random&includeRentals=yes&fuelType=,,Diesel,", YEAR
    )

    assert filters == replace(defaults, fuel_type=("Diesel",))


def test_hydrate_reads_every_field(defaults):
    """Test a fully populated URL hydrates every field."""
    url = (
        "/search?q=prado&make=Toyota&model=Prado&minPrice=100&maxPrice=900&minYear=2010"
        "&maxYear=2020&minMileage=5&maxMileage=50&location=Mombasa&bodyType=SUV"
        "&fuelType=Diesel&transmission=Manual&condition=used&features=Sunroof,Bluetooth"
        "&listingType=featured&sortBy=year&sortOrder=asc&includeRentals=true"
    )

    filters = decode_url(url, YEAR)

    assert filters == SearchFilters(
        query="prado",
        make="Toyota",
        model="Prado",
        min_price=100,
        max_price=900,
        min_year=2010,
        max_year=2020,
        min_mileage=5,
        max_mileage=50,
        location="Mombasa",
        body_type=("SUV",),
        fuel_type=("Diesel",),
        transmission=("Manual",),
        condition=("used",),
        features=("Sunroof", "Bluetooth"),
        listing_type=("featured",),
        sort_by="year",
        sort_order="asc",
        include_rentals=True,
    )
    assert encode_filters(filters, YEAR) == list(parse_query(url).items())


def test_parse_query_accepts_bare_query_and_plain_path():
    """Test parse_query input shapes."""
    assert parse_query("q=camry&q=corolla") == {"q": "camry"}
    assert parse_query("/search") == {}
    assert parse_query("/search?make=Land+Rover") == {"make": "Land Rover"}


def test_page_from_query():
    """Test page parsing defaults to 1."""
    assert page_from_query({"page": "3"}) == 3
    assert page_from_query({"page": "zero"}) == 1
    assert page_from_query({"page": "-2"}) == 1
    assert page_from_query({}) == 1
