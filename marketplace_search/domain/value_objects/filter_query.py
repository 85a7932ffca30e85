"""Conversion between search filters and URL query parameters."""

from typing import Mapping, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit

from marketplace_search.domain.value_objects.filter_fields import FILTER_FIELDS
from marketplace_search.domain.value_objects.search_filters import SearchFilters

SEARCH_PAGE_PATH = "/search"


def encode_filters(filters: SearchFilters, year: Optional[int] = None) -> list[tuple[str, str]]:
    """
    Serialize non-default fields, in field-table order.

    Args:
        filters: Filters to serialize
        year: Current year override (decides whether max year is default)

    Returns:
        Ordered (param, value) pairs
    """
    params: list[tuple[str, str]] = []
    for filter_field in FILTER_FIELDS:
        value = getattr(filters, filter_field.attr)
        if filter_field.is_omitted(value, year):
            continue
        params.append((filter_field.param, filter_field.encode(value)))
    return params


def search_params(
    filters: SearchFilters, page: int, limit: int, year: Optional[int] = None
) -> list[tuple[str, str]]:
    """Serialize filters and append the always-present page and limit."""
    return encode_filters(filters, year) + [("page", str(page)), ("limit", str(limit))]


def to_query_string(params: list[tuple[str, str]]) -> str:
    """Encode parameters, keeping multi-select commas readable."""
    return urlencode(params, safe=",")


def search_url(params: list[tuple[str, str]]) -> str:
    """Build the address bar URL mirroring a search request."""
    return f"{SEARCH_PAGE_PATH}?{to_query_string(params)}"


def decode_filters(params: Mapping[str, str], year: Optional[int] = None) -> SearchFilters:
    """
    Hydrate filters from query parameters; absent or bad values use defaults.

    Args:
        params: Query parameters keyed by parameter name
        year: Current year override

    Returns:
        Hydrated filters
    """
    values = {
        filter_field.attr: filter_field.decode(params.get(filter_field.param), year)
        for filter_field in FILTER_FIELDS
    }
    return SearchFilters(**values)


def parse_query(url_or_query: str) -> dict[str, str]:
    """
    Parse a URL or a bare query string into a parameter mapping.

    Repeated parameters keep the first occurrence.

    Args:
        url_or_query: ``/search?q=camry`` or ``q=camry`` or ``?q=camry``

    Returns:
        Parameters keyed by name
    """
    if "?" in url_or_query:
        query = urlsplit(url_or_query).query
    elif "=" in url_or_query:
        query = url_or_query
    else:
        query = ""

    params: dict[str, str] = {}
    for name, value in parse_qsl(query, keep_blank_values=True):
        params.setdefault(name, value)
    return params


def decode_url(url_or_query: str, year: Optional[int] = None) -> SearchFilters:
    """Hydrate filters from a URL or query string."""
    return decode_filters(parse_query(url_or_query), year)


def page_from_query(params: Mapping[str, str]) -> int:
    """Read the 1-indexed page parameter, defaulting to 1."""
    try:
        page = int(params.get("page", "1"))
    except ValueError:
        return 1
    return page if page >= 1 else 1
