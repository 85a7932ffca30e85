"""Display formatting for the search page."""

from typing import Optional

from marketplace_search.application.dtos.search import SearchResult
from marketplace_search.application.dtos.view import PaginationView, ResultCard, SearchView
from marketplace_search.domain.entities.search_view_state import SearchViewState
from marketplace_search.domain.value_objects.search_filters import applied_filters_count

CURRENCY_PREFIX = "KSh"
PAGE_BUTTONS = 5


def format_number(value: float) -> str:
    """Format a number with thousands separators."""
    return f"{int(round(value)):,}"


def format_price(amount: float) -> str:
    """Format an amount in Kenyan shillings."""
    return f"{CURRENCY_PREFIX} {format_number(amount)}"


def price_label(result: SearchResult) -> str:
    """
    Price shown on a result card.

    Args:
        result: Search result

    Returns:
        Daily rate for rentals, sale price otherwise
    """
    if result.is_rental and result.price_per_day is not None:
        return f"{format_price(result.price_per_day)}/day"
    return format_price(result.price)


def listing_title(result: SearchResult) -> str:
    """Card heading, e.g. ``2019 Toyota Camry``."""
    return f"{result.year} {result.make} {result.model}"


def results_summary(total_results: int, query: str, search_time_ms: int) -> str:
    """Line under the search box, e.g. ``1,234 results found for "camry" (45ms)``."""
    summary = f"{format_number(total_results)} results found"
    if query:
        summary += f' for "{query}"'
    return f"{summary} ({search_time_ms}ms)"


def page_window(current_page: int, total_pages: int, size: int = PAGE_BUTTONS) -> list[int]:
    """
    Page numbers to render as buttons.

    The window starts two pages before the current one and never goes
    past the last page.

    Args:
        current_page: 1-indexed current page
        total_pages: Total number of pages
        size: Maximum number of buttons

    Returns:
        Page numbers in ascending order
    """
    if total_pages < 1:
        return []
    start = max(1, current_page - 2)
    return [page for page in range(start, start + min(size, total_pages)) if page <= total_pages]


def build_view(
    state: SearchViewState,
    url: str,
    year: int,
    session_id: Optional[str] = None,
    notifications: Optional[list[str]] = None,
) -> SearchView:
    """
    Assemble the page view from engine state.

    Args:
        state: Engine state
        url: Current address bar URL
        year: Current year used for default comparison
        session_id: Optional session identifier
        notifications: Pending transient notifications

    Returns:
        Search view DTO
    """
    cards = [
        ResultCard(
            listing=result,
            display_title=listing_title(result),
            price_label=price_label(result),
            mileage_label=f"{format_number(result.mileage)} km",
        )
        for result in state.results
    ]
    pagination = PaginationView(
        current_page=state.current_page,
        total_pages=state.total_pages,
        pages=page_window(state.current_page, state.total_pages),
        has_previous=state.current_page > 1,
        has_next=state.current_page < state.total_pages,
    )
    return SearchView(
        session_id=session_id,
        url=url,
        filters=state.filters.to_dict(),
        applied_filters_count=applied_filters_count(state.filters, year),
        results=cards,
        facets=state.facets,
        total_results=state.total_results,
        search_time_ms=state.search_time_ms,
        summary=results_summary(state.total_results, state.filters.query, state.search_time_ms),
        pagination=pagination,
        loading=state.loading,
        error=state.last_error,
        notifications=notifications or [],
    )
