"""Search filter engine: filter state, URL sync and the search cycle."""

from dataclasses import replace
from typing import Any, Callable, Optional

from marketplace_search.application.ports.address_bar import AddressBar
from marketplace_search.application.ports.notifier import Notifier
from marketplace_search.application.ports.search_gateway import SearchGateway, SearchGatewayError
from marketplace_search.application.use_cases.user_messages import UserMessages
from marketplace_search.domain.entities.search_view_state import SearchViewState
from marketplace_search.domain.value_objects import search_filters as reducers
from marketplace_search.domain.value_objects.filter_fields import current_year
from marketplace_search.domain.value_objects.filter_query import (
    decode_url,
    search_params,
    search_url,
)
from marketplace_search.domain.value_objects.search_filters import SearchFilters

DEFAULT_PAGE_SIZE = 12
HISTORY_MODES = ("replace", "push")


class SearchFilterEngine:
    """
    Owns the filter state of one search page and drives searches.

    Filter edits are pure transitions and never trigger a request. Each
    ``perform_search`` call takes a new generation number; a response that
    arrives after a newer call was issued is discarded, so results always
    reflect the latest request.
    """

    def __init__(
        self,
        gateway: SearchGateway,
        address_bar: AddressBar,
        notifier: Notifier,
        page_size: int = DEFAULT_PAGE_SIZE,
        history_mode: str = "replace",
        year: Optional[int] = None,
        session_id: str = "anonymous",
        logger: Optional[Callable[..., None]] = None,
    ) -> None:
        """
        Initialize the engine with default filters.

        Args:
            gateway: Search endpoint gateway
            address_bar: Browser location and history
            notifier: Transient notification sink
            page_size: Results per page sent as ``limit``
            history_mode: ``replace`` or ``push`` for address bar updates
            year: Current year override (defaults to today's year)
            session_id: Session identifier used in logs
            logger: Optional logger function (session_id, request_id, component, **kwargs)
        """
        if history_mode not in HISTORY_MODES:
            raise ValueError(f"history_mode must be one of {', '.join(HISTORY_MODES)}")
        if page_size < 1:
            raise ValueError("page_size must be positive")

        self._gateway = gateway
        self._address_bar = address_bar
        self._notifier = notifier
        self._page_size = page_size
        self._history_mode = history_mode
        self._year = year if year is not None else current_year()
        self._session_id = session_id
        self._logger = logger
        self._generation = 0
        self._state = SearchViewState(filters=SearchFilters.defaults(self._year))

    @classmethod
    def from_url(
        cls,
        url: str,
        gateway: SearchGateway,
        address_bar: AddressBar,
        notifier: Notifier,
        **kwargs: Any,
    ) -> "SearchFilterEngine":
        """
        Create an engine hydrated from an incoming URL (initial mount).

        Args:
            url: Incoming page URL or query string
            gateway: Search endpoint gateway
            address_bar: Browser location and history
            notifier: Transient notification sink
            **kwargs: Remaining constructor arguments

        Returns:
            Hydrated engine
        """
        engine = cls(gateway, address_bar, notifier, **kwargs)
        engine.hydrate(url)
        return engine

    def _log(self, component: str, **kwargs: Any) -> None:
        """
        Log event if logger is available.

        Args:
            component: Component name
            **kwargs: Additional log fields
        """
        if self._logger:
            self._logger(self._session_id, str(self._generation), component, **kwargs)

    @property
    def state(self) -> SearchViewState:
        """Current view state."""
        return self._state

    @property
    def filters(self) -> SearchFilters:
        """Current filters."""
        return self._state.filters

    @property
    def year(self) -> int:
        """Year used as the max year default."""
        return self._year

    @property
    def session_id(self) -> str:
        """Session identifier."""
        return self._session_id

    @property
    def address_bar(self) -> AddressBar:
        """Address bar this engine mirrors its searches into."""
        return self._address_bar

    @property
    def notifier(self) -> Notifier:
        """Notification sink."""
        return self._notifier

    def hydrate(self, url: str) -> SearchFilters:
        """Replace the filters with those encoded in a URL."""
        self._state.filters = decode_url(url, self._year)
        self._state.touch()
        return self._state.filters

    def load_filters(self, filters: SearchFilters) -> SearchFilters:
        """Replace the whole filter set, e.g. from a saved search."""
        self._state.filters = filters
        self._state.touch()
        return filters

    def update_filter(self, key: str, value: Any) -> SearchFilters:
        """Replace one field. Raises ValueError on unknown keys or bad values."""
        return self.load_filters(reducers.update_filter(self._state.filters, key, value))

    def toggle_array_filter(self, key: str, value: str) -> SearchFilters:
        """Toggle a value of a multi-select field."""
        return self.load_filters(reducers.toggle_array_filter(self._state.filters, key, value))

    def clear_filters(self) -> SearchFilters:
        """Reset every field to its default."""
        return self.load_filters(reducers.clear_filters(self._year))

    def applied_filters_count(self) -> int:
        """Number of applied filters for the filter badge."""
        return reducers.applied_filters_count(self._state.filters, self._year)

    def request_params(self, page: int = 1) -> list[tuple[str, str]]:
        """Query parameters a search for ``page`` would send."""
        return search_params(self._state.filters, page, self._page_size, self._year)

    async def perform_search(self, page: int = 1) -> SearchViewState:
        """
        Search with the current filters and apply the response.

        On failure the previous results and facets are kept, the error is
        recorded and a notification is emitted.

        Args:
            page: 1-indexed page to fetch

        Returns:
            The view state after the call
        """
        if page < 1:
            raise ValueError("page must be >= 1")

        self._generation += 1
        generation = self._generation
        params = self.request_params(page)
        self._state.loading = True
        self._log("search", action="request", page=page, params=dict(params))

        try:
            response = await self._gateway.search(params)
        except SearchGatewayError as e:
            if generation != self._generation:
                self._log("search", action="stale_failure", stale_generation=generation)
                return self._state
            self._state.loading = False
            self._state.last_error = UserMessages.SEARCH_FAILED
            self._state.touch()
            self._notifier.error(UserMessages.SEARCH_FAILED)
            self._log("search", action="failure", error=str(e))
            return self._state

        if generation != self._generation:
            self._log("search", action="stale_response", stale_generation=generation)
            return self._state

        self._state = replace(
            self._state,
            results=tuple(response.results),
            facets=response.facets,
            total_results=response.search_info.total_results,
            current_page=response.pagination.page,
            total_pages=response.pagination.pages,
            search_time_ms=response.search_info.search_time,
            loading=False,
            last_error=None,
        )
        self._state.touch()

        url = search_url(params)
        if self._history_mode == "push":
            self._address_bar.push(url)
        else:
            self._address_bar.replace(url)

        self._log(
            "search",
            action="response",
            total_results=self._state.total_results,
            page=self._state.current_page,
            search_time_ms=self._state.search_time_ms,
        )
        return self._state

    def back(self) -> bool:
        """
        Go back one history entry and restore its filters.

        Returns:
            True if there was a previous entry
        """
        url = self._address_bar.back()
        if url is None:
            return False
        self.hydrate(url)
        self._log("history", action="back", url=url)
        return True
