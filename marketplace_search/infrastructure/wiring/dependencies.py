"""Dependency injection factory functions."""

from typing import Any, Optional
from uuid import uuid4

from marketplace_search.adapters.outbound.address_bar.in_memory_address_bar import (
    InMemoryAddressBar,
)
from marketplace_search.adapters.outbound.notifier.in_memory_notifier import InMemoryNotifier
from marketplace_search.adapters.outbound.saved_search.in_memory_saved_search_repository import (
    InMemorySavedSearchRepository,
)
from marketplace_search.adapters.outbound.saved_search.redis_saved_search_repository import (
    RedisSavedSearchRepository,
)
from marketplace_search.adapters.outbound.search_api.httpx_search_gateway import (
    HttpxSearchGateway,
)
from marketplace_search.adapters.outbound.session.in_memory_search_session_repository import (
    InMemorySearchSessionRepository,
)
from marketplace_search.application.ports.saved_search_repository import SavedSearchRepository
from marketplace_search.application.ports.search_gateway import SearchGateway
from marketplace_search.application.ports.search_session_repository import (
    SearchSessionRepository,
)
from marketplace_search.application.use_cases.manage_saved_searches import ManageSavedSearches
from marketplace_search.application.use_cases.search_filter_engine import SearchFilterEngine
from marketplace_search.application.use_cases.suggest_searches import SuggestSearches
from marketplace_search.domain.value_objects.filter_query import SEARCH_PAGE_PATH
from marketplace_search.infrastructure.config.settings import settings
from marketplace_search.infrastructure.logging.logger import (
    log_event,
    log_search_failure,
    log_search_request,
    log_search_response,
    log_stale_response,
)


def engine_logger(session_id: str, request_id: str, component: str, **kwargs: Any) -> None:
    """
    Route engine log events to the structured logging helpers.

    Args:
        session_id: Session identifier
        request_id: Request identifier
        component: Component name
        **kwargs: Event fields; ``action`` selects the helper for search events
    """
    action = kwargs.get("action")
    if component != "search":
        log_event(session_id, request_id, component, **kwargs)
        return

    kwargs.pop("action", None)
    if action == "request":
        log_search_request(session_id, request_id, kwargs.pop("params", {}), **kwargs)
    elif action == "response":
        log_search_response(
            session_id,
            request_id,
            kwargs.pop("total_results", 0),
            kwargs.pop("search_time_ms", None),
            **kwargs,
        )
    elif action in ("stale_response", "stale_failure"):
        log_stale_response(session_id, request_id, kwargs.get("stale_generation", -1))
    elif action == "failure":
        log_search_failure(session_id, request_id, kwargs.pop("error", ""), **kwargs)
    else:
        log_event(session_id, request_id, component, action=action, **kwargs)


def create_search_gateway() -> SearchGateway:
    """
    Factory function to create the search gateway.

    Returns:
        SearchGateway instance
    """
    return HttpxSearchGateway()


def create_saved_search_repository() -> SavedSearchRepository:
    """
    Factory function to create saved search repository.

    Returns:
        SavedSearchRepository instance
    """
    if settings.saved_search_repository == "redis":
        if not settings.redis_url:
            raise ValueError("REDIS_URL is required when SAVED_SEARCH_REPOSITORY=redis")
        return RedisSavedSearchRepository(settings.redis_url)
    else:
        return InMemorySavedSearchRepository()


def create_search_session_repository() -> SearchSessionRepository:
    """
    Factory function to create search session repository.

    Returns:
        SearchSessionRepository instance
    """
    return InMemorySearchSessionRepository()


def create_search_filter_engine(
    gateway: SearchGateway,
    url: Optional[str] = None,
    session_id: Optional[str] = None,
) -> SearchFilterEngine:
    """
    Factory function to create a search engine for one page session.

    Args:
        gateway: Search gateway shared by all sessions
        url: Incoming page URL to hydrate from (defaults to the bare search page)
        session_id: Session identifier (generated when omitted)

    Returns:
        SearchFilterEngine instance hydrated from the URL
    """
    url = url or SEARCH_PAGE_PATH
    return SearchFilterEngine.from_url(
        url,
        gateway,
        InMemoryAddressBar(initial_url=url),
        InMemoryNotifier(),
        page_size=settings.search_page_size,
        history_mode=settings.url_history_mode,
        session_id=session_id or uuid4().hex,
        logger=engine_logger,
    )


def create_manage_saved_searches() -> ManageSavedSearches:
    """
    Factory function to create saved searches use case.

    Returns:
        ManageSavedSearches instance
    """
    return ManageSavedSearches(create_saved_search_repository())


def create_suggest_searches(gateway: SearchGateway) -> SuggestSearches:
    """
    Factory function to create suggestions use case.

    Args:
        gateway: Search gateway

    Returns:
        SuggestSearches instance
    """
    return SuggestSearches(gateway, logger=engine_logger)
