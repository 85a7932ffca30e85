"""HTTP routes."""

from typing import Optional
from uuid import uuid4

from fastapi import APIRouter, HTTPException, Query, Request, Response, status

from marketplace_search.adapters.inbound.http.schemas import (
    CreateSessionRequest,
    FilterToggleRequest,
    FilterUpdateRequest,
    OptionView,
    SavedSearchView,
    SaveSearchRequest,
    SearchOptionsView,
    SuggestionsView,
)
from marketplace_search.application.dtos.saved_search import SavedSearch
from marketplace_search.application.dtos.suggestion import TrendingSearches
from marketplace_search.application.dtos.view import SearchView
from marketplace_search.application.use_cases.search_filter_engine import SearchFilterEngine
from marketplace_search.application.use_cases.search_page_formatter import build_view
from marketplace_search.application.use_cases.user_messages import UserMessages
from marketplace_search.domain.value_objects.catalog_options import (
    COMMON_FEATURES,
    LISTING_TYPES,
    SORT_OPTIONS,
)
from marketplace_search.domain.value_objects.filter_query import (
    SEARCH_PAGE_PATH,
    decode_filters,
    decode_url,
    page_from_query,
    parse_query,
)
from marketplace_search.infrastructure.config.settings import settings
from marketplace_search.infrastructure.logging.logger import log_event
from marketplace_search.infrastructure.wiring.dependencies import (
    create_manage_saved_searches,
    create_search_filter_engine,
    create_search_gateway,
    create_search_session_repository,
    create_suggest_searches,
)

router = APIRouter()

# Create shared instances (wired with dependencies)
_search_gateway = create_search_gateway()
_session_repository = create_search_session_repository()
_saved_searches = create_manage_saved_searches()


def _view(engine: SearchFilterEngine, session_id: Optional[str] = None) -> SearchView:
    """Render the view of an engine, draining its pending notifications."""
    return build_view(
        engine.state,
        engine.address_bar.current(),
        engine.year,
        session_id=session_id,
        notifications=engine.notifier.drain(),
    )


async def _get_engine(session_id: str) -> SearchFilterEngine:
    """
    Fetch the engine of a session.

    Raises:
        HTTPException: 404 if the session does not exist or expired
    """
    engine = await _session_repository.get(session_id)
    if engine is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=UserMessages.SESSION_NOT_FOUND,
        )
    return engine


def _saved_search_view(saved: SavedSearch) -> SavedSearchView:
    """Map a saved search to its HTTP view."""
    return SavedSearchView(
        id=saved.id,
        name=saved.name,
        filters=saved.filters,
        summary=_saved_searches.describe(decode_filters(saved.filters)),
        created_at=saved.created_at,
        last_checked=saved.last_checked,
        new_results_count=saved.new_results_count,
    )


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> dict[str, str]:
    """
    Health check endpoint for liveness/readiness.

    Returns:
        Health status
    """
    return {"status": "ok"}


@router.get("/search/options", response_model=SearchOptionsView)
async def search_options() -> SearchOptionsView:
    """Sort options, listing tiers and common features offered as filters."""
    return SearchOptionsView(
        sort_options=[OptionView(value=value, label=label) for value, label in SORT_OPTIONS],
        listing_types=[OptionView(value=value, label=label) for value, label in LISTING_TYPES],
        features=list(COMMON_FEATURES),
    )


@router.get("/search", response_model=SearchView)
async def search_page(request: Request) -> SearchView:
    """
    Render a search page straight from its URL.

    Filters and page are read from the query string; nothing is kept
    between calls.

    Args:
        request: Incoming request (its query string carries the filters)

    Returns:
        Search view

    Raises:
        HTTPException: 502 if the search endpoint failed
    """
    request_id = str(uuid4())
    url = f"{SEARCH_PAGE_PATH}?{request.url.query}" if request.url.query else SEARCH_PAGE_PATH
    engine = create_search_filter_engine(_search_gateway, url=url, session_id=request_id)

    log_event("-", request_id, "http", path="/search", query=request.url.query)

    state = await engine.perform_search(page_from_query(parse_query(url)))
    if state.last_error is not None:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=state.last_error)
    return _view(engine)


@router.post("/sessions", status_code=status.HTTP_201_CREATED, response_model=SearchView)
async def create_session(request: CreateSessionRequest) -> SearchView:
    """
    Open a search page session hydrated from its incoming URL.

    Args:
        request: Optional incoming URL

    Returns:
        Initial view (no search performed yet)
    """
    session_id = uuid4().hex
    engine = create_search_filter_engine(_search_gateway, url=request.url, session_id=session_id)
    await _session_repository.save(session_id, engine)

    log_event(session_id, "-", "http", action="create_session", url=request.url)
    return _view(engine, session_id)


@router.get("/sessions/{session_id}", response_model=SearchView)
async def get_session(session_id: str) -> SearchView:
    """Current view of a session."""
    engine = await _get_engine(session_id)
    return _view(engine, session_id)


@router.delete("/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def close_session(session_id: str) -> Response:
    """End a session."""
    await _session_repository.delete(session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/sessions/{session_id}/filters", response_model=SearchView)
async def update_filter(session_id: str, request: FilterUpdateRequest) -> SearchView:
    """
    Replace one filter field.

    Raises:
        HTTPException: 404 for unknown sessions, 422 for unknown keys or invalid values
    """
    engine = await _get_engine(session_id)
    try:
        engine.update_filter(request.key, request.value)
    except ValueError as err:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(err)) from err
    return _view(engine, session_id)


@router.post("/sessions/{session_id}/filters/toggle", response_model=SearchView)
async def toggle_filter(session_id: str, request: FilterToggleRequest) -> SearchView:
    """
    Toggle one value of a multi-select filter.

    Raises:
        HTTPException: 404 for unknown sessions, 422 for non multi-select keys
    """
    engine = await _get_engine(session_id)
    try:
        engine.toggle_array_filter(request.key, request.value)
    except ValueError as err:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(err)) from err
    return _view(engine, session_id)


@router.post("/sessions/{session_id}/filters/clear", response_model=SearchView)
async def clear_filters(session_id: str) -> SearchView:
    """Reset every filter of a session to its default."""
    engine = await _get_engine(session_id)
    engine.clear_filters()
    return _view(engine, session_id)


@router.post("/sessions/{session_id}/search", response_model=SearchView)
async def perform_search(session_id: str, page: int = Query(1, ge=1)) -> SearchView:
    """
    Search with the session's filters.

    A failed search keeps the previous results; the view then carries the
    error and a notification.
    """
    engine = await _get_engine(session_id)
    await engine.perform_search(page)
    return _view(engine, session_id)


@router.post("/sessions/{session_id}/back", response_model=SearchView)
async def go_back(session_id: str) -> SearchView:
    """Restore the filters of the previous history entry."""
    engine = await _get_engine(session_id)
    engine.back()
    return _view(engine, session_id)


@router.get("/suggestions", response_model=SuggestionsView)
async def suggestions(
    q: str = "",
    type: str = "all",
    limit: int = Query(10, ge=1, le=20),
) -> SuggestionsView:
    """
    Type-ahead suggestions for a partial query.

    Raises:
        HTTPException: 422 for unknown suggestion types
    """
    use_case = create_suggest_searches(_search_gateway)
    try:
        found = await use_case.execute(q, suggestion_type=type, limit=limit)
    except ValueError as err:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(err)) from err
    return SuggestionsView(query=q, type=type, suggestions=found)


@router.get("/suggestions/trending", response_model=TrendingSearches)
async def trending_searches(limit: int = Query(10, ge=1, le=20)) -> TrendingSearches:
    """Trending and recent searches shown before anything is typed."""
    return await create_suggest_searches(_search_gateway).trending(limit)


@router.get("/users/{owner_id}/saved-searches", response_model=list[SavedSearchView])
async def list_saved_searches(owner_id: str) -> list[SavedSearchView]:
    """Saved searches of a user, newest first."""
    return [_saved_search_view(saved) for saved in await _saved_searches.list(owner_id)]


@router.post(
    "/users/{owner_id}/saved-searches",
    status_code=status.HTTP_201_CREATED,
    response_model=SavedSearchView,
)
async def save_search(owner_id: str, request: SaveSearchRequest) -> SavedSearchView:
    """
    Save the filters of a session, or of a URL, under a name.

    Raises:
        HTTPException: 404 for unknown sessions, 422 for blank names or missing source
    """
    if request.session_id:
        filters = (await _get_engine(request.session_id)).filters
    elif request.url:
        filters = decode_url(request.url)
    else:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Either session_id or url is required",
        )

    try:
        saved = await _saved_searches.save(owner_id, request.name, filters)
    except ValueError as err:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(err)) from err

    log_event(request.session_id or "-", saved.id, "saved_search", action="save", owner_id=owner_id)
    return _saved_search_view(saved)


@router.delete("/users/{owner_id}/saved-searches/{search_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_saved_search(owner_id: str, search_id: str) -> Response:
    """
    Delete a saved search.

    Raises:
        HTTPException: 404 if it does not exist
    """
    if not await _saved_searches.delete(owner_id, search_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=UserMessages.SAVED_SEARCH_NOT_FOUND,
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/users/{owner_id}/saved-searches/{search_id}/load", response_model=SearchView)
async def load_saved_search(owner_id: str, search_id: str, session_id: str) -> SearchView:
    """
    Load a saved search into a session.

    Raises:
        HTTPException: 404 for unknown sessions or saved searches
    """
    engine = await _get_engine(session_id)
    try:
        filters = await _saved_searches.load(owner_id, search_id)
    except LookupError as err:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(err)) from err
    engine.load_filters(filters)
    return _view(engine, session_id)


@router.get("/debug/sessions/{session_id}", status_code=status.HTTP_200_OK)
async def get_session_debug(session_id: str) -> dict:
    """
    Raw engine state and history of a session (only enabled if DEBUG_MODE=true).

    Raises:
        HTTPException: 404 if DEBUG_MODE is disabled
    """
    if not settings.debug_mode:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Debug endpoint is disabled",
        )

    engine = await _session_repository.get(session_id)
    if engine is None:
        return {"session_id": session_id, "state": None}

    state = engine.state
    return {
        "session_id": session_id,
        "state": {
            "filters": state.filters.to_dict(),
            "request_params": dict(engine.request_params(state.current_page)),
            "total_results": state.total_results,
            "current_page": state.current_page,
            "total_pages": state.total_pages,
            "loading": state.loading,
            "last_error": state.last_error,
            "current_url": engine.address_bar.current(),
            "created_at": state.created_at.isoformat(),
            "updated_at": state.updated_at.isoformat(),
        },
    }
