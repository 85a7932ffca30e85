"""Structured logger for observability."""

import logging
from typing import Any, Optional

# Configure root logger with JSON-like structured format
_logger = logging.getLogger("marketplace_search")
_logger.setLevel(logging.INFO)

# Create console handler if not exists
if not _logger.handlers:
    handler = logging.StreamHandler()
    handler.setLevel(logging.INFO)
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    _logger.addHandler(handler)


def log_event(
    session_id: str,
    request_id: str,
    component: str,
    level: int = logging.INFO,
    **kwargs: Any,
) -> None:
    """
    Log structured event for a search session.

    Args:
        session_id: Session identifier
        request_id: Request identifier (search generation or HTTP request id)
        component: Component name (e.g., 'http', 'search', 'history')
        level: Log level (default: INFO)
        **kwargs: Additional structured fields to log
    """
    fields = {
        "session_id": session_id,
        "request_id": request_id,
        "component": component,
    }
    fields.update(kwargs)

    # Format as key=value pairs for readability
    log_parts = [f"{k}={v!r}" for k, v in fields.items()]
    _logger.log(level, " | ".join(log_parts))


def log_search_request(
    session_id: str,
    request_id: str,
    params: dict[str, str],
    **kwargs: Any,
) -> None:
    """
    Log outgoing search request.

    Args:
        session_id: Session identifier
        request_id: Request identifier
        params: Query parameters sent
        **kwargs: Additional fields
    """
    log_event(session_id, request_id, "search", search_params=params, **kwargs)


def log_search_response(
    session_id: str,
    request_id: str,
    total_results: int,
    search_time_ms: Optional[int] = None,
    **kwargs: Any,
) -> None:
    """
    Log accepted search response.

    Args:
        session_id: Session identifier
        request_id: Request identifier
        total_results: Total results reported by the endpoint
        search_time_ms: Endpoint search time
        **kwargs: Additional fields
    """
    fields: dict[str, Any] = {"total_results": total_results}
    if search_time_ms is not None:
        fields["search_time_ms"] = search_time_ms
    fields.update(kwargs)
    log_event(session_id, request_id, "search", **fields)


def log_stale_response(session_id: str, request_id: str, stale_generation: int) -> None:
    """
    Log a response discarded because a newer search was issued.

    Args:
        session_id: Session identifier
        request_id: Latest request identifier
        stale_generation: Generation of the discarded response
    """
    log_event(session_id, request_id, "search", stale_generation=stale_generation)


def log_search_failure(session_id: str, request_id: str, error: str, **kwargs: Any) -> None:
    """
    Log a failed search.

    Args:
        session_id: Session identifier
        request_id: Request identifier
        error: Error description
        **kwargs: Additional fields
    """
    log_event(session_id, request_id, "search", level=logging.WARNING, error=error, **kwargs)


# Export logger instance for adapters that log directly
logger = _logger
