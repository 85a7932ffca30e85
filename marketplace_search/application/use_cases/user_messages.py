"""User-facing messages shown by the search page."""


class UserMessages:
    """Centralized user-facing strings."""

    SEARCH_FAILED = "Search failed. Please try again."
    SESSION_NOT_FOUND = "Search session not found."
    SAVED_SEARCH_NOT_FOUND = "Saved search not found."
    SAVED_SEARCH_NAME_REQUIRED = "Saved search name is required."
