"""In-memory address bar adapter."""

from typing import Optional

from marketplace_search.application.ports.address_bar import AddressBar
from marketplace_search.domain.value_objects.filter_query import SEARCH_PAGE_PATH


class InMemoryAddressBar(AddressBar):
    """History stack kept in memory for one page session."""

    def __init__(self, initial_url: str = SEARCH_PAGE_PATH) -> None:
        """
        Initialize address bar.

        Args:
            initial_url: URL the page was opened with
        """
        self._entries: list[str] = [initial_url]

    @property
    def history(self) -> list[str]:
        """History entries, oldest first."""
        return list(self._entries)

    def current(self) -> str:
        """Return the current URL."""
        return self._entries[-1]

    def replace(self, url: str) -> None:
        """Replace the current history entry."""
        self._entries[-1] = url

    def push(self, url: str) -> None:
        """Add a history entry; pushing the current URL again is a no-op."""
        if url != self._entries[-1]:
            self._entries.append(url)

    def back(self) -> Optional[str]:
        """Pop to the previous entry."""
        if len(self._entries) <= 1:
            return None
        self._entries.pop()
        return self._entries[-1]
