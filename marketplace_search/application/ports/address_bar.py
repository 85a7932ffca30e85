"""Address bar port."""

from abc import ABC, abstractmethod
from typing import Optional


class AddressBar(ABC):
    """Port interface for the browser location and its history stack."""

    @abstractmethod
    def current(self) -> str:
        """Return the current URL."""
        pass

    @abstractmethod
    def replace(self, url: str) -> None:
        """Replace the current history entry without navigating."""
        pass

    @abstractmethod
    def push(self, url: str) -> None:
        """Add a new history entry without navigating."""
        pass

    @abstractmethod
    def back(self) -> Optional[str]:
        """
        Pop to the previous history entry.

        Returns:
            URL of the entry now current, or None when already at the first entry
        """
        pass
