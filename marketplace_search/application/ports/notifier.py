"""User notification port."""

from abc import ABC, abstractmethod


class Notifier(ABC):
    """Port interface for transient user-facing notifications."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show an error notification."""
        pass

    @abstractmethod
    def drain(self) -> list[str]:
        """Return pending notifications and forget them."""
        pass
