"""In-memory notifier adapter."""

from marketplace_search.application.ports.notifier import Notifier
from marketplace_search.infrastructure.logging.logger import logger


class InMemoryNotifier(Notifier):
    """Queues notifications until the view picks them up."""

    def __init__(self) -> None:
        """Initialize an empty notification queue."""
        self._pending: list[str] = []

    def error(self, message: str) -> None:
        """Queue an error notification."""
        self._pending.append(message)
        logger.info(f"User notification queued: {message}")

    def drain(self) -> list[str]:
        """Return pending notifications and forget them."""
        pending, self._pending = self._pending, []
        return pending
