"""Saved search DTOs."""

from datetime import datetime
from typing import Optional

from marketplace_search.application.dtos.base import DTO


class SavedSearch(DTO):
    """A named filter set kept for a user."""

    id: str
    owner_id: str
    name: str
    filters: dict[str, str]  # query-parameter encoding of the filters
    created_at: datetime
    last_checked: Optional[datetime] = None
    new_results_count: int = 0
