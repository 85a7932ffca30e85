"""HTTP adapter schemas."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from marketplace_search.application.dtos.base import CamelDTO
from marketplace_search.application.dtos.suggestion import Suggestion


class CreateSessionRequest(BaseModel):
    """Open a search page session."""

    url: Optional[str] = None  # incoming page URL, e.g. /search?q=camry

    model_config = ConfigDict(
        json_schema_extra={"example": {"url": "/search?q=camry&bodyType=SUV,Sedan"}}
    )


class FilterUpdateRequest(BaseModel):
    """Replace one filter field."""

    key: str
    value: Any = None

    model_config = ConfigDict(json_schema_extra={"example": {"key": "minPrice", "value": 500000}})


class FilterToggleRequest(BaseModel):
    """Toggle one value of a multi-select filter."""

    key: str
    value: str

    model_config = ConfigDict(json_schema_extra={"example": {"key": "bodyType", "value": "SUV"}})


class SaveSearchRequest(BaseModel):
    """Save the filters of a session (or of a URL) under a name."""

    name: str
    session_id: Optional[str] = None
    url: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={"example": {"name": "Family SUVs", "session_id": "4f1c2a"}}
    )


class SavedSearchView(CamelDTO):
    """Saved search as listed to its owner."""

    id: str
    name: str
    filters: dict[str, str]
    summary: str
    created_at: datetime
    last_checked: Optional[datetime] = None
    new_results_count: int = 0


class SuggestionsView(CamelDTO):
    """Suggestions for a partial query."""

    query: str
    type: str
    suggestions: list[Suggestion] = Field(default_factory=list)


class OptionView(CamelDTO):
    """Value/label pair."""

    value: str
    label: str


class SearchOptionsView(CamelDTO):
    """Static option lists of the search page."""

    sort_options: list[OptionView]
    listing_types: list[OptionView]
    features: list[str]
