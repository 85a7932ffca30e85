"""Search suggestion DTOs."""

from typing import Optional

from pydantic import Field

from marketplace_search.application.dtos.base import CamelDTO


class Suggestion(CamelDTO):
    """Type-ahead suggestion for a partial query."""

    value: str
    type: str
    count: Optional[int] = None


class SuggestionsResponse(CamelDTO):
    """Body of a suggestions call."""

    query: str = ""
    suggestions: list[Suggestion] = Field(default_factory=list)
    type: str = "all"


class TrendingSearches(CamelDTO):
    """Body of a trending searches call."""

    trending: list[str]
    recent: list[str] = Field(default_factory=list)
    period: str = "day"
