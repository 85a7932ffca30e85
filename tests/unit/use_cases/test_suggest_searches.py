"""Unit tests for SuggestSearches."""

from unittest.mock import AsyncMock

import pytest

from marketplace_search.application.dtos.suggestion import Suggestion, TrendingSearches
from marketplace_search.application.ports.search_gateway import SearchGatewayError
from marketplace_search.application.use_cases.suggest_searches import SuggestSearches


@pytest.fixture
def gateway():
    """Mock search gateway."""
    mock = AsyncMock()
    mock.suggest = AsyncMock(
        return_value=[
            Suggestion(value="Toyota", type="make", count=40),
            Suggestion(value="Toyota Camry", type="model", count=12),
        ]
    )
    mock.trending = AsyncMock(
        return_value=TrendingSearches(
            trending=["Toyota Prado", "Honda Vezel", "Nissan X-Trail"],
            recent=["Toyota Camry", "SUV", "automatic", "low mileage"],
        )
    )
    return mock


@pytest.mark.asyncio
async def test_returns_gateway_suggestions(gateway):
    """Test suggestions are passed through."""
    use_case = SuggestSearches(gateway)

    suggestions = await use_case.execute(" toy ", "all", 10)

    assert [suggestion.value for suggestion in suggestions] == ["Toyota", "Toyota Camry"]
    gateway.suggest.assert_awaited_once_with("toy", "all", 10)
    gateway.trending.assert_not_awaited()


@pytest.mark.asyncio
async def test_blank_query_lists_trending_and_recent(gateway):
    """Test blank queries show popular searches without a suggestions call."""
    use_case = SuggestSearches(gateway)

    suggestions = await use_case.execute("   ", limit=5)

    assert [(item.value, item.type) for item in suggestions] == [
        ("Toyota Prado", "trending"),
        ("Honda Vezel", "trending"),
        ("Nissan X-Trail", "trending"),
        ("Toyota Camry", "recent"),
        ("SUV", "recent"),
    ]
    gateway.suggest.assert_not_awaited()


@pytest.mark.asyncio
async def test_short_query_puts_recent_searches_first(gateway):
    """Test one or two character queries list recent searches before matches."""
    use_case = SuggestSearches(gateway)

    suggestions = await use_case.execute("to")

    assert [(item.value, item.type) for item in suggestions] == [
        ("Toyota Camry", "recent"),
        ("SUV", "recent"),
        ("automatic", "recent"),
        ("Toyota", "make"),
    ]


@pytest.mark.asyncio
async def test_no_matches_fall_back_to_trending(gateway):
    """Test queries without matches show trending searches."""
    gateway.suggest.return_value = []
    use_case = SuggestSearches(gateway)

    suggestions = await use_case.execute("zzz")

    assert [item.value for item in suggestions] == ["Toyota Prado", "Honda Vezel", "Nissan X-Trail"]
    assert {item.type for item in suggestions} == {"trending"}


@pytest.mark.asyncio
async def test_trending_failure_keeps_matches(gateway):
    """Test a failing trending call never hides suggestions."""
    gateway.trending.side_effect = SearchGatewayError("HTTP 500")
    use_case = SuggestSearches(gateway)

    assert [item.value for item in await use_case.execute("to")] == ["Toyota", "Toyota Camry"]
    assert await use_case.execute("") == []
    assert (await use_case.trending()).trending == []


@pytest.mark.asyncio
async def test_failure_returns_empty_list(gateway):
    """Test endpoint failures degrade to no suggestions."""
    gateway.suggest.side_effect = SearchGatewayError("HTTP 500")
    logged = []
    use_case = SuggestSearches(gateway, logger=lambda *args, **kwargs: logged.append(kwargs))

    assert await use_case.execute("toy") == []
    assert logged[0]["action"] == "failure"


@pytest.mark.asyncio
async def test_limit_is_clamped(gateway):
    """Test limit is clamped to the endpoint's range."""
    use_case = SuggestSearches(gateway)

    await use_case.execute("toy", limit=100)
    await use_case.execute("toy", limit=0)
    await use_case.trending(limit=50)

    assert [call.args[2] for call in gateway.suggest.await_args_list] == [20, 1]
    gateway.trending.assert_awaited_once_with(20)


@pytest.mark.asyncio
async def test_unknown_type_rejected(gateway):
    """Test suggestion type validation."""
    use_case = SuggestSearches(gateway)

    with pytest.raises(ValueError, match="type must be one of"):
        await use_case.execute("toy", "colours")
