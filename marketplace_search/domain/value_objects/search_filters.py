"""Search filters value object and its state transitions."""

from dataclasses import dataclass, field, replace
from typing import Any, Optional

from marketplace_search.domain.value_objects.filter_fields import (
    FILTER_FIELDS,
    MILEAGE_CEILING,
    MILEAGE_FLOOR,
    PRICE_CEILING,
    PRICE_FLOOR,
    YEAR_FLOOR,
    FieldKind,
    current_year,
    resolve_field,
)


@dataclass(frozen=True)
class SearchFilters:
    """Canonical filter state for one search page session."""

    query: str = ""
    make: str = ""
    model: str = ""
    min_price: int = PRICE_FLOOR
    max_price: int = PRICE_CEILING
    min_year: int = YEAR_FLOOR
    max_year: int = field(default_factory=current_year)
    min_mileage: int = MILEAGE_FLOOR
    max_mileage: int = MILEAGE_CEILING
    location: str = ""
    body_type: tuple[str, ...] = ()
    fuel_type: tuple[str, ...] = ()
    transmission: tuple[str, ...] = ()
    condition: tuple[str, ...] = ()
    features: tuple[str, ...] = ()
    listing_type: tuple[str, ...] = ()
    sort_by: str = "relevance"
    sort_order: str = "desc"
    include_rentals: bool = False

    @classmethod
    def defaults(cls, year: Optional[int] = None) -> "SearchFilters":
        """Build the documented default filter set."""
        return cls(max_year=year if year is not None else current_year())

    def to_dict(self) -> dict[str, Any]:
        """Return fields keyed by query parameter name (lists for multi-selects)."""
        data: dict[str, Any] = {}
        for filter_field in FILTER_FIELDS:
            value = getattr(self, filter_field.attr)
            data[filter_field.param] = list(value) if filter_field.kind == FieldKind.MULTI else value
        return data


def update_filter(filters: SearchFilters, key: str, value: Any) -> SearchFilters:
    """
    Replace a single field.

    Args:
        filters: Current filters
        key: Attribute or query parameter name
        value: New value, coerced to the field type

    Returns:
        New filters with the field replaced

    Raises:
        ValueError: If the key is unknown or the value invalid for the field
    """
    filter_field = resolve_field(key)
    return replace(filters, **{filter_field.attr: filter_field.coerce(value)})


def toggle_array_filter(filters: SearchFilters, key: str, value: str) -> SearchFilters:
    """
    Add a value to a multi-select field if absent, remove it otherwise.

    Args:
        filters: Current filters
        key: Attribute or query parameter name of a multi-select field
        value: Value to toggle

    Returns:
        New filters with the value toggled

    Raises:
        ValueError: If the key does not name a multi-select field, or the
            value contains the multi-select separator
    """
    filter_field = resolve_field(key)
    if filter_field.kind != FieldKind.MULTI:
        raise ValueError(f"{filter_field.param} is not a multi-select filter")
    filter_field.check_item(value)

    current: tuple[str, ...] = getattr(filters, filter_field.attr)
    if value in current:
        toggled = tuple(item for item in current if item != value)
    else:
        toggled = current + (value,)
    return replace(filters, **{filter_field.attr: toggled})


def clear_filters(year: Optional[int] = None) -> SearchFilters:
    """Reset every field to its documented default."""
    return SearchFilters.defaults(year)


def applied_filters_count(filters: SearchFilters, year: Optional[int] = None) -> int:
    """
    Count filter fields that differ from their default.

    Multi-selects count when non-empty; sort fields and the rentals flag
    never count.

    Args:
        filters: Filters to inspect
        year: Current year override

    Returns:
        Number of applied filters
    """
    count = 0
    for filter_field in FILTER_FIELDS:
        if not filter_field.counts_as_filter:
            continue
        value = getattr(filters, filter_field.attr)
        if filter_field.kind == FieldKind.MULTI:
            count += 1 if len(value) >= 1 else 0
        elif value != filter_field.default_value(year):
            count += 1
    return count
