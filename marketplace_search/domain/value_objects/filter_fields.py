"""Filter field table: query parameter names, defaults and encoding rules."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Callable, Optional, Union

PRICE_FLOOR = 0
PRICE_CEILING = 10_000_000
YEAR_FLOOR = 1990
MILEAGE_FLOOR = 0
MILEAGE_CEILING = 500_000

SORT_BY_CHOICES = ("relevance", "price", "year", "mileage", "createdAt", "views")
SORT_ORDER_CHOICES = ("asc", "desc")
MULTI_SEPARATOR = ","


def current_year() -> int:
    """Return the current calendar year (upper bound of the year range)."""
    return date.today().year


class FieldKind(str, Enum):
    """How a filter field is typed and encoded."""

    TEXT = "text"
    INTEGER = "integer"
    MULTI = "multi"
    CHOICE = "choice"
    FLAG = "flag"


# Zero-values per kind; a field holding one of these is never serialized.
_ZERO_VALUES: dict[FieldKind, Any] = {
    FieldKind.TEXT: "",
    FieldKind.INTEGER: 0,
    FieldKind.MULTI: (),
    FieldKind.FLAG: False,
}


@dataclass(frozen=True)
class FilterField:
    """One row of the serialization table."""

    attr: str
    param: str
    kind: FieldKind
    default: Union[Any, Callable[[], Any]]
    choices: tuple[str, ...] = ()
    counts_as_filter: bool = True

    def default_value(self, year: Optional[int] = None) -> Any:
        """
        Resolve the field default.

        Args:
            year: Current year override (only used by the max year field)

        Returns:
            Default value for the field
        """
        if callable(self.default):
            return year if year is not None else self.default()
        return self.default

    def is_omitted(self, value: Any, year: Optional[int] = None) -> bool:
        """Check whether a value is dropped from the query string."""
        if value == self.default_value(year):
            return True
        return self.kind in _ZERO_VALUES and value == _ZERO_VALUES[self.kind]

    def encode(self, value: Any) -> str:
        """Encode a value as a query parameter string."""
        if self.kind == FieldKind.MULTI:
            return MULTI_SEPARATOR.join(value)
        if self.kind == FieldKind.FLAG:
            return "true" if value else "false"
        return str(value)

    def decode(self, raw: Optional[str], year: Optional[int] = None) -> Any:
        """
        Decode a raw query parameter, falling back to the default.

        Args:
            raw: Raw parameter value, or None when absent
            year: Current year override

        Returns:
            Decoded value
        """
        default = self.default_value(year)
        if raw is None or raw == "":
            return default
        if self.kind == FieldKind.INTEGER:
            try:
                return int(raw.strip())
            except ValueError:
                return default
        if self.kind == FieldKind.MULTI:
            return unique_items(item for item in raw.split(MULTI_SEPARATOR) if item)
        if self.kind == FieldKind.FLAG:
            return raw == "true"
        if self.kind == FieldKind.CHOICE:
            return raw if raw in self.choices else default
        return raw

    def check_item(self, item: str) -> str:
        """Reject multi-select items that would split apart in the query string."""
        if MULTI_SEPARATOR in item:
            raise ValueError(f"{self.param} values cannot contain '{MULTI_SEPARATOR}': {item!r}")
        return item

    def coerce(self, value: Any) -> Any:
        """
        Coerce a caller-supplied value to the field type.

        Args:
            value: Raw value from the caller

        Returns:
            Value of the field type

        Raises:
            ValueError: If the value cannot represent this field
        """
        if self.kind == FieldKind.INTEGER:
            if isinstance(value, bool):
                raise ValueError(f"{self.param} expects an integer, got {value!r}")
            try:
                return int(value)
            except (TypeError, ValueError) as e:
                raise ValueError(f"{self.param} expects an integer, got {value!r}") from e
        if self.kind == FieldKind.MULTI:
            if isinstance(value, str):
                return unique_items(item for item in value.split(MULTI_SEPARATOR) if item)
            if value is None:
                return ()
            return unique_items(self.check_item(str(item)) for item in value)
        if self.kind == FieldKind.FLAG:
            if isinstance(value, str):
                return value.lower() == "true"
            return bool(value)
        if self.kind == FieldKind.CHOICE:
            if value not in self.choices:
                raise ValueError(f"{self.param} must be one of {', '.join(self.choices)}")
            return value
        return "" if value is None else str(value)


def unique_items(items) -> tuple[str, ...]:
    """Deduplicate while keeping first-seen order."""
    return tuple(dict.fromkeys(items))


FILTER_FIELDS: tuple[FilterField, ...] = (
    FilterField("query", "q", FieldKind.TEXT, ""),
    FilterField("make", "make", FieldKind.TEXT, ""),
    FilterField("model", "model", FieldKind.TEXT, ""),
    FilterField("min_price", "minPrice", FieldKind.INTEGER, PRICE_FLOOR),
    FilterField("max_price", "maxPrice", FieldKind.INTEGER, PRICE_CEILING),
    FilterField("min_year", "minYear", FieldKind.INTEGER, YEAR_FLOOR),
    FilterField("max_year", "maxYear", FieldKind.INTEGER, current_year),
    FilterField("min_mileage", "minMileage", FieldKind.INTEGER, MILEAGE_FLOOR),
    FilterField("max_mileage", "maxMileage", FieldKind.INTEGER, MILEAGE_CEILING),
    FilterField("location", "location", FieldKind.TEXT, ""),
    FilterField("body_type", "bodyType", FieldKind.MULTI, ()),
    FilterField("fuel_type", "fuelType", FieldKind.MULTI, ()),
    FilterField("transmission", "transmission", FieldKind.MULTI, ()),
    FilterField("condition", "condition", FieldKind.MULTI, ()),
    FilterField("features", "features", FieldKind.MULTI, ()),
    FilterField("listing_type", "listingType", FieldKind.MULTI, ()),
    FilterField(
        "sort_by", "sortBy", FieldKind.CHOICE, "relevance", SORT_BY_CHOICES, counts_as_filter=False
    ),
    FilterField(
        "sort_order", "sortOrder", FieldKind.CHOICE, "desc", SORT_ORDER_CHOICES, counts_as_filter=False
    ),
    FilterField("include_rentals", "includeRentals", FieldKind.FLAG, False, counts_as_filter=False),
)

_FIELDS_BY_KEY: dict[str, FilterField] = {
    **{field.attr: field for field in FILTER_FIELDS},
    **{field.param: field for field in FILTER_FIELDS},
}


def resolve_field(key: str) -> FilterField:
    """
    Look up a field by attribute name or query parameter name.

    Args:
        key: Attribute name (``min_price``) or parameter name (``minPrice``)

    Returns:
        The matching filter field

    Raises:
        ValueError: If the key names no filter field
    """
    try:
        return _FIELDS_BY_KEY[key]
    except KeyError as e:
        raise ValueError(f"Unknown filter field: {key}") from e
