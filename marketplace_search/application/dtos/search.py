"""Search endpoint DTOs."""

from typing import Literal, Optional

from pydantic import ConfigDict, Field

from marketplace_search.application.dtos.base import CamelDTO


class OwnerProfile(CamelDTO):
    """Verification flags of a listing owner."""

    is_verified: bool = False
    is_company_verified: bool = False


class ListingOwner(CamelDTO):
    """Owner summary attached to each search result."""

    id: str
    name: str
    image: Optional[str] = None
    profile: Optional[OwnerProfile] = None


class SearchResult(CamelDTO):
    """One listing returned by the search endpoint."""

    id: str
    title: str
    make: str
    model: str
    year: int
    price: float
    price_per_day: Optional[float] = None
    mileage: int
    location: str
    body_type: str
    fuel_type: str
    transmission: str
    condition: Optional[str] = None
    images: list[str]
    views: int
    listing_type: str
    type: Optional[Literal["sale", "rental"]] = None
    user: ListingOwner

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "lst_001",
                "title": "Toyota Camry 2019",
                "make": "Toyota",
                "model": "Camry",
                "year": 2019,
                "price": 2450000,
                "mileage": 48000,
                "location": "Nairobi",
                "bodyType": "Sedan",
                "fuelType": "Petrol",
                "transmission": "Automatic",
                "images": ["https://cdn.example.com/camry.jpg"],
                "views": 312,
                "listingType": "featured",
                "type": "sale",
                "user": {"id": "usr_9", "name": "Jane Dealer"},
            }
        },
    )

    @property
    def is_rental(self) -> bool:
        """Check if the listing is a rental."""
        return self.type == "rental"


class FacetCount(CamelDTO):
    """Count of results sharing one value of a filterable dimension."""

    value: str
    count: int


class PriceRange(CamelDTO):
    """Price spread over all matching listings, bounds the price slider."""

    min: float = 0
    max: float = 0
    avg: float = 0


class SearchFacets(CamelDTO):
    """Facet counts returned alongside results."""

    makes: list[FacetCount] = Field(default_factory=list)
    body_types: list[FacetCount] = Field(default_factory=list)
    fuel_types: list[FacetCount] = Field(default_factory=list)
    transmissions: list[FacetCount] = Field(default_factory=list)
    conditions: list[FacetCount] = Field(default_factory=list)
    price_range: PriceRange = Field(default_factory=PriceRange)


class SearchInfo(CamelDTO):
    """Search metadata."""

    total_results: int
    search_time: int = 0


class Pagination(CamelDTO):
    """Pagination metadata."""

    page: int
    pages: int


class SearchResponse(CamelDTO):
    """Body of a successful search call."""

    results: list[SearchResult]
    facets: SearchFacets
    search_info: SearchInfo
    pagination: Pagination
