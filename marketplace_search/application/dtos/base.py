"""Base DTO classes."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DTO(BaseModel):
    """Base class for application DTOs."""

    model_config = ConfigDict(frozen=True)


class CamelDTO(DTO):
    """DTO read from (and written as) the search API's camelCase JSON."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)
