"""Typed records and payloads for the advocate listing."""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

SortOrder = Literal["asc", "desc"]

# Wire name of each sortable key -> Advocate attribute
SORT_KEYS: Dict[str, str] = {
    "firstName": "first_name",
    "lastName": "last_name",
    "city": "city",
    "degree": "degree",
    "yearsOfExperience": "years_of_experience",
}

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 50
DEFAULT_SORT_BY = "first_name"
DEFAULT_SORT_ORDER: SortOrder = "asc"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class Advocate(_CamelModel):
    """An advocate profile as listed to callers.

    `id` is only set for records read from the relational store; records
    from the fallback dataset never carry one.
    """
    id: Optional[int] = None
    first_name: str
    last_name: str
    city: str
    degree: str
    specialties: List[str] = Field(default_factory=list)
    years_of_experience: int = Field(ge=0)
    phone_number: int

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class ListingQuery(_CamelModel):
    """Normalized filter, sort and paging intent of one listing request."""
    search: str = ""
    page: int = Field(default=DEFAULT_PAGE, ge=1)
    limit: int = Field(default=DEFAULT_LIMIT, gt=0)
    sort_by: Literal["first_name", "last_name", "city", "degree", "years_of_experience"] = DEFAULT_SORT_BY
    sort_order: SortOrder = DEFAULT_SORT_ORDER
    city: Optional[str] = None
    degree: Optional[str] = None
    min_experience: Optional[int] = None
    max_experience: Optional[int] = None

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class Pagination(_CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool


class ListingPage(_CamelModel):
    """One assembled page of advocates plus its pagination metadata."""
    records: List[Advocate]
    pagination: Pagination

    def to_payload(self) -> Dict[str, Any]:
        return {
            "data": [record.to_payload() for record in self.records],
            "pagination": self.pagination.model_dump(by_alias=True),
        }
