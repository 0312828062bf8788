"""Backend-agnostic filter predicates derived from a ListingQuery.

A condition set is a tuple of predicates combined with AND. An empty tuple
matches every record. Adapters translate each predicate into their own
matching language; nothing here knows about SQL.
"""

from dataclasses import dataclass
from typing import Tuple, Union

from .models import ListingQuery

# Scalar text fields covered by the free-text search, in evaluation order
SEARCH_TEXT_FIELDS: Tuple[str, ...] = ("first_name", "last_name", "city", "degree")
SEARCH_ARRAY_FIELD = "specialties"
EXPERIENCE_FIELD = "years_of_experience"


@dataclass(frozen=True)
class TextMatch:
    """Case-insensitive substring match against a scalar text field."""
    field: str
    needle: str


@dataclass(frozen=True)
class ArrayTextMatch:
    """Case-insensitive substring match against any element of a multi-valued field."""
    field: str
    needle: str


@dataclass(frozen=True)
class SearchOr:
    """Free-text search: any search text field or any specialty contains the needle."""
    needle: str

    def alternatives(self) -> Tuple[Union[TextMatch, ArrayTextMatch], ...]:
        return tuple(TextMatch(field, self.needle) for field in SEARCH_TEXT_FIELDS) + (
            ArrayTextMatch(SEARCH_ARRAY_FIELD, self.needle),
        )


@dataclass(frozen=True)
class RangeMin:
    """Inclusive lower bound on a numeric field."""
    field: str
    value: int


@dataclass(frozen=True)
class RangeMax:
    """Inclusive upper bound on a numeric field."""
    field: str
    value: int


Condition = Union[TextMatch, ArrayTextMatch, SearchOr, RangeMin, RangeMax]
ConditionSet = Tuple[Condition, ...]


def build_conditions(query: ListingQuery) -> ConditionSet:
    """Derive the predicate list from a query in its fixed order."""
    conditions: list[Condition] = []
    if query.search:
        conditions.append(SearchOr(query.search))
    if query.city is not None:
        conditions.append(TextMatch("city", query.city))
    if query.degree is not None:
        conditions.append(TextMatch("degree", query.degree))
    if query.min_experience is not None:
        conditions.append(RangeMin(EXPERIENCE_FIELD, query.min_experience))
    if query.max_experience is not None:
        conditions.append(RangeMax(EXPERIENCE_FIELD, query.max_experience))
    return tuple(conditions)


def describe_conditions(conditions: ConditionSet) -> str:
    """Compact one-line summary for log messages."""
    if not conditions:
        return "<all>"
    parts = []
    for condition in conditions:
        if isinstance(condition, SearchOr):
            parts.append(f"search~{condition.needle!r}")
        elif isinstance(condition, (TextMatch, ArrayTextMatch)):
            parts.append(f"{condition.field}~{condition.needle!r}")
        elif isinstance(condition, RangeMin):
            parts.append(f"{condition.field}>={condition.value}")
        elif isinstance(condition, RangeMax):
            parts.append(f"{condition.field}<={condition.value}")
    return " AND ".join(parts)
