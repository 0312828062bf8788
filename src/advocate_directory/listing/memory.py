"""In-memory adapter over a fixed, read-only advocate dataset."""

from operator import attrgetter
from typing import Iterable, List, Optional, Tuple

from .conditions import (
    ArrayTextMatch,
    Condition,
    ConditionSet,
    RangeMax,
    RangeMin,
    SearchOr,
    TextMatch,
)
from .models import Advocate, SortOrder


def _matches(record: Advocate, condition: Condition) -> bool:
    if isinstance(condition, TextMatch):
        return condition.needle.lower() in getattr(record, condition.field).lower()
    if isinstance(condition, ArrayTextMatch):
        needle = condition.needle.lower()
        return any(needle in item.lower() for item in getattr(record, condition.field))
    if isinstance(condition, SearchOr):
        return any(_matches(record, alt) for alt in condition.alternatives())
    if isinstance(condition, RangeMin):
        return getattr(record, condition.field) >= condition.value
    if isinstance(condition, RangeMax):
        return getattr(record, condition.field) <= condition.value
    raise TypeError(f"Unsupported condition: {condition!r}")


class InMemoryAdapter:
    """
    Evaluates listing requests against records held in process.

    The dataset is copied into a tuple on construction and never mutated,
    so concurrent requests need no locking. Records never carry an id.
    This adapter cannot raise ConnectivityError.
    """

    name = "memory"

    def __init__(self, records: Optional[Iterable[Advocate]] = None):
        if records is None:
            from ..data.fallback_advocates import load_fallback_advocates

            records = load_fallback_advocates()
        self._records: Tuple[Advocate, ...] = tuple(
            record.model_copy(update={"id": None}) if record.id is not None else record
            for record in records
        )

    @property
    def records(self) -> Tuple[Advocate, ...]:
        return self._records

    def _filter(self, conditions: ConditionSet) -> List[Advocate]:
        return [
            record
            for record in self._records
            if all(_matches(record, condition) for condition in conditions)
        ]

    def count(self, conditions: ConditionSet) -> int:
        return len(self._filter(conditions))

    def fetch(
        self,
        conditions: ConditionSet,
        sort_by: str,
        sort_order: SortOrder,
        offset: int,
        limit: int,
    ) -> List[Advocate]:
        # sorted() is stable, and reverse=True keeps equal keys in dataset order
        ordered = sorted(
            self._filter(conditions),
            key=attrgetter(sort_by),
            reverse=sort_order == "desc",
        )
        return ordered[offset:offset + limit]
