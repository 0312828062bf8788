"""Capability interface shared by the relational and in-memory adapters."""

from typing import List, Protocol

from .conditions import ConditionSet
from .models import Advocate, SortOrder


class BackendAdapter(Protocol):
    """
    Executes a condition set, sort and page window against one data source.

    Both operations are read-only. The only error an implementation may
    raise is ConnectivityError.
    """

    name: str

    def count(self, conditions: ConditionSet) -> int:
        """Number of records matching every condition, ignoring paging."""
        ...

    def fetch(
        self,
        conditions: ConditionSet,
        sort_by: str,
        sort_order: SortOrder,
        offset: int,
        limit: int,
    ) -> List[Advocate]:
        """Matching records, stably sorted by `sort_by`, windowed by offset/limit."""
        ...
