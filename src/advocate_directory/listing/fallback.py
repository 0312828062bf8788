"""Per-request backend selection with degraded-mode fallback."""

from dataclasses import dataclass
from typing import List

from ..errors import ConnectivityError
from ..utils.logging import get_logger
from .backends import BackendAdapter
from .conditions import ConditionSet, describe_conditions
from .models import Advocate, ListingQuery

logger = get_logger(__name__)


@dataclass(frozen=True)
class ListingResult:
    records: List[Advocate]
    total: int
    backend: str  # adapter that served the request; logging only


def _run(adapter: BackendAdapter, query: ListingQuery, conditions: ConditionSet) -> ListingResult:
    total = adapter.count(conditions)
    records = adapter.fetch(
        conditions,
        query.sort_by,
        query.sort_order,
        query.offset,
        query.limit,
    )
    return ListingResult(records=list(records), total=total, backend=adapter.name)


class FallbackCoordinator:
    """
    Serve a listing from the primary store, degrading to the fallback dataset.

    Decision table, evaluated once per request with no retries:

    1. Run count then fetch on the primary adapter.
    2. ConnectivityError: rerun the same conditions, sort and window on the
       fallback adapter. Nothing from the primary attempt is kept.
    3. Primary total is 0 and the condition set is empty: the store is taken
       to be unseeded and the fallback adapter serves the same window.
    4. Otherwise the primary result stands, even when it is empty.
    """

    def __init__(self, primary: BackendAdapter, fallback: BackendAdapter):
        self.primary = primary
        self.fallback = fallback

    def execute(self, query: ListingQuery, conditions: ConditionSet) -> ListingResult:
        try:
            result = _run(self.primary, query, conditions)
        except ConnectivityError as exc:
            logger.warning(
                "Store not available, serving fallback dataset (%s): %s",
                describe_conditions(conditions),
                exc,
            )
            return _run(self.fallback, query, conditions)

        if result.total == 0 and not conditions:
            logger.info("Store has no advocates, serving fallback dataset")
            return _run(self.fallback, query, conditions)

        return result
