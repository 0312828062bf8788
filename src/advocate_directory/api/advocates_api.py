"""Advocates API: listing endpoint surface."""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from ..database.advocate_repo import RelationalAdapter
from ..database.client import StoreHandle
from ..listing.assembler import assemble_page
from ..listing.conditions import build_conditions, describe_conditions
from ..listing.fallback import FallbackCoordinator
from ..listing.memory import InMemoryAdapter
from ..listing.models import ListingPage
from ..listing.params import parse_query_params
from ..utils.logging import get_logger

logger = get_logger(__name__)

LIST_ERROR_MESSAGE = "Failed to fetch advocates"
DEFAULT_CACHE_MAX_AGE = 60


@dataclass
class ApiResponse:
    """Framework-neutral response: status code, headers and JSON body."""
    status: int
    body: Dict[str, Any]
    headers: Dict[str, str] = field(default_factory=dict)


def cache_control_header(max_age: int) -> str:
    return f"public, s-maxage={max_age}, stale-while-revalidate={max_age}"


def build_store(config: Mapping[str, Any]) -> StoreHandle:
    database = config.get("database", {})
    return StoreHandle(database.get("url"), echo=bool(database.get("echo", False)))


def build_coordinator(
    config: Mapping[str, Any],
    store: Optional[StoreHandle] = None,
) -> FallbackCoordinator:
    """Wire the relational adapter and the bundled fallback dataset."""
    store = store if store is not None else build_store(config)
    return FallbackCoordinator(primary=RelationalAdapter(store), fallback=InMemoryAdapter())


def list_advocates(raw_params: Mapping[str, Any], coordinator: FallbackCoordinator) -> ListingPage:
    """
    Run the listing pipeline for one request.

    Args:
        raw_params: Request parameters by wire name (search, page, limit,
            sortBy, sortOrder, city, degree, minExperience, maxExperience)
        coordinator: Backend selection policy

    Returns:
        ListingPage with records and pagination metadata
    """
    query = parse_query_params(raw_params)
    conditions = build_conditions(query)
    result = coordinator.execute(query, conditions)
    logger.debug(
        "Listed %d of %d advocates from %s (%s, page=%d, limit=%d)",
        len(result.records),
        result.total,
        result.backend,
        describe_conditions(conditions),
        query.page,
        query.limit,
    )
    return assemble_page(result.records, result.total, query.page, query.limit)


def handle_list_request(
    raw_params: Mapping[str, Any],
    coordinator: FallbackCoordinator,
    cache_max_age: int = DEFAULT_CACHE_MAX_AGE,
) -> ApiResponse:
    """
    Listing endpoint: 200 with a cacheable page, or 500 with a generic error.

    Store outages never reach this level; the coordinator absorbs them.
    Anything else that escapes is logged in full and reported to the caller
    only as the generic message.
    """
    try:
        page = list_advocates(raw_params, coordinator)
        body = page.to_payload()
    except Exception as e:
        logger.error(f"Error fetching advocates: {e}", exc_info=True)
        return ApiResponse(status=500, body={"error": LIST_ERROR_MESSAGE})

    return ApiResponse(
        status=200,
        body=body,
        headers={"Cache-Control": cache_control_header(cache_max_age)},
    )

