"""Parse loosely-typed request parameters into a ListingQuery.

Malformed values never raise: they fall back to the default, or to
"absent" for optional filters.
"""

import re
from typing import Any, Mapping, Optional

from .models import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    DEFAULT_SORT_BY,
    DEFAULT_SORT_ORDER,
    SORT_KEYS,
    ListingQuery,
)

_INT_RE = re.compile(r"[+-]?[0-9]{1,19}")

# Values must fit a signed 64-bit SQL integer
MAX_SQL_INT = 2**63 - 1
MIN_SQL_INT = -(2**63)


def _first(value: Any) -> Any:
    """Query string parsers hand back lists for repeated keys; the first value wins."""
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


def _parse_int(value: Any) -> Optional[int]:
    value = _first(value)
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        text = value.strip()
        value = int(text) if _INT_RE.fullmatch(text) else None
    if isinstance(value, int) and MIN_SQL_INT <= value <= MAX_SQL_INT:
        return value
    return None


def _parse_text(value: Any) -> Optional[str]:
    value = _first(value)
    if not isinstance(value, str):
        return None
    text = value.strip()
    return text or None


def parse_query_params(raw: Mapping[str, Any]) -> ListingQuery:
    """
    Build a ListingQuery from raw request parameters.

    Args:
        raw: String-keyed request parameters using the wire names
            (search, page, limit, sortBy, sortOrder, city, degree,
            minExperience, maxExperience). Values may be strings, ints or
            lists of either.

    Returns:
        ListingQuery with defaults applied
    """
    page = _parse_int(raw.get("page"))
    if page is None or page < 1:
        page = DEFAULT_PAGE

    limit = _parse_int(raw.get("limit"))
    if limit is None or limit < 1:
        limit = DEFAULT_LIMIT

    # Keep offset + limit inside the SQL integer range
    page = min(page, (MAX_SQL_INT - limit) // limit + 1)

    sort_by = SORT_KEYS.get(_parse_text(raw.get("sortBy")) or "", DEFAULT_SORT_BY)

    sort_order = (_parse_text(raw.get("sortOrder")) or "").lower()
    if sort_order not in ("asc", "desc"):
        sort_order = DEFAULT_SORT_ORDER

    return ListingQuery(
        search=_parse_text(raw.get("search")) or "",
        page=page,
        limit=limit,
        sort_by=sort_by,
        sort_order=sort_order,
        city=_parse_text(raw.get("city")),
        degree=_parse_text(raw.get("degree")),
        min_experience=_parse_int(raw.get("minExperience")),
        max_experience=_parse_int(raw.get("maxExperience")),
    )
