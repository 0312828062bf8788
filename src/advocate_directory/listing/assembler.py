"""Pagination metadata and response shaping."""

import math
from typing import Sequence

from .models import Advocate, ListingPage, Pagination


def build_pagination(total: int, page: int, limit: int) -> Pagination:
    """Page count and next/previous flags for `total` records split into pages of `limit`."""
    return Pagination(
        page=page,
        limit=limit,
        total=total,
        total_pages=math.ceil(total / limit),
        has_next=page * limit < total,
        has_prev=page > 1,
    )


def assemble_page(records: Sequence[Advocate], total: int, page: int, limit: int) -> ListingPage:
    """Package one page of records with its pagination metadata."""
    return ListingPage(records=list(records), pagination=build_pagination(total, page, limit))
