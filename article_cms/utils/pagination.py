"""
Pagination Utilities

Offset pagination helpers shared by every listing path, so page-boundary
semantics are identical whether paging happens in SQL or in memory.
"""

import math
from dataclasses import dataclass
from typing import Any

from fastapi import Query

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
# LIMIT and OFFSET are bound as signed 64-bit integers by the database drivers
MAX_SQL_INTEGER = 2**63 - 1


@dataclass(frozen=True)
class PaginationWindow:
    """Normalized page bounds"""

    page: int
    page_size: int
    limit: int
    offset: int


def _finite_number(value: Any) -> float | None:
    """Return ``value`` as a finite float, or None when it is not one."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def resolve_pagination(
    page: Any = DEFAULT_PAGE,
    page_size: Any = DEFAULT_PAGE_SIZE,
    min_page_size: int = 1,
    max_page_size: int | None = None,
) -> PaginationWindow:
    """
    Normalize requested page/page size into bounded offset pagination.

    Invalid input is coerced rather than rejected: None takes the default,
    a non-numeric, non-finite or non-positive page becomes 1, and a
    non-numeric, non-finite or non-positive page size becomes the lower bound.
    Pages too large to express as a SQL OFFSET are lowered to the largest
    one that is, which is always past the last row.

    Args:
        page: Requested 1-based page
        page_size: Requested items per page
        min_page_size: Lower page size bound (never below 1)
        max_page_size: Upper page size bound, None for unbounded

    Returns:
        PaginationWindow with limit == page_size and offset == (page - 1) * page_size
    """
    if page is None:
        page = DEFAULT_PAGE
    if page_size is None:
        page_size = DEFAULT_PAGE_SIZE

    requested_page = _finite_number(page)
    normalized_page = math.floor(requested_page) if requested_page is not None and requested_page > 0 else 1
    # floor(0.5) is 0, which is still not a valid page
    normalized_page = max(1, normalized_page)

    lower_bound = max(1, math.floor(min_page_size))
    upper_bound = None if max_page_size is None else max(lower_bound, math.floor(max_page_size))

    requested_size = _finite_number(page_size)
    if requested_size is not None and requested_size > 0:
        normalized_size = math.floor(requested_size)
    else:
        normalized_size = lower_bound

    if normalized_size < lower_bound:
        normalized_size = lower_bound
    if upper_bound is not None and normalized_size > upper_bound:
        normalized_size = upper_bound
    normalized_size = min(normalized_size, MAX_SQL_INTEGER)
    normalized_page = min(normalized_page, MAX_SQL_INTEGER // normalized_size + 1)

    return PaginationWindow(
        page=normalized_page,
        page_size=normalized_size,
        limit=normalized_size,
        offset=(normalized_page - 1) * normalized_size,
    )


def calculate_total_pages(total_items: Any, page_size: Any) -> int:
    """Number of pages needed for ``total_items``; 0 for empty or invalid input."""
    items = _finite_number(total_items)
    size = _finite_number(page_size)
    if items is None or items <= 0:
        return 0
    if size is None or size <= 0:
        return 0
    return math.ceil(items / size)


class PaginationParams:
    """
    FastAPI dependency for page-number pagination parameters.

    Values are accepted as-is and normalized by ``resolve_pagination`` so a
    bad page number degrades to the first page instead of a 422.

    Usage:
        @router.get("/items")
        async def list_items(pagination: PaginationParams = Depends()):
            ...
    """

    def __init__(
        self,
        page: str | None = Query(default=None, description="1-based page number"),
        page_size: str | None = Query(default=None, description="Number of items per page"),
    ):
        self.page = page
        self.page_size = page_size
