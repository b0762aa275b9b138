"""Pagination — pure parsing and arithmetic for the customer listing.

Invariants:
    - Unparseable page/limit values become 0, never an error
    - page and limit below 1 fall back to DEFAULT_PAGE / DEFAULT_LIMIT
    - offset = (page - 1) * limit, capped at the 64-bit maximum
    - total_pages uses floor division: a partially filled last page is not counted
"""

from dataclasses import dataclass

from customer_api.core.domain_types import INT64_MAX, parse_int64

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


def parse_int_or_zero(raw: str | None) -> int:
    """Parse a base-10 integer query value, 0 when absent or invalid.

    Surrounding whitespace, underscores and values outside the 64-bit
    range are rejected, unlike a bare int().
    """
    value = parse_int64(raw)
    return 0 if value is None else value


@dataclass(frozen=True)
class PageRequest:
    """A 1-based page of `limit` rows."""
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @property
    def offset(self) -> int:
        # past INT64_MAX every page is empty anyway
        return min((self.page - 1) * self.limit, INT64_MAX)


def build_page_request(page_raw: str | None, limit_raw: str | None) -> PageRequest:
    """Build a PageRequest from raw query strings, applying defaults."""
    page = parse_int_or_zero(page_raw)
    limit = parse_int_or_zero(limit_raw)
    if page < 1:
        page = DEFAULT_PAGE
    if limit < 1:
        limit = DEFAULT_LIMIT
    return PageRequest(page=page, limit=limit)


def count_total_pages(total_records: int, limit: int) -> int:
    # floor division; 25 rows at limit 10 -> 2
    return total_records // limit
