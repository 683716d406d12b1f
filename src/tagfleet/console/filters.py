"""Filter state and the listing query it produces."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from ..resources._common_types import _normalize_status
from ..resources.tags_types import TagQuery

PAGE_SIZE = 10
ALL = ""


def _normalize_filter_value(value: Optional[str]) -> str:
    """Map ``None`` and ``"all"`` to the no-filter sentinel."""
    if value is None:
        return ALL
    value = value.strip()
    if value.lower() == "all":
        return ALL
    return value


@dataclass(frozen=True)
class FilterState:
    """Search, status, vendor and page selection for one tag listing.

    Changing any filter returns a state on page 1, so a page number is never
    combined with filters it was not computed for.
    """

    search_term: str = ""
    status_filter: str = ALL
    vendor_filter: str = ALL
    current_page: int = 1

    def with_search(self, search_term: Optional[str]) -> "FilterState":
        return replace(self, search_term=search_term or "", current_page=1)

    def with_status(self, status: Optional[str]) -> "FilterState":
        status = _normalize_filter_value(status)
        if status != ALL:
            status = _normalize_status(status)
        return replace(self, status_filter=status, current_page=1)

    def with_vendor(self, vendor_id: Optional[str]) -> "FilterState":
        return replace(self, vendor_filter=_normalize_filter_value(vendor_id), current_page=1)

    def with_page(self, page: int) -> "FilterState":
        if isinstance(page, bool) or not isinstance(page, int) or page < 1:
            raise ValueError(f"Invalid page: {page!r}")
        return replace(self, current_page=page)


def build_query(filter_state: FilterState) -> TagQuery:
    """Turn a filter state into listing query parameters.

    No-filter values are omitted rather than sent empty, so the server's own
    defaults apply.
    """
    query: TagQuery = {"page": filter_state.current_page, "limit": PAGE_SIZE}
    if filter_state.vendor_filter:
        query["vendorId"] = filter_state.vendor_filter
    if filter_state.status_filter:
        query["status"] = filter_state.status_filter  # type: ignore[typeddict-item]
    search = filter_state.search_term.strip()
    if search:
        query["search"] = search
    return query


__all__ = ["ALL", "FilterState", "PAGE_SIZE", "build_query"]
