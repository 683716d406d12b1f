"""Filtered, paginated view over one tag type."""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Executor, Future
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Optional

from ..errors import TagFleetError, user_message
from ..resources._common_types import DomainType, _normalize_domain_type
from ..resources.tags_types import PaginationMeta, Tag, TagQuery
from .filters import FilterState, build_query

if TYPE_CHECKING:  # pragma: no cover
    from ..client import TagFleet

LOAD_FAILED_MESSAGE = "Failed to load tags"

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogResult:
    """Outcome of one listing fetch.

    A failed fetch carries an ``error`` and never any tags. ``stale`` marks a
    result that was superseded by a newer request and therefore not applied.
    """

    tags: list[Tag] = field(default_factory=list)
    meta: Optional[PaginationMeta] = None
    error: Optional[str] = None
    stale: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


class TagCatalog:
    """Holds the visible tag list for one domain type and keeps it in sync.

    Each fetch is numbered when issued. A result is applied only if no newer
    fetch has been issued since, so a slow response for old filters cannot
    overwrite the list for the current ones.
    """

    def __init__(
        self,
        client: "TagFleet",
        domain_type: DomainType | str,
        *,
        filters: Optional[FilterState] = None,
        timeout: Optional[int] = None,
    ) -> None:
        self._client = client
        self.domain_type: DomainType = _normalize_domain_type(domain_type)
        self.timeout = timeout
        self._lock = threading.Lock()
        self._filters = filters or FilterState()
        self._issued = 0
        self._applied = 0
        self._tags: list[Tag] = []
        self._meta: Optional[PaginationMeta] = None
        self._error: Optional[str] = None

    # ------------------------------------------------------------------
    # Observable state
    # ------------------------------------------------------------------
    @property
    def filters(self) -> FilterState:
        with self._lock:
            return self._filters

    @property
    def tags(self) -> list[Tag]:
        with self._lock:
            return list(self._tags)

    @property
    def meta(self) -> Optional[PaginationMeta]:
        with self._lock:
            return self._meta

    @property
    def error(self) -> Optional[str]:
        with self._lock:
            return self._error

    @property
    def is_loading(self) -> bool:
        with self._lock:
            return self._applied < self._issued

    @property
    def is_empty(self) -> bool:
        """True for the loaded "no matches" state, as opposed to loading or failed."""
        with self._lock:
            return (
                self._issued > 0
                and self._applied == self._issued
                and self._error is None
                and not self._tags
            )

    @property
    def has_next(self) -> bool:
        with self._lock:
            meta = self._meta
        if not meta:
            return False
        return meta.get("page", 1) < meta.get("totalPages", 0)

    @property
    def has_previous(self) -> bool:
        with self._lock:
            meta = self._meta
            current_page = self._filters.current_page
        if meta:
            return meta.get("page", current_page) > 1
        return current_page > 1

    def find(self, tag_id: str) -> Optional[Tag]:
        with self._lock:
            for tag in self._tags:
                if tag.id == tag_id:
                    return tag
        return None

    # ------------------------------------------------------------------
    # Fetching
    # ------------------------------------------------------------------
    def fetch_page(self, domain_type: DomainType | str, query: TagQuery) -> CatalogResult:
        """Run one listing request and convert failures to an empty result."""
        try:
            page = self._client.tags.list_by_type(
                domain_type,
                query,
                timeout=self.timeout,
                raise_on_error=True,
            )
        except TagFleetError as exc:
            return CatalogResult(error=user_message(exc, LOAD_FAILED_MESSAGE))
        if page is None:
            return CatalogResult(error=LOAD_FAILED_MESSAGE)
        return CatalogResult(tags=list(page["tags"]), meta=page["meta"])

    def _issue(self) -> tuple[int, TagQuery]:
        with self._lock:
            self._issued += 1
            return self._issued, build_query(self._filters)

    def _complete(self, sequence: int, result: CatalogResult) -> CatalogResult:
        with self._lock:
            if sequence != self._issued:
                _logger.debug(
                    "Discarding %s listing #%s; #%s is newer",
                    self.domain_type,
                    sequence,
                    self._issued,
                )
                return replace(result, stale=True)
            self._tags = list(result.tags)
            self._meta = result.meta
            self._error = result.error
            self._applied = sequence
        if result.error:
            _logger.warning("Loading %s tags failed: %s", self.domain_type, result.error)
        return result

    def _run(self, sequence: int, query: TagQuery) -> CatalogResult:
        return self._complete(sequence, self.fetch_page(self.domain_type, query))

    def refresh(self) -> CatalogResult:
        """Fetch the page described by the current filters."""
        sequence, query = self._issue()
        return self._run(sequence, query)

    def refresh_after_change(self) -> CatalogResult:
        """Re-fetch after a mutation, stepping back if the current page is gone.

        Removing a tag can leave fewer pages than the current page number; the
        catalog then moves to the last page that still exists.
        """
        result = self.refresh()
        if result.stale or not result.ok or not result.meta:
            return result
        total_pages = result.meta.get("totalPages", 0)
        current_page = self.filters.current_page
        if 1 <= total_pages < current_page:
            _logger.debug(
                "Page %s of %s tags no longer exists; showing page %s",
                current_page,
                self.domain_type,
                total_pages,
            )
            return self.go_to_page(total_pages) or result
        return result

    def refresh_in_background(self, executor: Executor) -> "Future[CatalogResult]":
        """Issue a fetch now and run it on ``executor``.

        The request is numbered at call time, so call order decides which
        result wins even if the executor runs them out of order.
        """
        sequence, query = self._issue()
        return executor.submit(self._run, sequence, query)

    # ------------------------------------------------------------------
    # Filter and page changes
    # ------------------------------------------------------------------
    def set_search(self, search_term: Optional[str], *, fetch: bool = True) -> Optional[CatalogResult]:
        with self._lock:
            self._filters = self._filters.with_search(search_term)
        return self.refresh() if fetch else None

    def set_status(self, status: Optional[str], *, fetch: bool = True) -> Optional[CatalogResult]:
        with self._lock:
            self._filters = self._filters.with_status(status)
        return self.refresh() if fetch else None

    def set_vendor(self, vendor_id: Optional[str], *, fetch: bool = True) -> Optional[CatalogResult]:
        with self._lock:
            self._filters = self._filters.with_vendor(vendor_id)
        return self.refresh() if fetch else None

    def go_to_page(self, page: int, *, fetch: bool = True) -> Optional[CatalogResult]:
        with self._lock:
            self._filters = self._filters.with_page(page)
        return self.refresh() if fetch else None

    def next_page(self) -> Optional[CatalogResult]:
        if not self.has_next:
            return None
        return self.go_to_page(self.filters.current_page + 1)

    def previous_page(self) -> Optional[CatalogResult]:
        if not self.has_previous:
            return None
        return self.go_to_page(self.filters.current_page - 1)


__all__ = ["CatalogResult", "LOAD_FAILED_MESSAGE", "TagCatalog"]
