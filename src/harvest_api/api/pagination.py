"""
Pagination state and automatic paging for list endpoints.

This module provides the cursor each endpoint keeps between successive list
calls, and an iterator that walks every page of a list endpoint.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional

from .errors import UnsupportedOperationError
from ..models.responses import PaginationInfo

logger = logging.getLogger(__name__)


def coerce_page_number(value: Any) -> Any:
    """
    Normalize a page or per-page value

    Numeric strings become integers; None and every other value are kept
    as given.

    Args:
        value: Value supplied by the caller

    Returns:
        The normalized value
    """
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return value


class PaginationState:
    """
    Page cursor for one endpoint's sequence of list calls.

    ``page`` and ``per_page`` describe what the caller wants on the next
    request; the remaining fields are learned from the last successful
    list response. Not safe to share between concurrent sequences.
    """

    def __init__(self):
        self._page: Optional[int] = None
        self._per_page: Optional[int] = None
        self._total_entries: Optional[int] = None
        self._total_pages: Optional[int] = None
        self._next_page: Optional[int] = None
        self._previous_page: Optional[int] = None

    @property
    def page(self) -> Optional[int]:
        return self._page

    @property
    def per_page(self) -> Optional[int]:
        return self._per_page

    @property
    def total_entries(self) -> Optional[int]:
        return self._total_entries

    @property
    def total_pages(self) -> Optional[int]:
        return self._total_pages

    @property
    def next_page(self) -> Optional[int]:
        return self._next_page

    @property
    def previous_page(self) -> Optional[int]:
        return self._previous_page

    def set_page(self, page: Any) -> 'PaginationState':
        self._page = coerce_page_number(page)
        return self

    def set_per_page(self, per_page: Any) -> 'PaginationState':
        self._per_page = coerce_page_number(per_page)
        return self

    def get_page(self) -> Optional[int]:
        return self._page

    def get_per_page(self) -> Optional[int]:
        return self._per_page

    def get_total_entries(self) -> Optional[int]:
        return self._total_entries

    def get_total_pages(self) -> Optional[int]:
        return self._total_pages

    def get_next_page(self) -> Optional[int]:
        return self._next_page

    def get_previous_page(self) -> Optional[int]:
        return self._previous_page

    def has_more(self) -> bool:
        """Whether the last list response announced a next page"""
        return self._next_page is not None

    def update(self, info: PaginationInfo) -> None:
        """Record totals and cursors from a successful list response"""
        self._total_entries = info.total_entries
        self._total_pages = info.total_pages
        self._next_page = info.next_page
        self._previous_page = info.previous_page

    def reset(self) -> 'PaginationState':
        """Clear all fields before starting an independent sequence"""
        self._page = None
        self._per_page = None
        self._total_entries = None
        self._total_pages = None
        self._next_page = None
        self._previous_page = None
        return self

    def __repr__(self) -> str:
        return (f"PaginationState(page={self._page!r}, per_page={self._per_page!r}, "
                f"total_entries={self._total_entries!r}, total_pages={self._total_pages!r}, "
                f"next_page={self._next_page!r}, previous_page={self._previous_page!r})")


class AutoPagingIterator:
    """
    Lazy, restartable sequence of result pages for a list endpoint.

    Each iteration starts over from the first requested page and fetches
    one page at a time, following ``next_page`` until the endpoint reports
    no more pages or the next page does not advance. The endpoint's page
    is restored when iteration ends, fails or is abandoned.

    Args:
        api: Endpoint exposing a ``list`` operation
        parameters: Filters passed to every ``list`` call; a ``page`` entry
            sets the first page to fetch
    """

    def __init__(self, api: Any, parameters: Optional[Dict[str, Any]] = None):
        if not callable(getattr(api, 'list', None)):
            raise UnsupportedOperationError('The resource does not support retrieving all objects.')

        self.api = api
        self.parameters = dict(parameters or {})
        self.start_page = coerce_page_number(self.parameters.pop('page', None)) or 1

    def __iter__(self) -> Iterator[List[Any]]:
        return self._pages()

    def _pages(self) -> Iterator[List[Any]]:
        initial_page = self.api.get_page()
        page = self.start_page
        try:
            while page is not None:
                self.api.set_page(page)
                logger.debug(f"Fetching page {page} from {type(self.api).__name__}")
                items = self.api.list(dict(self.parameters))
                yield items

                if not items or not self.api.has_more():
                    break

                next_page = self.api.get_next_page()
                if not isinstance(next_page, int) or next_page <= page:
                    logger.warning(f"Stopping auto paging: next page {next_page!r} does not follow page {page}")
                    break
                page = next_page
        finally:
            # The requested page must not leak into later list calls
            self.api.set_page(initial_page)

    def items(self) -> Iterator[Any]:
        """Iterate over the individual records of every page"""
        for page in self:
            yield from page
