"""
Pagination math for admin tables.

Tables combine two kinds of paging:
- server paging: the backend returns one page plus PageInfo metadata
- local paging: a filtered list is sliced into pages in the session

Everything here is bounds-safe: an out-of-range page yields an empty slice,
never an exception.
"""

import math
from dataclasses import dataclass
from typing import Generic, List, Optional, Sequence, Tuple, TypeVar

from pricewatch.models import PageInfo

T = TypeVar("T")

DEFAULT_WINDOW_WIDTH = 5


@dataclass
class PageSlice(Generic[T]):
    """
    One page of a locally paginated list.

    Attributes:
        items: Rows on this page
        page: 0-indexed page number requested
        size: Page size
        total_items: Number of rows before slicing
        total_pages: ceil(total_items / size)
    """
    items: List[T]
    page: int
    size: int
    total_items: int
    total_pages: int

    @property
    def start(self) -> int:
        """1-based index of the first row shown (0 when the page is empty)."""
        return showing_range(self.page, self.size, self.total_items)[0]

    @property
    def end(self) -> int:
        """1-based index of the last row shown (0 when the page is empty)."""
        return showing_range(self.page, self.size, self.total_items)[1]

    @property
    def has_previous(self) -> bool:
        return self.page > 0

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages - 1


def total_pages(count: int, size: int) -> int:
    """Number of pages needed for ``count`` rows; 0 rows means 0 pages."""
    if size < 1:
        raise ValueError(f"page size must be >= 1, got {size}")
    if count <= 0:
        return 0
    return math.ceil(count / size)


def paginate(items: Sequence[T], page: int, size: int) -> PageSlice[T]:
    """
    Slice ``items`` into the requested 0-indexed page.

    Raises:
        ValueError: if size < 1
    """
    pages = total_pages(len(items), size)
    if page < 0:
        page_items: List[T] = []
    else:
        page_items = list(items[page * size:(page + 1) * size])
    return PageSlice(
        items=page_items,
        page=page,
        size=size,
        total_items=len(items),
        total_pages=pages,
    )


def clamp_page(page: int, pages: int) -> int:
    """Keep a page index within [0, pages - 1] (0 when there are no pages)."""
    return max(0, min(page, max(pages - 1, 0)))


def next_page(page: int, pages: int) -> int:
    return clamp_page(page + 1, pages)


def previous_page(page: int) -> int:
    return max(0, page - 1)


def page_window(page: int, pages: int, width: int = DEFAULT_WINDOW_WIDTH) -> List[int]:
    """
    Page numbers to render as numbered buttons.

    Shows at most ``width`` buttons: the first pages near the start, the last
    pages near the end, otherwise the current page centred.

    Example:
        >>> page_window(6, 20)
        [4, 5, 6, 7, 8]
    """
    if pages <= 0:
        return []
    if pages <= width:
        return list(range(pages))

    half = width // 2
    if page < half + 1:
        first = 0
    elif page > pages - (half + 1):
        first = pages - width
    else:
        first = page - half
    return list(range(first, first + width))


def showing_range(page: int, size: int, total: int) -> Tuple[int, int]:
    """
    1-based (first, last) row numbers for "Showing X to Y of Z".

    Returns (0, 0) when nothing is on the page.
    """
    first = page * size + 1
    last = min((page + 1) * size, total)
    if total <= 0 or page < 0 or first > total:
        return (0, 0)
    return (first, last)


def server_total_pages(page_info: Optional[PageInfo]) -> int:
    """
    Total pages reported by the backend, defaulting to 1.

    The backend omits or zeroes the page block for empty tables; the pager
    still needs one (empty) page to render.
    """
    if page_info is None or not page_info.total_pages:
        return 1
    return page_info.total_pages
