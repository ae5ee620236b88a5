import logging
from typing import Callable, List, Optional, TypeVar

from core import Page

T = TypeVar("T")

FetchPage = Callable[[Optional[str], int], Page[T]]

DEFAULT_PAGE_SIZE = 200

# Default result limits per entity kind for list commands and name lookups.
LIMITS = {
    "tasks": 300,
    "projects": 50,
    "sections": 300,
    "labels": 300,
    "comments": 10,
}

logger = logging.getLogger("td.pagination")


def paginate(
    fetch_page: FetchPage[T],
    limit: int,
    page_size: int = DEFAULT_PAGE_SIZE,
    start_cursor: Optional[str] = None,
) -> Page[T]:
    """Walk a cursor-paginated stream until ``limit`` results or the end.

    ``fetch_page(cursor, size)`` is called with the cursor from the previous page
    and never with a size above the remaining quota. The returned cursor is the
    last one the backend sent: None when the stream was exhausted, otherwise the
    position to continue from. Errors from ``fetch_page`` propagate and the
    results gathered so far are dropped.
    """
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    cursor = start_cursor
    collected: List[T] = []
    while len(collected) < limit:
        request_size = min(limit - len(collected), page_size)
        page = fetch_page(cursor, request_size)
        collected.extend(page.results)
        cursor = page.next_cursor
        logger.debug("fetched %s items (total %s), next cursor %r", len(page.results), len(collected), cursor)
        if not cursor:
            break
    return Page(results=collected[:limit], next_cursor=cursor)


__all__ = ["FetchPage", "DEFAULT_PAGE_SIZE", "LIMITS", "paginate"]
