"""
Pagination cursors for Pivotal Tracker collections.
"""

from pivotal_client.cursors.cursor import (
    Cursor,
    ListRequest,
    PAGE_LIMIT,
    FETCH_ALL,
    with_pagination,
)
from pivotal_client.cursors.typed import (
    TypedCursor,
    StoryCursor,
    EpicCursor,
    NextResult,
    Outcome,
)

__all__ = [
    "Cursor",
    "ListRequest",
    "PAGE_LIMIT",
    "FETCH_ALL",
    "with_pagination",
    "TypedCursor",
    "StoryCursor",
    "EpicCursor",
    "NextResult",
    "Outcome",
]
