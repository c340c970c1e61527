"""
Offset/limit pagination over a filtered Pivotal Tracker collection.

Pivotal Tracker does not return filtered listings in a stable order and the
X-Tracker-Pagination-Total it reports can change from one page to the next.
The cursor therefore refreshes its total from every response and treats the
latest value as the loop bound.

Two modes:
    limit > 0   fetch `limit` items per request (lazy iteration)
    limit == 0  one sizing request to read the total, then ask for
                everything in as few requests as the server allows
"""

import httpx
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar, TYPE_CHECKING

from pivotal_client.utils.logging_config import get_logger
from pivotal_client.utils.exceptions import CursorError

if TYPE_CHECKING:
    from pivotal_client.client import Client, Response

logger = get_logger("cursor")

T = TypeVar("T")

# Number of items to fetch at once when iterating lazily.
PAGE_LIMIT = 10

# Sentinel limit: size the page from the server's reported total.
FETCH_ALL = 0


@dataclass(frozen=True)
class ListRequest:
    """Builds the GET request for one filtered collection."""
    client: "Client"
    path: str
    filter: str = ""
    params: Optional[Dict[str, Any]] = None

    def build(self) -> httpx.Request:
        params = dict(self.params or {})
        if self.filter:
            params["filter"] = self.filter
        return self.client.new_request("GET", self.path, params=params or None)


def with_pagination(request: httpx.Request, offset: int, limit: int) -> httpx.Request:
    """Return a copy of a GET request with offset/limit query parameters set."""
    url = request.url.copy_merge_params({"offset": offset, "limit": limit})
    return httpx.Request(request.method, url, headers=request.headers)


class Cursor(Generic[T]):
    """
    Stateful pagination driver for one collection endpoint.

    Not safe for concurrent use.
    """

    def __init__(
        self,
        client: "Client",
        builder: ListRequest,
        decode: Callable[[Any], List[T]],
        limit: int = FETCH_ALL,
    ):
        """
        Initialize the cursor.

        With limit == FETCH_ALL this sends one request to learn the total.

        Args:
            client: Transport used to execute requests
            builder: Produces a fresh request for every page
            decode: Turns the JSON body of a page into items
            limit: Items per request, or FETCH_ALL
        """
        if limit < 0:
            raise CursorError(f"Cursor limit must be >= 0, got {limit}")

        self._client = client
        self._builder = builder
        self._decode = decode
        self.limit = limit
        self.page_size = limit
        self.offset = 0
        self.total: Optional[int] = None
        self._exhausted = False

        if limit == FETCH_ALL:
            self._size()

    @property
    def done(self) -> bool:
        """True once the server has nothing left past the current offset."""
        if self._exhausted:
            return True
        return self.total is not None and self.offset >= self.total

    def _size(self) -> None:
        self._fetch(offset=0, limit=1, decode=None)
        if self.total is None:
            # Endpoint without pagination headers returns the whole collection.
            self.page_size = PAGE_LIMIT
        else:
            self.page_size = max(self.total, 1)
        logger.debug(f"Sized {self._builder.path}: total={self.total}, page_size={self.page_size}")

    def _fetch(self, offset: int, limit: int, decode: Optional[Callable[[Any], Any]]) -> "Response":
        request = with_pagination(self._builder.build(), offset=offset, limit=limit)
        response = self._client.do(request, decode)
        if response.pagination is not None:
            self._update_total(response.pagination.total)
        return response

    def _update_total(self, total: int) -> None:
        if self.total is not None and total != self.total:
            logger.warning(
                f"Reported total for {self._builder.path} changed from {self.total} to {total} "
                f"at offset {self.offset}"
            )
        self.total = total

    def next(self, into: List[T]) -> int:
        """
        Fetch the next page and append its items to `into`.

        Returns:
            Number of items fetched; 0 once the collection is exhausted

        Raises:
            PivotalClientError: transport or decode failure, unchanged
        """
        if self.done:
            return 0

        response = self._fetch(offset=self.offset, limit=self.page_size, decode=self._decode)
        items = response.data or []
        into.extend(items)

        # The server may cap the limit; step and compare by what it says it applied.
        expected = self.page_size
        if response.pagination is None:
            expected = len(items) + 1
        elif response.pagination.limit:
            expected = min(expected, response.pagination.limit)

        if self.limit == FETCH_ALL:
            self.offset += len(items)
        else:
            self.offset += min(self.page_size, expected)

        if len(items) < expected:
            self._exhausted = True

        logger.debug(
            f"Fetched {len(items)} from {self._builder.path} "
            f"(offset={self.offset}, total={self.total})"
        )
        return len(items)

    def all(self) -> List[T]:
        """
        Drain every remaining page.

        Any error discards the items gathered so far and propagates.
        """
        items: List[T] = []
        while not self.done:
            if self.next(items) == 0:
                break
        logger.debug(f"Listed {len(items)} items from {self._builder.path}")
        return items
