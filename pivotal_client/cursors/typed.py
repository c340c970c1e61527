"""
Single-item iteration over a Cursor.

A typed cursor buffers one page and hands items out one at a time, asking
the underlying Cursor for the next page only when the buffer runs dry.
"""

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque, Generic, Iterator, List, Optional, TypeVar

from pivotal_client.cursors.cursor import Cursor
from pivotal_client.models.epic import Epic
from pivotal_client.models.story import Story
from pivotal_client.utils.exceptions import PivotalClientError

T = TypeVar("T")


class Outcome(Enum):
    ITEM = "item"
    END = "end"
    ERROR = "error"


@dataclass(frozen=True)
class NextResult(Generic[T]):
    """Result of TypedCursor.next(): an item, end of sequence, or an error."""
    outcome: Outcome
    item: Optional[T] = None
    error: Optional[PivotalClientError] = None

    @property
    def is_item(self) -> bool:
        return self.outcome is Outcome.ITEM

    @property
    def is_end(self) -> bool:
        return self.outcome is Outcome.END

    @property
    def is_error(self) -> bool:
        return self.outcome is Outcome.ERROR


class TypedCursor(Generic[T]):
    """
    Lazy, forward-only sequence of items.

    After an ERROR outcome the cursor state is unspecified; stop iterating
    and build a new cursor instead.
    """

    def __init__(self, cursor: Cursor[T]):
        self._cursor = cursor
        self._buffer: Deque[T] = deque()

    @property
    def cursor(self) -> Cursor[T]:
        return self._cursor

    def next(self) -> NextResult[T]:
        if not self._buffer:
            page: List[T] = []
            try:
                self._cursor.next(page)
            except PivotalClientError as e:
                return NextResult(Outcome.ERROR, error=e)
            self._buffer.extend(page)

        if not self._buffer:
            return NextResult(Outcome.END)
        return NextResult(Outcome.ITEM, item=self._buffer.popleft())

    def __iter__(self) -> Iterator[T]:
        """Yield items until END; an ERROR outcome is raised."""
        while True:
            result = self.next()
            if result.is_end:
                return
            if result.is_error:
                raise result.error
            yield result.item


class StoryCursor(TypedCursor[Story]):
    """Iterates over stories, fetching more on demand."""


class EpicCursor(TypedCursor[Epic]):
    """Iterates over epics, fetching more on demand."""
