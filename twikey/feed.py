"""Cursor-tracking iteration over Twikey feeds.

A feed endpoint returns bounded pages of records and is polled until it comes
back empty. :class:`Feed` hides the round trips behind a plain iterator: it asks
a page fetcher for one page at a time, hands out the items in order and threads
the ``position`` of the last item into the next request.

Only one page is held at a time and the next page is fetched when the consumer
asks for the item after the last one, never ahead of time.

If a non-empty page ends with an item that has no ``position``, the cursor is
not advanced and the next request reuses the previous one. A server that keeps
answering that request with the same non-empty page makes the feed loop
forever; the iterator does not guess an alternative cursor.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Iterator, Mapping, Sequence
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)

POSITION_KEY = "position"

Item = Mapping[str, Any]
PageFetcher = Callable[[dict[str, Any]], Sequence[Item]]


class FeedState(Enum):
    NOT_STARTED = "not_started"
    FETCHING = "fetching"
    EMITTING = "emitting"
    EXHAUSTED = "exhausted"


class Feed(Iterator[Item]):
    """Single-pass iterator over every item of a feed.

    Args:
        fetch_page: Called with ``{"position": cursor}`` (or ``{}`` before the
            first cursor is known) and returns the page's items in order.

    Errors raised by ``fetch_page`` propagate to the consumer and end the
    iteration. Iterating again requires a new ``Feed``.
    """

    def __init__(self, fetch_page: PageFetcher) -> None:
        self._fetch_page = fetch_page
        self._cursor: Any = None
        self._state = FeedState.NOT_STARTED
        self._pending: deque[Item] = deque()
        self._last: Item | None = None
        self.pages_fetched = 0

    @property
    def state(self) -> FeedState:
        return self._state

    @property
    def cursor(self) -> Any:
        return self._cursor

    def __iter__(self) -> Feed:
        return self

    def __next__(self) -> Item:
        while True:
            if self._state is FeedState.EXHAUSTED:
                raise StopIteration
            if self._state is FeedState.EMITTING:
                if self._pending:
                    return self._pending.popleft()
                self._advance_cursor()
            self._fetch()

    def _advance_cursor(self) -> None:
        if self._last is None:
            return
        position = self._last.get(POSITION_KEY)
        if position is not None:
            self._cursor = position
        else:
            logger.warning(
                f"Last item of page {self.pages_fetched} has no {POSITION_KEY!r}; "
                f"re-requesting with cursor {self._cursor!r}"
            )

    def _fetch(self) -> None:
        self._state = FeedState.FETCHING
        options: dict[str, Any] = {}
        if self._cursor is not None:
            options[POSITION_KEY] = self._cursor

        try:
            page = list(self._fetch_page(options))
        except Exception:
            self._state = FeedState.EXHAUSTED
            raise

        self.pages_fetched += 1
        if not page:
            logger.debug(f"Feed exhausted after {self.pages_fetched} page(s)")
            self._state = FeedState.EXHAUSTED
            return

        logger.debug(f"Page {self.pages_fetched}: {len(page)} item(s) at cursor {self._cursor!r}")
        self._pending = deque(page)
        self._last = page[-1]
        self._state = FeedState.EMITTING
