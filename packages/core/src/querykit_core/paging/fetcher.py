"""
PagedFetcher: one filtered, paginated read plus the total matching count.

The fetcher issues the window fetch first and then decides whether a count
query is needed at all:

- ``CountStrategy.ALWAYS``: always count. The reference behaviour.
- ``CountStrategy.OPTIMIZED``: a short page (fewer rows than ``limit``)
  proves it is the last page, so the total is ``offset + len(items)``.
- ``CountStrategy.LOOKAHEAD``: fetch one extra row so that an exactly full
  last page is also recognised without counting.

Whatever the strategy, ``total`` equals what ``ALWAYS`` would report; the
strategy only changes whether the count query runs.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from ..primitives.exceptions import InvalidRequestError
from .page import PageRequest, PageResult

if TYPE_CHECKING:
    from ..domain.specification import ISpecification
    from ..ports.page_source import IPageSource

T = TypeVar("T")

logger = logging.getLogger("querykit.paging")


class CountStrategy(str, Enum):
    """When the total-count query is issued."""

    ALWAYS = "always"
    OPTIMIZED = "optimized"
    LOOKAHEAD = "lookahead"


def known_total(request: PageRequest, fetched: int, window: int) -> int | None:
    """
    Return the total implied by a fetched window, or ``None`` if unknown.

    *window* is the number of rows that was asked for. Only a short window
    proves there is nothing beyond it. An empty window past the first row
    proves nothing about the rows before it, so it still needs a count.
    """
    if fetched >= window:
        return None
    if request.offset == 0:
        return fetched
    if fetched == 0:
        return None
    return request.offset + fetched


class PagedFetcher(Generic[T]):
    """
    Execute a paginated fetch against an :class:`IPageSource`.

    Stateless: every call passes the same specification object to both the
    fetch and the count so the two can never disagree on the filter.
    Errors raised by the source propagate unchanged.
    """

    def __init__(
        self,
        source: IPageSource[T],
        *,
        count_strategy: CountStrategy | str = CountStrategy.OPTIMIZED,
    ) -> None:
        self._source = source
        self.count_strategy = CountStrategy(count_strategy)

    async def fetch(
        self,
        specification: ISpecification[Any] | None,
        request: PageRequest,
    ) -> PageResult[T]:
        """Fetch one page and resolve the total matching count."""
        if not isinstance(request, PageRequest):
            raise InvalidRequestError(
                f"Expected a PageRequest, got {type(request).__name__}"
            )

        window = request.limit
        if self.count_strategy is CountStrategy.LOOKAHEAD:
            window += 1

        rows = await self._source.fetch_page(
            specification, request.order_by, request.offset, window
        )
        items = list(rows[: request.limit])
        logger.debug(
            "Fetched %d row(s) at offset=%d limit=%d (strategy=%s)",
            len(rows),
            request.offset,
            request.limit,
            self.count_strategy.value,
        )

        total: int | None = None
        if self.count_strategy is not CountStrategy.ALWAYS:
            total = known_total(request, len(rows), window)

        if total is None:
            total = await self._source.count(specification)
            logger.debug("Count query returned total=%d", total)
        else:
            logger.debug("Last page detected, skipping count query (total=%d)", total)

        return PageResult(items=items, total=total, request=request)
