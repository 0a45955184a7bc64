"""IPageSource: the read-only data-source port used by the paging layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..domain.specification import ISpecification

T = TypeVar("T", covariant=True)


@runtime_checkable
class IPageSource(Protocol[T]):
    """
    Data source capable of fetching a window of matching rows and counting
    all matching rows.

    Both operations must observe the specification identically: a row is
    returned by ``fetch_page`` under a given specification if and only if it
    is counted by ``count`` under the same specification. The count-avoidance
    logic in :class:`~querykit_core.paging.PagedFetcher` relies on this.

    Failures (connectivity, query syntax, driver errors) are raised as
    :class:`~querykit_core.primitives.exceptions.DataAccessError`.
    """

    async def fetch_page(
        self,
        specification: ISpecification[Any] | None,
        order_by: Sequence[str],
        offset: int,
        limit: int | None,
    ) -> list[T]:
        """Return at most *limit* matching rows after skipping *offset*.

        Rows must come back in a stable order for unchanged data.
        ``order_by`` entries are field names, ``-`` prefixed for descending.
        ``limit=None`` means no upper bound.
        """
        ...

    async def count(self, specification: ISpecification[Any] | None) -> int:
        """Return the number of rows matching *specification* (before paging)."""
        ...
