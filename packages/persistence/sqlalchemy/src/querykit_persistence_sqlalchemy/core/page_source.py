"""
SQLAlchemyPageSource: ``IPageSource`` backed by an ``AsyncSession``.

Fetch and count are compiled from the same specification dictionary, so a
row returned by ``fetch_page`` is always counted by ``count``. Relationship
filters compile to ``EXISTS`` sub-queries, which keeps the count on the
root entity even when the fetch statement joins other tables for its
projection.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from sqlalchemy import Select, func, inspect, select
from sqlalchemy.exc import SQLAlchemyError

from querykit_core.ports.page_source import IPageSource

from ..exceptions import SQLAlchemyDataAccessError
from ..specifications.compiler import apply_window, build_sqla_filter

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement
    from sqlalchemy.ext.asyncio import AsyncSession

    from querykit_core.domain.specification import ISpecification

    from ..specifications.strategy import SQLAlchemyOperatorRegistry

T = TypeVar("T")

RowMapper = Callable[[Any], Any]

logger = logging.getLogger("querykit.persistence")


class SQLAlchemyPageSource(IPageSource[T], Generic[T]):
    """
    Page source over one mapped model.

    By default rows are the model instances themselves. Pass *statement*
    (a ``Select`` whose FROM clause starts at *model*) to fetch a projection
    instead, and *row_mapper* to turn each result row into a DTO::

        source = SQLAlchemyPageSource(
            Member,
            session,
            statement=select(Member.id, Team.name).outerjoin(Member.team),
            row_mapper=lambda row: MemberTeamDto(member_id=row[0], ...),
        )

    Ordering fields are looked up on *model*; the primary key is always
    appended as a tie-breaker so windows are stable.
    """

    def __init__(
        self,
        model: type[Any],
        session: AsyncSession,
        *,
        statement: Select[Any] | None = None,
        row_mapper: RowMapper | None = None,
        registry: SQLAlchemyOperatorRegistry | None = None,
    ) -> None:
        self.model = model
        self.session = session
        self._statement = statement
        self._row_mapper = row_mapper
        self._registry = registry

    def _where(
        self, specification: ISpecification[Any] | None
    ) -> ColumnElement[bool] | None:
        if specification is None:
            return None
        spec_data = specification.to_dict()
        if not spec_data:
            return None
        return build_sqla_filter(self.model, spec_data, registry=self._registry)

    def build_fetch_statement(
        self,
        specification: ISpecification[Any] | None,
        order_by: Sequence[str],
        offset: int,
        limit: int | None,
    ) -> Select[Any]:
        stmt = self._statement if self._statement is not None else select(self.model)

        where_clause = self._where(specification)
        if where_clause is not None:
            stmt = stmt.where(where_clause)

        stmt = apply_window(
            stmt, self.model, order_by=order_by, offset=offset, limit=limit
        )
        return stmt.order_by(*inspect(self.model).primary_key)

    def build_count_statement(
        self, specification: ISpecification[Any] | None
    ) -> Select[Any]:
        stmt = select(func.count()).select_from(self.model)
        where_clause = self._where(specification)
        if where_clause is not None:
            stmt = stmt.where(where_clause)
        return stmt

    async def fetch_page(
        self,
        specification: ISpecification[Any] | None,
        order_by: Sequence[str],
        offset: int,
        limit: int | None,
    ) -> list[T]:
        stmt = self.build_fetch_statement(specification, order_by, offset, limit)
        logger.debug(
            "Fetching %s window offset=%d limit=%s",
            self.model.__name__,
            offset,
            limit,
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            logger.warning("Fetch on %s failed: %s", self.model.__name__, exc)
            raise SQLAlchemyDataAccessError(
                f"Failed to fetch {self.model.__name__} rows: {exc}",
                operation="fetch",
            ) from exc

        if self._statement is None:
            rows: list[Any] = list(result.scalars().all())
        else:
            rows = list(result.all())
        if self._row_mapper is not None:
            return [self._row_mapper(row) for row in rows]
        return rows

    async def count(self, specification: ISpecification[Any] | None) -> int:
        stmt = self.build_count_statement(specification)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            logger.warning("Count on %s failed: %s", self.model.__name__, exc)
            raise SQLAlchemyDataAccessError(
                f"Failed to count {self.model.__name__} rows: {exc}",
                operation="count",
            ) from exc
        total = int(result.scalar_one())
        logger.debug("Counted %d %s row(s)", total, self.model.__name__)
        return total
