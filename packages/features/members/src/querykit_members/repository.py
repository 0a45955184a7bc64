"""
MemberQueryRepository: member/team search on an ``AsyncSession``.

Every search composes a fresh specification from the condition and runs
it through a :class:`~querykit_persistence_sqlalchemy.SQLAlchemyPageSource`
projecting ``member LEFT OUTER JOIN team`` rows into
:class:`~querykit_members.schemas.MemberTeamDto`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import Select, select

from querykit_core.paging import CountStrategy, PagedFetcher
from querykit_persistence_sqlalchemy import SQLAlchemyPageSource
from querykit_specifications import AttributeSpecification
from querykit_specifications.operators import SpecificationOperator

from .composer import build_member_composer
from .models import Member, Team
from .schemas import MemberSearchCondition, MemberTeamDto

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from querykit_core.paging import PageRequest, PageResult
    from querykit_specifications import PredicateComposer

logger = logging.getLogger("querykit.members")


def member_team_statement() -> Select[Any]:
    return select(
        Member.id,
        Member.username,
        Member.age,
        Team.id,
        Team.name,
    ).outerjoin(Member.team)


class MemberQueryRepository:
    """Read-side queries over members and their teams."""

    def __init__(
        self,
        session: AsyncSession,
        *,
        composer: PredicateComposer | None = None,
    ) -> None:
        self.session = session
        self.composer = composer or build_member_composer()
        self._dto_source: SQLAlchemyPageSource[MemberTeamDto] = SQLAlchemyPageSource(
            Member,
            session,
            statement=member_team_statement(),
            row_mapper=MemberTeamDto.from_row,
        )
        self._member_source: SQLAlchemyPageSource[Member] = SQLAlchemyPageSource(
            Member, session
        )

    def _condition(self, condition: MemberSearchCondition | None) -> Any:
        return condition if condition is not None else MemberSearchCondition()

    async def search(
        self, condition: MemberSearchCondition | None = None
    ) -> list[MemberTeamDto]:
        """All matching rows, ordered by member id."""
        spec = self.composer.compose(self._condition(condition))
        logger.debug("Member search: %s", spec.to_dict())
        return await self._dto_source.fetch_page(spec, (), 0, None)

    async def search_page_simple(
        self,
        condition: MemberSearchCondition | None,
        page: PageRequest,
    ) -> PageResult[MemberTeamDto]:
        """One page plus the total; always issues the count query."""
        return await self._search_page(condition, page, CountStrategy.ALWAYS)

    async def search_page_complex(
        self,
        condition: MemberSearchCondition | None,
        page: PageRequest,
    ) -> PageResult[MemberTeamDto]:
        """One page plus the total; skips the count query on a short last page."""
        return await self._search_page(condition, page, CountStrategy.OPTIMIZED)

    async def _search_page(
        self,
        condition: MemberSearchCondition | None,
        page: PageRequest,
        strategy: CountStrategy,
    ) -> PageResult[MemberTeamDto]:
        spec = self.composer.compose(self._condition(condition))
        logger.debug(
            "Member page search (%s): %s offset=%s limit=%s",
            strategy.value,
            spec.to_dict(),
            getattr(page, "offset", None),
            getattr(page, "limit", None),
        )
        fetcher = PagedFetcher(self._dto_source, count_strategy=strategy)
        return await fetcher.fetch(spec, page)

    async def find_all(self) -> list[Member]:
        return await self._member_source.fetch_page(None, (), 0, None)

    async def find_by_username(self, username: str) -> list[Member]:
        spec = AttributeSpecification(
            "username",
            SpecificationOperator.EQ,
            username,
            registry=self.composer.registry,
        )
        return await self._member_source.fetch_page(spec, (), 0, None)
