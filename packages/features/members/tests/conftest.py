"""Shared fixtures for the member search tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from querykit_members import Base, Member, MemberQueryRepository, Team

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator


@pytest.fixture
async def engine():
    eng = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
async def session(engine) -> AsyncGenerator[AsyncSession, None]:
    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as sess:
        yield sess


@pytest.fixture
async def four_members(session: AsyncSession) -> AsyncSession:
    """member1..member4 aged 10..40; 1-2 in teamA, 3-4 in teamB."""
    team_a = Team(name="teamA")
    team_b = Team(name="teamB")
    session.add_all(
        [
            Member(username="member1", age=10, team=team_a),
            Member(username="member2", age=20, team=team_a),
            Member(username="member3", age=30, team=team_b),
            Member(username="member4", age=40, team=team_b),
        ]
    )
    await session.commit()
    return session


@pytest.fixture
def repository(four_members: AsyncSession) -> MemberQueryRepository:
    return MemberQueryRepository(four_members)
