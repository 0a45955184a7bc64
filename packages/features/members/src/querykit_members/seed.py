from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .models import Member, Team

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger("querykit.members")


async def seed_members(session: AsyncSession, count: int = 100) -> None:
    """
    Insert local sample data.

    Creates ``teamA`` and ``teamB``, then for each ``i`` in ``1..count`` two
    members named ``member{i}`` aged ``i * 10``; even ``i`` join ``teamA``,
    odd ``i`` join ``teamB``. Flushes but does not commit.
    """
    team_a = Team(name="teamA")
    team_b = Team(name="teamB")
    session.add_all([team_a, team_b])

    for i in range(1, count + 1):
        team = team_a if i % 2 == 0 else team_b
        for _ in range(2):
            session.add(Member(username=f"member{i}", age=i * 10, team=team))

    await session.flush()
    logger.info("Seeded 2 teams and %d members", count * 2)
