"""Search condition and result projection for member queries."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class MemberSearchCondition(BaseModel):
    """
    Optional filters for a member search.

    Every field may be omitted. An omitted field, ``None``, or a blank name
    leaves the search unconstrained on that field.

    Attributes:
        username: Exact member username.
        team_name: Exact name of the member's team.
        age_goe: Inclusive lower bound on age.
        age_loe: Inclusive upper bound on age.
    """

    model_config = ConfigDict(frozen=True)

    username: str | None = None
    team_name: str | None = None
    age_goe: int | None = None
    age_loe: int | None = None


class MemberTeamDto(BaseModel):
    """One member joined with its (optional) team."""

    model_config = ConfigDict(frozen=True)

    member_id: int
    username: str | None = None
    age: int | None = None
    team_id: int | None = None
    team_name: str | None = None

    @classmethod
    def from_row(cls, row: Any) -> MemberTeamDto:
        """Build from a ``(member_id, username, age, team_id, team_name)`` row."""
        member_id, username, age, team_id, team_name = row
        return cls(
            member_id=member_id,
            username=username,
            age=age,
            team_id=team_id,
            team_name=team_name,
        )
