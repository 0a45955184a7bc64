"""querykit-members: member/team search built on querykit."""

from __future__ import annotations

from .composer import MEMBER_FIELD_RULES, build_member_composer
from .models import Base, Member, Team
from .repository import MemberQueryRepository, member_team_statement
from .schemas import MemberSearchCondition, MemberTeamDto
from .seed import seed_members

__all__ = [
    "Base",
    "MEMBER_FIELD_RULES",
    "Member",
    "MemberQueryRepository",
    "MemberSearchCondition",
    "MemberTeamDto",
    "Team",
    "build_member_composer",
    "member_team_statement",
    "seed_members",
]
