from __future__ import annotations

from querykit_specifications import FieldRule, PredicateComposer, has_text
from querykit_specifications.operators import SpecificationOperator

MEMBER_FIELD_RULES: tuple[FieldRule, ...] = (
    FieldRule("username", "username", SpecificationOperator.EQ, has_text),
    FieldRule("team_name", "team.name", SpecificationOperator.EQ, has_text),
    FieldRule("age_goe", "age", SpecificationOperator.GE),
    FieldRule("age_loe", "age", SpecificationOperator.LE),
)


def build_member_composer() -> PredicateComposer:
    """Composer for :class:`~querykit_members.schemas.MemberSearchCondition`."""
    return PredicateComposer(MEMBER_FIELD_RULES)
