"""Tests for SpecificationBuilder."""

from __future__ import annotations

import pytest

from querykit_specifications import (
    AndSpecification,
    AttributeSpecification,
    MatchAllSpecification,
    NotSpecification,
    OrSpecification,
    SpecificationBuilder,
    SpecificationOperator,
    has_text,
)


@pytest.fixture
def builder(registry) -> SpecificationBuilder:
    return SpecificationBuilder(registry=registry)


def names(spec, rows) -> list[str]:
    return [row.username for row in rows if spec.is_satisfied_by(row)]


# -- Single condition -------------------------------------------------------


def test_single_where(builder: SpecificationBuilder, members):
    spec = builder.where("username", "=", "member2").build()
    assert isinstance(spec, AttributeSpecification)
    assert names(spec, members) == ["member2"]


def test_single_where_enum_op(builder: SpecificationBuilder, members):
    spec = builder.where("age", SpecificationOperator.GT, 30).build()
    assert names(spec, members) == ["member4", "loner"]


def test_empty_builder_is_match_all(builder: SpecificationBuilder):
    assert builder.has_value is False
    spec = builder.build()
    assert spec == MatchAllSpecification()
    assert spec.to_dict() == {}


# -- AND ---------------------------------------------------------------------


def test_where_chains_with_and(builder: SpecificationBuilder, members):
    spec = builder.where("age", ">=", 20).where("team.name", "=", "teamA").build()
    assert isinstance(spec, AndSpecification)
    assert names(spec, members) == ["member2"]


def test_and_chain_is_flat(builder: SpecificationBuilder):
    spec = (
        builder.where("age", ">", 1)
        .where("age", "<", 9)
        .where("age", "!=", 5)
        .build()
    )
    assert len(spec.to_dict()["conditions"]) == 3


def test_where_if_skips_absent_fields(builder: SpecificationBuilder, members):
    username, age_goe = "  ", 30
    spec = (
        builder.where_if(has_text(username), "username", "=", username)
        .where_if(age_goe is not None, "age", ">=", age_goe)
        .build()
    )
    assert isinstance(spec, AttributeSpecification)
    assert names(spec, members) == ["member3", "member4", "loner"]


def test_and_skips_none(builder: SpecificationBuilder):
    leaf = builder.leaf("age", ">", 1)
    assert builder.and_(None).and_(leaf).build() is leaf


def test_and_not(builder: SpecificationBuilder, members):
    built = (
        builder.where("age", "<=", 30)
        .and_not(builder.leaf("team.name", "=", "teamA"))
        .build()
    )
    assert isinstance(built.specifications[1], NotSpecification)
    assert names(built, members) == ["member3"]


# -- OR ----------------------------------------------------------------------


def test_or(builder: SpecificationBuilder, members):
    spec = (
        builder.where("username", "=", "member1")
        .or_(builder.leaf("username", "=", "member3"))
        .build()
    )
    assert isinstance(spec, OrSpecification)
    assert names(spec, members) == ["member1", "member3"]


def test_or_on_empty_builder_starts_predicate(builder: SpecificationBuilder):
    leaf = builder.leaf("age", "=", 1)
    assert builder.or_(leaf).build() is leaf


# -- lifecycle ---------------------------------------------------------------


def test_initial_predicate(registry, members):
    initial = AttributeSpecification("team.name", "=", "teamB", registry=registry)
    builder = SpecificationBuilder(initial, registry=registry)
    spec = builder.where("age", ">", 35).build()
    assert names(spec, members) == ["member4"]


def test_reset(builder: SpecificationBuilder):
    builder.where("age", ">", 1)
    assert builder.has_value is True
    assert isinstance(builder.reset().build(), MatchAllSpecification)
