"""Shared fixtures for specifications tests."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from querykit_specifications.operators_memory import build_default_registry


@dataclass
class Team:
    name: str


@dataclass
class Member:
    username: str | None
    age: int | None
    team: Team | None = None


@pytest.fixture
def registry():
    """Default in-memory operator registry for building specs."""
    return build_default_registry()


@pytest.fixture
def members() -> list[Member]:
    team_a, team_b = Team("teamA"), Team("teamB")
    return [
        Member("member1", 10, team_a),
        Member("member2", 20, team_a),
        Member("member3", 30, team_b),
        Member("member4", 40, team_b),
        Member("loner", 50, None),
    ]
