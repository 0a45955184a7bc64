"""Shared fixtures for the SQLAlchemy persistence tests."""

from __future__ import annotations

import pytest

from querykit_specifications.operators_memory import build_default_registry


@pytest.fixture
def registry():
    return build_default_registry()
