"""Built-in SQLAlchemy operators and the shared default registry."""

from __future__ import annotations

from ..strategy import SQLAlchemyOperatorRegistry
from .set import BetweenOperator, InOperator, NotInOperator
from .standard import (
    EqualOperator,
    GreaterEqualOperator,
    GreaterThanOperator,
    LessEqualOperator,
    LessThanOperator,
    NotEqualOperator,
)


def build_default_sqla_registry() -> SQLAlchemyOperatorRegistry:
    """A new registry holding every built-in SQLAlchemy operator."""
    return SQLAlchemyOperatorRegistry(
        EqualOperator(),
        NotEqualOperator(),
        GreaterThanOperator(),
        LessThanOperator(),
        GreaterEqualOperator(),
        LessEqualOperator(),
        InOperator(),
        NotInOperator(),
        BetweenOperator(),
    )


# Used by build_sqla_filter when no registry is passed; treat as read-only.
DEFAULT_SQLA_REGISTRY: SQLAlchemyOperatorRegistry = build_default_sqla_registry()

__all__ = [
    "DEFAULT_SQLA_REGISTRY",
    "build_default_sqla_registry",
]
