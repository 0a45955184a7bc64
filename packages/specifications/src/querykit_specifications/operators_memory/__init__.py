"""Built-in in-memory operators and the default registry factory."""

from __future__ import annotations

from ..evaluator import MemoryOperatorRegistry
from .set import BetweenOperator, InOperator, NotInOperator
from .standard import (
    EqualOperator,
    GreaterEqualOperator,
    GreaterThanOperator,
    LessEqualOperator,
    LessThanOperator,
    NotEqualOperator,
)


def build_default_registry() -> MemoryOperatorRegistry:
    """
    A new registry holding every built-in operator.

    Each call returns a separate instance, so registering a custom operator
    on one registry leaves other registries untouched.
    """
    return MemoryOperatorRegistry(
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


__all__ = [
    "BetweenOperator",
    "EqualOperator",
    "GreaterEqualOperator",
    "GreaterThanOperator",
    "InOperator",
    "LessEqualOperator",
    "LessThanOperator",
    "NotEqualOperator",
    "NotInOperator",
    "build_default_registry",
]
