"""
Composable specification tree.

Leaves are :class:`~querykit_specifications.ast.AttributeSpecification`
instances; the classes here join them with AND / OR / NOT. Every node
serialises to the dict AST consumed by the persistence compilers, and
:class:`MatchAllSpecification` serialises to ``{}`` ("no constraint").
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from querykit_core.domain.specification import ISpecification

T = TypeVar("T", contravariant=True)


class BaseSpecification(Generic[T], ISpecification[T]):
    """Adds ``&``, ``|`` and ``~`` to a specification."""

    def __and__(self, other: ISpecification[T]) -> ISpecification[T]:
        return AndSpecification(self, other)

    def __or__(self, other: ISpecification[T]) -> ISpecification[T]:
        return OrSpecification(self, other)

    def __invert__(self) -> ISpecification[T]:
        return NotSpecification(self)

    def merge(self, other: ISpecification[T]) -> ISpecification[T]:
        """Same as ``self & other``."""
        return self & other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseSpecification):
            return NotImplemented
        return type(self) is type(other) and self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash((type(self).__name__, repr(self.to_dict())))


class MatchAllSpecification(BaseSpecification[T]):
    """Satisfied by every candidate; compiles to no WHERE clause."""

    def is_satisfied_by(self, candidate: T) -> bool:
        return True

    def to_dict(self) -> dict[str, Any]:
        return {}

    def __and__(self, other: ISpecification[T]) -> ISpecification[T]:
        return other

    def __repr__(self) -> str:
        return "MatchAllSpecification()"


class _CompositeSpecification(BaseSpecification[T]):
    op: str = ""

    def __init__(self, *specifications: ISpecification[T]) -> None:
        flat: list[ISpecification[T]] = []
        for spec in specifications:
            # (a & b) & c is stored as AND(a, b, c)
            if type(spec) is type(self):
                flat.extend(spec.specifications)  # type: ignore[attr-defined]
            else:
                flat.append(spec)
        self.specifications: tuple[ISpecification[T], ...] = tuple(flat)

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": self.op,
            "conditions": [spec.to_dict() for spec in self.specifications],
        }

    def __repr__(self) -> str:
        inner = ", ".join(repr(spec) for spec in self.specifications)
        return f"{self.op.upper()}({inner})"


class AndSpecification(_CompositeSpecification[T]):
    op = "and"

    def is_satisfied_by(self, candidate: T) -> bool:
        return all(spec.is_satisfied_by(candidate) for spec in self.specifications)


class OrSpecification(_CompositeSpecification[T]):
    op = "or"

    def is_satisfied_by(self, candidate: T) -> bool:
        return any(spec.is_satisfied_by(candidate) for spec in self.specifications)


class NotSpecification(BaseSpecification[T]):
    def __init__(self, specification: ISpecification[T]) -> None:
        self.specification = specification

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self.specification.is_satisfied_by(candidate)

    def to_dict(self) -> dict[str, Any]:
        return {"op": "not", "conditions": [self.specification.to_dict()]}

    def __repr__(self) -> str:
        return f"NOT({self.specification!r})"
