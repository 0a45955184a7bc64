"""Specification pattern primitives."""

from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T", contravariant=True)


@runtime_checkable
class ISpecification(Protocol[T]):
    """
    Protocol for the Specification pattern.
    Used to encapsulate a filter predicate that both a row fetch and a row
    count must observe identically.
    """

    def is_satisfied_by(self, candidate: T) -> bool:
        """
        Check if the candidate satisfies the specification.
        Used primarily for in-memory filtering.
        """
        ...

    def to_dict(self) -> dict[str, Any]:
        """
        Return a dictionary representation of the specification.
        An empty dict means "no constraint" and is compiled to no WHERE clause.
        """
        ...
