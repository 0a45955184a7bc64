"""
Leaf node of the specification tree: one attribute compared to one value.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from .base import BaseSpecification
from .exceptions import OperatorNotFoundError
from .operators import SpecificationOperator

if TYPE_CHECKING:
    from .evaluator import MemoryOperatorRegistry

T = TypeVar("T", contravariant=True)

_LOGICAL = frozenset(
    {SpecificationOperator.AND, SpecificationOperator.OR, SpecificationOperator.NOT}
)
_COMPARISONS = [op.value for op in SpecificationOperator if op not in _LOGICAL]


def _coerce_operator(op: SpecificationOperator | str) -> SpecificationOperator:
    """Accept an enum member or its (case-insensitive) value; comparisons only."""
    if not isinstance(op, SpecificationOperator):
        try:
            op = SpecificationOperator(str(op).lower())
        except ValueError:
            raise OperatorNotFoundError(str(op), _COMPARISONS) from None
    if op in _LOGICAL:
        raise OperatorNotFoundError(op.value, _COMPARISONS)
    return op


def resolve_path(candidate: Any, path: str) -> Any:
    """
    Follow a dotted *path* through attributes or mapping keys.

    Returns ``None`` as soon as a step is missing, which is how an absent
    related entity (an outer join without a match) looks in memory.
    """
    value = candidate
    for step in path.split("."):
        if value is None:
            return None
        if isinstance(value, Mapping):
            value = value.get(step)
        else:
            value = getattr(value, step, None)
    return value


class AttributeSpecification(BaseSpecification[T]):
    """
    ``attr <op> val``, e.g. ``AttributeSpecification("age", ">=", 35, registry=r)``.

    *attr* may cross relationships (``team.name``). The in-memory check
    uses *registry*; persistence adapters read :meth:`to_dict` instead.
    """

    def __init__(
        self,
        attr: str,
        op: SpecificationOperator | str,
        val: Any,
        *,
        registry: MemoryOperatorRegistry,
    ) -> None:
        if registry is None:
            raise ValueError(
                "AttributeSpecification needs a registry; "
                "see querykit_specifications.operators_memory.build_default_registry"
            )
        self.attr = attr
        self.op = _coerce_operator(op)
        self.val = val
        self._registry = registry

    def is_satisfied_by(self, candidate: T) -> bool:
        return self._registry.evaluate(
            self.op, resolve_path(candidate, self.attr), self.val
        )

    def to_dict(self) -> dict[str, Any]:
        return {"op": self.op.value, "attr": self.attr, "val": self.val}

    def __repr__(self) -> str:
        return f"AttributeSpecification({self.attr!r} {self.op.value} {self.val!r})"
