"""
Incremental specification builder.

Accumulates conditions the way a boolean builder in a query DSL does:
start empty, ``and_``/``or_`` further specifications onto the running
predicate, then ``build()``. Optional search fields are added with
``where_if``, which leaves the predicate untouched when the field is
absent::

    spec = (
        SpecificationBuilder()
        .where_if(has_text(username), "username", "=", username)
        .where_if(age_goe is not None, "age", ">=", age_goe)
        .build()
    )
    # → AND(username == ..., age >= ...) or fewer; match-all when empty
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .ast import AttributeSpecification
from .base import (
    AndSpecification,
    MatchAllSpecification,
    NotSpecification,
    OrSpecification,
)
from .operators_memory import build_default_registry

if TYPE_CHECKING:
    from querykit_core.domain.specification import ISpecification

    from .evaluator import MemoryOperatorRegistry
    from .operators import SpecificationOperator


class SpecificationBuilder:
    """Mutable accumulator producing an immutable specification."""

    def __init__(
        self,
        initial: ISpecification[Any] | None = None,
        *,
        registry: MemoryOperatorRegistry | None = None,
    ) -> None:
        self._registry = registry if registry is not None else build_default_registry()
        self._current: ISpecification[Any] | None = initial

    @property
    def has_value(self) -> bool:
        return self._current is not None

    def leaf(
        self,
        attr: str,
        op: SpecificationOperator | str,
        val: Any = None,
    ) -> AttributeSpecification[Any]:
        """Create an attribute condition bound to this builder's registry."""
        return AttributeSpecification(attr, op, val, registry=self._registry)

    # -- AND ---------------------------------------------------------------

    def and_(self, spec: ISpecification[Any] | None) -> SpecificationBuilder:
        """AND *spec* onto the predicate; ``None`` is a no-op."""
        if spec is None:
            return self
        if self._current is None:
            self._current = spec
        else:
            self._current = AndSpecification(self._current, spec)
        return self

    def and_not(self, spec: ISpecification[Any] | None) -> SpecificationBuilder:
        if spec is not None:
            self.and_(NotSpecification(spec))
        return self

    def where(
        self,
        attr: str,
        op: SpecificationOperator | str,
        val: Any = None,
    ) -> SpecificationBuilder:
        return self.and_(self.leaf(attr, op, val))

    def where_if(
        self,
        present: bool,
        attr: str,
        op: SpecificationOperator | str,
        val: Any = None,
    ) -> SpecificationBuilder:
        if not present:
            return self
        return self.where(attr, op, val)

    # -- OR ----------------------------------------------------------------

    def or_(self, spec: ISpecification[Any] | None) -> SpecificationBuilder:
        """OR *spec* with the predicate built so far; ``None`` is a no-op."""
        if spec is None:
            return self
        if self._current is None:
            self._current = spec
        else:
            self._current = OrSpecification(self._current, spec)
        return self

    # -- result ------------------------------------------------------------

    def build(self) -> ISpecification[Any]:
        """The predicate, or :class:`MatchAllSpecification` if nothing was added."""
        if self._current is None:
            return MatchAllSpecification()
        return self._current

    def reset(self) -> SpecificationBuilder:
        self._current = None
        return self
