"""
In-memory operator evaluation.

Each ``SpecificationOperator`` that can be checked against a Python object
has a :class:`MemoryOperator` strategy; a :class:`MemoryOperatorRegistry`
looks the strategy up when an ``AttributeSpecification`` is evaluated.
The SQL compiler keeps a parallel registry with the same operator set.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .operators import SpecificationOperator


class MemoryOperator(ABC):
    """One comparison, evaluated on a resolved field value."""

    @property
    @abstractmethod
    def name(self) -> SpecificationOperator: ...

    @abstractmethod
    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        """
        Args:
            field_value: Value resolved from the candidate (``None`` when a
                path segment is missing).
            condition_value: Value carried by the specification.
        """


class MemoryOperatorRegistry:
    """
    Operator strategies keyed by :class:`SpecificationOperator`.

    Registering an operator that is already present replaces it, which is
    how callers customise a single comparison::

        registry = build_default_registry()
        registry.register(CaseInsensitiveEqual())
    """

    def __init__(self, *operators: MemoryOperator) -> None:
        self._by_name: dict[SpecificationOperator, MemoryOperator] = {}
        self.register_all(*operators)

    def register(self, operator: MemoryOperator) -> None:
        self._by_name[operator.name] = operator

    def register_all(self, *operators: MemoryOperator) -> None:
        for operator in operators:
            self.register(operator)

    def unregister(self, name: SpecificationOperator) -> None:
        self._by_name.pop(name, None)

    def get(self, name: SpecificationOperator) -> MemoryOperator | None:
        return self._by_name.get(name)

    def has(self, name: SpecificationOperator) -> bool:
        return name in self

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[SpecificationOperator]:
        return iter(self._by_name)

    def __len__(self) -> int:
        return len(self._by_name)

    @property
    def supported_operators(self) -> set[SpecificationOperator]:
        return set(self._by_name)

    def evaluate(
        self,
        name: SpecificationOperator,
        field_value: Any,
        condition_value: Any,
    ) -> bool:
        """
        Raises:
            ValueError: If no strategy is registered for *name*.
        """
        operator = self._by_name.get(name)
        if operator is None:
            raise ValueError(
                f"Unsupported operator for in-memory evaluation: {name}"
            )
        return operator.evaluate(field_value, condition_value)
