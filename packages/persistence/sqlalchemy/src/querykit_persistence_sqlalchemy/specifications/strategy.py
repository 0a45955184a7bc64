"""
SQLAlchemy operator strategies.

The SQL counterpart of the in-memory evaluator: every operator that a
specification may carry maps to a :class:`SQLAlchemyOperator` producing a
boolean column expression for the given column and value.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy import ColumnElement

    from querykit_specifications.operators import SpecificationOperator


class SQLAlchemyOperator(ABC):
    """One comparison, compiled against a column or instrumented attribute."""

    @property
    @abstractmethod
    def name(self) -> SpecificationOperator: ...

    @abstractmethod
    def apply(self, column: Any, value: Any) -> ColumnElement[bool]: ...


class SQLAlchemyOperatorRegistry:
    """
    Operator strategies keyed by :class:`SpecificationOperator`.

    A later registration for the same operator replaces the earlier one.
    """

    def __init__(self, *operators: SQLAlchemyOperator) -> None:
        self._by_name: dict[SpecificationOperator, SQLAlchemyOperator] = {}
        self.register_all(*operators)

    def register(self, operator: SQLAlchemyOperator) -> None:
        self._by_name[operator.name] = operator

    def register_all(self, *operators: SQLAlchemyOperator) -> None:
        for operator in operators:
            self.register(operator)

    def unregister(self, name: SpecificationOperator) -> None:
        self._by_name.pop(name, None)

    def get(self, name: SpecificationOperator) -> SQLAlchemyOperator | None:
        return self._by_name.get(name)

    def has(self, name: SpecificationOperator) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[SpecificationOperator]:
        return iter(self._by_name)

    @property
    def supported_operators(self) -> set[SpecificationOperator]:
        return set(self._by_name)

    def apply(
        self,
        name: SpecificationOperator,
        column: Any,
        value: Any,
    ) -> ColumnElement[bool]:
        """
        Raises:
            ValueError: If no strategy is registered for *name*.
        """
        operator = self._by_name.get(name)
        if operator is None:
            raise ValueError(f"Unsupported operator for SQLAlchemy: {name}")
        return operator.apply(column, value)
