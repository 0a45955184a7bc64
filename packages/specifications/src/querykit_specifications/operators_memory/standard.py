"""Comparison operators: =, !=, >, <, >=, <=.

Ordering comparisons treat a ``None`` field value as "no match", the same
way SQL treats a comparison with NULL, so in-memory and database filters
agree on rows with missing values.
"""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any, ClassVar

from ..evaluator import MemoryOperator
from ..operators import SpecificationOperator


class _Comparison(MemoryOperator):
    operator_name: ClassVar[SpecificationOperator]
    compare: ClassVar[Callable[[Any, Any], Any]]
    ordering: ClassVar[bool] = True

    @property
    def name(self) -> SpecificationOperator:
        return self.operator_name

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if self.ordering and field_value is None:
            return False
        return bool(type(self).compare(field_value, condition_value))


class EqualOperator(_Comparison):
    operator_name = SpecificationOperator.EQ
    compare = operator.eq
    ordering = False


class NotEqualOperator(_Comparison):
    operator_name = SpecificationOperator.NE
    compare = operator.ne
    ordering = False


class GreaterThanOperator(_Comparison):
    operator_name = SpecificationOperator.GT
    compare = operator.gt


class LessThanOperator(_Comparison):
    operator_name = SpecificationOperator.LT
    compare = operator.lt


class GreaterEqualOperator(_Comparison):
    operator_name = SpecificationOperator.GE
    compare = operator.ge


class LessEqualOperator(_Comparison):
    operator_name = SpecificationOperator.LE
    compare = operator.le
