"""Comparison operators for SQLAlchemy: =, !=, >, <, >=, <=."""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, ClassVar, cast

from querykit_specifications.operators import SpecificationOperator

from ..strategy import SQLAlchemyOperator

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement


class _Comparison(SQLAlchemyOperator):
    operator_name: ClassVar[SpecificationOperator]
    compare: ClassVar[Callable[[Any, Any], Any]]

    @property
    def name(self) -> SpecificationOperator:
        return self.operator_name

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", type(self).compare(column, value))


class EqualOperator(_Comparison):
    operator_name = SpecificationOperator.EQ
    compare = operator.eq


class NotEqualOperator(_Comparison):
    operator_name = SpecificationOperator.NE
    compare = operator.ne


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
