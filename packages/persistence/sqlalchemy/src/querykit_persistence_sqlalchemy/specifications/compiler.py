"""
Specification dict AST → SQLAlchemy expressions.

``build_sqla_filter`` turns the output of ``spec.to_dict()`` into a boolean
clause for ``Select.where``; ``apply_window`` adds ORDER BY / OFFSET /
LIMIT for one page. Leaf comparisons are delegated to a
:class:`~.strategy.SQLAlchemyOperatorRegistry`.

Attribute paths may cross relationships (``team.name``, or deeper). Each
hop becomes ``has()`` for a scalar relationship or ``any()`` for a
collection, i.e. a correlated ``EXISTS``. The filter therefore restricts
the root rows without joining, and the same clause can be used under a
``SELECT count(*) FROM root`` and under a projection that outer-joins the
related table.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from sqlalchemy import and_, asc, desc, inspect, not_, or_, true

from querykit_specifications.operators import SpecificationOperator

from ..exceptions import FilterCompilationError
from .operators import DEFAULT_SQLA_REGISTRY

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement, Select

    from .strategy import SQLAlchemyOperatorRegistry


def build_sqla_filter(
    model: type[Any],
    data: dict[str, Any],
    *,
    registry: SQLAlchemyOperatorRegistry | None = None,
) -> ColumnElement[bool]:
    """
    Compile a specification dict against *model*.

    An empty dict (match-all) compiles to ``true()``; callers that want no
    WHERE clause at all should check for the empty dict first.

    Raises:
        FilterCompilationError: On an unknown operator, a missing
            ``attr``, or a path that does not exist on the model.
    """
    return _SpecCompiler(registry or DEFAULT_SQLA_REGISTRY).compile(model, data)


def apply_window(
    stmt: Select[Any],
    model: type[Any],
    *,
    order_by: Sequence[str] = (),
    offset: int | None = None,
    limit: int | None = None,
) -> Select[Any]:
    """
    Apply ordering and an offset/limit window to *stmt*.

    ``order_by`` entries name columns of *model*, ``-`` prefixed for
    descending. Names that are not mapped columns of *model* (relationships,
    plain attributes, unknown names) are skipped.
    """
    columns = inspect(model).column_attrs
    clauses = []
    for field_expr in order_by:
        name = field_expr.removeprefix("-")
        if name not in columns:
            continue
        column = getattr(model, name)
        clauses.append(desc(column) if field_expr.startswith("-") else asc(column))
    if clauses:
        stmt = stmt.order_by(*clauses)
    if offset:
        stmt = stmt.offset(offset)
    if limit is not None:
        stmt = stmt.limit(limit)
    return stmt


class _SpecCompiler:
    def __init__(self, registry: SQLAlchemyOperatorRegistry) -> None:
        self.registry = registry

    def compile(self, model: type[Any], node: dict[str, Any]) -> ColumnElement[bool]:
        if not node:
            return true()

        op = str(node.get("op", "")).lower()
        children = node.get("conditions", [])

        if op == SpecificationOperator.AND:
            return and_(true(), *(self.compile(model, c) for c in children))
        if op == SpecificationOperator.OR:
            if not children:
                raise FilterCompilationError("OR node without conditions")
            return or_(*(self.compile(model, c) for c in children))
        if op == SpecificationOperator.NOT:
            if len(children) != 1:
                raise FilterCompilationError("NOT node needs exactly one condition")
            return not_(self.compile(model, children[0]))

        return self._leaf(model, node, op)

    def _leaf(
        self, model: type[Any], node: dict[str, Any], op: str
    ) -> ColumnElement[bool]:
        attr = node.get("attr")
        if not attr:
            raise FilterCompilationError(f"Specification missing 'attr': {node}")
        try:
            operator = SpecificationOperator(op)
        except ValueError:
            raise FilterCompilationError(
                f"Unknown operator {op!r} in {node}"
            ) from None
        if not self.registry.has(operator):
            raise FilterCompilationError(f"Operator {op!r} is not supported in SQL")
        return self._path(model, attr.split("."), operator, node.get("val"))

    def _path(
        self,
        model: type[Any],
        parts: list[str],
        operator: SpecificationOperator,
        value: Any,
    ) -> ColumnElement[bool]:
        head, rest = parts[0], parts[1:]
        attribute = getattr(model, head, None)

        if not rest:
            if attribute is None:
                raise FilterCompilationError(
                    f"Model {model.__name__} has no attribute {head!r}"
                )
            return self.registry.apply(operator, attribute, value)

        prop = getattr(attribute, "property", None)
        if prop is None or not hasattr(prop, "mapper"):
            raise FilterCompilationError(
                f"Model {model.__name__} has no relationship {head!r}"
            )
        inner = self._path(prop.mapper.class_, rest, operator, value)
        if prop.uselist:
            return attribute.any(inner)
        return attribute.has(inner)
