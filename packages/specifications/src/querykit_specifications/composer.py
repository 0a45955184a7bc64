"""
PredicateComposer: turn a partially-populated search condition into one
specification.

Each :class:`FieldRule` maps one condition field to one attribute
comparison. A rule yields a clause only when its field is *present*;
absent fields are left out of the composition entirely (they are neither
``True`` nor ``False`` clauses). The clauses that remain are combined
with AND, and an empty composition is the match-all specification.

Example::

    composer = PredicateComposer(
        [
            FieldRule("username", "username", "=", has_text),
            FieldRule("team_name", "team.name", "=", has_text),
            FieldRule("age_goe", "age", ">="),
            FieldRule("age_loe", "age", "<="),
        ]
    )
    spec = composer.compose({"age_goe": 35, "team_name": "teamB"})
    # → AND(team.name == "teamB", age >= 35)
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .ast import AttributeSpecification, _coerce_operator
from .builder import SpecificationBuilder
from .exceptions import ValidationError
from .operators import SpecificationOperator
from .operators_memory import build_default_registry

if TYPE_CHECKING:
    from querykit_core.domain.specification import ISpecification

    from .evaluator import MemoryOperatorRegistry

Presence = Callable[[Any], bool]


def has_text(value: Any) -> bool:
    """True for a string that is not empty and not whitespace-only."""
    return isinstance(value, str) and bool(value.strip())


def is_present(value: Any) -> bool:
    """True for any value other than ``None``."""
    return value is not None


@dataclass(frozen=True)
class FieldRule:
    """
    One optional filter field.

    Attributes:
        source: Name of the field on the search condition.
        attr: Attribute path on the filtered entity (``team.name`` for a
            joined entity).
        op: Comparison operator.
        present: Presence test deciding whether the field constrains the
            search at all.
    """

    source: str
    attr: str
    op: SpecificationOperator | str = SpecificationOperator.EQ
    present: Presence = is_present

    def __post_init__(self) -> None:
        object.__setattr__(self, "op", _coerce_operator(self.op))

    def value_of(self, condition: Any) -> Any:
        if isinstance(condition, Mapping):
            return condition.get(self.source)
        return getattr(condition, self.source, None)

    def clause(
        self,
        condition: Any,
        registry: MemoryOperatorRegistry,
    ) -> AttributeSpecification[Any] | None:
        """Return the clause for this field, or ``None`` when it is absent."""
        value = self.value_of(condition)
        if not self.present(value):
            return None
        return AttributeSpecification(self.attr, self.op, value, registry=registry)


class PredicateComposer:
    """
    Compose a search condition into a single specification.

    Pure and deterministic: the same condition always yields an equivalent
    specification, and a fresh specification is built on every call.
    Conditions may be plain objects, pydantic models or mappings; unknown
    fields are ignored and malformed ranges simply match nothing.
    """

    def __init__(
        self,
        rules: Iterable[FieldRule],
        *,
        registry: MemoryOperatorRegistry | None = None,
    ) -> None:
        self._rules = tuple(rules)
        sources = [rule.source for rule in self._rules]
        duplicates = sorted({s for s in sources if sources.count(s) > 1})
        if duplicates:
            raise ValidationError(
                f"Duplicate field rules for: {', '.join(duplicates)}",
                path="rules",
            )
        self._registry = registry if registry is not None else build_default_registry()

    @property
    def rules(self) -> tuple[FieldRule, ...]:
        return self._rules

    @property
    def registry(self) -> MemoryOperatorRegistry:
        return self._registry

    def clauses(self, condition: Any) -> list[AttributeSpecification[Any]]:
        """Return the clauses of the present fields, in rule order."""
        result: list[AttributeSpecification[Any]] = []
        for rule in self._rules:
            clause = rule.clause(condition, self._registry)
            if clause is not None:
                result.append(clause)
        return result

    def compose(self, condition: Any) -> ISpecification[Any]:
        builder = SpecificationBuilder(registry=self._registry)
        for clause in self.clauses(condition):
            builder.and_(clause)
        return builder.build()

    __call__ = compose
