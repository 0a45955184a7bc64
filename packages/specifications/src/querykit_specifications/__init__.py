"""querykit-specifications: composable filter predicates.

Build predicates directly (``AttributeSpecification`` joined with ``&``,
``|``, ``~``), incrementally (``SpecificationBuilder``) or from a search
condition of optional fields (``PredicateComposer``).
"""

from .ast import AttributeSpecification, resolve_path
from .base import (
    AndSpecification,
    BaseSpecification,
    MatchAllSpecification,
    NotSpecification,
    OrSpecification,
)
from .builder import SpecificationBuilder
from .composer import FieldRule, PredicateComposer, has_text, is_present
from .evaluator import MemoryOperator, MemoryOperatorRegistry
from .exceptions import OperatorNotFoundError, SpecificationError, ValidationError
from .operators import SpecificationOperator
from .operators_memory import build_default_registry

__all__ = [
    # Tree
    "SpecificationOperator",
    "AttributeSpecification",
    "BaseSpecification",
    "AndSpecification",
    "OrSpecification",
    "NotSpecification",
    "MatchAllSpecification",
    "resolve_path",
    # Construction
    "SpecificationBuilder",
    "PredicateComposer",
    "FieldRule",
    "has_text",
    "is_present",
    # In-memory evaluation
    "MemoryOperator",
    "MemoryOperatorRegistry",
    "build_default_registry",
    # Errors
    "SpecificationError",
    "ValidationError",
    "OperatorNotFoundError",
]
