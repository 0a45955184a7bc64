"""Errors raised while building or configuring specifications."""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class SpecificationError(Exception):
    """Base class; ``to_dict()`` gives an API-friendly payload."""

    code = "SPECIFICATION_ERROR"

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.code, "message": str(self)}


class ValidationError(SpecificationError):
    """A specification, rule set or composer is structurally invalid."""

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "path": self.path}


class OperatorNotFoundError(SpecificationError):
    """An operator name that is not a known comparison.

    ``suggestions`` holds up to three close spellings from *valid_operators*.
    """

    code = "OPERATOR_NOT_FOUND"

    def __init__(self, operator: str, valid_operators: list[str]) -> None:
        self.operator = operator
        self.valid_operators = sorted(valid_operators)
        self.suggestions = get_close_matches(operator, valid_operators, n=3, cutoff=0.6)

        hint = ""
        if self.suggestions:
            hint = f" Did you mean: {', '.join(self.suggestions)}?"
        super().__init__(
            f"Unknown operator {operator!r}.{hint}"
            f" Valid operators: {', '.join(self.valid_operators)}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "operator": self.operator,
            "suggestions": self.suggestions,
            "valid_operators": self.valid_operators,
        }
