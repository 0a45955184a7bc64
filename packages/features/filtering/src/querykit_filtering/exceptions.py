"""Errors raised while reading paging and sorting parameters."""

from __future__ import annotations

from querykit_core.primitives.exceptions import ValidationError


class FieldNotAllowedError(ValidationError):
    """A sort key named a field outside the resource's whitelist."""

    def __init__(self, field: str, *, param: str = "sort") -> None:
        self.field = field
        super().__init__({param: [f"Field {field!r} is not sortable"]})
