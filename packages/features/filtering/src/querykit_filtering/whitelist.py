"""Sortable-field whitelist for one resource."""

from __future__ import annotations

from collections.abc import Iterable

from .exceptions import FieldNotAllowedError


class FieldWhitelist:
    """Names a client may sort by. An empty whitelist rejects every field."""

    def __init__(self, *, sortable_fields: Iterable[str] = ()) -> None:
        self.sortable_fields = frozenset(sortable_fields)

    def is_sortable(self, field: str) -> bool:
        return field in self.sortable_fields

    def allow_sort(self, field: str) -> None:
        if not self.is_sortable(field):
            raise FieldNotAllowedError(field)
