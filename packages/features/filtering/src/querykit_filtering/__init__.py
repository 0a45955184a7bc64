"""API query parsing: pagination and sorting into a PageRequest."""

from __future__ import annotations

from .exceptions import FieldNotAllowedError
from .pagination import PaginationParser
from .whitelist import FieldWhitelist

__all__ = [
    "FieldNotAllowedError",
    "FieldWhitelist",
    "PaginationParser",
]
