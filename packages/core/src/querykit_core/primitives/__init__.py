"""Primitives: exceptions."""

from __future__ import annotations

from .exceptions import (
    DataAccessError,
    InfrastructureError,
    InvalidRequestError,
    PersistenceError,
    QueryKitError,
    ValidationError,
)

__all__ = [
    "DataAccessError",
    "InfrastructureError",
    "InvalidRequestError",
    "PersistenceError",
    "QueryKitError",
    "ValidationError",
]
