"""Exceptions for the SQLAlchemy persistence layer."""

from __future__ import annotations

from querykit_core.primitives.exceptions import DataAccessError, PersistenceError


class SQLAlchemyPersistenceError(PersistenceError):
    """Base exception for all SQLAlchemy-specific persistence errors."""


class SQLAlchemyDataAccessError(SQLAlchemyPersistenceError, DataAccessError):
    """Raised when a SQLAlchemy fetch or count statement fails."""


class FilterCompilationError(SQLAlchemyPersistenceError):
    """Raised when a specification cannot be compiled into a WHERE clause."""


__all__: list[str] = [
    "FilterCompilationError",
    "SQLAlchemyDataAccessError",
    "SQLAlchemyPersistenceError",
]
