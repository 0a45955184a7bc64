"""querykit-persistence-sqlalchemy: SQLAlchemy implementation of the paging port.

Compiles specification dictionaries into SQLAlchemy filters and executes
window fetches and counts on an ``AsyncSession``.
"""

from __future__ import annotations

from .core import RowMapper, SQLAlchemyPageSource
from .exceptions import (
    FilterCompilationError,
    SQLAlchemyDataAccessError,
    SQLAlchemyPersistenceError,
)
from .specifications import (
    DEFAULT_SQLA_REGISTRY,
    SQLAlchemyOperator,
    SQLAlchemyOperatorRegistry,
    apply_window,
    build_default_sqla_registry,
    build_sqla_filter,
)

__all__ = [
    "SQLAlchemyPageSource",
    "RowMapper",
    # Compiler
    "build_sqla_filter",
    "apply_window",
    "SQLAlchemyOperator",
    "SQLAlchemyOperatorRegistry",
    "DEFAULT_SQLA_REGISTRY",
    "build_default_sqla_registry",
    # Exceptions
    "SQLAlchemyPersistenceError",
    "SQLAlchemyDataAccessError",
    "FilterCompilationError",
]
