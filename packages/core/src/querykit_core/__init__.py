"""querykit-core: Foundation package for dynamic query composition and paging.

Zero infrastructure dependencies.
"""

from __future__ import annotations

# ── Adapters ────────────────────────────────────────────────────
from .adapters.memory import InMemoryPageSource

# ── Domain ───────────────────────────────────────────────────────
from .domain import ISpecification

# ── Paging ───────────────────────────────────────────────────────
from .paging import CountStrategy, PagedFetcher, PageRequest, PageResult, known_total

# ── Ports ────────────────────────────────────────────────────────
from .ports import IPageSource

# ── Primitives ───────────────────────────────────────────────────
from .primitives import (
    DataAccessError,
    InfrastructureError,
    InvalidRequestError,
    PersistenceError,
    QueryKitError,
    ValidationError,
)

__all__ = [
    # Adapters
    "InMemoryPageSource",
    # Domain
    "ISpecification",
    # Paging
    "CountStrategy",
    "PageRequest",
    "PageResult",
    "PagedFetcher",
    "known_total",
    # Ports
    "IPageSource",
    # Primitives
    "DataAccessError",
    "InfrastructureError",
    "InvalidRequestError",
    "PersistenceError",
    "QueryKitError",
    "ValidationError",
]
