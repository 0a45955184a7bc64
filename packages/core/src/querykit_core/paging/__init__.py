from .fetcher import CountStrategy, PagedFetcher, known_total
from .page import PageRequest, PageResult

__all__ = [
    "CountStrategy",
    "PageRequest",
    "PageResult",
    "PagedFetcher",
    "known_total",
]
