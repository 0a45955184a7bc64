from .page_source import InMemoryPageSource

__all__ = ["InMemoryPageSource"]
