from .page_source import IPageSource

__all__ = ["IPageSource"]
