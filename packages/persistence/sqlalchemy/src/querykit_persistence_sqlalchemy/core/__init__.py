from .page_source import RowMapper, SQLAlchemyPageSource

__all__ = ["RowMapper", "SQLAlchemyPageSource"]
