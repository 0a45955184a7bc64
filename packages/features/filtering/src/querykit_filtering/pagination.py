"""Read a ``PageRequest`` out of HTTP-style query parameters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from querykit_core.paging.page import PageRequest

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .whitelist import FieldWhitelist


def _as_int(raw: Any, fallback: int) -> int:
    if raw is None:
        return fallback
    try:
        return int(raw)
    except (TypeError, ValueError):
        return fallback


def _first_given(params: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = params.get(key)
        if value is not None:
            return value
    return None


class PaginationParser:
    """
    Lenient paging parser.

    Either ``offset``/``limit`` or ``page``/``size`` may be supplied; an
    explicit offset wins over a page number. Garbage falls back to the
    defaults and out-of-range numbers are clamped, so parsing never raises
    for paging values. Sort keys are checked against the whitelist when one
    is given and raise :class:`FieldNotAllowedError` otherwise.
    """

    def parse(
        self,
        query_params: Mapping[str, Any],
        *,
        offset_key: str = "offset",
        limit_key: str = "limit",
        page_key: str = "page",
        size_key: str = "size",
        sort_key: str = "sort",
        default_limit: int = 20,
        max_limit: int = 100,
        whitelist: FieldWhitelist | None = None,
    ) -> PageRequest:
        requested = _as_int(
            _first_given(query_params, limit_key, size_key), default_limit
        )
        limit = max(1, min(requested, max_limit))

        if query_params.get(offset_key) is not None:
            offset = _as_int(query_params[offset_key], 0)
        else:
            offset = _as_int(query_params.get(page_key), 0) * limit

        return PageRequest(
            offset=max(0, offset),
            limit=limit,
            order_by=self.parse_sort(query_params.get(sort_key), whitelist=whitelist),
        )

    @staticmethod
    def parse_sort(
        raw: Any,
        *,
        whitelist: FieldWhitelist | None = None,
    ) -> tuple[str, ...]:
        """``"-age,username"`` -> ``("-age", "username")``."""
        if not raw:
            return ()
        tokens = raw if isinstance(raw, (list, tuple)) else str(raw).split(",")
        order_by = []
        for token in (str(t).strip() for t in tokens):
            name = token.removeprefix("-")
            if not name:
                continue
            if whitelist is not None:
                whitelist.allow_sort(name)
            order_by.append(token)
        return tuple(order_by)
