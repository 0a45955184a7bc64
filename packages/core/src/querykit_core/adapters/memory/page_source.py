"""InMemoryPageSource: list-backed page source for tests and differential checks."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

from querykit_core.ports.page_source import IPageSource

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from querykit_core.domain.specification import ISpecification

T = TypeVar("T")


def _resolve(obj: Any, attr_path: str) -> Any:
    for part in attr_path.split("."):
        if obj is None:
            return None
        obj = obj.get(part) if isinstance(obj, dict) else getattr(obj, part, None)
    return obj


def _asc_key(row: Any, name: str) -> tuple[bool, Any]:
    value = _resolve(row, name)
    return (value is None, value)


def _desc_key(row: Any, name: str) -> tuple[bool, Any]:
    # sorted with reverse=True, so None must rank lowest to land last
    value = _resolve(row, name)
    return (value is not None, value)


class InMemoryPageSource(IPageSource[T], Generic[T]):
    """In-memory implementation of ``IPageSource[T]``.

    Rows keep insertion order unless ``order_by`` is given; sorting is stable
    and places ``None`` values last in either direction. Fetch and count both
    filter with ``specification.is_satisfied_by``.
    """

    def __init__(self, rows: Iterable[T] = ()) -> None:
        self._rows: list[T] = list(rows)
        self.fetch_calls = 0
        self.count_calls = 0

    def add(self, *rows: T) -> None:
        self._rows.extend(rows)

    async def fetch_page(
        self,
        specification: ISpecification[Any] | None,
        order_by: Sequence[str],
        offset: int,
        limit: int | None,
    ) -> list[T]:
        self.fetch_calls += 1
        matching = self._matching(specification)
        for field_expr in reversed(list(order_by)):
            descending = field_expr.startswith("-")
            name = field_expr.removeprefix("-")
            if descending:
                matching.sort(key=lambda row, n=name: _desc_key(row, n), reverse=True)
            else:
                matching.sort(key=lambda row, n=name: _asc_key(row, n))
        end = None if limit is None else offset + limit
        return matching[offset:end]

    async def count(self, specification: ISpecification[Any] | None) -> int:
        self.count_calls += 1
        return len(self._matching(specification))

    def _matching(self, specification: ISpecification[Any] | None) -> list[T]:
        if specification is None:
            return list(self._rows)
        return [row for row in self._rows if specification.is_satisfied_by(row)]

    # ── Test helpers ─────────────────────────────────────────────

    def reset_calls(self) -> None:
        self.fetch_calls = 0
        self.count_calls = 0

    def clear(self) -> None:
        self._rows.clear()

    def __len__(self) -> int:
        return len(self._rows)
