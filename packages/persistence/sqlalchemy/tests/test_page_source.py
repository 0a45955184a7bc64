"""Integration tests for SQLAlchemyPageSource on in-memory SQLite."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy import ForeignKey, Integer, String, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from querykit_core.paging import CountStrategy, PagedFetcher, PageRequest
from querykit_core.ports.page_source import IPageSource
from querykit_core.primitives.exceptions import DataAccessError
from querykit_persistence_sqlalchemy import (
    SQLAlchemyDataAccessError,
    SQLAlchemyPageSource,
)
from querykit_specifications import (
    AttributeSpecification,
    FieldRule,
    MatchAllSpecification,
    PredicateComposer,
    has_text,
)

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# ---------------------------------------------------------------------------
# Test models
# ---------------------------------------------------------------------------


class Base(DeclarativeBase):
    pass


class SquadRecord(Base):
    __tablename__ = "squads"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String)
    players: Mapped[list[PlayerRecord]] = relationship(back_populates="squad")


class PlayerRecord(Base):
    __tablename__ = "players"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String)
    age: Mapped[int] = mapped_column(Integer)
    squad_id: Mapped[int | None] = mapped_column(ForeignKey("squads.id"))
    squad: Mapped[SquadRecord | None] = relationship(back_populates="players")


class UnmappedBase(DeclarativeBase):
    pass


class GhostRecord(UnmappedBase):
    """Mapped but never created, so every statement fails."""

    __tablename__ = "ghosts"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
async def engine():
    eng = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
async def session(engine) -> AsyncGenerator[AsyncSession, None]:
    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as sess:
        yield sess


@pytest.fixture
async def seeded(session: AsyncSession) -> AsyncSession:
    """Ages 10..60; players 1-2 in 'red', 3-4 in 'blue', 5-6 without a squad."""
    red = SquadRecord(id=1, name="red")
    blue = SquadRecord(id=2, name="blue")
    session.add_all([red, blue])
    for i in range(1, 7):
        squad = red if i <= 2 else blue if i <= 4 else None
        session.add(PlayerRecord(id=i, name=f"p{i}", age=i * 10, squad=squad))
    await session.commit()
    return session


@pytest.fixture
def source(seeded: AsyncSession) -> SQLAlchemyPageSource[PlayerRecord]:
    return SQLAlchemyPageSource(PlayerRecord, seeded)


def ids(rows) -> list[int]:
    return [row.id for row in rows]


# ---------------------------------------------------------------------------
# Fetch and count
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_satisfies_protocol(session):
    assert isinstance(SQLAlchemyPageSource(PlayerRecord, session), IPageSource)


@pytest.mark.asyncio
class TestSQLAlchemyPageSource:
    async def test_fetch_all_in_primary_key_order(self, source):
        rows = await source.fetch_page(None, (), 0, None)
        assert ids(rows) == [1, 2, 3, 4, 5, 6]

    async def test_match_all_adds_no_filter(self, source):
        spec = MatchAllSpecification()
        assert "WHERE" not in str(source.build_count_statement(spec))
        assert await source.count(spec) == 6

    async def test_window(self, source):
        rows = await source.fetch_page(None, (), 2, 3)
        assert ids(rows) == [3, 4, 5]

    async def test_ordering_with_primary_key_tie_breaker(self, source, seeded):
        seeded.add(PlayerRecord(id=7, name="p7", age=60))
        await seeded.commit()

        rows = await source.fetch_page(None, ("-age",), 0, 3)

        assert ids(rows) == [6, 7, 5]

    async def test_relationship_sort_key_falls_back_to_primary_key(self, source):
        rows = await source.fetch_page(None, ("squad", "-players"), 0, 3)
        assert ids(rows) == [1, 2, 3]

    async def test_filter_applies_to_fetch_and_count(self, source, registry):
        spec = AttributeSpecification("age", ">=", 35, registry=registry)

        rows = await source.fetch_page(spec, (), 0, None)

        assert ids(rows) == [4, 5, 6]
        assert await source.count(spec) == 3

    async def test_relationship_filter_counts_root_rows(self, source, registry):
        spec = AttributeSpecification("squad.name", "=", "blue", registry=registry)

        rows = await source.fetch_page(spec, (), 0, None)

        assert ids(rows) == [3, 4]
        assert await source.count(spec) == 2

    async def test_composed_predicate(self, source, registry):
        composer = PredicateComposer(
            [
                FieldRule("squad", "squad.name", "=", has_text),
                FieldRule("min_age", "age", ">="),
            ],
            registry=registry,
        )
        spec = composer.compose({"squad": "blue", "min_age": 35, "ignored": "x"})

        assert ids(await source.fetch_page(spec, (), 0, None)) == [4]
        assert await source.count(spec) == 1

    async def test_projection_with_row_mapper(self, seeded, registry):
        statement = select(
            PlayerRecord.id, PlayerRecord.name, SquadRecord.name
        ).outerjoin(PlayerRecord.squad)
        source = SQLAlchemyPageSource(
            PlayerRecord,
            seeded,
            statement=statement,
            row_mapper=lambda row: (row[0], row[1], row[2]),
        )
        spec = AttributeSpecification("age", ">=", 40, registry=registry)

        rows = await source.fetch_page(spec, ("-age",), 0, 10)

        assert rows == [(6, "p6", None), (5, "p5", None), (4, "p4", "blue")]
        assert await source.count(spec) == 3


# ---------------------------------------------------------------------------
# Paging over SQL
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.parametrize("strategy", list(CountStrategy))
async def test_paged_fetch_totals(source, registry, strategy):
    spec = AttributeSpecification("age", ">", 10, registry=registry)
    fetcher = PagedFetcher(source, count_strategy=strategy)

    first = await fetcher.fetch(spec, PageRequest(0, 2))
    last = await fetcher.fetch(spec, PageRequest(4, 2))
    beyond = await fetcher.fetch(spec, PageRequest(10, 2))

    assert (ids(first.items), first.total) == ([2, 3], 5)
    assert (ids(last.items), last.total) == ([6], 5)
    assert (beyond.items, beyond.total) == ([], 5)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_fetch_failure_is_data_access_error(session):
    source = SQLAlchemyPageSource(GhostRecord, session)

    with pytest.raises(DataAccessError) as exc_info:
        await source.fetch_page(None, (), 0, 10)

    assert isinstance(exc_info.value, SQLAlchemyDataAccessError)
    assert exc_info.value.operation == "fetch"
    assert exc_info.value.__cause__ is not None


@pytest.mark.asyncio
async def test_count_failure_is_data_access_error(session):
    source = SQLAlchemyPageSource(GhostRecord, session)

    with pytest.raises(SQLAlchemyDataAccessError) as exc_info:
        await source.count(None)

    assert exc_info.value.operation == "count"


@pytest.mark.asyncio
async def test_fetcher_propagates_data_access_error(session):
    fetcher = PagedFetcher(SQLAlchemyPageSource(GhostRecord, session))

    with pytest.raises(DataAccessError):
        await fetcher.fetch(None, PageRequest(0, 5))
