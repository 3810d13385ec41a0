"""Tests for the SQLAlchemy-backed book catalog."""

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from bookrec.adapters.catalog.sql import SqlBookCatalogAdapter
from bookrec.domain.exceptions import BookLookupError, BookNotFoundError
from bookrec.domain.models import Base
from tests.fakes import make_book


@pytest.fixture
async def session():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as s:
        s.add_all([make_book(1, "Dune"), make_book(2, "Emma")])
        await s.commit()
        yield s
    await engine.dispose()


@pytest.mark.asyncio
async def test_get_book(session: AsyncSession):
    book = await SqlBookCatalogAdapter(session).get_book(2)
    assert book.title == "Emma"
    assert book.created_at is not None


@pytest.mark.asyncio
async def test_missing_book(session: AsyncSession):
    with pytest.raises(BookNotFoundError) as exc_info:
        await SqlBookCatalogAdapter(session).get_book(99)
    assert exc_info.value.book_id == 99


class _FailingSession:
    def __init__(self, exc: Exception) -> None:
        self._exc = exc

    async def execute(self, statement):
        raise self._exc


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "exc",
    [
        ConnectionRefusedError(111, "Connect call failed"),
        ConnectionResetError(104, "Connection reset by peer"),
        OperationalError("SELECT", {}, Exception("database is locked")),
    ],
    ids=["refused", "reset", "operational"],
)
async def test_database_errors_become_lookup_errors(exc: Exception):
    with pytest.raises(BookLookupError) as exc_info:
        await SqlBookCatalogAdapter(_FailingSession(exc)).get_book(7)
    assert exc_info.value.book_id == 7
    assert not isinstance(exc_info.value, BookNotFoundError)
