"""Book catalog adapter backed by the relational ``books`` table."""

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bookrec.domain.exceptions import BookLookupError, BookNotFoundError
from bookrec.domain.models import Book
from bookrec.ports.catalog import BookCatalogPort


class SqlBookCatalogAdapter(BookCatalogPort):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_book(self, book_id: int) -> Book:
        try:
            result = await self._session.execute(select(Book).where(Book.id == book_id))
        except (SQLAlchemyError, OSError) as exc:
            raise BookLookupError(book_id, str(exc)) from exc
        book = result.scalar_one_or_none()
        if book is None:
            raise BookNotFoundError(book_id)
        return book
