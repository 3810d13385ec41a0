"""Book catalog port: the lookup used to hydrate recommendation results."""

from abc import ABC, abstractmethod

from bookrec.domain.models import Book


class BookCatalogPort(ABC):
    @abstractmethod
    async def get_book(self, book_id: int) -> Book:
        """Return the book or raise ``BookLookupError`` / ``BookNotFoundError``."""
        ...
