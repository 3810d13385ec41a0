"""Best-effort recommendation serving on top of the active backend."""

import logging
from collections.abc import Awaitable, Callable

from bookrec.domain.exceptions import (
    ActiveBackendMisconfiguredError,
    BackendError,
    BookLookupError,
)
from bookrec.domain.models import Book
from bookrec.domain.recsys import RecommendationItem
from bookrec.ports.catalog import BookCatalogPort
from bookrec.ports.recommender import RecommenderPort

logger = logging.getLogger(__name__)

MIN_LIMIT = 1
MAX_LIMIT = 100


def limit_in_range(limit: int) -> bool:
    return MIN_LIMIT <= limit <= MAX_LIMIT


class RecommendationService:
    """Proxies recommendation queries and hydrates results into catalog books.

    Recommendations are supplementary: every backend or configuration failure
    is logged and collapsed to an empty list, and books that cannot be loaded
    are dropped one by one. Backend order is preserved.
    """

    def __init__(self, recommender: RecommenderPort, catalog: BookCatalogPort) -> None:
        self._recommender = recommender
        self._catalog = catalog

    async def get_recommendations(self, user_id: int, limit: int = 10) -> list[Book]:
        items = await self._fetch(
            "recommendations", lambda: self._recommender.recommend(user_id, limit)
        )
        return await self._hydrate(items)

    async def get_similar_books(self, book_id: int, limit: int = 10) -> list[Book]:
        if not limit_in_range(limit):
            logger.debug("Similar books: limit %d out of range, skipping backend", limit)
            return []
        items = await self._fetch("similar", lambda: self._recommender.similar(book_id, limit))
        return await self._hydrate(items)

    async def get_diversity_books(self, book_id: int, limit: int = 5) -> list[Book]:
        if not limit_in_range(limit):
            logger.debug("Diversity books: limit %d out of range, skipping backend", limit)
            return []
        items = await self._fetch(
            "diversity", lambda: self._recommender.diversity(book_id, limit)
        )
        return await self._hydrate(items)

    async def _fetch(
        self,
        query: str,
        call: Callable[[], Awaitable[list[RecommendationItem]]],
    ) -> list[RecommendationItem]:
        try:
            return await call()
        except ActiveBackendMisconfiguredError as exc:
            logger.error("Recsys %s skipped, configuration error: %s", query, exc)
        except BackendError as exc:
            logger.warning("Recsys %s failed (%s): %s", query, type(exc).__name__, exc)
        return []

    async def _lookup(self, item: RecommendationItem) -> Book | None:
        try:
            return await self._catalog.get_book(item.book_id)
        except BookLookupError as exc:
            logger.debug("Dropping recommended item: %s", exc)
            return None

    async def _hydrate(self, items: list[RecommendationItem]) -> list[Book]:
        # Sequential: one session must not run concurrent queries.
        books = [await self._lookup(item) for item in items]
        return [book for book in books if book is not None]
