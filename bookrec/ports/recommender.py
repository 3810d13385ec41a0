"""Recommender port: abstract interface for the external recommendation backend."""

from abc import ABC, abstractmethod

from bookrec.domain.recsys import RecommendationItem


class RecommenderPort(ABC):
    """Abstraction for the active recommendation backend.

    Implementations return items in backend rank order and raise
    ``BackendError`` subclasses (or ``ActiveBackendMisconfiguredError``)
    on failure. They never hydrate or swallow errors themselves.
    """

    @abstractmethod
    async def recommend(self, user_id: int, limit: int = 10) -> list[RecommendationItem]:
        """Return ranked book recommendations for a user."""
        ...

    @abstractmethod
    async def similar(self, book_id: int, limit: int = 10) -> list[RecommendationItem]:
        """Return books similar to ``book_id``."""
        ...

    @abstractmethod
    async def diversity(self, book_id: int, limit: int = 5) -> list[RecommendationItem]:
        """Return a diverse set of books seeded by ``book_id``."""
        ...
