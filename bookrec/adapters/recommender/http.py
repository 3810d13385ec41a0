"""Recommender adapter calling the active backend over HTTP."""

import asyncio
import logging
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from bookrec.domain.exceptions import (
    BackendMalformedResponseError,
    BackendTimeoutError,
    BackendUnavailableError,
)
from bookrec.domain.recsys import RecommendationItem
from bookrec.ports.recommender import RecommenderPort
from bookrec.services.routing import RecsysRouter

logger = logging.getLogger(__name__)


class _BackendItem(BaseModel):
    book_id: int
    score: float | None = None
    title: str | None = None
    author: str | None = None


class _BackendPayload(BaseModel):
    # Entries are validated one by one so a bad item only drops itself.
    items: list[Any] | None = None


class HttpRecommenderAdapter(RecommenderPort):
    """Calls whichever backend the router reports as active at call time.

    ``timeout`` bounds the whole call (connect, send, receive), not each
    phase. ``transport`` is passed straight to ``httpx.AsyncClient``; tests
    use it to plug in ``httpx.MockTransport``.
    """

    def __init__(
        self,
        router: RecsysRouter,
        timeout: float,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._router = router
        self._timeout = timeout
        self._transport = transport

    async def _get(self, path: str, params: dict[str, int]) -> list[RecommendationItem]:
        url = self._router.get_active_base_url().rstrip("/") + path
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                logger.debug("Recsys request: %s params=%s", url, params)
                resp = await asyncio.wait_for(
                    client.get(url, params=params), timeout=self._timeout
                )
                resp.raise_for_status()
        except (httpx.TimeoutException, asyncio.TimeoutError) as exc:
            raise BackendTimeoutError(f"{url} timed out after {self._timeout:.1f}s") from exc
        except httpx.HTTPStatusError as exc:
            raise BackendUnavailableError(
                f"{url} returned HTTP {exc.response.status_code}"
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise BackendUnavailableError(f"{url} unreachable: {exc}") from exc

        items = self._parse(url, resp.content)
        logger.debug("Recsys response: %s -> %d items", url, len(items))
        return items

    @staticmethod
    def _parse(url: str, body: bytes) -> list[RecommendationItem]:
        if not body.strip():
            return []
        try:
            payload = _BackendPayload.model_validate_json(body)
        except ValidationError as exc:
            raise BackendMalformedResponseError(
                f"{url} returned an unparseable body: {exc.error_count()} error(s)"
            ) from exc

        items = []
        for position, entry in enumerate(payload.items or []):
            try:
                item = _BackendItem.model_validate(entry)
            except ValidationError as exc:
                logger.debug("Skipping invalid item #%d from %s: %s", position, url, exc)
                continue
            items.append(
                RecommendationItem(
                    book_id=item.book_id,
                    score=item.score,
                    title=item.title,
                    author=item.author,
                )
            )
        return items

    async def recommend(self, user_id: int, limit: int = 10) -> list[RecommendationItem]:
        return await self._get("/recommendations", {"user_id": user_id, "limit": limit})

    async def similar(self, book_id: int, limit: int = 10) -> list[RecommendationItem]:
        return await self._get("/similar", {"book_id": book_id, "limit": limit})

    async def diversity(self, book_id: int, limit: int = 5) -> list[RecommendationItem]:
        return await self._get("/diversity", {"book_id": book_id, "limit": limit})
