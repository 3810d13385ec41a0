"""FastAPI dependency providers."""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from bookrec.adapters.catalog.sql import SqlBookCatalogAdapter
from bookrec.database import get_session
from bookrec.ports.catalog import BookCatalogPort
from bookrec.ports.recommender import RecommenderPort
from bookrec.services.recommendation import RecommendationService
from bookrec.services.routing import RecsysRouter


def get_recsys_router(request: Request) -> RecsysRouter:
    return request.app.state.recsys_router


def get_recommender(request: Request) -> RecommenderPort:
    return request.app.state.recommender


def get_book_catalog(session: AsyncSession = Depends(get_session)) -> BookCatalogPort:
    return SqlBookCatalogAdapter(session)


def get_recommendation_service(
    recommender: RecommenderPort = Depends(get_recommender),
    catalog: BookCatalogPort = Depends(get_book_catalog),
) -> RecommendationService:
    return RecommendationService(recommender, catalog)
