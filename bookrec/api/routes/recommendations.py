"""Recommendation routes: proxied results and the active model."""

from fastapi import APIRouter, Depends, Query

from bookrec.api.dependencies import get_recommendation_service, get_recsys_router
from bookrec.api.schemas import (
    ApiResponse,
    BookResponse,
    DiversityBooksResponse,
    ModelInfoResponse,
)
from bookrec.domain.models import Book
from bookrec.services.recommendation import (
    MAX_LIMIT,
    MIN_LIMIT,
    RecommendationService,
    limit_in_range,
)
from bookrec.services.routing import RecsysRouter

router = APIRouter(tags=["Recommendations"])

LIMIT_OUT_OF_RANGE = f"Limit must be between {MIN_LIMIT} and {MAX_LIMIT}"


def _books(books: list[Book]) -> list[BookResponse]:
    return [BookResponse.model_validate(book) for book in books]


@router.get("/recommendations", response_model=ApiResponse[list[BookResponse]])
async def get_recommendations(
    user_id: int = Query(alias="userId"),
    limit: int = 10,
    service: RecommendationService = Depends(get_recommendation_service),
) -> ApiResponse[list[BookResponse]]:
    """Personalised recommendations from the active model. Empty on backend failure."""
    books = await service.get_recommendations(user_id, limit)
    return ApiResponse[list[BookResponse]](
        message="Recommendations retrieved successfully", data=_books(books)
    )


@router.get("/similar-books", response_model=ApiResponse[list[BookResponse]])
async def get_similar_books(
    book_id: int = Query(alias="bookId"),
    limit: int = 10,
    service: RecommendationService = Depends(get_recommendation_service),
) -> ApiResponse[list[BookResponse]]:
    if not limit_in_range(limit):
        return ApiResponse[list[BookResponse]](message=LIMIT_OUT_OF_RANGE, data=[])

    books = await service.get_similar_books(book_id, limit)
    return ApiResponse[list[BookResponse]](
        message="Similar books retrieved successfully", data=_books(books)
    )


@router.get("/diversity-books", response_model=ApiResponse[DiversityBooksResponse])
async def get_diversity_books(
    book_id: int = Query(alias="bookId"),
    limit: int = 5,
    service: RecommendationService = Depends(get_recommendation_service),
) -> ApiResponse[DiversityBooksResponse]:
    if not limit_in_range(limit):
        return ApiResponse[DiversityBooksResponse](
            message=LIMIT_OUT_OF_RANGE, data=DiversityBooksResponse(items=[])
        )

    books = await service.get_diversity_books(book_id, limit)
    return ApiResponse[DiversityBooksResponse](
        message="Diversity recommendations retrieved successfully",
        data=DiversityBooksResponse(items=_books(books)),
    )


@router.get(
    "/recommendation/active-model",
    response_model=ApiResponse[ModelInfoResponse],
)
def get_active_model(
    recsys: RecsysRouter = Depends(get_recsys_router),
) -> ApiResponse[ModelInfoResponse]:
    info = recsys.get_active_model_info()
    return ApiResponse[ModelInfoResponse](
        message="Active recommendation model retrieved successfully",
        data=ModelInfoResponse.model_validate(info) if info else None,
    )
