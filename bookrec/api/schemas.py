"""Pydantic request/response schemas."""

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiResponse(CamelModel, Generic[T]):
    """Envelope shared by every recommendation endpoint."""

    success: bool = True
    message: str
    data: T | None = None


# ── Books ──────────────────────────────────────────


class BookResponse(CamelModel):
    id: int
    title: str
    description: str
    cover_image_url: str
    publication_year: int | None = None
    publisher: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class DiversityBooksResponse(CamelModel):
    items: list[BookResponse]


# ── Recommendation models ──────────────────────────


class ModelInfoResponse(CamelModel):
    key: str
    label: str
    base_url: str
    supports_online_learning: bool
    active: bool


class ModelsResponse(CamelModel):
    active_key: str
    models: list[ModelInfoResponse]
