"""FastAPI application factory and entry point for the bookrec service."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import httpx
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bookrec.adapters.recommender.http import HttpRecommenderAdapter
from bookrec.api.routes.admin_recommendation import router as admin_router
from bookrec.api.routes.recommendations import router as recommendations_router
from bookrec.api.schemas import ApiResponse
from bookrec.config import Settings, settings
from bookrec.domain.exceptions import UnknownModelError
from bookrec.services.registry import ModelRegistry
from bookrec.services.routing import RecsysRouter

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: startup and shutdown events."""
    recsys: RecsysRouter = app.state.recsys_router
    logger.info("bookrec starting up...")
    logger.info(
        "Recommendation models: %s (active: %s)",
        ", ".join(recsys.registry.keys()),
        recsys.get_active_model_key(),
    )
    logger.info("Recsys timeout: %.1fs", app.state.settings.recsys_timeout_seconds)
    yield
    logger.info("bookrec shutting down...")


async def unknown_model_handler(request: Request, exc: UnknownModelError) -> JSONResponse:
    logger.warning("Rejected model switch: %s", exc)
    body = ApiResponse[None](success=False, message=str(exc))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=body.model_dump(by_alias=True),
    )


def create_app(
    app_settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Build and configure the FastAPI application.

    The model registry is built here, so an empty ``recsys_models``
    raises ``RecsysConfigurationError`` before the server starts.
    """
    app_settings = app_settings or settings
    recsys = RecsysRouter.create(
        ModelRegistry.from_settings(app_settings),
        app_settings.recsys_default_model,
    )

    application = FastAPI(
        title="bookrec",
        description="Book recommendation model routing and proxy",
        version="1.0.0",
        lifespan=lifespan,
    )
    application.state.settings = app_settings
    application.state.recsys_router = recsys
    application.state.recommender = HttpRecommenderAdapter(
        recsys,
        timeout=app_settings.recsys_timeout_seconds,
        transport=transport,
    )

    # ── Middleware ──────────────────────────────────
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Errors ──────────────────────────────────────
    application.add_exception_handler(UnknownModelError, unknown_model_handler)

    # ── Routes ─────────────────────────────────────
    application.include_router(recommendations_router, prefix=app_settings.api_prefix)
    application.include_router(admin_router, prefix=app_settings.api_prefix)

    # ── Health Check ───────────────────────────────
    @application.get("/health", tags=["System"])
    async def health() -> dict[str, str]:
        return {"status": "healthy", "service": app_settings.app_name}

    return application


app = create_app()
