"""Admin routes for switching the active recommendation model."""

from fastapi import APIRouter, Depends

from bookrec.api.dependencies import get_recsys_router
from bookrec.api.schemas import ApiResponse, ModelInfoResponse, ModelsResponse
from bookrec.services.routing import RecsysRouter

router = APIRouter(prefix="/admin/recommendation", tags=["Admin"])


@router.get("/models", response_model=ApiResponse[ModelsResponse])
def list_models(
    recsys: RecsysRouter = Depends(get_recsys_router),
) -> ApiResponse[ModelsResponse]:
    """All registered models; exactly one is flagged active."""
    models = recsys.get_available_models()
    active_key = next((m.key for m in models if m.active), recsys.get_active_model_key())
    return ApiResponse[ModelsResponse](
        message="Recommendation model registry retrieved successfully",
        data=ModelsResponse(
            active_key=active_key,
            models=[ModelInfoResponse.model_validate(m) for m in models],
        ),
    )


@router.put("/models/{model_key}", response_model=ApiResponse[ModelInfoResponse])
def activate_model(
    model_key: str,
    recsys: RecsysRouter = Depends(get_recsys_router),
) -> ApiResponse[ModelInfoResponse]:
    """Switch the active model. Unknown keys are rejected with 400."""
    info = recsys.activate_model(model_key)
    return ApiResponse[ModelInfoResponse](
        message="Active recommendation model updated successfully",
        data=ModelInfoResponse.model_validate(info),
    )
