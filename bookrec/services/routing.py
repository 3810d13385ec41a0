"""Recommendation model routing: which backend serves requests right now."""

import logging

from bookrec.domain.exceptions import ActiveBackendMisconfiguredError
from bookrec.domain.recsys import ModelDescriptor, ModelInfo
from bookrec.services.registry import ActiveModelSelector, ModelRegistry

logger = logging.getLogger(__name__)


class RecsysRouter:
    """Coordinates the model registry and the active-model selector.

    ``activate_model`` is the only mutating operation. Every other method
    reads the active key once and works from that snapshot.
    """

    def __init__(self, registry: ModelRegistry, selector: ActiveModelSelector) -> None:
        self._registry = registry
        self._selector = selector

    @classmethod
    def create(cls, registry: ModelRegistry, default_key: str | None = None) -> "RecsysRouter":
        return cls(registry, ActiveModelSelector(registry, default_key))

    @property
    def registry(self) -> ModelRegistry:
        return self._registry

    def get_active_model_key(self) -> str:
        return self._selector.current()

    def get_active_model(self) -> ModelDescriptor | None:
        return self._registry.get(self._selector.current())

    def get_active_base_url(self) -> str:
        """Base URL of the active backend, for outbound calls."""
        model = self.get_active_model()
        if model is None or not model.base_url.strip():
            raise ActiveBackendMisconfiguredError(
                "Active recommender model does not have a base URL configured"
            )
        return model.base_url

    def activate_model(self, key: str) -> ModelInfo:
        """Make ``key`` the active model. Raises ``UnknownModelError`` if unregistered."""
        descriptor = self._registry.require(key)
        previous = self._selector.swap(key)
        logger.info("Switched active recommender model from '%s' to '%s'", previous, key)
        return ModelInfo.from_descriptor(descriptor, active=True)

    def get_available_models(self) -> list[ModelInfo]:
        current = self._selector.current()
        return [
            ModelInfo.from_descriptor(descriptor, active=descriptor.key == current)
            for descriptor in self._registry.all()
        ]

    def get_active_model_info(self) -> ModelInfo | None:
        current = self._selector.current()
        descriptor = self._registry.get(current)
        if descriptor is None:
            return None
        return ModelInfo.from_descriptor(descriptor, active=True)
