"""Static model registry and the active-model cell."""

import logging
import threading
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from bookrec.config import Settings
from bookrec.domain.exceptions import RecsysConfigurationError, UnknownModelError
from bookrec.domain.recsys import ModelDescriptor

logger = logging.getLogger(__name__)


class ModelRegistry:
    """Immutable, insertion-ordered mapping of model key to descriptor."""

    def __init__(self, models: Mapping[str, ModelDescriptor]) -> None:
        if not models:
            raise RecsysConfigurationError(
                "No recommender models configured under 'recsys_models'"
            )
        self._models = MappingProxyType(dict(models))

    @classmethod
    def from_settings(cls, settings: Settings) -> "ModelRegistry":
        """Build descriptors from ``settings.recsys_models`` in declaration order."""
        return cls(
            {
                key: ModelDescriptor(
                    key=key,
                    label=cfg.label,
                    base_url=cfg.base_url,
                    supports_online_learning=cfg.supports_online_learning,
                )
                for key, cfg in settings.recsys_models.items()
            }
        )

    def get(self, key: str) -> ModelDescriptor | None:
        return self._models.get(key)

    def require(self, key: str) -> ModelDescriptor:
        """Return the descriptor for ``key`` or raise ``UnknownModelError``."""
        try:
            return self._models[key]
        except KeyError:
            raise UnknownModelError(key) from None

    def keys(self) -> tuple[str, ...]:
        return tuple(self._models)

    def all(self) -> tuple[ModelDescriptor, ...]:
        return tuple(self._models.values())

    def __contains__(self, key: object) -> bool:
        return key in self._models

    def __iter__(self) -> Iterator[str]:
        return iter(self._models)

    def __len__(self) -> int:
        return len(self._models)


class ActiveModelSelector:
    """Holds the key of the active model.

    Reads are a single attribute load and never take the lock. Writers
    serialise on a lock held only for the assignment. The selector does
    not validate keys; ``RecsysRouter`` checks the registry first.
    """

    def __init__(self, registry: ModelRegistry, default_key: str | None = None) -> None:
        if default_key and default_key in registry:
            initial = default_key
        else:
            if default_key:
                logger.warning(
                    "Configured default model '%s' is not registered; falling back",
                    default_key,
                )
            initial = registry.keys()[0]
        self._lock = threading.Lock()
        self._key = initial
        logger.info("Active recommendation model initialized to '%s'", initial)

    def current(self) -> str:
        return self._key

    def swap(self, key: str) -> str:
        """Replace the active key and return the previous one."""
        with self._lock:
            previous, self._key = self._key, key
        return previous
