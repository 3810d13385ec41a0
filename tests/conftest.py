import pytest

from bookrec.config import Settings
from bookrec.services.registry import ModelRegistry
from bookrec.services.routing import RecsysRouter
from tests.fakes import FakeCatalog, make_book, make_settings


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def registry(settings: Settings) -> ModelRegistry:
    return ModelRegistry.from_settings(settings)


@pytest.fixture
def recsys(registry: ModelRegistry) -> RecsysRouter:
    return RecsysRouter.create(registry, "neural")


@pytest.fixture
def catalog() -> FakeCatalog:
    return FakeCatalog([make_book(i) for i in range(1, 6)])
