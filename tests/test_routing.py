"""Tests for RecsysRouter."""

import itertools
from concurrent.futures import ThreadPoolExecutor

import pytest

from bookrec.domain.exceptions import ActiveBackendMisconfiguredError, UnknownModelError
from bookrec.domain.recsys import ModelDescriptor
from bookrec.services.registry import ModelRegistry
from bookrec.services.routing import RecsysRouter


def test_default_model_is_active(recsys: RecsysRouter):
    assert recsys.get_active_model_key() == "neural"
    assert recsys.get_active_model().label == "Neural collaborative filtering"
    assert recsys.get_active_base_url() == "http://rec2"


def test_activate_known_model(recsys: RecsysRouter):
    info = recsys.activate_model("svd")
    assert info.key == "svd"
    assert info.active is True
    assert info.base_url == "http://rec1"
    assert recsys.get_active_model_key() == "svd"
    assert recsys.get_active_base_url() == "http://rec1"


def test_activate_unknown_model_keeps_current(recsys: RecsysRouter):
    with pytest.raises(UnknownModelError, match="does-not-exist"):
        recsys.activate_model("does-not-exist")
    assert recsys.get_active_model_key() == "neural"


@pytest.mark.parametrize("key", ["svd", "neural"])
def test_listing_marks_exactly_the_activated_model(recsys: RecsysRouter, key: str):
    recsys.activate_model(key)
    models = recsys.get_available_models()
    assert [m.key for m in models] == ["svd", "neural"]
    assert [m.key for m in models if m.active] == [key]


def test_active_model_info(recsys: RecsysRouter):
    info = recsys.get_active_model_info()
    assert info.key == "neural"
    assert info.active is True
    assert info.supports_online_learning is True


def test_blank_base_url_is_a_configuration_error():
    registry = ModelRegistry(
        {
            "blank": ModelDescriptor(key="blank", label="Blank", base_url="  "),
            "ok": ModelDescriptor(key="ok", label="OK", base_url="http://ok"),
        }
    )
    recsys = RecsysRouter.create(registry, "blank")
    with pytest.raises(ActiveBackendMisconfiguredError):
        recsys.get_active_base_url()

    recsys.activate_model("ok")
    assert recsys.get_active_base_url() == "http://ok"


def test_concurrent_switches_never_expose_unknown_keys():
    keys = [f"m{i}" for i in range(8)]
    registry = ModelRegistry(
        {k: ModelDescriptor(key=k, label=k, base_url=f"http://{k}") for k in keys}
    )
    recsys = RecsysRouter.create(registry, "m0")

    def write(key: str) -> None:
        for _ in range(200):
            recsys.activate_model(key)

    def read(_: int) -> set[str]:
        seen = set()
        for _ in range(500):
            seen.add(recsys.get_active_model_key())
            active = [m.key for m in recsys.get_available_models() if m.active]
            assert len(active) == 1
        return seen

    with ThreadPoolExecutor(max_workers=16) as pool:
        writers = [pool.submit(write, k) for k in keys]
        readers = [pool.submit(read, i) for i in range(8)]
        for f in writers:
            f.result()
        observed = set(itertools.chain.from_iterable(f.result() for f in readers))

    assert observed <= set(keys)
    assert recsys.get_active_model_key() in keys
