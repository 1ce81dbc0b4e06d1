import pytest

from whirligig.containers.parameters import BladeParameters
from whirligig.evaluate import clear_cache


@pytest.fixture
def leaf_params() -> BladeParameters:
    return BladeParameters()


@pytest.fixture
def rounded_params() -> BladeParameters:
    return BladeParameters.from_preset("rounded")


@pytest.fixture(autouse=True)
def _fresh_cache():
    clear_cache()
    yield
    clear_cache()
