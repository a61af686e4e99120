from collections.abc import Generator

import pytest

from human_join import reset_defaults


@pytest.fixture(autouse=True)
def pristine_defaults() -> Generator[None, None, None]:
    """Run every test against baseline process-wide defaults."""
    reset_defaults()
    yield
    reset_defaults()


@pytest.fixture
def fruit() -> list[str]:
    return ["apples", "oranges", "bananas", "pears"]
