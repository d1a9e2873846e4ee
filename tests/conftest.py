import pytest

from pretty_text.formatting.cache import FormatCache
from pretty_text.formatting.prettify import prettify
from pretty_text.registry import DisplayNameRegistry, reset_registry


@pytest.fixture(autouse=True)
def _fresh_global_registry():
    reset_registry()
    yield
    reset_registry()


@pytest.fixture
def registry() -> DisplayNameRegistry:
    return DisplayNameRegistry()


@pytest.fixture
def counting_cache():
    """A cache whose formatter records every raw value it is asked to format."""
    calls: list[str] = []

    def _formatter(raw: str) -> str:
        calls.append(raw)
        return prettify(raw)

    return FormatCache("test", formatter=_formatter), calls
