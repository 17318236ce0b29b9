import os
from typing import List

import pytest

# Ensure a predictable environment before importing the package
os.environ.setdefault("DATA_SOURCE", "SYNTHETIC")
os.environ.setdefault("CACHE_TYPE", "SimpleCache")
os.environ.setdefault("CACHE_TIMEOUT_SECONDS", "5")
os.environ.setdefault("MAX_ROWS", "200")
os.environ.setdefault("QUERY_RETRY", "0")
os.environ.setdefault("QUERY_RETRY_DELAY_SECONDS", "0")
os.environ.setdefault("LOG_FORMAT", "plain")

from selector_provider.models import Item  # noqa: E402
from selector_provider.provider import SelectorDataProvider  # noqa: E402


def make_items(*ids: str, type_: str | None = None) -> List[Item]:
    return [Item(id=i, content={"name": i.upper()}, type=type_) for i in ids]


@pytest.fixture
def abc_items() -> List[Item]:
    return make_items("a", "b", "c")


@pytest.fixture
def provider() -> SelectorDataProvider:
    return SelectorDataProvider()


@pytest.fixture
def notifications(provider):
    """Counter of provider notifications."""
    calls = {"n": 0}

    def on_change():
        calls["n"] += 1

    provider.subscribe(on_change)
    return calls
