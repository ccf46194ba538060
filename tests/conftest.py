"""Shared fixtures: a fetch whose results the test hands out by hand."""

import asyncio

import pytest

from autocombo.config import Settings
from autocombo.model import Suggestion

PLACES = [
    Suggestion("p1", "London"),
    Suggestion("p2", "Long Beach"),
    Suggestion("p3", "Paris"),
]


class ControlledFetch:
    """Fake fetch. Each call returns a future the test resolves explicitly."""

    def __init__(self):
        self.calls: list[str] = []
        self.futures: list[asyncio.Future] = []

    def __call__(self, query):
        future = asyncio.get_running_loop().create_future()
        self.calls.append(query)
        self.futures.append(future)
        return future

    def resolve(self, index, value):
        self.futures[index].set_result(value)

    def reject(self, index, exc=None):
        self.futures[index].set_exception(exc or ConnectionError("offline"))


async def settle(seconds: float = 0.0):
    """Let ready tasks and due timers run."""
    await asyncio.sleep(seconds)
    for _ in range(3):
        await asyncio.sleep(0)


@pytest.fixture
def fetch():
    return ControlledFetch()


@pytest.fixture
def fast_settings():
    """No debounce wait, so a single settle() triggers the fetch."""
    return Settings(debounce_interval=0, scroll_throttle=0.1)
