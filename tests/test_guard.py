"""Tests for RequestGuard: only the latest fetch may land."""

import pytest

from autocombo.guard import RequestGuard
from tests.conftest import settle


class Recorder:
    def __init__(self):
        self.successes = []
        self.failures = []

    def on_success(self, handle, result):
        self.successes.append((handle.argument, result))

    def on_failure(self, handle, exc):
        self.failures.append((handle.argument, exc))


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def guard(fetch, recorder):
    return RequestGuard(fetch, recorder.on_success, recorder.on_failure)


@pytest.mark.asyncio
async def test_issue_applies_result(guard, fetch, recorder):
    handle = guard.issue("lon")
    assert guard.is_current(handle)
    assert guard.pending
    fetch.resolve(0, ["London"])
    await settle()
    assert recorder.successes == [("lon", ["London"])]
    assert not guard.pending


@pytest.mark.asyncio
async def test_handles_are_distinct(guard):
    first = guard.issue("a")
    second = guard.issue("a")
    assert first != second
    assert second.token > first.token
    assert not guard.is_current(first)


@pytest.mark.asyncio
async def test_last_issued_wins_when_old_resolves_last(guard, fetch, recorder):
    """A slow early response must not clobber a fast later one."""
    guard.issue("lo")
    guard.issue("lon")
    fetch.resolve(1, ["London"])
    await settle()
    fetch.resolve(0, ["London", "Long Beach"])
    await settle()
    assert recorder.successes == [("lon", ["London"])]


@pytest.mark.asyncio
async def test_last_issued_wins_when_old_resolves_first(guard, fetch, recorder):
    guard.issue("lo")
    guard.issue("lon")
    fetch.resolve(0, ["stale"])
    await settle()
    assert recorder.successes == []
    fetch.resolve(1, ["fresh"])
    await settle()
    assert recorder.successes == [("lon", ["fresh"])]


@pytest.mark.asyncio
async def test_failure_of_current_reported(guard, fetch, recorder):
    guard.issue("lon")
    fetch.reject(0)
    await settle()
    assert recorder.successes == []
    assert len(recorder.failures) == 1
    assert recorder.failures[0][0] == "lon"
    assert isinstance(recorder.failures[0][1], ConnectionError)


@pytest.mark.asyncio
async def test_failure_of_stale_ignored(guard, fetch, recorder):
    guard.issue("lo")
    guard.issue("lon")
    fetch.reject(0)
    await settle()
    assert recorder.failures == []


@pytest.mark.asyncio
async def test_clear_makes_completion_inert(guard, fetch, recorder):
    guard.issue("lon")
    guard.clear()
    assert guard.current is None
    assert not guard.pending
    fetch.resolve(0, ["London"])
    await settle()
    assert recorder.successes == []


@pytest.mark.asyncio
async def test_synchronous_raise_is_a_failure(recorder):
    def broken(query):
        raise RuntimeError("no backend")

    guard = RequestGuard(broken, recorder.on_success, recorder.on_failure)
    guard.issue("lon")
    assert len(recorder.failures) == 1
    assert not guard.pending


@pytest.mark.asyncio
async def test_plain_return_value_accepted(recorder):
    guard = RequestGuard(lambda q: [q.upper()], recorder.on_success, recorder.on_failure)
    guard.issue("lon")
    await settle()
    assert recorder.successes == [("lon", ["LON"])]
