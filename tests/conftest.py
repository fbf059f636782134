from __future__ import annotations

import copy
from collections.abc import Callable, Iterator

import pytest

from voltflow.config.settings import settings


@pytest.fixture(autouse=True)
def isolate_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Prevent tests from persisting settings to disk."""
    original_data = copy.deepcopy(settings._data)

    def _noop_save() -> None:
        return None

    monkeypatch.setattr(settings, "_save", _noop_save)
    try:
        yield
    finally:
        settings._data = original_data


class ManualScheduler:
    """Scheduler with a hand-cranked clock, in whole milliseconds."""

    def __init__(self) -> None:
        self.now_ms = 0
        self.scheduled: list[tuple[int, Callable[[], None]]] = []
        self.fired = 0

    def __call__(self, delay: float, callback: Callable[[], None]) -> None:
        self.scheduled.append((self.now_ms + round(delay * 1000), callback))

    @property
    def pending(self) -> int:
        return len(self.scheduled)

    def advance(self, ms: int) -> None:
        self.now_ms += ms
        due = [item for item in self.scheduled if item[0] <= self.now_ms]
        self.scheduled = [item for item in self.scheduled if item[0] > self.now_ms]
        for _, callback in sorted(due, key=lambda item: item[0]):
            self.fired += 1
            callback()


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()
