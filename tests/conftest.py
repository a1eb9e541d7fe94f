# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import os
from typing import Callable

import pytest


class ManualHandle:
    def __init__(self, delay_seconds: float, callback: Callable[[], None]) -> None:
        self.delay_seconds = delay_seconds
        self.callback = callback
        self.active = True

    def cancel(self) -> None:
        self.active = False


class ManualScheduler:
    """Scheduler whose timers only fire when the test calls ``fire``."""

    def __init__(self) -> None:
        self.handles: list[ManualHandle] = []

    def call_repeating(
        self, delay_seconds: float, callback: Callable[[], None]
    ) -> ManualHandle:
        handle = ManualHandle(delay_seconds, callback)
        self.handles.append(handle)
        return handle

    @property
    def active_handles(self) -> list[ManualHandle]:
        return [h for h in self.handles if h.active]

    def fire(self, times: int = 1) -> None:
        for _ in range(times):
            for handle in self.active_handles:
                handle.callback()


@pytest.fixture()
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture(autouse=True)
def _isolate_helios_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer HELIOS_* settings out of the tests."""

    for key in list(os.environ):
        if key.startswith("HELIOS_"):
            monkeypatch.delenv(key, raising=False)
