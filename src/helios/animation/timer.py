# SPDX-License-Identifier: Apache-2.0
"""Cancellable repeating timers.

``AnimationClock`` only needs ``call_repeating`` and a handle it can cancel,
so tests can swap in a scheduler that fires ticks on demand.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Protocol, runtime_checkable

LOGGER = logging.getLogger(__name__)


@runtime_checkable
class TimerHandle(Protocol):
    @property
    def active(self) -> bool: ...

    def cancel(self) -> None: ...


@runtime_checkable
class Scheduler(Protocol):
    def call_repeating(
        self, delay_seconds: float, callback: Callable[[], None]
    ) -> TimerHandle: ...


class _AsyncioRepeatingHandle:
    """Fixed-delay repetition on an asyncio loop.

    The next fire is scheduled only after the callback returns, so ticks never
    overlap.
    """

    def __init__(
        self,
        loop: asyncio.AbstractEventLoop,
        delay_seconds: float,
        callback: Callable[[], None],
    ) -> None:
        self._loop = loop
        self._delay = max(float(delay_seconds), 0.0)
        self._callback = callback
        self._pending: asyncio.TimerHandle | None = None
        self._active = True
        self._schedule()

    @property
    def active(self) -> bool:
        return self._active

    def _schedule(self) -> None:
        self._pending = self._loop.call_later(self._delay, self._fire)

    def _fire(self) -> None:
        self._pending = None
        if not self._active:
            return
        try:
            self._callback()
        except Exception:
            LOGGER.exception("Repeating timer callback failed")
        if self._active:
            self._schedule()

    def cancel(self) -> None:
        self._active = False
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None


class AsyncioScheduler:
    """Schedule repeating callbacks on an asyncio event loop.

    When ``loop`` is not given, the loop running at ``call_repeating`` time is
    used.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_repeating(
        self, delay_seconds: float, callback: Callable[[], None]
    ) -> _AsyncioRepeatingHandle:
        loop = self._loop or asyncio.get_running_loop()
        return _AsyncioRepeatingHandle(loop, delay_seconds, callback)
