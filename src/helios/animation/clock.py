# SPDX-License-Identifier: Apache-2.0
"""Animation clock that steps a scene through time.

The clock owns a time cursor, a ``[start, end]`` window, a cadence (seconds
added per frame) and a frame delay (milliseconds between frames). While
running, each tick advances the cursor by the cadence and reports the new
time to the scene. Overshooting ``end`` wraps back to ``start``; the cursor is
never clamped to ``end``.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Protocol, Union, runtime_checkable

from dateutil.relativedelta import relativedelta

from .timer import AsyncioScheduler, Scheduler, TimerHandle

LOGGER = logging.getLogger(__name__)

DEFAULT_CADENCE_SECONDS = 3600
DEFAULT_FRAME_DELAY_MS = 1000


@runtime_checkable
class SceneTimeSink(Protocol):
    def on_time_changed(self, timestamp: datetime) -> None: ...


SceneTarget = Union[SceneTimeSink, Callable[[datetime], None]]


class AnimationClock:
    """Cyclic time-stepping driver for the scene.

    Parameters
    - scene: receives every new current time, either an object exposing
      ``on_time_changed`` or a plain callable.
    - scheduler: provides the repeating timer; defaults to the running
      asyncio loop.
    - now: current time used for the default window (last 24 hours).
    """

    def __init__(
        self,
        scene: SceneTarget | None = None,
        *,
        scheduler: Scheduler | None = None,
        now: datetime | None = None,
    ) -> None:
        now = now or datetime.now(timezone.utc)
        self._scene = scene
        self._scheduler: Scheduler = scheduler or AsyncioScheduler()
        self._timer: TimerHandle | None = None
        self._start_time = now - relativedelta(days=1)
        self._end_time = now
        self._current_time = self._start_time
        self._cadence: float = DEFAULT_CADENCE_SECONDS
        self._frame_delay: float = DEFAULT_FRAME_DELAY_MS
        self.duration: float | None = None

    @property
    def running(self) -> bool:
        return self._timer is not None and self._timer.active

    @property
    def start_time(self) -> datetime:
        return self._start_time

    @property
    def end_time(self) -> datetime:
        return self._end_time

    @property
    def cadence(self) -> float:
        return self._cadence

    @property
    def frame_delay(self) -> float:
        return self._frame_delay

    def play(self) -> None:
        """Begin the animation; no effect if it is already running."""

        if self.running:
            return
        self._timer = self._scheduler.call_repeating(
            self._frame_delay / 1000.0, self._tick_frame
        )
        LOGGER.debug(
            "Animation playing every %sms with cadence %ss",
            self._frame_delay,
            self._cadence,
        )

    def pause(self) -> None:
        """Stop the animation; no effect if it is not running."""

        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
            LOGGER.debug("Animation paused at %s", self._current_time)

    def set_start_time(self, start: datetime) -> None:
        self._start_time = start

    def set_end_time(self, end: datetime) -> None:
        self._end_time = end

    def set_time_window(self, start: datetime, end: datetime) -> None:
        """Replace the animation window. ``start <= end`` is not checked."""

        self._start_time = start
        self._end_time = end

    def set_time(self, when: datetime) -> None:
        """Jump to ``when`` and update the scene immediately."""

        self._current_time = when
        self._update_scene()

    def set_cadence(self, seconds: float) -> None:
        self._cadence = seconds

    def set_frame_delay(self, ms: float) -> None:
        """Set the delay between frames; applied on the next ``play()``."""

        self._frame_delay = ms

    def set_values(
        self, *, fps: float | None = None, duration: float | None = None
    ) -> None:
        """Apply playback parameters from an imported movie.

        A positive ``fps`` becomes the frame delay (``1000 / fps`` ms);
        ``duration`` is recorded as given.
        """

        if fps:
            self._frame_delay = 1000.0 / fps
        self.duration = duration

    def get_current_time(self) -> datetime:
        return self._current_time

    def _update_scene(self) -> None:
        scene = self._scene
        if scene is None:
            return
        if isinstance(scene, SceneTimeSink):
            scene.on_time_changed(self._current_time)
        else:
            scene(self._current_time)

    def _tick_frame(self) -> None:
        self._current_time = self._next_frame_time()
        self._update_scene()

    def _next_frame_time(self) -> datetime:
        next_time = self._current_time + timedelta(seconds=self._cadence)
        if next_time > self._end_time:
            LOGGER.debug("Animation wrapped to %s", self._start_time)
            return self._start_time
        return next_time
