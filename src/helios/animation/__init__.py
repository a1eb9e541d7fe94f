# SPDX-License-Identifier: Apache-2.0
"""Time-stepping animation over a configured window."""

from __future__ import annotations

from .clock import AnimationClock, SceneTimeSink
from .timer import AsyncioScheduler, Scheduler, TimerHandle

__all__ = [
    "AnimationClock",
    "AsyncioScheduler",
    "SceneTimeSink",
    "Scheduler",
    "TimerHandle",
]
