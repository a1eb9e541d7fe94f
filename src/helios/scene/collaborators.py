# SPDX-License-Identifier: Apache-2.0
"""Plain in-memory stand-ins for the scene's UI collaborators."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from helios.movie.models import ResolvedSource, TimeWindow
from helios.utils.env import env_int
from helios.utils.iso8601 import format_utc

LOGGER = logging.getLogger(__name__)


@dataclass
class ActiveSources:
    """Collects activated sources in activation order."""

    sources: list[ResolvedSource] = field(default_factory=list)

    def activate(
        self,
        start: datetime,
        end: datetime,
        cadence: float,
        source_id: Any,
        resolution: Any,
    ) -> None:
        source = ResolvedSource(source_id, TimeWindow(start, end), cadence, resolution)
        self.sources.append(source)
        LOGGER.info(
            "Activated source %s (%s to %s, cadence %ss, resolution %s)",
            source_id,
            format_utc(start),
            format_utc(end),
            cadence,
            resolution,
        )


@dataclass
class DateRangeSelection:
    start: datetime | None = None
    end: datetime | None = None
    frames: int | None = None

    def set_values(self, *, start: datetime, end: datetime, frames: int) -> None:
        self.start = start
        self.end = end
        self.frames = frames


@dataclass
class FixedResolution:
    """Resolution selector returning a constant (``HELIOS_RESOLUTION``)."""

    resolution: int = field(default_factory=lambda: env_int("RESOLUTION", 1024))

    def current_resolution(self) -> int:
        return self.resolution


class LoggingScene:
    """Scene time sink that logs and remembers each time it is given."""

    def __init__(self) -> None:
        self.times: list[datetime] = []

    def on_time_changed(self, timestamp: datetime) -> None:
        self.times.append(timestamp)
        LOGGER.info("Scene time %s", format_utc(timestamp))
