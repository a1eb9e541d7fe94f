# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from datetime import datetime, timezone

from helios.movie import ResolvedSource, TimeWindow
from helios.scene import (
    ActiveSources,
    DateRangeSelection,
    FixedResolution,
    LoggingScene,
)

T0 = datetime(2020, 1, 1, tzinfo=timezone.utc)
T1 = datetime(2020, 1, 2, tzinfo=timezone.utc)


def test_active_sources_records_activations() -> None:
    active = ActiveSources()
    active.activate(T0, T1, 600.0, 10, 1024)
    assert active.sources == [ResolvedSource(10, TimeWindow(T0, T1), 600.0, 1024)]


def test_date_range_selection() -> None:
    dates = DateRangeSelection()
    dates.set_values(start=T0, end=T1, frames=48)
    assert (dates.start, dates.end, dates.frames) == (T0, T1, 48)


def test_fixed_resolution_env_default(monkeypatch) -> None:
    assert FixedResolution().current_resolution() == 1024
    monkeypatch.setenv("HELIOS_RESOLUTION", "2048")
    assert FixedResolution().current_resolution() == 2048
    assert FixedResolution(256).current_resolution() == 256


def test_logging_scene_remembers_times() -> None:
    scene = LoggingScene()
    scene.on_time_changed(T0)
    assert scene.times == [T0]
