# SPDX-License-Identifier: Apache-2.0
"""Reconfigure the scene to match a movie rendered by Helioviewer.

An import fetches the movie's metadata, derives its time window and cadence,
matches each of its layers against the local source catalog and hands the
results to the scene collaborators:

- every matched source is activated with the movie's window, cadence and the
  currently selected resolution;
- the date-range display receives the window and frame count;
- the animation clock receives the window and the movie's playback values.

Failures are logged and abort the import. Sources activated before the
failure stay active.
"""

from __future__ import annotations

import inspect
import logging
from datetime import datetime
from typing import Any, Callable, Protocol, Sequence, Union
from urllib.parse import parse_qs, urlparse

import numpy as np

from helios.sources.catalog import SourceCatalogEntry
from helios.sources.source_map import helioviewer_to_helios
from helios.utils.iso8601 import parse_utc

from .layers import parse_layer_string
from .matching import Translate, resolve_layer_sources
from .models import MovieMetadata, ResolvedSource, TimeWindow

LOGGER = logging.getLogger(__name__)


class MetadataService(Protocol):
    def get_movie_details(self, movie_id: str) -> Any: ...


class SourceActivationSink(Protocol):
    def activate(
        self,
        start: datetime,
        end: datetime,
        cadence: float,
        source_id: Any,
        resolution: Any,
    ) -> None: ...


class DateRangeSink(Protocol):
    def set_values(self, *, start: datetime, end: datetime, frames: int) -> None: ...


class AnimationParameterSink(Protocol):
    def set_values(
        self, *, fps: float | None = None, duration: float | None = None
    ) -> None: ...


class TimeWindowTarget(Protocol):
    def set_time_window(self, start: datetime, end: datetime) -> None: ...


class ResolutionSelector(Protocol):
    def current_resolution(self) -> Any: ...


CatalogSource = Union[
    Sequence[SourceCatalogEntry], Callable[[], Sequence[SourceCatalogEntry]]
]


def get_date_range(data: MovieMetadata) -> TimeWindow:
    """Return the movie's window; its dates are UTC without a zone suffix."""

    return TimeWindow(start=parse_utc(data.start_date), end=parse_utc(data.end_date))


def parse_cadence(window: TimeWindow, num_frames: int) -> float:
    """Seconds between frames: the window length divided by the frame count.

    ``num_frames == 0`` yields ``inf`` (or ``nan`` for an empty window)
    instead of raising.
    """

    seconds = np.float64((window.end - window.start).total_seconds())
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(seconds / np.float64(num_frames))


def movie_id_from_query(url_or_query: str) -> str | None:
    """Return the ``movie`` query parameter of a page URL or query string."""

    text = url_or_query or ""
    query = urlparse(text).query if "://" in text or text.startswith("/") else text
    values = parse_qs(query.lstrip("?")).get("movie")
    return values[0] if values else None


class MovieImporter:
    """Load Helioviewer movies into the scene through injected collaborators.

    ``catalog`` is either a sequence of entries or a callable returning a
    fresh snapshot; it is read once per import. ``animation_sink`` defaults
    to ``clock`` so a single ``AnimationClock`` can serve both roles.
    """

    def __init__(
        self,
        metadata_service: MetadataService,
        catalog: CatalogSource,
        *,
        clock: TimeWindowTarget,
        activation_sink: SourceActivationSink,
        date_range_sink: DateRangeSink,
        resolution_selector: ResolutionSelector,
        animation_sink: AnimationParameterSink | None = None,
        translate: Translate = helioviewer_to_helios,
    ) -> None:
        self._metadata = metadata_service
        self._catalog = catalog
        self._clock = clock
        self._activation = activation_sink
        self._date_range = date_range_sink
        self._resolution = resolution_selector
        self._animation = animation_sink if animation_sink is not None else clock
        self._translate = translate

    async def import_movie(self, movie_id: str) -> list[ResolvedSource] | None:
        """Fetch and load movie ``movie_id``.

        Returns the activated sources, or ``None`` when the import failed.
        """

        try:
            data = await self._get_movie_data(movie_id)
            return self.load_movie(data)
        except Exception as exc:
            LOGGER.warning("Error importing movie %s: %s", movie_id, exc)
            return None

    async def load_from_url(self, url: str) -> list[ResolvedSource] | None:
        """Import the movie named by a ``movie=<id>`` query parameter, if any."""

        movie_id = movie_id_from_query(url)
        if not movie_id:
            return None
        return await self.import_movie(movie_id)

    async def _get_movie_data(self, movie_id: str) -> MovieMetadata:
        fetch = getattr(self._metadata, "aget_movie_details", None)
        if fetch is not None:
            result: Any = fetch(movie_id)
        else:
            result = self._metadata.get_movie_details(movie_id)
        if inspect.isawaitable(result):
            result = await result
        if isinstance(result, MovieMetadata):
            return result
        return MovieMetadata.model_validate(result)

    def _get_catalog(self) -> list[SourceCatalogEntry]:
        catalog = self._catalog() if callable(self._catalog) else self._catalog
        return list(catalog)

    def _get_resolution(self, source_id: Any) -> Any:
        return self._resolution.current_resolution()

    def load_movie(self, data: MovieMetadata) -> list[ResolvedSource]:
        """Apply already fetched movie metadata to the scene."""

        window = get_date_range(data)
        sources = resolve_layer_sources(
            parse_layer_string(data.layers), self._get_catalog(), self._translate
        )
        cadence = parse_cadence(window, data.num_frames)
        activated: list[ResolvedSource] = []
        for source_id in sources:
            resolution = self._get_resolution(source_id)
            self._activation.activate(
                window.start, window.end, cadence, source_id, resolution
            )
            activated.append(ResolvedSource(source_id, window, cadence, resolution))
        self._update_date_range(window, data.num_frames)
        self._update_animation(data, window)
        LOGGER.info(
            "Loaded movie with %d source(s) from %s to %s",
            len(activated),
            window.start,
            window.end,
        )
        return activated

    def _update_date_range(self, window: TimeWindow, frames: int) -> None:
        self._date_range.set_values(start=window.start, end=window.end, frames=frames)

    def _update_animation(self, data: MovieMetadata, window: TimeWindow) -> None:
        self._clock.set_time_window(window.start, window.end)
        with np.errstate(divide="ignore", invalid="ignore"):
            duration = float(np.float64(data.num_frames) / np.float64(data.frame_rate))
        self._animation.set_values(fps=data.frame_rate, duration=duration)
