# SPDX-License-Identifier: Apache-2.0
"""Command line entry point for Helios."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from datetime import datetime
from typing import Any, Sequence

from helios.animation import AnimationClock
from helios.connectors.helioviewer import HelioviewerClient
from helios.movie import (
    MatchError,
    MovieImporter,
    movie_id_from_query,
    parse_layer_string,
    resolve_layer_sources,
)
from helios.scene import ActiveSources, DateRangeSelection, FixedResolution
from helios.sources import catalog_from_env, load_catalog
from helios.utils.cli_helpers import (
    apply_verbosity_flags,
    configure_logging_from_env,
)
from helios.utils.iso8601 import format_utc, parse_utc

LOGGER = logging.getLogger(__name__)


def _add_verbosity(p: argparse.ArgumentParser) -> None:
    group = p.add_mutually_exclusive_group()
    group.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    group.add_argument("--quiet", action="store_true", help="Only log errors")


def _catalog(ns: Any):
    if getattr(ns, "catalog", None):
        return load_catalog(ns.catalog)
    return catalog_from_env()


def _json_default(value: Any) -> Any:
    if isinstance(value, datetime):
        return format_utc(value)
    return str(value)


def handle_import_movie(ns: Any) -> int:
    """Handle ``helios import-movie``."""

    client = HelioviewerClient(ns.api_url)
    clock = AnimationClock()
    active = ActiveSources()
    date_range = DateRangeSelection()
    resolution = FixedResolution(ns.resolution) if ns.resolution else FixedResolution()
    importer = MovieImporter(
        client,
        lambda: _catalog(ns),
        clock=clock,
        activation_sink=active,
        date_range_sink=date_range,
        resolution_selector=resolution,
    )
    movie = ns.movie
    movie_id = movie_id_from_query(movie) if "movie=" in movie else movie
    if not movie_id:
        LOGGER.error("No movie id found in %s", movie)
        return 2
    result = asyncio.run(importer.import_movie(movie_id))
    if result is None:
        return 1
    summary = {
        "movie": movie_id,
        "start": date_range.start,
        "end": date_range.end,
        "frames": date_range.frames,
        "frame_delay_ms": clock.frame_delay,
        "duration": clock.duration,
        "sources": [
            {
                "id": s.source_id,
                "cadence": s.cadence,
                "resolution": s.resolution,
            }
            for s in result
        ],
    }
    print(json.dumps(summary, indent=2, default=_json_default))
    return 0


def handle_parse_layers(ns: Any) -> int:
    """Handle ``helios parse-layers``."""

    print(json.dumps(parse_layer_string(ns.layers)))
    return 0


def handle_match_layers(ns: Any) -> int:
    """Handle ``helios match-layers``."""

    layers = parse_layer_string(ns.layers)
    try:
        ids = resolve_layer_sources(layers, _catalog(ns))
    except MatchError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    print(json.dumps(ids, default=_json_default))
    return 0


async def _run_animation(ns: Any) -> list[datetime]:
    seen: list[datetime] = []
    done = asyncio.Event()

    def on_time(ts: datetime) -> None:
        seen.append(ts)
        print(format_utc(ts))
        if len(seen) > ns.ticks:
            done.set()

    clock = AnimationClock(on_time)
    start = parse_utc(ns.start) if ns.start else clock.start_time
    end = parse_utc(ns.end) if ns.end else clock.end_time
    clock.set_time_window(start, end)
    clock.set_cadence(ns.cadence)
    clock.set_frame_delay(ns.frame_delay)
    clock.set_time(start)
    if ns.ticks <= 0:
        return seen
    clock.play()
    try:
        await done.wait()
    finally:
        clock.pause()
    return seen


def handle_animate(ns: Any) -> int:
    """Handle ``helios animate``: print the start time and ``--ticks`` frames."""

    asyncio.run(_run_animation(ns))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="helios",
        description=(
            "Step solar imagery scenes through time and import Helioviewer movies."
        ),
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_import = sub.add_parser(
        "import-movie", help="Configure the scene from a Helioviewer movie"
    )
    p_import.add_argument("movie", help="Movie id, or a URL with a movie=<id> query")
    p_import.add_argument("--api-url", default=None, help="Helioviewer API base URL")
    p_import.add_argument("--catalog", default=None, help="JSON source catalog")
    p_import.add_argument("--resolution", type=int, default=None)
    _add_verbosity(p_import)
    p_import.set_defaults(func=handle_import_movie)

    p_parse = sub.add_parser("parse-layers", help="Split an encoded layer string")
    p_parse.add_argument("layers", help="e.g. '[SDO,AIA,AIA,171,1,100]'")
    _add_verbosity(p_parse)
    p_parse.set_defaults(func=handle_parse_layers)

    p_match = sub.add_parser(
        "match-layers", help="Match encoded layers against the source catalog"
    )
    p_match.add_argument("layers", help="e.g. '[SDO,AIA,AIA,171,1,100]'")
    p_match.add_argument("--catalog", default=None, help="JSON source catalog")
    _add_verbosity(p_match)
    p_match.set_defaults(func=handle_match_layers)

    p_anim = sub.add_parser("animate", help="Run the animation clock")
    p_anim.add_argument("--start", default=None, help="UTC start (default: 24h ago)")
    p_anim.add_argument("--end", default=None, help="UTC end (default: now)")
    p_anim.add_argument("--cadence", type=float, default=3600, help="Seconds per frame")
    p_anim.add_argument(
        "--frame-delay", type=float, default=1000, help="Milliseconds between frames"
    )
    p_anim.add_argument("--ticks", type=int, default=10, help="Frames to emit")
    _add_verbosity(p_anim)
    p_anim.set_defaults(func=handle_animate)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    apply_verbosity_flags(ns)
    configure_logging_from_env()
    return int(ns.func(ns))


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
