# SPDX-License-Identifier: Apache-2.0
"""Import Helioviewer movies into the scene."""

from __future__ import annotations

from .importer import (
    MovieImporter,
    get_date_range,
    movie_id_from_query,
    parse_cadence,
)
from .layers import is_integer_token, parse_layer_string
from .matching import (
    MatchError,
    filter_sources,
    match_layer_to_source,
    resolve_layer_sources,
)
from .models import MovieMetadata, ResolvedSource, TimeWindow

__all__ = [
    "MatchError",
    "MovieImporter",
    "MovieMetadata",
    "ResolvedSource",
    "TimeWindow",
    "filter_sources",
    "get_date_range",
    "is_integer_token",
    "match_layer_to_source",
    "movie_id_from_query",
    "parse_cadence",
    "parse_layer_string",
    "resolve_layer_sources",
]
