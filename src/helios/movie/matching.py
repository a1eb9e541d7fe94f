# SPDX-License-Identifier: Apache-2.0
"""Match Helioviewer layers against the local source catalog.

A layer is a list of descriptive elements (observatory, instrument, detector,
measurement, then numeric display settings). Each element narrows the
candidate sources to those whose label contains it, after translating it to
catalog vocabulary. Narrowing stops at the first numeric element (elements
after the measurement are display settings) or as soon as one candidate
remains.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Sequence

from helios.sources.catalog import SourceCatalogEntry
from helios.sources.source_map import helioviewer_to_helios

from .layers import is_integer_token

LOGGER = logging.getLogger(__name__)

Translate = Callable[[str], str]


class MatchError(ValueError):
    """Raised when a layer matches zero or several catalog sources."""

    def __init__(
        self, layer: Sequence[str], candidates: Sequence[SourceCatalogEntry]
    ) -> None:
        self.layer = list(layer)
        self.candidates = list(candidates)
        labels = ", ".join(c.label for c in self.candidates) or "none"
        super().__init__(
            f"Couldn't match movie layer [{','.join(self.layer)}] to supported "
            f"sources (candidates: {labels})"
        )


def filter_sources(
    sources: Iterable[SourceCatalogEntry], needle: str
) -> list[SourceCatalogEntry]:
    """Return the sources whose label contains ``needle`` (case-sensitive)."""

    return [s for s in sources if needle in s.label]


def match_layer_to_source(
    layer: Sequence[str],
    catalog: Sequence[SourceCatalogEntry],
    translate: Translate = helioviewer_to_helios,
) -> Any:
    """Return the id of the single catalog source described by ``layer``."""

    candidates = list(catalog)
    for element in layer:
        candidates = filter_sources(candidates, translate(element))
        if is_integer_token(element) or len(candidates) == 1:
            break
    if len(candidates) == 1:
        return candidates[0].id
    raise MatchError(layer, candidates)


def resolve_layer_sources(
    layers: Iterable[Sequence[str]],
    catalog: Sequence[SourceCatalogEntry],
    translate: Translate = helioviewer_to_helios,
) -> list[Any]:
    """Match every layer, preserving order; the first failure propagates."""

    found: list[Any] = []
    for layer in layers:
        source_id = match_layer_to_source(layer, catalog, translate)
        LOGGER.debug("Matched layer %s to source %s", layer, source_id)
        found.append(source_id)
    return found
