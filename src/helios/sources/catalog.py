# SPDX-License-Identifier: Apache-2.0
"""Catalog of imagery sources the scene knows how to render.

Entry ids are the Helioviewer source ids so activated sources can be requested
from the same image service the movies were rendered from.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence

from helios.utils.env import env_path

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SourceCatalogEntry:
    """A selectable source: a display label and an opaque identifier."""

    label: str
    id: Any


DEFAULT_CATALOG: tuple[SourceCatalogEntry, ...] = (
    SourceCatalogEntry("SOHO EIT 171", 0),
    SourceCatalogEntry("SOHO EIT 195", 1),
    SourceCatalogEntry("SOHO EIT 284", 2),
    SourceCatalogEntry("SOHO EIT 304", 3),
    SourceCatalogEntry("SOHO LASCO C2", 4),
    SourceCatalogEntry("SOHO LASCO C3", 5),
    SourceCatalogEntry("SDO AIA 94", 8),
    SourceCatalogEntry("SDO AIA 131", 9),
    SourceCatalogEntry("SDO AIA 171", 10),
    SourceCatalogEntry("SDO AIA 193", 11),
    SourceCatalogEntry("SDO AIA 211", 12),
    SourceCatalogEntry("SDO AIA 304", 13),
    SourceCatalogEntry("SDO AIA 335", 14),
    SourceCatalogEntry("SDO AIA 1600", 15),
    SourceCatalogEntry("SDO AIA 1700", 16),
    SourceCatalogEntry("SDO AIA 4500", 17),
    SourceCatalogEntry("SDO HMI Continuum", 18),
    SourceCatalogEntry("SDO HMI Magnetogram", 19),
)


def load_catalog(path: str | Path) -> tuple[SourceCatalogEntry, ...]:
    """Read a catalog from a JSON list of ``{"label": ..., "id": ...}``.

    Raises ``ValueError`` when the document is not a list of such objects.
    """

    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"Catalog {path} must be a JSON list")
    entries: list[SourceCatalogEntry] = []
    for i, item in enumerate(data):
        if not isinstance(item, dict) or "label" not in item or "id" not in item:
            raise ValueError(f"Catalog entry {i} in {path} needs 'label' and 'id'")
        entries.append(SourceCatalogEntry(str(item["label"]), item["id"]))
    return tuple(entries)


def catalog_from_env() -> Sequence[SourceCatalogEntry]:
    """Return the catalog named by ``HELIOS_CATALOG_FILE`` or the default."""

    path = env_path("CATALOG_FILE")
    if path is None:
        return DEFAULT_CATALOG
    LOGGER.debug("Loading source catalog from %s", path)
    return load_catalog(path)
