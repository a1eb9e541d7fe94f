# SPDX-License-Identifier: Apache-2.0
"""Locally supported imagery sources and vocabulary mapping."""

from __future__ import annotations

from .catalog import (
    DEFAULT_CATALOG,
    SourceCatalogEntry,
    catalog_from_env,
    load_catalog,
)
from .source_map import HELIOVIEWER_TO_HELIOS, helioviewer_to_helios

__all__ = [
    "DEFAULT_CATALOG",
    "HELIOVIEWER_TO_HELIOS",
    "SourceCatalogEntry",
    "catalog_from_env",
    "helioviewer_to_helios",
    "load_catalog",
]
