# SPDX-License-Identifier: Apache-2.0
"""Shared helpers for CLI handlers."""

from __future__ import annotations

import logging
import os
from typing import Any

from helios.utils.env import env

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "quiet": logging.ERROR,
}


def apply_verbosity_flags(ns: Any) -> None:
    """Translate ``--verbose``/``--quiet`` flags into ``HELIOS_VERBOSITY``."""

    if getattr(ns, "verbose", False):
        os.environ["HELIOS_VERBOSITY"] = "debug"
    elif getattr(ns, "quiet", False):
        os.environ["HELIOS_VERBOSITY"] = "quiet"


def configure_logging_from_env(default: str = "info") -> int:
    """Configure root logging from ``HELIOS_VERBOSITY`` and return the level."""

    verbosity = (env("VERBOSITY", default) or default).lower()
    level = _LEVELS.get(verbosity, logging.INFO)
    logging.basicConfig(
        level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    logging.getLogger().setLevel(level)
    return level
