# SPDX-License-Identifier: Apache-2.0
"""Prefixed environment helpers.

Settings are read from ``HELIOS_<NAME>`` first and fall back to the bare
``<NAME>`` so shared deployment variables keep working.
"""

from __future__ import annotations

import os
from pathlib import Path

PREFIX = "HELIOS_"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def env(name: str, default: str | None = None) -> str | None:
    """Return the value of ``HELIOS_<name>`` (or ``<name>``) or ``default``."""

    for key in (f"{PREFIX}{name}", name):
        value = os.environ.get(key)
        if value is not None and value.strip() != "":
            return value.strip()
    return default


def env_bool(name: str, default: bool | None = None) -> bool | None:
    raw = env(name)
    if raw is None:
        return default
    low = raw.lower()
    if low in _TRUTHY:
        return True
    if low in _FALSY:
        return False
    return default


def env_int(name: str, default: int) -> int:
    raw = env(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def env_float(name: str, default: float) -> float:
    raw = env(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def env_path(name: str, default: str | Path | None = None) -> Path | None:
    raw = env(name)
    if raw is None:
        return Path(default) if default is not None else None
    return Path(raw).expanduser()
