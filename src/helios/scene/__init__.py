# SPDX-License-Identifier: Apache-2.0
"""Headless scene collaborators for the clock and movie importer."""

from __future__ import annotations

from .collaborators import (
    ActiveSources,
    DateRangeSelection,
    FixedResolution,
    LoggingScene,
)

__all__ = ["ActiveSources", "DateRangeSelection", "FixedResolution", "LoggingScene"]
