# SPDX-License-Identifier: Apache-2.0
"""Helios: time-stepped solar imagery scenes and Helioviewer movie import."""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
