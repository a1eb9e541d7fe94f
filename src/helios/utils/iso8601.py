# SPDX-License-Identifier: Apache-2.0
"""Lightweight ISO-8601 helpers for the timestamps exchanged with Helioviewer.

Helioviewer reports movie dates without a zone designator
(``2020-01-01 00:00:00``); they are always UTC.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any

_OFFSET_RX = re.compile(r"[+-]\d{2}:?\d{2}$")


def to_datetime(value: Any) -> datetime | None:
    """Coerce ``value`` into a timezone-aware ``datetime`` where possible.

    Accepts ``datetime`` objects (naive assumed UTC) and ISO strings with an
    optional ``Z`` suffix. Returns ``None`` when the input is empty or cannot
    be interpreted as a timestamp.
    """

    if value is None:
        return None
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if isinstance(value, str):
        token = value.strip()
        if not token:
            return None
        if token.endswith("Z"):
            token = token[:-1] + "+00:00"
        try:
            dt = datetime.fromisoformat(token)
        except ValueError:
            for fmt in ("%Y-%m-%d %H:%M:%S", "%Y-%m-%dT%H:%M:%S"):
                try:
                    dt = datetime.strptime(token, fmt)
                    break
                except ValueError:
                    continue
            else:
                return None
        return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)
    return None


def parse_utc(value: str) -> datetime:
    """Parse a zone-less timestamp as UTC by qualifying it with ``Z``.

    Raises ``ValueError`` when the string is not a recognizable timestamp.
    """

    token = (value or "").strip()
    if token and not token.endswith("Z") and not _OFFSET_RX.search(token[10:]):
        token = token + "Z"
    dt = to_datetime(token)
    if dt is None:
        raise ValueError(f"Invalid timestamp: {value!r}")
    return dt.astimezone(timezone.utc)


def format_utc(dt: datetime) -> str:
    """Render ``dt`` as ``YYYY-MM-DDTHH:MM:SSZ``."""

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    else:
        dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%SZ")
