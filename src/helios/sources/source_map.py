# SPDX-License-Identifier: Apache-2.0
"""Translate Helioviewer layer vocabulary into catalog label vocabulary.

Helioviewer encodes a layer as ``[observatory,instrument,detector,measurement,
visible,opacity]``. Most terms already appear verbatim in catalog labels;
the ones below do not.
"""

from __future__ import annotations

HELIOVIEWER_TO_HELIOS: dict[str, str] = {
    # HMI measurements are lower-case upstream.
    "magnetogram": "Magnetogram",
    "continuum": "Continuum",
    # LASCO measurements carry no information beyond the detector.
    "white-light": "",
}


def helioviewer_to_helios(term: str) -> str:
    """Return the catalog spelling of ``term``; unknown terms pass through."""

    return HELIOVIEWER_TO_HELIOS.get(term, term)
