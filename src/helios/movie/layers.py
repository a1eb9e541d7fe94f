# SPDX-License-Identifier: Apache-2.0
"""Parsing of Helioviewer's compact layer encoding.

Layers are written as bracketed, comma separated groups, e.g.
``[SDO,AIA,AIA,171,1,100],[SOHO,LASCO,C2,white-light,1,100]``.
"""

from __future__ import annotations

import re

_INT_PREFIX_RX = re.compile(r"^\s*[+-]?\d")


def parse_layer_string(layer_string: str) -> list[list[str]]:
    """Split an encoded layer string into one list of elements per layer."""

    layers: list[list[str]] = []
    for chunk in layer_string.split("],["):
        layers.append(chunk.replace("[", "").replace("]", "").split(","))
    return layers


def is_integer_token(value: str) -> bool:
    """Return True when ``value`` starts with an integer (``171``, ``304abc``)."""

    return bool(_INT_PREFIX_RX.match(value))
