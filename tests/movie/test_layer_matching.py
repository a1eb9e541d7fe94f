# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import pytest

from helios.movie import (
    MatchError,
    filter_sources,
    match_layer_to_source,
    resolve_layer_sources,
)
from helios.sources import DEFAULT_CATALOG, SourceCatalogEntry

CATALOG = [
    SourceCatalogEntry("AIA 171", "aia-171"),
    SourceCatalogEntry("AIA 304", "aia-304"),
    SourceCatalogEntry("EIT 195", "eit-195"),
]


def _identity(term: str) -> str:
    return term


def test_filter_sources_is_substring_and_case_sensitive() -> None:
    assert [s.id for s in filter_sources(CATALOG, "AIA")] == ["aia-171", "aia-304"]
    assert filter_sources(CATALOG, "aia") == []


def test_match_unique_label() -> None:
    assert match_layer_to_source(["AIA", "171"], CATALOG, _identity) == "aia-171"


def test_match_stops_once_unique() -> None:
    # "XYZ" would eliminate everything if narrowing continued
    assert match_layer_to_source(["EIT", "XYZ"], CATALOG, _identity) == "eit-195"


def test_ambiguous_layer_raises() -> None:
    with pytest.raises(MatchError) as info:
        match_layer_to_source(["AIA"], CATALOG, _identity)
    assert info.value.layer == ["AIA"]
    assert {c.label for c in info.value.candidates} == {"AIA 171", "AIA 304"}


def test_unknown_layer_raises() -> None:
    with pytest.raises(MatchError) as info:
        match_layer_to_source(["LASCO", "C2"], CATALOG, _identity)
    assert info.value.candidates == []
    assert "LASCO,C2" in str(info.value)


def test_numeric_element_stops_narrowing() -> None:
    catalog = [
        SourceCatalogEntry("AIA 171", 1),
        SourceCatalogEntry("AIA 171 Deep", 2),
        SourceCatalogEntry("HMI 100", 3),
    ]
    # "171" ends narrowing with two candidates left, "Deep" is never applied
    with pytest.raises(MatchError) as info:
        match_layer_to_source(["AIA", "171", "Deep"], catalog, _identity)
    assert [c.id for c in info.value.candidates] == [1, 2]


def test_translation_applied_before_filtering() -> None:
    catalog = [
        SourceCatalogEntry("HMI Magnetogram", "mag"),
        SourceCatalogEntry("HMI Continuum", "int"),
    ]
    mapping = {"magneto": "Magnetogram"}
    result = match_layer_to_source(
        ["HMI", "magneto"], catalog, lambda t: mapping.get(t, t)
    )
    assert result == "mag"


def test_catalog_is_not_mutated() -> None:
    catalog = list(CATALOG)
    match_layer_to_source(["AIA", "304"], catalog, _identity)
    assert catalog == CATALOG


def test_resolve_preserves_layer_order() -> None:
    layers = [["EIT", "195"], ["AIA", "171"]]
    assert resolve_layer_sources(layers, CATALOG, _identity) == ["eit-195", "aia-171"]


@pytest.mark.parametrize(
    "layer,expected",
    [
        (["SDO", "AIA", "AIA", "171", "1", "100"], 10),
        (["SDO", "AIA", "AIA", "1600", "1", "100"], 15),
        (["SOHO", "LASCO", "C2", "white-light", "1", "100"], 4),
        (["SOHO", "LASCO", "C3", "white-light", "1", "100"], 5),
        (["SOHO", "EIT", "EIT", "304", "1", "100"], 3),
        (["SDO", "HMI", "HMI", "magnetogram", "1", "100"], 19),
        (["SDO", "HMI", "HMI", "continuum", "1", "100"], 18),
    ],
)
def test_default_catalog_matches_helioviewer_layers(layer, expected) -> None:
    assert match_layer_to_source(layer, DEFAULT_CATALOG) == expected
