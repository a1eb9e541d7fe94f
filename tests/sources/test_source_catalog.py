# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import json

import pytest

from helios.sources import (
    DEFAULT_CATALOG,
    SourceCatalogEntry,
    catalog_from_env,
    helioviewer_to_helios,
    load_catalog,
)


def test_default_catalog_labels_are_unique() -> None:
    labels = [entry.label for entry in DEFAULT_CATALOG]
    assert len(labels) == len(set(labels))


def test_load_catalog_from_json(tmp_path) -> None:
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps([{"label": "AIA 171", "id": 10}, {"label": "EIT 195", "id": "e"}]),
        encoding="utf-8",
    )

    assert load_catalog(path) == (
        SourceCatalogEntry("AIA 171", 10),
        SourceCatalogEntry("EIT 195", "e"),
    )


@pytest.mark.parametrize(
    "document", [{"label": "x", "id": 1}, [{"label": "no id"}], ["AIA 171"]]
)
def test_load_catalog_rejects_bad_documents(tmp_path, document) -> None:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(document), encoding="utf-8")

    with pytest.raises(ValueError):
        load_catalog(path)


def test_catalog_from_env(tmp_path, monkeypatch) -> None:
    assert catalog_from_env() is DEFAULT_CATALOG

    path = tmp_path / "custom.json"
    path.write_text(json.dumps([{"label": "Custom", "id": 99}]), encoding="utf-8")
    monkeypatch.setenv("HELIOS_CATALOG_FILE", str(path))

    assert catalog_from_env() == (SourceCatalogEntry("Custom", 99),)


@pytest.mark.parametrize(
    "term,expected",
    [
        ("magnetogram", "Magnetogram"),
        ("continuum", "Continuum"),
        ("white-light", ""),
        ("AIA", "AIA"),
        ("171", "171"),
        ("", ""),
    ],
)
def test_helioviewer_to_helios(term, expected) -> None:
    assert helioviewer_to_helios(term) == expected
