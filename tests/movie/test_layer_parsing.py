# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import pytest

from helios.movie import is_integer_token, parse_layer_string


def test_parse_two_layers() -> None:
    assert parse_layer_string("[AIA,171],[EIT,195]") == [
        ["AIA", "171"],
        ["EIT", "195"],
    ]


def test_parse_single_helioviewer_layer() -> None:
    assert parse_layer_string("[SDO,AIA,AIA,171,1,100]") == [
        ["SDO", "AIA", "AIA", "171", "1", "100"]
    ]


def test_parse_without_brackets() -> None:
    assert parse_layer_string("SOHO,LASCO,C2,white-light,1,100") == [
        ["SOHO", "LASCO", "C2", "white-light", "1", "100"]
    ]


@pytest.mark.parametrize(
    "value,expected",
    [
        ("171", True),
        ("1", True),
        ("-3", True),
        (" 42", True),
        ("304abc", True),
        ("AIA", False),
        ("C2", False),
        ("white-light", False),
        ("", False),
    ],
)
def test_is_integer_token(value: str, expected: bool) -> None:
    assert is_integer_token(value) is expected
