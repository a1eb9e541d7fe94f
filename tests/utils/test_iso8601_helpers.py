# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from helios.utils.iso8601 import format_utc, parse_utc, to_datetime


def test_parse_utc_qualifies_naive_strings() -> None:
    expected = datetime(2020, 1, 1, 12, 30, tzinfo=timezone.utc)
    assert parse_utc("2020-01-01 12:30:00") == expected
    assert parse_utc("2020-01-01T12:30:00") == expected
    assert parse_utc("2020-01-01T12:30:00Z") == expected


def test_parse_utc_keeps_explicit_offsets() -> None:
    assert parse_utc("2020-01-01T12:30:00+02:00") == datetime(
        2020, 1, 1, 10, 30, tzinfo=timezone.utc
    )
    assert parse_utc("2020-01-01T12:30:00-05:00") == datetime(
        2020, 1, 1, 17, 30, tzinfo=timezone.utc
    )


@pytest.mark.parametrize("value", ["", "yesterday", "2020-13-45 00:00:00"])
def test_parse_utc_rejects_garbage(value) -> None:
    with pytest.raises(ValueError):
        parse_utc(value)


def test_to_datetime_assumes_utc_for_naive() -> None:
    naive = datetime(2020, 1, 1)
    assert to_datetime(naive) == naive.replace(tzinfo=timezone.utc)
    assert to_datetime(None) is None
    assert to_datetime("   ") is None


def test_format_utc() -> None:
    tz = timezone(timedelta(hours=1))
    assert format_utc(datetime(2020, 1, 1, 1, tzinfo=tz)) == "2020-01-01T00:00:00Z"
    assert format_utc(datetime(2020, 1, 1)) == "2020-01-01T00:00:00Z"
