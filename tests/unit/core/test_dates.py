"""Unit tests for core/dates.py"""

from datetime import date

import pytest

from mdblog.core.dates import format_date_dmy, format_date_long, parse_date_string


@pytest.mark.parametrize("s,expected", [
    ("2026-01-15",            date(2026, 1, 15)),
    ("15-01-2026",            date(2026, 1, 15)),
    ("15/01/2026",            date(2026, 1, 15)),
    ("2026-01-15T10:30:00",   date(2026, 1, 15)),
    ("2026-02-30",            None),
    ("yesterday",             None),
    ("",                      None),
    (None,                    None),
])
def test_parse_date_string(s, expected):
    assert parse_date_string(s) == expected


@pytest.mark.parametrize("s,expected", [
    ("2026-01-15", "15-01-2026"),
    ("15/01/2026", "15/01/2026"),
    ("",           ""),
    (None,         ""),
])
def test_format_date_dmy(s, expected):
    assert format_date_dmy(s) == expected


def test_format_date_long_pt():
    assert format_date_long("2026-03-05") == "5 de março de 2026"


def test_format_date_long_en():
    assert format_date_long("05/03/2026", locale="en") == "March 5, 2026"


def test_format_date_long_unparseable_passthrough():
    assert format_date_long("soon") == "soon"
    assert format_date_long(None) == ""
