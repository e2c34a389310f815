"""Tests for to_number / is_truthy - permissive request-field coercion, no IO."""

import math

import pytest

from app.core.coercion import is_truthy, to_number


@pytest.mark.parametrize("raw, expected", [
    (3200, 3200),
    (12.5, 12.5),
    ("400", 400),
    ("  150 ", 150),
    ("19.99", 19.99),
    ("1e3", 1000),
    (".5", 0.5),
    ("0x1F", 31),
    ("0b101", 5),
    ("", 0),
    (None, 0),
    (True, 1),
    (False, 0),
])
def test_to_number_reads_numeric_input(raw, expected):
    assert to_number(raw) == expected


def test_integral_floats_become_int():
    assert isinstance(to_number(3200.0), int)
    assert isinstance(to_number("10"), int)


@pytest.mark.parametrize("raw", ["abc", "12abc", "nan", "inf", "1_000", "-0x10", [], {}])
def test_to_number_returns_nan_for_unreadable_input(raw):
    assert math.isnan(to_number(raw))


def test_to_number_reads_infinity_literal_only():
    assert to_number("Infinity") == math.inf
    assert to_number("-Infinity") == -math.inf
    assert math.isnan(to_number("infinity"))


@pytest.mark.parametrize("value", [None, "", 0, 0.0, False, math.nan])
def test_is_truthy_rejects_missing_values(value):
    assert not is_truthy(value)


@pytest.mark.parametrize("value", ["a", " ", 1, -1, 0.1, True, [], {}, "0"])
def test_is_truthy_accepts_present_values(value):
    assert is_truthy(value)
