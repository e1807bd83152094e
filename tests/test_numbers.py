import math
from decimal import Decimal

import pytest

from utils.formatting import format_axis_tick
from utils.numbers import js_string, round_half_up, to_number


@pytest.mark.parametrize("raw,expected", [
    (None, 0),
    ("", 0),
    ("   ", 0),
    ("abc", 0),
    ("42", 42),
    (" 3.5 ", 3.5),
    ("-2e3", -2000),
    (".5", 0.5),
    ("0x1F", 31),
    ("0b101", 5),
    (7, 7),
    (2.25, 2.25),
    (Decimal("1.5"), 1.5),
    (True, 1),
    (False, 0),
    (math.nan, 0),
    (math.inf, 0),
    ("Infinity", 0),
    ("1e400", 0),
    ([1], 0),
])
def test_to_number(raw, expected):
    assert to_number(raw) == expected


@pytest.mark.parametrize("value,expected", [
    (0.5, 1), (1.5, 2), (2.5, 3), (87.5, 88), (87.4, 87), (-0.5, 0), (60.0, 60),
])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


@pytest.mark.parametrize("value,expected", [
    (10.0, "10"), (2.5, "2.5"), (3, "3"), ("A", "A"), (True, "true"),
])
def test_js_string(value, expected):
    assert js_string(value) == expected


@pytest.mark.parametrize("value,expected", [
    (2_500_000, "2.5M"), (1_000, "1.0K"), (42, "42.0"), (0.25, "0.25"), (0, "0"), (-3, "0"),
])
def test_format_axis_tick(value, expected):
    assert format_axis_tick(value) == expected
