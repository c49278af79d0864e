import random

import pytest

from prayengine.common_utils import clamp, feq, hexdump, in_bounds, random_float


def test_feq_close_values():
    assert feq(0.1 + 0.2, 0.3)
    assert feq(1.0, 1.0 + 2**-24)


def test_feq_distant_values():
    assert not feq(1.0, 1.0001)
    assert not feq(-1.0, 1.0)


@pytest.mark.parametrize(
    "value, expected",
    [(-1, False), (0, True), (4, True), (5, False)],
)
def test_in_bounds_half_open(value, expected):
    assert in_bounds(value, 0, 5) is expected


@pytest.mark.parametrize("value, expected", [(10, 5), (-3, 0), (3, 3), (0, 0), (5, 5)])
def test_clamp(value, expected):
    assert clamp(value, 0, 5) == expected


def test_hexdump_full_row():
    assert hexdump(bytes(range(16))) == "00 01 02 03 04 05 06 07 08 09 0A 0B 0C 0D 0E 0F \n"


def test_hexdump_partial_row_is_padded():
    text = hexdump(bytes(range(17)))
    lines = text.split("\n")
    assert lines[1] == "10 " + " " * 45
    assert all(len(line) == 48 for line in lines[:-1])
    assert text.endswith("\n")


def test_hexdump_empty():
    assert hexdump(b"") == ""


def test_hexdump_uppercase():
    assert hexdump(b"\xab\xff") .startswith("AB FF ")


def test_random_float_in_range():
    values = [random_float(-2.5, 7.5) for _ in range(1000)]
    assert all(-2.5 <= v <= 7.5 for v in values)


def test_random_float_degenerate_range():
    assert random_float(3.0, 3.0) == 3.0


def test_random_float_is_seedable():
    random.seed(42)
    first = random_float(0.0, 1.0)
    random.seed(42)
    assert random_float(0.0, 1.0) == first