"""Tests for unit conversion and rounding helpers."""

import pytest

from paramdraw.utils import pixels_to_units, units_to_pixels, round2, clamp, format_number


class TestRound2:
    @pytest.mark.parametrize("value, expected", [
        (1.234, 1.23),
        (1.236, 1.24),
        (0.125, 0.13),
        (-0.125, -0.12),
        (2.0, 2.0),
        (0.0, 0.0),
    ])
    def test_rounds_to_two_decimals(self, value, expected):
        assert round2(value) == pytest.approx(expected)

    @pytest.mark.parametrize("value", [0.1 + 0.2, 1 / 3, 50 / 96, -7.777, 123456.789, 0.29, 1e-9])
    def test_idempotent(self, value):
        once = round2(value)
        assert round2(once) == once


class TestClamp:
    def test_both_bounds(self):
        assert clamp(-1.0, 0.0, 5.0) == 0.0
        assert clamp(9.0, 0.0, 5.0) == 5.0
        assert clamp(3.0, 0.0, 5.0) == 3.0

    def test_open_bounds(self):
        assert clamp(1e9, 1.0, None) == 1e9
        assert clamp(-1e9, None, 4.0) == -1e9
        assert clamp(0.5, 1.0) == 1.0


class TestUnits:
    def test_pixels_to_units(self):
        assert pixels_to_units(96) == 1.0
        assert pixels_to_units(48) == 0.5

    def test_custom_dpi(self):
        assert pixels_to_units(72, dpi=72) == 1.0
        assert units_to_pixels(2.0, dpi=72) == 144.0


class TestFormatNumber:
    @pytest.mark.parametrize("value, expected", [
        (6.0, "6"),
        (0.1, "0.1"),
        (0.1 + 0.2, "0.3"),
        (1.25, "1.25"),
        (-0.0000001, "0"),
        (100.0, "100"),
    ])
    def test_format(self, value, expected):
        assert format_number(value) == expected

    def test_no_decimals(self):
        assert format_number(100.0, decimals=0) == "100"
