# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for numeric guards and size-band parsing.

Test Coverage:
1. safe_divide / safe_percentage / safe_power fallbacks
2. Persian digit normalization
3. Size-band parsing and midpoints, including malformed labels
"""

import math

import pytest

from sahm.utils import (
    normalize_digits,
    parse_size_band,
    safe_divide,
    safe_percentage,
    safe_power,
    size_band_midpoint,
)


class TestSafeDivision:
    def test_regular_division(self):
        assert safe_divide(10, 4) == 2.5

    def test_zero_denominator_returns_default(self):
        assert safe_divide(10, 0) == 0.0
        assert safe_divide(10, 0, default=-1.0) == -1.0

    def test_non_finite_denominator_returns_default(self):
        assert safe_divide(10, math.inf) == 0.0
        assert safe_divide(10, math.nan) == 0.0

    def test_safe_percentage(self):
        assert safe_percentage(25, 200) == pytest.approx(12.5)
        assert safe_percentage(25, 0) == 0.0

    def test_negative_values_pass_through(self):
        assert safe_percentage(-50, 100) == pytest.approx(-50.0)


class TestSafePower:
    def test_regular_power(self):
        assert safe_power(1.44, 0.5) == pytest.approx(1.2)

    @pytest.mark.parametrize("base", [0.0, -0.5])
    def test_non_positive_base_is_zero(self, base):
        assert safe_power(base, 3.5) == 0.0

    def test_overflow_saturates(self):
        assert safe_power(11.0, 1e5) == math.inf


class TestSizeBands:
    def test_normalize_persian_and_arabic_digits(self):
        assert normalize_digits("۸۰-۱۰۰") == "80-100"
        assert normalize_digits("٨٠") == "80"

    @pytest.mark.parametrize(
        "label, expected",
        [
            ("80-100", (80.0, 100.0)),
            ("80 - 100", (80.0, 100.0)),
            ("۱۰۰–۱۳۰ متر", (100.0, 130.0)),
            ("62.5-77.5", (62.5, 77.5)),
        ],
    )
    def test_parse_valid_bands(self, label, expected):
        assert parse_size_band(label) == expected

    @pytest.mark.parametrize("label", ["", "large", "100", "80-", None])
    def test_parse_malformed_bands(self, label):
        assert parse_size_band(label) is None

    def test_midpoint(self):
        assert size_band_midpoint("60-80") == 70.0
        assert size_band_midpoint("penthouse") is None
