# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for domain/coefficients.py — equation coefficients and input parsing."""
import dataclasses
import math

import numpy as np
import pytest

from quadrica.domain.coefficients import (
    COEFFICIENT_NAMES,
    DEFAULT_COEFFICIENTS,
    QuadricCoefficients,
    coefficients_from_mapping,
    parse_coefficient,
)


class TestMatrixForm:
    def test_cross_terms_split_evenly(self):
        coeffs = QuadricCoefficients(a11=1, a22=2, a33=3, a12=4, a23=6, a13=8)
        assert coeffs.to_quadratic_matrix() == [
            [1, 2.0, 4.0],
            [2.0, 2, 3.0],
            [4.0, 3.0, 3],
        ]

    def test_linear_vector(self):
        assert QuadricCoefficients(b1=1, b2=-2, b3=3).to_linear_vector() == [1, -2, 3]

    def test_quadratic_form_reproduces_polynomial(self):
        coeffs = QuadricCoefficients(1.5, -2, 0.5, 3, -1, 2, 0.25, -4, 1, -6)
        a = np.array(coeffs.to_quadratic_matrix())
        j = np.array(coeffs.to_linear_vector())
        for point in [(1.0, 2.0, -1.0), (0.3, -0.7, 2.5), (-2.0, 0.0, 4.0)]:
            x = np.array(point)
            assert abs(x @ a @ x + j @ x + coeffs.c - coeffs.evaluate(*point)) < 1e-12


class TestRecord:
    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_COEFFICIENTS.a11 = 2.0

    def test_field_order(self):
        assert tuple(QuadricCoefficients().as_dict()) == COEFFICIENT_NAMES

    def test_default_surface(self):
        assert DEFAULT_COEFFICIENTS.as_tuple() == (1.0, 1.0, -1.0, 0, 0, 0, 0, 0, 0, -1.0)

    def test_is_finite(self):
        assert DEFAULT_COEFFICIENTS.is_finite()
        assert not QuadricCoefficients(b2=math.nan).is_finite()
        assert not QuadricCoefficients(c=math.inf).is_finite()


class TestFormatEquation:
    def test_default(self):
        assert DEFAULT_COEFFICIENTS.format_equation() == "x² + y² - z² - 1 = 0"

    def test_empty(self):
        assert QuadricCoefficients().format_equation() == "0 = 0"

    def test_fractional_and_cross_terms(self):
        coeffs = QuadricCoefficients(a12=0.5, b3=-2.25, c=3)
        assert coeffs.format_equation() == "0.5xy - 2.25z + 3 = 0"

    def test_unit_constant_kept(self):
        assert QuadricCoefficients(a23=1, c=1).format_equation() == "yz + 1 = 0"

    def test_three_decimals(self):
        assert QuadricCoefficients(a33=1.23456).format_equation() == "1.235z² = 0"

    def test_tiny_terms_skipped(self):
        assert QuadricCoefficients(a11=1, b1=5e-7).format_equation() == "x² = 0"


class TestParseCoefficient:
    @pytest.mark.parametrize("text,previous,expected", [
        ("", 4.0, 0.0),
        ("   ", 4.0, 0.0),
        ("2.5", 0.0, 2.5),
        ("-3", 0.0, -3.0),
        ("1.", 0.0, 1.0),
        ("2,5", 0.0, 2.5),
        ("-", 7.0, 7.0),
        ("abc", 7.0, 7.0),
        ("1e", 7.0, 7.0),
        ("nan", 7.0, 7.0),
    ])
    def test_parse(self, text, previous, expected):
        assert parse_coefficient(text, previous) == expected


class TestFromMapping:
    def test_missing_default_to_zero(self):
        coeffs = coefficients_from_mapping({"a11": 1, "c": "-1"})
        assert coeffs == QuadricCoefficients(a11=1.0, c=-1.0)

    def test_base_values_kept(self):
        coeffs = coefficients_from_mapping({"c": 5}, base=DEFAULT_COEFFICIENTS)
        assert coeffs.a33 == -1.0
        assert coeffs.c == 5.0

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="a44"):
            coefficients_from_mapping({"a44": 1})

    @pytest.mark.parametrize("raw", [True, None, [1], "x"])
    def test_not_a_number(self, raw):
        with pytest.raises(ValueError, match="b1"):
            coefficients_from_mapping({"b1": raw})
