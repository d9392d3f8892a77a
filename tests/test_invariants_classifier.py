# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Invariant tests for the quadric classifier.

These verify properties of the rotation and translation that must hold
for every input: M is a proper rotation, it diagonalises A, eigenvalues
are descending, and completing the square removes the linear terms.
"""

import numpy as np
import pytest

from quadrica.domain.classifier import TOLERANCE, analyze_quadric
from quadrica.domain.coefficients import QuadricCoefficients
from quadrica.domain.linalg import mat_determinant


_FIXED_VECTORS = [
    (1, 1, 1, 0, 0, 0, 0, 0, 0, -1),
    (1, -1, 0, 0, 0, 0, 0, 0, -1, 0),
    (2, 2, 2, 1, 1, 1, -3, 0.5, 4, -7),
    (0, 0, 0, 2, 2, 2, 1, 1, 1, 0),
    (5, 3, 1, 4, -2, 0, 0, 0, 0, 0),
    (1, 1, 0, 2, 0, 0, 1, -1, 2, 3),
    (-4, 1, 2.5, 0.3, -1.7, 2.2, 0, 9, -1, 1),
    (1e-6, 1, 1, 0, 0, 0, 3, 0, 0, -2),
    (0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
]

_rng = np.random.default_rng(20260101)
_RANDOM_VECTORS = [tuple(_rng.uniform(-5.0, 5.0, size=10)) for _ in range(20)]

_ALL_VECTORS = _FIXED_VECTORS + _RANDOM_VECTORS


def _setup(vector):
    coeffs = QuadricCoefficients(*[float(v) for v in vector])
    result = analyze_quadric(coeffs)
    a = np.array(coeffs.to_quadratic_matrix())
    m = np.array(result.rotation_matrix)
    return coeffs, result, a, m


class TestRotationProper:
    """M^T M = I and det M = +1."""

    @pytest.mark.parametrize("vector", _ALL_VECTORS)
    def test_orthogonal(self, vector):
        _, _, _, m = _setup(vector)
        np.testing.assert_allclose(m.T @ m, np.eye(3), atol=1e-6)

    @pytest.mark.parametrize("vector", _ALL_VECTORS)
    def test_determinant_plus_one(self, vector):
        _, result, _, _ = _setup(vector)
        m = [list(row) for row in result.rotation_matrix]
        assert abs(mat_determinant(m) - 1.0) < 1e-6


class TestDiagonalization:
    """M^T A M = diag(eigenvalues)."""

    @pytest.mark.parametrize("vector", _ALL_VECTORS)
    def test_diagonalizes(self, vector):
        _, result, a, m = _setup(vector)
        np.testing.assert_allclose(m.T @ a @ m, np.diag(result.eigenvalues), atol=1e-4)

    @pytest.mark.parametrize("vector", _ALL_VECTORS)
    def test_descending(self, vector):
        _, result, _, _ = _setup(vector)
        lam = result.eigenvalues
        assert lam[0] >= lam[1] >= lam[2]

    @pytest.mark.parametrize("vector", _ALL_VECTORS)
    def test_matches_numpy_spectrum(self, vector):
        _, result, a, _ = _setup(vector)
        expected = np.sort(np.linalg.eigh(a)[0])[::-1]
        np.testing.assert_allclose(result.eigenvalues, expected, atol=1e-9)


class TestTranslation:
    """Completing the square removes linear terms on non-degenerate axes."""

    @pytest.mark.parametrize("vector", _ALL_VECTORS)
    def test_linear_terms_eliminated(self, vector):
        _, result, _, m = _setup(vector)
        if result.parabolic_axes:
            pytest.skip("parabolic surface keeps a linear term")
        shift = m.T @ np.array(result.translation_vector)
        for i, lam in enumerate(result.eigenvalues):
            if abs(lam) > TOLERANCE:
                assert abs(2.0 * lam * shift[i] + result.rotated_linear[i]) < 1e-4

    @pytest.mark.parametrize("vector", _RANDOM_VECTORS)
    def test_canonical_equation_reproduces_f(self, vector):
        coeffs, result, _, m = _setup(vector)
        tau = np.array(result.translation_vector)
        rng = np.random.default_rng(7)
        for _ in range(5):
            xp = rng.uniform(-3.0, 3.0, size=3)
            x = m @ xp + tau
            canonical = sum(lam * xp[i] ** 2 for i, lam in enumerate(result.eigenvalues))
            canonical += sum(result.rotated_linear[i] * xp[i] for i in result.parabolic_axes)
            canonical += result.residual_constant
            assert abs(coeffs.evaluate(*x) - canonical) < 1e-8 * max(1.0, abs(canonical))
