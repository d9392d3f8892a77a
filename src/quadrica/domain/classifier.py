# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Quadric surface classification.

Reduces X^T A X + J^T X + c = 0 to canonical form in three steps:

1. Rotation. Diagonalise the symmetric matrix A; the eigenvectors, sorted
   by descending eigenvalue, form the columns of M ∈ SO(3).
2. Translation. With J' = M^T J, complete the square on every axis with a
   nonzero eigenvalue. An axis with zero eigenvalue but nonzero J'_i is
   parabolic: its shift absorbs the constant instead.
3. Classification. Rank, signature, parabolic axes and the residual
   constant c' select the surface type.

The coordinate change is X = M (X' + S) = M X' + τ with τ = M S.

All degeneracy tests use the absolute tolerance TOLERANCE on eigenvalues,
rotated linear coefficients and the residual constant.
"""
import logging
from dataclasses import dataclass
from enum import Enum

from .coefficients import QuadricCoefficients
from .linalg import (
    ComputationError,
    Matrix,
    mat_determinant,
    mat_eigen_symmetric,
    mat_transpose,
    mat_vec_multiply,
)

logger = logging.getLogger(__name__)

TOLERANCE = 1e-5
"""Absolute tolerance below which a value is treated as exactly zero."""

AXIS_NAMES = ("x'", "y'", "z'")

# Surface type labels
ELLIPSOID = "Ellipsoid"
IMAGINARY_ELLIPSOID = "Imaginary Ellipsoid"
HYPERBOLOID_ONE_SHEET = "Hyperboloid of One Sheet"
HYPERBOLOID_TWO_SHEETS = "Hyperboloid of Two Sheets"
CONE = "Cone (Real or Imaginary)"
ELLIPTIC_PARABOLOID = "Elliptic Paraboloid"
HYPERBOLIC_PARABOLOID = "Hyperbolic Paraboloid"
ELLIPTIC_CYLINDER = "Elliptic Cylinder"
HYPERBOLIC_CYLINDER = "Hyperbolic Cylinder"
PARABOLIC_CYLINDER = "Parabolic Cylinder"
INTERSECTING_PLANES = "Intersecting Planes"
IMAGINARY_INTERSECTING_PLANES = "Intersecting Planes (Imaginary)"
PARALLEL_PLANES = "Parallel Planes"
COINCIDENT_PLANES = "Coincident Planes"
GENERAL_QUADRIC = "General Quadric"


class CenterType(Enum):
    """Locus of centres of the quadric.

    PLANE and UNKNOWN are part of the vocabulary but are not produced by
    the current classification rules.
    """
    POINT = "Point"
    LINE = "Line"
    PLANE = "Plane"
    NONE = "None"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class PrincipalAxes:
    """Eigenvalues (descending) and the rotation whose columns are the axes."""
    eigenvalues: tuple[float, float, float]
    rotation: tuple[tuple[float, ...], ...]


@dataclass(frozen=True)
class SquareCompletion:
    """Outcome of completing the square in the rotated frame."""
    shift: tuple[float, float, float]
    residual_constant: float
    parabolic_axes: tuple[int, ...]


@dataclass(frozen=True)
class AnalysisResult:
    """Canonical-form analysis of one quadric equation."""
    eigenvalues: tuple[float, float, float]
    rotation_matrix: tuple[tuple[float, ...], ...]
    translation_vector: tuple[float, float, float]
    standard_form: str
    center_type: CenterType
    surface_type: str
    rank: int
    signature: tuple[int, int]
    rotated_linear: tuple[float, float, float]
    residual_constant: float
    parabolic_axes: tuple[int, ...]


def principal_axes(a: Matrix) -> PrincipalAxes:
    """
    Sorted eigen-decomposition of a symmetric 3×3 matrix as a proper rotation.

    Eigenpairs are sorted by descending eigenvalue; equal eigenvalues keep
    the solver's order. If the assembled matrix has det < 0 the third
    (smallest eigenvalue) column is negated so that det(M) = +1.

    Raises:
        ComputationError: If the eigensolver fails.
    """
    decomposition = mat_eigen_symmetric(a)
    values = decomposition.eigenvalues
    vectors = decomposition.eigenvectors

    order = sorted(range(3), key=lambda k: values[k], reverse=True)
    eigenvalues = tuple(values[k] for k in order)
    m = [[vectors[i][k] for k in order] for i in range(3)]

    if mat_determinant(m) < 0:
        for i in range(3):
            m[i][2] = -m[i][2]

    return PrincipalAxes(
        eigenvalues=eigenvalues,
        rotation=tuple(tuple(row) for row in m),
    )


def complete_the_square(
    eigenvalues,
    rotated_linear,
    constant: float,
) -> SquareCompletion:
    """
    Shift S removing linear terms axis by axis, in index order.

    Non-degenerate axis:  S_i = -J'_i / (2 λ_i), c' -= J'_i² / (4 λ_i).
    Parabolic axis:       S_i = -c' / J'_i, then c' = 0.
    Free axis:            S_i = 0.
    """
    shift = [0.0, 0.0, 0.0]
    c_prime = constant
    parabolic: list[int] = []

    for i in range(3):
        lam = eigenvalues[i]
        ji = rotated_linear[i]
        if abs(lam) > TOLERANCE:
            shift[i] = -ji / (2.0 * lam)
            c_prime -= (ji * ji) / (4.0 * lam)
        elif abs(ji) > TOLERANCE:
            shift[i] = -c_prime / ji
            c_prime = 0.0
            parabolic.append(i)

    return SquareCompletion(
        shift=tuple(shift),
        residual_constant=c_prime,
        parabolic_axes=tuple(parabolic),
    )


def classify_surface(
    eigenvalues,
    residual_constant: float,
    has_linear: bool,
) -> tuple[str, CenterType]:
    """
    Surface type label and centre type from the canonical invariants.

    Returns (surface_type, center_type).
    """
    rank = sum(1 for lam in eigenvalues if abs(lam) > TOLERANCE)
    sig_pos = sum(1 for lam in eigenvalues if lam > TOLERANCE)
    sig_neg = sum(1 for lam in eigenvalues if lam < -TOLERANCE)
    definite_pair = sig_pos == 2 or sig_neg == 2
    no_constant = abs(residual_constant) < TOLERANCE

    surface_type = GENERAL_QUADRIC
    if has_linear:
        if rank == 2:
            surface_type = ELLIPTIC_PARABOLOID if definite_pair else HYPERBOLIC_PARABOLOID
        elif rank == 1:
            surface_type = PARABOLIC_CYLINDER
    elif rank == 3:
        if no_constant:
            surface_type = CONE
        else:
            # λ1 x'² + λ2 y'² + λ3 z'² = -c'
            rhs = -residual_constant
            same_sign = sum(1 for lam in eigenvalues if lam * rhs > 0)
            surface_type = {
                3: ELLIPSOID,
                2: HYPERBOLOID_ONE_SHEET,
                1: HYPERBOLOID_TWO_SHEETS,
            }.get(same_sign, IMAGINARY_ELLIPSOID)
    elif rank == 2:
        if no_constant:
            surface_type = IMAGINARY_INTERSECTING_PLANES if definite_pair else INTERSECTING_PLANES
        else:
            surface_type = ELLIPTIC_CYLINDER if definite_pair else HYPERBOLIC_CYLINDER
    elif rank == 1:
        surface_type = COINCIDENT_PLANES if no_constant else PARALLEL_PLANES

    if has_linear:
        center_type = CenterType.NONE
    elif rank == 3:
        center_type = CenterType.POINT
    else:
        center_type = CenterType.LINE
    return surface_type, center_type


def _term(value: float, body: str, first: bool) -> str:
    sign = "-" if value < 0 else ("" if first else "+")
    return f"{sign} {body}"


def format_standard_form(
    eigenvalues,
    rotated_linear,
    parabolic_axes,
    residual_constant: float,
) -> str:
    """
    Canonical equation string, e.g. ``x'^2 + y'^2 + z'^2 - 1.00 = 0``.

    Quadratic terms come first in axis order, then the linear terms of the
    parabolic axes, then the constant. Unit quadratic coefficients are
    elided; every other magnitude is printed with two decimals.
    """
    terms: list[str] = []

    for i, lam in enumerate(eigenvalues):
        if abs(lam) > TOLERANCE:
            magnitude = abs(lam)
            coef = "" if abs(magnitude - 1.0) < 1e-4 else f"{magnitude:.2f}"
            terms.append(_term(lam, f"{coef}{AXIS_NAMES[i]}^2", not terms))

    for i in parabolic_axes:
        coef = rotated_linear[i]
        terms.append(_term(coef, f"{abs(coef):.2f}{AXIS_NAMES[i]}", not terms))

    if abs(residual_constant) > TOLERANCE:
        terms.append(_term(residual_constant, f"{abs(residual_constant):.2f}", not terms))

    if not terms:
        return "0 = 0"
    return " ".join(terms).strip() + " = 0"


def analyze_quadric(coeffs: QuadricCoefficients) -> AnalysisResult:
    """
    Classify a quadric surface and derive its canonical form.

    Args:
        coeffs: The ten equation coefficients.

    Returns:
        AnalysisResult with descending eigenvalues, rotation M (det +1),
        translation τ in original coordinates, canonical equation, centre
        type and surface type.

    Raises:
        ComputationError: If a coefficient is NaN or infinite, or the
            eigensolver does not converge.
    """
    if not coeffs.is_finite():
        raise ComputationError(f"Coefficients must be finite, got {coeffs.as_dict()}")

    axes = principal_axes(coeffs.to_quadratic_matrix())
    m = [list(row) for row in axes.rotation]

    rotated_linear = tuple(mat_vec_multiply(mat_transpose(m), coeffs.to_linear_vector()))
    completion = complete_the_square(axes.eigenvalues, rotated_linear, coeffs.c)
    translation = tuple(mat_vec_multiply(m, completion.shift))

    has_linear = bool(completion.parabolic_axes)
    surface_type, center_type = classify_surface(
        axes.eigenvalues, completion.residual_constant, has_linear,
    )
    standard_form = format_standard_form(
        axes.eigenvalues, rotated_linear,
        completion.parabolic_axes, completion.residual_constant,
    )

    rank = sum(1 for lam in axes.eigenvalues if abs(lam) > TOLERANCE)
    signature = (
        sum(1 for lam in axes.eigenvalues if lam > TOLERANCE),
        sum(1 for lam in axes.eigenvalues if lam < -TOLERANCE),
    )
    logger.debug(
        "rank=%d signature=%s parabolic=%s c'=%.6g -> %s",
        rank, signature, completion.parabolic_axes,
        completion.residual_constant, surface_type,
    )

    return AnalysisResult(
        eigenvalues=axes.eigenvalues,
        rotation_matrix=axes.rotation,
        translation_vector=translation,
        standard_form=standard_form,
        center_type=center_type,
        surface_type=surface_type,
        rank=rank,
        signature=signature,
        rotated_linear=rotated_linear,
        residual_constant=completion.residual_constant,
        parabolic_axes=completion.parabolic_axes,
    )
