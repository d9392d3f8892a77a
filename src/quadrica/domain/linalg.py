# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Pure linear algebra infrastructure.

Small dense matrix operations, LU-based determinant and Jacobi eigenvalue
decomposition for real symmetric matrices.

No external dependencies — only stdlib math/dataclasses.
"""
import math
from dataclasses import dataclass
from typing import List

Matrix = List[List[float]]


class ComputationError(ArithmeticError):
    """Raised when a numeric result cannot be produced for the given input."""


@dataclass(frozen=True)
class EigenDecomposition:
    """Result of symmetric eigenvalue decomposition.

    Eigenvalues are in the solver's native order; column k of
    ``eigenvectors`` is the unit eigenvector for ``eigenvalues[k]``.
    """
    eigenvalues: tuple
    eigenvectors: tuple


def mat_zeros(n: int, m: int) -> Matrix:
    """Create an NxM zero matrix."""
    return [[0.0] * m for _ in range(n)]


def mat_identity(n: int) -> Matrix:
    """Create an NxN identity matrix."""
    result = mat_zeros(n, n)
    for i in range(n):
        result[i][i] = 1.0
    return result


def mat_multiply(a: Matrix, b: Matrix) -> Matrix:
    """Multiply matrices a (NxM) and b (MxK) → NxK."""
    n = len(a)
    m = len(b)
    if n == 0 or m == 0:
        return []
    k = len(b[0])
    result = mat_zeros(n, k)
    for i in range(n):
        for j in range(k):
            s = 0.0
            for p in range(m):
                s += a[i][p] * b[p][j]
            result[i][j] = s
    return result


def mat_vec_multiply(a: Matrix, v) -> list[float]:
    """Multiply matrix a (NxM) by vector v (M) → N."""
    return [sum(row[j] * v[j] for j in range(len(v))) for row in a]


def mat_transpose(a: Matrix) -> Matrix:
    """Transpose matrix a."""
    n = len(a)
    if n == 0:
        return []
    m = len(a[0])
    return [[a[i][j] for i in range(n)] for j in range(m)]


def mat_determinant(a: Matrix) -> float:
    """Determinant of an NxN matrix via LU decomposition with partial pivoting."""
    n = len(a)
    if n == 1:
        return a[0][0]
    if n == 2:
        return a[0][0] * a[1][1] - a[0][1] * a[1][0]

    lu = [[a[i][j] for j in range(n)] for i in range(n)]
    det = 1.0

    for col in range(n):
        max_val = abs(lu[col][col])
        max_row = col
        for row in range(col + 1, n):
            if abs(lu[row][col]) > max_val:
                max_val = abs(lu[row][col])
                max_row = row
        if max_row != col:
            lu[col], lu[max_row] = lu[max_row], lu[col]
            det *= -1.0

        pivot = lu[col][col]
        if abs(pivot) < 1e-15:
            return 0.0
        det *= pivot

        for row in range(col + 1, n):
            factor = lu[row][col] / pivot
            for j in range(col + 1, n):
                lu[row][j] -= factor * lu[col][j]

    return det


def mat_eigen_symmetric(
    a: Matrix,
    max_sweeps: int = 100,
    tolerance: float = 1e-12,
) -> EigenDecomposition:
    """Jacobi eigenvalue algorithm for real symmetric matrices.

    Repeatedly annihilates the largest off-diagonal element with a Givens
    rotation until every off-diagonal element is below
    ``tolerance * max(1, ||A||_F)``.

    Eigenvalues are returned unsorted, in diagonal order of the converged
    matrix. A matrix that is already diagonal comes back untouched, with
    the identity as eigenvector matrix.

    Raises:
        ComputationError: If ``a`` is not square, holds a non-finite entry,
            or the iteration fails to converge within ``max_sweeps * n``
            rotations.
    """
    n = len(a)
    if any(len(row) != n for row in a):
        raise ComputationError(f"Expected a square matrix, got {n} rows of lengths "
                               f"{[len(row) for row in a]}")
    if n == 0:
        return EigenDecomposition(eigenvalues=(), eigenvectors=())
    for row in a:
        for value in row:
            if not math.isfinite(value):
                raise ComputationError(f"Matrix entry is not finite: {value}")

    s = [[float(a[i][j]) for j in range(n)] for i in range(n)]
    v = mat_identity(n)

    scale = max(1.0, math.sqrt(sum(x * x for row in s for x in row)))
    threshold = tolerance * scale

    converged = False
    for _ in range(max_sweeps * n + 1):
        # Find largest off-diagonal element
        max_off = 0.0
        p, q = 0, 1
        for i in range(n):
            for j in range(i + 1, n):
                if abs(s[i][j]) > max_off:
                    max_off = abs(s[i][j])
                    p, q = i, j

        if max_off <= threshold:
            converged = True
            break

        theta = 0.5 * math.atan2(2.0 * s[p][q], s[p][p] - s[q][q])
        cos_t = math.cos(theta)
        sin_t = math.sin(theta)

        # Apply Givens rotation: S' = G^T S G
        row_p = [s[p][j] for j in range(n)]
        row_q = [s[q][j] for j in range(n)]
        for j in range(n):
            s[p][j] = cos_t * row_p[j] + sin_t * row_q[j]
            s[q][j] = -sin_t * row_p[j] + cos_t * row_q[j]

        col_p = [s[i][p] for i in range(n)]
        col_q = [s[i][q] for i in range(n)]
        for i in range(n):
            s[i][p] = cos_t * col_p[i] + sin_t * col_q[i]
            s[i][q] = -sin_t * col_p[i] + cos_t * col_q[i]

        # Exact zero by construction; drop rounding residue
        s[p][q] = 0.0
        s[q][p] = 0.0

        # Accumulate eigenvectors (columns of v)
        for i in range(n):
            vip = v[i][p]
            viq = v[i][q]
            v[i][p] = cos_t * vip + sin_t * viq
            v[i][q] = -sin_t * vip + cos_t * viq

    if not converged:
        raise ComputationError(
            f"Jacobi iteration did not converge after {max_sweeps * n} rotations"
        )

    eigenvalues = tuple(s[i][i] for i in range(n))
    eigenvectors = tuple(tuple(v[i][k] for k in range(n)) for i in range(n))
    return EigenDecomposition(eigenvalues=eigenvalues, eigenvectors=eigenvectors)
