# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Display serialization of analysis results.

Pure formatting functions; every number goes through format_smart.
No external dependencies.
"""

from .classifier import AnalysisResult
from .coefficients import QuadricCoefficients
from .formatting import format_smart


def format_vector(values) -> list[str]:
    """Smart-format each component of a vector."""
    return [format_smart(v) for v in values]


def format_matrix(rows) -> list[list[str]]:
    """Smart-format each entry of a matrix, row by row."""
    return [format_vector(row) for row in rows]


def build_analysis_record(
    result: AnalysisResult,
    coeffs: QuadricCoefficients | None = None,
) -> dict:
    """
    Build a JSON-ready dict for one analysed surface.

    Args:
        result: Classifier output.
        coeffs: Input coefficients; included with the input equation
            when given.

    Returns:
        Dict with display strings for every numeric field.
    """
    record: dict = {}
    if coeffs is not None:
        record['coefficients'] = coeffs.as_dict()
        record['equation'] = coeffs.format_equation()
    record['surfaceType'] = result.surface_type
    record['centerType'] = result.center_type.value
    record['standardForm'] = result.standard_form
    record['eigenvalues'] = format_vector(result.eigenvalues)
    record['rotationMatrix'] = format_matrix(result.rotation_matrix)
    record['translationVector'] = format_vector(result.translation_vector)
    record['rank'] = result.rank
    record['signature'] = list(result.signature)
    return record


def _matrix_lines(rows: list[list[str]]) -> list[str]:
    width = max(len(cell) for row in rows for cell in row)
    return ["  [ " + "  ".join(cell.rjust(width) for cell in row) + " ]" for row in rows]


def format_analysis_report(
    result: AnalysisResult,
    coeffs: QuadricCoefficients | None = None,
) -> str:
    """
    Multi-line plain-text report of an analysis.

    Sections: surface type, input equation, canonical form in (x', y', z'),
    eigenvalues, rotation M, translation τ and the coordinate change
    X = M·X' + τ.
    """
    lines = [f"Surface type:   {result.surface_type}"]
    lines.append(f"Center type:    {result.center_type.value}")
    if coeffs is not None:
        lines.append(f"Equation:       {coeffs.format_equation()}")
    lines.append(f"Standard form:  {result.standard_form}")
    lines.append("")
    lines.append("Eigenvalues (λ) of A:")
    for idx, lam in enumerate(result.eigenvalues, start=1):
        lines.append(f"  λ{idx} = {format_smart(lam)}")
    lines.append("")
    lines.append("Rotation matrix M ∈ SO(3) (columns are eigenvectors of A):")
    lines.extend(_matrix_lines(format_matrix(result.rotation_matrix)))
    lines.append("")
    lines.append("Translation τ (center/vertex offset in original coords):")
    lines.append("  (" + ", ".join(format_vector(result.translation_vector)) + ")")
    lines.append("")
    lines.append("Transformation:")
    lines.append("  X = M · X' + τ")
    lines.append("  X' = Mᵀ · (X - τ)")
    lines.append("  A_diagonal = diag(λ₁, λ₂, λ₃)")
    return "\n".join(lines)
