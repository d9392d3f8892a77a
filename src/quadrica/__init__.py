# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Quadrica

Classify general second-degree surfaces in three variables. Diagonalises
the quadratic form, completes the square, names the surface (ellipsoid,
hyperboloids, paraboloids, cylinders, cones, plane pairs) and renders the
canonical equation, with exact fraction/radical display of the results.
"""

from quadrica.domain.coefficients import (
    QuadricCoefficients,
    DEFAULT_COEFFICIENTS,
    parse_coefficient,
    coefficients_from_mapping,
)
from quadrica.domain.linalg import (
    ComputationError,
    EigenDecomposition,
    mat_eigen_symmetric,
)
from quadrica.domain.classifier import (
    TOLERANCE,
    CenterType,
    AnalysisResult,
    analyze_quadric,
)
from quadrica.domain.formatting import (
    format_smart,
    simplify_root,
)
from quadrica.domain.sampling import (
    SampledVolume,
    sample_implicit_function,
)
from quadrica.domain.serialization import (
    build_analysis_record,
    format_analysis_report,
)

__version__ = "1.0.0"

__all__ = [
    "QuadricCoefficients",
    "DEFAULT_COEFFICIENTS",
    "parse_coefficient",
    "coefficients_from_mapping",
    "ComputationError",
    "EigenDecomposition",
    "mat_eigen_symmetric",
    "TOLERANCE",
    "CenterType",
    "AnalysisResult",
    "analyze_quadric",
    "format_smart",
    "simplify_root",
    "SampledVolume",
    "sample_implicit_function",
    "build_analysis_record",
    "format_analysis_report",
]
