# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for coefficient and analysis file I/O.

Adapters implement these to handle different file formats.
"""
from typing import Protocol, runtime_checkable

from quadrica.domain.classifier import AnalysisResult
from quadrica.domain.coefficients import QuadricCoefficients


@runtime_checkable
class CoefficientReader(Protocol):
    """Port for reading quadric coefficient sets."""

    def read_coefficients(self, path: str) -> list[QuadricCoefficients]:
        """Read and parse every coefficient set in a file."""
        ...


@runtime_checkable
class AnalysisWriter(Protocol):
    """Port for writing analysis results."""

    def write_analyses(
        self,
        analyses: list[tuple[QuadricCoefficients, AnalysisResult]],
        path: str,
    ) -> None:
        """Write (coefficients, result) pairs to an output file."""
        ...
