# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for tabular export.

Adapters implement these to export analyses and sampled surfaces in
various formats (CSV, etc.).
"""
from typing import Protocol, runtime_checkable

from quadrica.domain.classifier import AnalysisResult
from quadrica.domain.coefficients import QuadricCoefficients
from quadrica.domain.sampling import SampledVolume


@runtime_checkable
class AnalysisExporter(Protocol):
    """Port for exporting a batch of analysed surfaces to file."""

    def export(
        self,
        analyses: list[tuple[QuadricCoefficients, AnalysisResult]],
        path: str,
    ) -> int:
        """
        Export one row/record per analysed surface.

        Returns:
            Number of surfaces exported.
        """
        ...


@runtime_checkable
class PointCloudExporter(Protocol):
    """Port for exporting grid samples that lie on a surface."""

    def export(self, volume: SampledVolume, path: str) -> int:
        """
        Export the samples inside the volume's iso band.

        Returns:
            Number of points exported.
        """
        ...
