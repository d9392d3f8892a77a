# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
CSV exporters.

Exports analysed surfaces (one row each) and sampled near-surface
points as CSV. External dependencies (csv, file I/O) are confined to
this adapter.
"""
import csv
import logging

logger = logging.getLogger(__name__)

from quadrica.ports.export import AnalysisExporter, PointCloudExporter
from quadrica.domain.classifier import AnalysisResult
from quadrica.domain.coefficients import COEFFICIENT_NAMES, QuadricCoefficients
from quadrica.domain.formatting import format_smart
from quadrica.domain.sampling import SampledVolume


_ANALYSIS_HEADER = list(COEFFICIENT_NAMES) + [
    'surface_type', 'center_type', 'standard_form',
    'lambda1', 'lambda2', 'lambda3',
    'tau_x', 'tau_y', 'tau_z',
    'rank', 'positive', 'negative',
]

_POINT_HEADER = ['x', 'y', 'z', 'f']


class CsvAnalysisExporter(AnalysisExporter):
    """Exports analysed surfaces to CSV, one row per surface."""

    def export(
        self,
        analyses: list[tuple[QuadricCoefficients, AnalysisResult]],
        path: str,
    ) -> int:
        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(_ANALYSIS_HEADER)

            for coeffs, result in analyses:
                writer.writerow(
                    [f'{v:.10g}' for v in coeffs.as_tuple()]
                    + [
                        result.surface_type,
                        result.center_type.value,
                        result.standard_form,
                    ]
                    + [format_smart(v) for v in result.eigenvalues]
                    + [format_smart(v) for v in result.translation_vector]
                    + [result.rank, result.signature[0], result.signature[1]]
                )

        return len(analyses)


class CsvPointCloudExporter(PointCloudExporter):
    """Exports grid samples inside the iso band as x, y, z, F rows."""

    def export(self, volume: SampledVolume, path: str) -> int:
        points = volume.points_near_surface()
        if len(points) == 0:
            logger.warning(
                "No samples within iso band [%g, %g]; surface does not cross the grid",
                volume.iso_min, volume.iso_max,
            )

        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(_POINT_HEADER)
            for x, y, z, value in points:
                writer.writerow([
                    f'{x:.4f}',
                    f'{y:.4f}',
                    f'{z:.4f}',
                    f'{value:.6f}',
                ])

        return len(points)
