# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for quadric surface analysis.

Usage:
    # Default surface (x² + y² - z² - 1 = 0)
    quadrica

    # Coefficients on the command line (missing ones are 0)
    quadrica --a11 1 --a22 1 --a33 1 --c -1
    quadrica --a11 1 --a22 -1 --b3 -1

    # Batch from JSON, write results
    quadrica -i surfaces.json -o analysis.json
    quadrica -i surfaces.json --export-csv analysis.csv

    # Sample F on a grid and export points near F = 0
    quadrica --a11 1 --a22 1 --a33 1 --c -4 --export-points sphere.csv
"""
import argparse
import json
import logging
import sys

from quadrica.domain.classifier import AnalysisResult, analyze_quadric
from quadrica.domain.coefficients import (
    COEFFICIENT_NAMES,
    DEFAULT_COEFFICIENTS,
    QuadricCoefficients,
)
from quadrica.domain.linalg import ComputationError
from quadrica.domain.sampling import DEFAULT_EXTENT, DEFAULT_STEP, sample_implicit_function
from quadrica.domain.serialization import format_analysis_report
from quadrica.adapters.json_io import JsonAnalysisWriter, JsonCoefficientReader
from quadrica.adapters.csv_exporter import CsvAnalysisExporter, CsvPointCloudExporter

logger = logging.getLogger(__name__)


def coefficients_from_args(args: argparse.Namespace) -> QuadricCoefficients:
    """
    Coefficients given as flags; the default surface when no flag is set.
    """
    given = {name: getattr(args, name) for name in COEFFICIENT_NAMES}
    if all(value is None for value in given.values()):
        return DEFAULT_COEFFICIENTS
    return QuadricCoefficients(**{
        name: (0.0 if value is None else value) for name, value in given.items()
    })


def run(
    surfaces: list[QuadricCoefficients],
) -> list[tuple[QuadricCoefficients, AnalysisResult]]:
    """
    Analyse every coefficient set.

    Raises:
        ComputationError: For the first surface that cannot be classified.
    """
    analyses = []
    for index, coeffs in enumerate(surfaces):
        try:
            result = analyze_quadric(coeffs)
        except ComputationError:
            logger.debug("Surface #%d could not be classified", index)
            raise
        analyses.append((coeffs, result))
    return analyses


def _fail(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def main():
    parser = argparse.ArgumentParser(
        description="Classify a quadric surface and reduce it to canonical form"
    )
    parser.add_argument(
        '--input', '-i',
        help="JSON file with one coefficient object or a list of them"
    )
    parser.add_argument(
        '--output', '-o',
        help="Write analysis results to this JSON file"
    )
    parser.add_argument(
        '--quiet', '-q', action='store_true', default=False,
        help="Do not print the text report"
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Enable debug logging"
    )

    coeff_group = parser.add_argument_group(
        'coefficients',
        "a11 x² + a22 y² + a33 z² + a12 xy + a23 yz + a13 xz + b1 x + b2 y + b3 z + c = 0",
    )
    for name in COEFFICIENT_NAMES:
        coeff_group.add_argument(f'--{name}', type=float, default=None, metavar='V')

    export_group = parser.add_argument_group('export')
    export_group.add_argument(
        '--export-csv',
        help="Export one summary row per surface to CSV"
    )
    export_group.add_argument(
        '--export-points',
        help="Export grid samples near F = 0 to CSV (first surface only)"
    )
    export_group.add_argument(
        '--extent', type=float, default=DEFAULT_EXTENT,
        help=f"Half-width of the sampled cube (default: {DEFAULT_EXTENT})"
    )
    export_group.add_argument(
        '--step', type=float, default=DEFAULT_STEP,
        help=f"Grid spacing for sampling (default: {DEFAULT_STEP})"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.input:
        if any(getattr(args, name) is not None for name in COEFFICIENT_NAMES):
            parser.error("coefficient flags cannot be combined with --input")
        try:
            surfaces = JsonCoefficientReader().read_coefficients(args.input)
        except FileNotFoundError:
            _fail(f"Input file not found: {args.input}")
        except json.JSONDecodeError as e:
            _fail(f"Invalid JSON in {args.input}: {e}")
        except ValueError as e:
            _fail(str(e))
        if not surfaces:
            _fail(f"No surfaces in {args.input}")
    else:
        surfaces = [coefficients_from_args(args)]

    try:
        analyses = run(surfaces)
    except ComputationError as e:
        _fail(f"No classification available: {e}")

    if not args.quiet:
        for index, (coeffs, result) in enumerate(analyses):
            if index:
                print()
            print(format_analysis_report(result, coeffs))

    if args.output:
        JsonAnalysisWriter().write_analyses(analyses, args.output)
        print(f"Wrote {len(analyses)} analyses to {args.output}")

    if args.export_csv:
        count = CsvAnalysisExporter().export(analyses, args.export_csv)
        print(f"Exported {count} surfaces to {args.export_csv}")

    if args.export_points:
        try:
            volume = sample_implicit_function(
                surfaces[0], extent=args.extent, step=args.step,
            )
        except ValueError as e:
            _fail(str(e))
        count = CsvPointCloudExporter().export(volume, args.export_points)
        print(f"Exported {count} points to {args.export_points}")


if __name__ == '__main__':
    main()
