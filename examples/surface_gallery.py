#!/usr/bin/env python3
"""Surface gallery example: classify one representative of each quadric type.

Runs the classifier over a fixed set of equations, prints a summary table,
and exports the sphere's near-surface grid samples to CSV.

Usage:
    python examples/surface_gallery.py
"""
from quadrica import (
    QuadricCoefficients,
    analyze_quadric,
    format_smart,
    sample_implicit_function,
)
from quadrica.adapters.csv_exporter import CsvPointCloudExporter


GALLERY = [
    QuadricCoefficients(a11=1, a22=1, a33=1, c=-4),
    QuadricCoefficients(a11=1, a22=1, a33=-1, c=-1),
    QuadricCoefficients(a11=1, a22=-1, a33=-1, c=-1),
    QuadricCoefficients(a11=1, a22=1, a33=-1),
    QuadricCoefficients(a11=1, a22=1, b3=-1),
    QuadricCoefficients(a11=1, a22=-1, b3=-1),
    QuadricCoefficients(a11=1, a22=1, c=-1),
    QuadricCoefficients(a12=2, c=-1),
    QuadricCoefficients(a22=1, b1=-1),
    QuadricCoefficients(a11=1, a22=-1),
    QuadricCoefficients(a11=1, c=-4),
    QuadricCoefficients(a11=2, a22=2, a33=2, a12=2, a23=2, a13=2, c=-3),
]


def main():
    # --- Step 1: Classify ---
    print(f"{'Equation':<40} {'Surface':<28} {'Eigenvalues'}")
    print("-" * 90)
    for coeffs in GALLERY:
        result = analyze_quadric(coeffs)
        lambdas = ", ".join(format_smart(v) for v in result.eigenvalues)
        print(f"{coeffs.format_equation():<40} {result.surface_type:<28} {lambdas}")

    # --- Step 2: Sample the sphere for an external renderer ---
    volume = sample_implicit_function(GALLERY[0], extent=3.0, step=0.2)
    count = CsvPointCloudExporter().export(volume, "sphere_points.csv")
    print(f"\nExported {count} near-surface samples to sphere_points.csv")


if __name__ == "__main__":
    main()
