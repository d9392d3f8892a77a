# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Volumetric sampling of the implicit function F(x, y, z).

Produces the scalar grid an isosurface renderer needs to draw F = 0.
Works directly on the raw coefficients and does not depend on the
classifier.
"""
from dataclasses import dataclass

import numpy as np

from .coefficients import QuadricCoefficients

DEFAULT_EXTENT = 10.0
DEFAULT_STEP = 0.4
DEFAULT_ISO_BAND = (-0.5, 0.5)


@dataclass(frozen=True)
class SampledVolume:
    """F sampled on a cubic grid.

    ``values[k, j, i]`` is F(axis[i], axis[j], axis[k]), i.e. x varies
    fastest when flattened in C order.
    """
    axis: np.ndarray
    values: np.ndarray
    iso_min: float
    iso_max: float

    @property
    def shape(self) -> tuple[int, int, int]:
        return self.values.shape

    def points_near_surface(self) -> np.ndarray:
        """(N, 4) array of x, y, z, F for samples inside the iso band."""
        zz, yy, xx = np.meshgrid(self.axis, self.axis, self.axis, indexing="ij")
        mask = (self.values >= self.iso_min) & (self.values <= self.iso_max)
        return np.column_stack((xx[mask], yy[mask], zz[mask], self.values[mask]))


def grid_axis(extent: float = DEFAULT_EXTENT, step: float = DEFAULT_STEP) -> np.ndarray:
    """
    Symmetric sample positions -extent .. +extent.

    Raises:
        ValueError: If extent or step is not positive.
    """
    if extent <= 0:
        raise ValueError(f"extent must be positive, got {extent}")
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    count = int(np.floor(2.0 * extent / step + 1e-9)) + 1
    return -extent + step * np.arange(count)


def sample_implicit_function(
    coeffs: QuadricCoefficients,
    extent: float = DEFAULT_EXTENT,
    step: float = DEFAULT_STEP,
    iso_band: tuple[float, float] = DEFAULT_ISO_BAND,
) -> SampledVolume:
    """
    Evaluate F on a cubic grid covering [-extent, extent]³.

    Args:
        coeffs: Equation coefficients.
        extent: Half-width of the sampled cube.
        step: Grid spacing.
        iso_band: (min, max) of F treated as "on the surface".

    Returns:
        SampledVolume with values indexed [z, y, x].

    Raises:
        ValueError: If extent/step are not positive or the iso band is empty.
    """
    iso_min, iso_max = iso_band
    if iso_min > iso_max:
        raise ValueError(f"iso_band must satisfy min <= max, got {iso_band}")

    axis = grid_axis(extent, step)
    z, y, x = np.meshgrid(axis, axis, axis, indexing="ij")
    values = coeffs.evaluate(x, y, z)
    return SampledVolume(
        axis=axis,
        values=values,
        iso_min=float(iso_min),
        iso_max=float(iso_max),
    )
