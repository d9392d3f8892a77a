# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
General second-degree equation in three variables.

    a11 x² + a22 y² + a33 z² + a12 xy + a23 yz + a13 xz
        + b1 x + b2 y + b3 z + c = 0

Holds the ten coefficients and the matrix form X^T A X + J^T X + c = 0.
No external dependencies — only stdlib math/dataclasses.
"""
import math
from dataclasses import dataclass, fields

from .linalg import Matrix

COEFFICIENT_NAMES = (
    "a11", "a22", "a33", "a12", "a23", "a13", "b1", "b2", "b3", "c",
)


@dataclass(frozen=True)
class QuadricCoefficients:
    """The ten real coefficients of a quadric surface equation."""
    a11: float = 0.0
    a22: float = 0.0
    a33: float = 0.0
    a12: float = 0.0
    a23: float = 0.0
    a13: float = 0.0
    b1: float = 0.0
    b2: float = 0.0
    b3: float = 0.0
    c: float = 0.0

    def to_quadratic_matrix(self) -> Matrix:
        """
        Symmetric matrix A with x^T A x equal to the quadratic part.

        Each cross coefficient is split evenly across the two mirrored
        off-diagonal entries, since x^T A x contributes (A_ij + A_ji) xi xj.
        """
        return [
            [self.a11, self.a12 / 2.0, self.a13 / 2.0],
            [self.a12 / 2.0, self.a22, self.a23 / 2.0],
            [self.a13 / 2.0, self.a23 / 2.0, self.a33],
        ]

    def to_linear_vector(self) -> list[float]:
        """Linear coefficient vector J = [b1, b2, b3]."""
        return [self.b1, self.b2, self.b3]

    def evaluate(self, x: float, y: float, z: float) -> float:
        """Value of F(x, y, z); zero on the surface."""
        return (
            self.a11 * x * x + self.a22 * y * y + self.a33 * z * z
            + self.a12 * x * y + self.a23 * y * z + self.a13 * x * z
            + self.b1 * x + self.b2 * y + self.b3 * z
            + self.c
        )

    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in self.as_tuple())

    def as_tuple(self) -> tuple[float, ...]:
        return tuple(getattr(self, f.name) for f in fields(self))

    def as_dict(self) -> dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def format_equation(self) -> str:
        """
        Input equation as the user typed it, e.g. ``x² + y² - z² - 1 = 0``.

        Terms below 1e-6 are skipped. A unit coefficient is elided on every
        term except the constant. Magnitudes are rounded to three decimals
        with trailing zeros trimmed.
        """
        suffixes = ("x²", "y²", "z²", "xy", "yz", "xz", "x", "y", "z", "")
        terms: list[str] = []
        for value, suffix in zip(self.as_tuple(), suffixes):
            if abs(value) < 1e-6:
                continue
            sign = " - " if value < 0 else (" + " if terms else "")
            magnitude = abs(value)
            if abs(magnitude - 1.0) < 1e-6 and suffix:
                value_str = ""
            else:
                value_str = _trim_decimal(magnitude, 3)
            terms.append(f"{sign}{value_str}{suffix}")

        if not terms:
            return "0 = 0"
        return "".join(terms).strip() + " = 0"


DEFAULT_COEFFICIENTS = QuadricCoefficients(a11=1.0, a22=1.0, a33=-1.0, c=-1.0)


def _trim_decimal(value: float, digits: int) -> str:
    """Round to ``digits`` decimals and drop trailing zeros (1.500 → 1.5)."""
    text = f"{value:.{digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def parse_coefficient(text: str, previous: float) -> float:
    """
    Parse one typed coefficient value.

    Empty input counts as zero. Input that is not a number (including
    partial entries such as ``-`` or ``1e``) leaves the previous value
    unchanged. A decimal comma is accepted.
    """
    stripped = text.strip()
    if stripped == "":
        return 0.0
    try:
        value = float(stripped.replace(",", "."))
    except ValueError:
        return previous
    if math.isnan(value):
        return previous
    return value


def coefficients_from_mapping(
    data: dict,
    base: QuadricCoefficients | None = None,
) -> QuadricCoefficients:
    """
    Build coefficients from a name → value mapping.

    Names missing from ``data`` keep their value from ``base`` (zero when no
    base is given).

    Raises:
        ValueError: On an unknown coefficient name or a value that is not
            a real number.
    """
    values = (base or QuadricCoefficients()).as_dict()
    for key, raw in data.items():
        if key not in values:
            raise ValueError(
                f"Unknown coefficient '{key}', expected one of {', '.join(COEFFICIENT_NAMES)}"
            )
        if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
            raise ValueError(f"Coefficient '{key}' must be a number, got {raw!r}")
        try:
            values[key] = float(raw)
        except ValueError:
            raise ValueError(f"Coefficient '{key}' must be a number, got {raw!r}") from None
    return QuadricCoefficients(**values)
