# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Smart numeric display formatting.

Recognises floats that are (within 1e-5) an integer, a simple fraction
p/q with q ≤ 50, or the square root of a simple fraction with denominator
≤ 100, and renders them exactly:

    0.5          → "1/2"
    1.41421356   → "√2"
    0.95831485   → "3√5/7"

Anything else falls back to four decimals. The search bounds are fixed so
that arbitrary decimals are not matched to large, meaningless fractions.
No external dependencies — only stdlib math.
"""
import math

ABS_TOLERANCE = 1e-5
MAX_FRACTION_DENOMINATOR = 50
MAX_RADICAL_DENOMINATOR = 100
FALLBACK_DECIMALS = 4


def simplify_root(n: int) -> tuple[int, int]:
    """
    Factor the largest perfect square out of n.

    Returns (coeff, radicand) with coeff² · radicand == n, e.g.
    8 → (2, 2), 45 → (3, 5), 7 → (1, 7), 16 → (4, 1).
    """
    for i in range(math.isqrt(n), 0, -1):
        if n % (i * i) == 0:
            return i, n // (i * i)
    return 1, n


def _format_root(coeff: int, radicand: int) -> str:
    if radicand == 1:
        return str(coeff)
    if coeff == 1:
        return f"√{radicand}"
    return f"{coeff}√{radicand}"


def _near_integer(x: float) -> bool:
    return abs(x - round(x)) < ABS_TOLERANCE


def format_smart(value: float) -> str:
    """
    Format a real number for display, preferring an exact form.

    Checks, in order: zero, integer, fraction p/q (2 ≤ q ≤ 50), square root
    of a fraction (1 ≤ q ≤ 100) with square factors pulled out of the
    radicands, and finally a fixed four-decimal string. Never raises.
    """
    if not math.isfinite(value):
        return f"{value:.{FALLBACK_DECIMALS}f}"

    if abs(value) < ABS_TOLERANCE:
        return "0"

    sign = "-" if value < 0 else ""
    abs_val = abs(value)

    if _near_integer(abs_val):
        return f"{sign}{round(abs_val)}"

    for q in range(2, MAX_FRACTION_DENOMINATOR + 1):
        p = abs_val * q
        if _near_integer(p):
            p_int = round(p)
            common = math.gcd(p_int, q)
            return f"{sign}{p_int // common}/{q // common}"

    # value = sqrt(num / den)
    sq = abs_val * abs_val
    for q in range(1, MAX_RADICAL_DENOMINATOR + 1):
        p = sq * q
        if not _near_integer(p):
            continue
        p_int = round(p)
        if p_int == 0:
            continue
        common = math.gcd(p_int, q)
        num = p_int // common
        den = q // common

        num_str = _format_root(*simplify_root(num))
        den_coeff, den_radicand = simplify_root(den)
        if den_coeff == 1 and den_radicand == 1:
            return f"{sign}{num_str}"
        return f"{sign}{num_str}/{_format_root(den_coeff, den_radicand)}"

    text = f"{abs_val:.{FALLBACK_DECIMALS}f}"
    if float(text) == 0.0:
        return text
    return f"{sign}{text}"
