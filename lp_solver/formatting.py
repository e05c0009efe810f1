"""Number conversion and display helpers shared by the solvers.

The tableau engines work on exact rationals; the graphical method works on
floats. Everything the UI sees goes through one of the formatters below.
"""

import math
from decimal import Decimal
from fractions import Fraction
from typing import Union

Num = Union[int, float, Fraction, Decimal]


def F(x: Num) -> Fraction:
    """Convert a number to Fraction exactly when possible.
    - Fraction -> as is
    - Decimal -> exact rational
    - int -> exact
    - float -> best rational approx (limit large denominator)
    """
    if isinstance(x, Fraction):
        return x
    if isinstance(x, Decimal):
        return Fraction(x)
    if isinstance(x, int):
        return Fraction(x)
    if isinstance(x, float):
        if math.isnan(x) or math.isinf(x):
            raise ValueError(f"not a finite number: {x}")
        return Fraction.from_float(x).limit_denominator(10**12)
    return Fraction(str(x))


def fmt_frac(x: Num) -> str:
    """Integer or reduced fraction, e.g. ``3``, ``-5/2``."""
    if isinstance(x, float):
        if math.isnan(x) or math.isinf(x):
            return str(x)
        if abs(x) < 1e-12:
            x = 0.0
        fr = Fraction.from_float(x).limit_denominator(10**6)
    else:
        fr = F(x)

    if fr == 0:
        return "0"
    if fr.denominator == 1:
        return str(fr.numerator)
    sign = '-' if fr.numerator * fr.denominator < 0 else ''
    return f"{sign}{abs(fr.numerator)}/{abs(fr.denominator)}"


def fmt_decimal(x: float) -> str:
    """0 decimals when integral, 1 decimal otherwise."""
    x = float(x)
    if abs(x - round(x)) < 1e-9:
        text = f"{round(x):.0f}"
    else:
        text = f"{x:.1f}"
    # no "-0" / "-0.0" in the tables
    if text in ("-0", "-0.0"):
        text = text[1:]
    return text


def fmt_point(point) -> str:
    return f"({fmt_decimal(point[0])}, {fmt_decimal(point[1])})"


def fmt_number(x) -> str:
    """Shortest exact text for an input number: ``1234567``, ``2.5``, ``0.1``."""
    x = float(x)
    if x.is_integer():
        return str(int(x))
    return repr(x)


def fmt_coeff_term(coeff: float, index: int, first: bool) -> str:
    """One term of a linear expression: ``2x1``, ``- x2``, ``+ 0.5x3``."""
    magnitude = abs(coeff)
    body = "" if abs(magnitude - 1) < 1e-12 else fmt_number(magnitude)
    term = f"{body}x{index + 1}"
    if first:
        return f"-{term}" if coeff < 0 else term
    return f"- {term}" if coeff < 0 else f"+ {term}"


def fmt_linear(coefficients) -> str:
    """Render ``a1*x1 + a2*x2 + ...`` skipping zero terms."""
    terms = []
    for j, a in enumerate(coefficients):
        a = float(a)
        if a == 0:
            continue
        terms.append(fmt_coeff_term(a, j, first=not terms))
    return " ".join(terms) if terms else "0"
