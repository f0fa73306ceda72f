"""Exact Lagrange interpolation over the integers.

No field reduction: every product and sum is a Python int (unbounded),
and the single division per basis term is held as a Fraction so nothing
is truncated. The interpolated value must come out integral; if it does
not, the points were not on an integer polynomial and NonIntegralTerm is
raised instead of returning a rounded answer.
"""

from fractions import Fraction
from typing import NamedTuple

from polyrecon.errors import DuplicateXValue, NonIntegralTerm


class Point(NamedTuple):
    x: int
    y: int


def check_distinct(xs: list) -> None:
    """Raise DuplicateXValue for the first x seen twice (input order)."""
    seen = set()
    for x in xs:
        if x in seen:
            raise DuplicateXValue(x)
        seen.add(x)


def lagrange_basis_parts(xs: list, i: int, target: int) -> tuple:
    """Numerator and denominator of the Lagrange basis coefficient L_i(target).

    xs = list of x-coordinates.
    Returns (prod_{j!=i} (target - x_j), prod_{j!=i} (x_i - x_j)), both
    unreduced ints, so the caller can multiply by y_i before dividing.
    """
    xi = xs[i]
    num = 1
    den = 1
    for j, xj in enumerate(xs):
        if j == i:
            continue
        num *= target - xj
        den *= xi - xj
    if den == 0:
        raise DuplicateXValue(xi)
    return num, den


def lagrange_interpolate(points: list, x: int) -> int:
    """Evaluate the interpolating polynomial at x given a set of points.

    points = [(x_0, y_0), (x_1, y_1), ...], all ints, x_i pairwise distinct.
    Each term is (y_j * prod(x - x_i)) / prod(x_j - x_i): the product with
    y_j is taken before dividing, and the quotient is kept exact. Terms are
    summed in list order.

    Individual terms may be fractional even for integer polynomials
    (x = 1, 3 on P(x) = x gives 3/2 and -3/2), so integrality is checked
    on the sum only.
    """
    if not points:
        raise ValueError("Need at least one point")
    xs = [p[0] for p in points]
    check_distinct(xs)

    result = Fraction(0)
    for j, (_, yj) in enumerate(points):
        num, den = lagrange_basis_parts(xs, j, x)
        result += Fraction(yj * num, den)

    if result.denominator != 1:
        raise NonIntegralTerm(result.numerator, result.denominator, x)
    return result.numerator


def interpolate(points: list) -> int:
    """Constant term P(0) of the polynomial through `points`."""
    return lagrange_interpolate(points, 0)
