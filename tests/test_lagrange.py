"""Tests for exact integer Lagrange interpolation."""

from fractions import Fraction

import pytest
from polyrecon.errors import DuplicateXValue, NonIntegralTerm
from polyrecon.lagrange import (
    Point, check_distinct, lagrange_basis_parts, lagrange_interpolate, interpolate,
)


def poly_eval_low(coeffs, x):
    """Horner evaluation, coeffs lowest degree first."""
    result = 0
    for c in reversed(coeffs):
        result = result * x + c
    return result


def _points(coeffs, xs):
    return [Point(x, poly_eval_low(coeffs, x)) for x in xs]


class TestKnownPolynomials:

    def test_line(self):
        """P(x) = 3x + 7."""
        assert interpolate([(1, 10), (2, 13)]) == 7

    def test_quadratic(self):
        """P(x) = x^2 + 2x + 5."""
        assert interpolate([(1, 8), (2, 13), (3, 20)]) == 5

    def test_single_point_is_constant(self):
        assert interpolate([(9, 42)]) == 42

    def test_point_order_irrelevant(self):
        assert interpolate([(3, 20), (1, 8), (2, 13)]) == 5

    def test_negative_constant(self):
        """P(x) = 2x^2 - 5x - 11."""
        pts = _points([-11, -5, 2], [1, 2, 3])
        assert interpolate(pts) == -11

    def test_negative_and_large_x(self):
        coeffs = [123456789, -42, 7, 1]
        pts = _points(coeffs, [-5, 17, 1000, 2 ** 40])
        assert interpolate(pts) == 123456789

    def test_fractional_terms_integral_sum(self):
        """P(x) = x through x=1,3: terms are 3/2 and -3/2."""
        assert interpolate([(1, 1), (3, 3)]) == 0


class TestExactness:
    """No precision loss far beyond 64-bit range."""

    def test_huge_secret(self, rng):
        for k in [2, 5, 10, 20]:
            coeffs = [rng.getrandbits(256) for _ in range(k)]
            xs = rng.sample(range(1, 10 ** 6), k)
            assert interpolate(_points(coeffs, xs)) == coeffs[0]

    def test_evaluate_elsewhere(self, rng):
        coeffs = [rng.getrandbits(128) for _ in range(6)]
        pts = _points(coeffs, [1, 2, 3, 4, 5, 6])
        for t in [0, 7, -3, 10 ** 20]:
            assert lagrange_interpolate(pts, t) == poly_eval_low(coeffs, t)

    def test_recovers_given_points(self, rng):
        coeffs = [rng.getrandbits(64) for _ in range(4)]
        pts = _points(coeffs, [2, 5, 11, 13])
        for x, y in pts:
            assert lagrange_interpolate(pts, x) == y


class TestFailures:

    def test_duplicate_x(self):
        with pytest.raises(DuplicateXValue) as exc:
            interpolate([(1, 10), (2, 13), (1, 10)])
        assert exc.value.x == 1

    def test_duplicate_x_regardless_of_y(self):
        with pytest.raises(DuplicateXValue):
            interpolate([(4, 0), (4, 999)])

    def test_inconsistent_points_not_truncated(self):
        """(1,1),(3,2): the line is x/2 + 1/2, so P(0) = 1/2."""
        with pytest.raises(NonIntegralTerm) as exc:
            interpolate([(1, 1), (3, 2)])
        assert (exc.value.numerator, exc.value.denominator) == (1, 2)

    def test_negative_fraction_not_floored(self):
        """(1,0),(3,1): P(0) = -1/2."""
        with pytest.raises(NonIntegralTerm) as exc:
            interpolate([(1, 0), (3, 1)])
        assert (exc.value.numerator, exc.value.denominator) == (-1, 2)

    def test_empty(self):
        with pytest.raises(ValueError):
            interpolate([])


class TestHelpers:

    def test_check_distinct(self):
        check_distinct([1, 2, 3])
        with pytest.raises(DuplicateXValue) as exc:
            check_distinct([5, 6, 7, 6, 5])
        assert exc.value.x == 6

    def test_basis_parts_at_zero(self):
        xs = [1, 2, 3]
        parts = [lagrange_basis_parts(xs, i, 0) for i in range(3)]
        assert parts == [(6, 2), (3, -1), (2, 2)]
        assert Fraction(*lagrange_basis_parts([1, 3], 0, 0)) == Fraction(3, 2)

    def test_basis_partition_of_unity(self):
        xs = [2, 7, 11, 20]
        for t in [0, 5, 100]:
            total = sum(Fraction(*lagrange_basis_parts(xs, i, t)) for i in range(4))
            assert total == 1

    def test_basis_duplicate(self):
        with pytest.raises(DuplicateXValue):
            lagrange_basis_parts([1, 1], 0, 0)

    def test_point_is_tuple(self):
        p = Point(1, 2)
        x, y = p
        assert (x, y) == (1, 2)
        with pytest.raises(AttributeError):
            p.x = 5


class TestHugeValues:
    """Values past the interpreter's int/str conversion limit (4300 digits)."""

    def test_huge_x_and_y(self):
        x0 = 10 ** 5000
        coeffs = [3, 10 ** 5000 + 7]
        pts = _points(coeffs, [x0, x0 + 1])
        assert interpolate(pts) == 3

    def test_huge_non_integral(self):
        """(1, b), (3, 2b) with b odd: P(0) = b/2."""
        b = 10 ** 5000 + 1
        with pytest.raises(NonIntegralTerm) as exc:
            interpolate([(1, b), (3, 2 * b)])
        assert exc.value.numerator == b
        assert exc.value.denominator == 2
        assert "-bit integer>" in str(exc.value)

    def test_huge_duplicate_x(self):
        x = 10 ** 5000
        with pytest.raises(DuplicateXValue) as exc:
            interpolate([(x, 1), (x, 2)])
        assert exc.value.x == x
        assert "-bit integer>" in str(exc.value)

    def test_small_values_shown_in_full(self):
        with pytest.raises(DuplicateXValue) as exc:
            interpolate([(12, 1), (12, 2)])
        assert str(exc.value) == "Duplicate x-coordinate 12"
