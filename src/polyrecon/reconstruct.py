"""Reconstruct a polynomial's constant term from k encoded points.

A candidate is an (x, base, digits) triple: x is the integer abscissa and
digits is the y-value written in `base`. Only the first k candidates, in
the order given, are decoded and used.
"""

import logging

from polyrecon.errors import InsufficientPoints, MalformedInput, describe_int
from polyrecon.lagrange import Point, lagrange_interpolate
from polyrecon.radix import decode

log = logging.getLogger(__name__)


def check_threshold(k) -> int:
    """Return k if it is an int >= 1, else raise MalformedInput."""
    if isinstance(k, bool) or not isinstance(k, int) or k < 1:
        raise MalformedInput(
            f"Threshold k must be an integer >= 1, got {describe_int(k)}")
    return k


def select(candidates: list, k: int) -> list:
    """First k candidates in input order.

    Raises:
        MalformedInput: k is not a positive int.
        InsufficientPoints: fewer than k candidates.
    """
    check_threshold(k)
    candidates = list(candidates)
    if len(candidates) < k:
        raise InsufficientPoints(len(candidates), k)
    if len(candidates) > k:
        log.debug("Using first %d of %d points", k, len(candidates))
    return candidates[:k]


def decode_points(triples: list) -> list:
    """Turn (x, base, digits) triples into Points with decoded y."""
    return [Point(x, decode(digits, base)) for x, base, digits in triples]


def reconstruct(candidates: list, k: int) -> int:
    """Recover P(0) from the first k of `candidates`.

    Args:
        candidates: Sequence of (x, base, digits) triples.
        k: Threshold; the polynomial has degree <= k - 1.

    Returns:
        The constant term as an int.
    """
    return reconstruct_at(candidates, k, 0)


def reconstruct_at(candidates: list, k: int, target: int) -> int:
    """Recover P(target) from the first k of `candidates`.

    Args:
        candidates: Sequence of (x, base, digits) triples.
        k: Threshold; the polynomial has degree <= k - 1.
        target: The x-value to evaluate at.

    Returns:
        P(target) as an int.
    """
    points = decode_points(select(candidates, k))
    value = lagrange_interpolate(points, target)
    log.debug("Interpolated %d points at x=%s (%d-bit result)",
              len(points), describe_int(target), value.bit_length())
    return value
