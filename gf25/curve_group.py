#!/usr/bin/env python3

# Copyright (C) 2024-2026 The gf25 developers
#
# This file is part of gf25. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of gf25 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve group law over GF(5^2).

The curve is the set of points (x, y) that are solutions to the
short Weierstrass equation y^2 = x^3 + a*x + b, with x, y, a, and b
in GF(5^2), together with the point at infinity INF.

Only the a parameter enters the addition formulas, so the group law
functions take it as an explicit argument; CurveGroup is a thin
convenience bundling a and b.

Neither the curve parameters nor the input points are validated:
the curve being non-singular and the points being on it
are preconditions of the caller.
"""

from typing import Any

from gf25.exceptions import GF25TypeError
from gf25.field import FieldElement
from gf25.point import INF, AffinePoint, Infinity, Point, is_point


def _require_point(Q: Any) -> None:
    if not is_point(Q):
        raise GF25TypeError(f"not a point: {Q!r}")


def _require_field_element(a: Any) -> None:
    if not isinstance(a, FieldElement):
        raise GF25TypeError(f"curve parameter is not a field element: {a!r}")


def negate(Q: Point) -> Point:
    "Return the opposite point: (x, -y), INF for INF."
    _require_point(Q)
    if isinstance(Q, Infinity):
        return INF
    return AffinePoint(Q.x, -Q.y)


def double(Q: Point, a: FieldElement) -> Point:
    """Return Q + Q.

    A point with zero y-coordinate has order 2 (vertical tangent):
    its double is INF, no division is attempted.
    """
    _require_point(Q)
    _require_field_element(a)
    if isinstance(Q, Infinity):
        return INF
    if Q.y.is_zero():
        return INF

    lam = (3 * Q.x * Q.x + a) / (2 * Q.y)
    x = lam * lam - Q.x - Q.x
    y = lam * (Q.x - x) - Q.y
    return AffinePoint(x, y)


def point_add(Q: Point, R: Point, a: FieldElement) -> Point:
    """Return the sum of two points on the curve with parameter a.

    Opposite points (same x, different y) sum to INF
    and equal points are doubled; otherwise the chord slope
    (yR - yQ) / (xR - xQ) has a nonzero denominator.
    """
    _require_point(Q)
    _require_point(R)
    _require_field_element(a)

    if isinstance(Q, Infinity):
        return R
    if isinstance(R, Infinity):
        return Q

    if Q.x == R.x:
        if Q.y == R.y:
            return double(Q, a)
        # opposite points
        return INF

    lam = (R.y - Q.y) / (R.x - Q.x)
    x = lam * lam - Q.x - R.x
    y = lam * (Q.x - x) - Q.y
    return AffinePoint(x, y)


def point_sub(Q: Point, R: Point, a: FieldElement) -> Point:
    "Return Q - R."
    return point_add(Q, negate(R), a)


def _field_element(i: Any) -> FieldElement:
    if isinstance(i, FieldElement):
        return i
    if isinstance(i, tuple) and len(i) == 2:
        return FieldElement(*i)
    return FieldElement(i)


class CurveGroup:
    """Group of the points of y^2 = x^3 + a*x + b over GF(5^2).

    The parameters can be given as FieldElement, as (a, b) coefficient
    pairs, or as integers of the prime subfield.
    They are not checked: 4a^3 + 27b^2 != 0 is assumed.
    """

    def __init__(self, a: Any, b: Any) -> None:
        self.a = _field_element(a)
        self.b = _field_element(b)

    def __str__(self) -> str:
        result = "Curve"
        result += "\n p   = 5^2"
        result += f"\n a   = {self.a}"
        result += f"\n b   = {self.b}"
        return result

    def __repr__(self) -> str:
        return f"CurveGroup({self.a!r}, {self.b!r})"

    def add(self, Q: Point, R: Point) -> Point:
        return point_add(Q, R, self.a)

    def double(self, Q: Point) -> Point:
        return double(Q, self.a)

    def negate(self, Q: Point) -> Point:
        return negate(Q)

    def sub(self, Q: Point, R: Point) -> Point:
        return point_sub(Q, R, self.a)
