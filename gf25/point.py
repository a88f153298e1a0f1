#!/usr/bin/env python3

# Copyright (C) 2024-2026 The gf25 developers
#
# This file is part of gf25. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of gf25 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve points over GF(5^2).

A point is a tagged variant: either the point at infinity INF,
the neutral element of the group, or an affine point with both
coordinates present. A point with a single coordinate cannot be
represented.

Points are immutable values and do not reference any curve:
the curve parameters are passed to the group law functions.
Points are not checked to be on any curve.
"""

from dataclasses import dataclass
from typing import Optional, Union

from gf25.exceptions import GF25TypeError, InvalidPointError
from gf25.field import FieldElement


@dataclass(frozen=True)
class Infinity:
    "The point at infinity."

    def __str__(self) -> str:
        return "INF"


@dataclass(frozen=True)
class AffinePoint:
    x: FieldElement
    y: FieldElement

    def __post_init__(self) -> None:
        if not isinstance(self.x, FieldElement):
            raise GF25TypeError(f"x-coordinate is not a field element: {self.x!r}")
        if not isinstance(self.y, FieldElement):
            raise GF25TypeError(f"y-coordinate is not a field element: {self.y!r}")

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


Point = Union[Infinity, AffinePoint]

INF = Infinity()


def point(
    x: Optional[FieldElement] = None, y: Optional[FieldElement] = None
) -> Point:
    """Return a point from two optional coordinates.

    Both coordinates present is an affine point,
    both absent is the point at infinity.
    """
    if x is None and y is None:
        return INF
    if x is None or y is None:
        missing = "x" if x is None else "y"
        raise InvalidPointError(f"missing {missing}-coordinate")
    return AffinePoint(x, y)


def is_point(Q: object) -> bool:
    return isinstance(Q, (Infinity, AffinePoint))
