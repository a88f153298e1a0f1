#!/usr/bin/env python3

# Copyright (C) 2024-2026 The gf25 developers
#
# This file is part of gf25. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of gf25 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `gf25.point` module."

import pytest

from gf25.exceptions import GF25TypeError, InvalidPointError
from gf25.field import ZERO, FieldElement
from gf25.point import INF, AffinePoint, Infinity, is_point, point


def test_point() -> None:
    x = FieldElement(1, 2)
    y = FieldElement(4, 4)

    P = point(x, y)
    assert isinstance(P, AffinePoint)
    assert P == AffinePoint(x, y)
    assert P.x == x
    assert P.y == y
    assert str(P) == "(1 + 2t, 4 + 4t)"
    assert point(x, ZERO) == AffinePoint(x, ZERO)

    assert point() == INF
    assert point(None, None) is INF
    assert Infinity() == INF
    assert str(INF) == "INF"
    assert INF != P

    assert is_point(P)
    assert is_point(INF)
    assert not is_point((x, y))
    assert not is_point(None)


def test_immutable_and_hashable() -> None:
    P = point(FieldElement(1, 2), FieldElement(4, 4))
    with pytest.raises(AttributeError):
        P.x = ZERO  # type: ignore
    assert len({P, point(FieldElement(6, 7), FieldElement(4, 4)), INF, Infinity()}) == 2


def test_invalid_point() -> None:
    x = FieldElement(1, 2)

    with pytest.raises(InvalidPointError, match="missing y-coordinate"):
        point(x, None)
    with pytest.raises(InvalidPointError, match="missing x-coordinate"):
        point(None, x)
    with pytest.raises(InvalidPointError, match="missing y-coordinate"):
        point(x)

    with pytest.raises(GF25TypeError, match="x-coordinate is not a field element: "):
        AffinePoint((1, 2), x)  # type: ignore
    with pytest.raises(GF25TypeError, match="y-coordinate is not a field element: "):
        point(x, 4)  # type: ignore
