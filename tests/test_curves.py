#!/usr/bin/env python3

# Copyright (C) 2024-2026 The gf25 developers
#
# This file is part of gf25. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of gf25 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `gf25.curves` module."

from gf25.curve_group import CurveGroup
from gf25.curves import CURVES, ec25_1_1
from gf25.field import ONE, ZERO, FieldElement
from gf25.point import INF, point


def test_curves() -> None:
    assert set(CURVES) == {"ec25_1_1", "ec25_0_2"}
    for ec in CURVES.values():
        assert isinstance(ec, CurveGroup)
        # non-singular: 4a^3 + 27b^2 != 0
        assert not (4 * ec.a ** 3 + 27 * ec.b * ec.b).is_zero()

    assert ec25_1_1 is CURVES["ec25_1_1"]
    assert ec25_1_1.a == ONE
    assert ec25_1_1.b == ONE
    assert CURVES["ec25_0_2"].a == ZERO
    assert CURVES["ec25_0_2"].b == FieldElement(2, 1)


def test_demo_point() -> None:
    P = point(FieldElement(1, 2), FieldElement(4, 4))
    P2 = ec25_1_1.add(P, P)
    assert P2 == point(FieldElement(1, 2), FieldElement(1, 1))
    assert ec25_1_1.add(P, P2) == INF
