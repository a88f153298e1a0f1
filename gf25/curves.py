#!/usr/bin/env python3

# Copyright (C) 2024-2026 The gf25 developers
#
# This file is part of gf25. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of gf25 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Named elliptic curves over GF(5^2).

Curve parameters are configuration constants:
they are not checked for non-singularity.
"""

from typing import Dict

from gf25.curve_group import CurveGroup
from gf25.field import FieldElement

CURVES: Dict[str, CurveGroup] = {
    # y^2 = x^3 + x + 1
    "ec25_1_1": CurveGroup(FieldElement(1, 0), FieldElement(1, 0)),
    # y^2 = x^3 + 2 + t
    "ec25_0_2": CurveGroup(FieldElement(0, 0), FieldElement(2, 1)),
}

ec25_1_1 = CURVES["ec25_1_1"]
