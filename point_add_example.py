#!/usr/bin/env python3

# Copyright (C) 2024-2026 The gf25 developers
#
# This file is part of gf25. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of gf25 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

from gf25.curves import ec25_1_1 as ec
from gf25.field import FieldElement
from gf25.point import Infinity, point

print("\n*** EC:")
print(ec)

print("\n0. Sample points")
P1 = point(FieldElement(1, 2), FieldElement(4, 4))
P2 = point(FieldElement(1, 2), FieldElement(4, 4))
print(f"P1: {P1}")
print(f"P2: {P2}")

print("\n1. Point addition")
P3 = ec.add(P1, P2)
if isinstance(P3, Infinity):
    print("P1 + P2 = Point at Infinity")
else:
    print(f"P1 + P2: {P3}")
