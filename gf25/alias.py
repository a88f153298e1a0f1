#!/usr/bin/env python3

# Copyright (C) 2024-2026 The gf25 developers
#
# This file is part of gf25. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of gf25 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Tuple

# The (a, b) coefficients of the field element a + b*t,
# both already reduced in 0..4
Coefficients = Tuple[int, int]
