#!/usr/bin/env python3

# Copyright (C) 2024-2026 The gf25 developers
#
# This file is part of gf25. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of gf25 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Modular arithmetic over the small prime base field.

The modular inverse is found by exhaustive search over the residues
1..m-1: it costs O(m) multiplications and it is only appropriate for
the tiny moduli used here, never for cryptographic-size fields.
"""

from gf25.exceptions import GF25ValueError, NonInvertibleElementError

# the exhaustive search is refused above this modulus
MAX_SEARCH_MODULUS = 0xFFFF


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of a (mod m) by exhaustive search.

    The remainder of a is taken first (Euclidean, i.e. non-negative),
    then every residue in 1..m-1 is tried as a candidate inverse.
    When m is a prime every nonzero residue has exactly one inverse.
    """

    if m < 2:
        raise GF25ValueError(f"invalid modulus: {m}")
    if m > MAX_SEARCH_MODULUS:
        err_msg = f"modulus is too big for exhaustive inverse search: {m}"
        raise GF25ValueError(err_msg)

    a %= m
    for i in range(1, m):
        if a * i % m == 1:
            return i
    raise NonInvertibleElementError(f"no inverse for {a} mod {m}")
