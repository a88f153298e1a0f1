#!/usr/bin/env python3

# Copyright (C) 2024-2026 The gf25 developers
#
# This file is part of gf25. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of gf25 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by gf25 from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError, TypeError, and ZeroDivisionError
from which the gf25 versions are derived.
"""


class GF25ValueError(ValueError):
    pass


class GF25TypeError(TypeError):
    pass


class NonInvertibleElementError(GF25ValueError, ZeroDivisionError):
    "The element has no multiplicative inverse (i.e. it is zero)."


class InvalidPointError(GF25ValueError):
    "A curve point with exactly one coordinate."
