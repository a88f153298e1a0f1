#!/usr/bin/env python3

# Copyright (C) 2024-2026 The gf25 developers
#
# This file is part of gf25. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of gf25 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `point_add_example.py` demonstration script."

import runpy
from os import path

import pytest

SCRIPT = path.join(path.dirname(__file__), "..", "point_add_example.py")


def test_point_add_example(capsys: pytest.CaptureFixture) -> None:
    runpy.run_path(SCRIPT, run_name="__main__")
    out = capsys.readouterr().out
    assert "P1: (1 + 2t, 4 + 4t)" in out
    assert "P2: (1 + 2t, 4 + 4t)" in out
    assert "P1 + P2: (1 + 2t, 1 + 1t)" in out
    assert "Point at Infinity" not in out
