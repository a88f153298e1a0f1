#!/usr/bin/env python3

# Copyright (C) 2024-2026 The gf25 developers
#
# This file is part of gf25. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of gf25 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the gf25 package."

name = "gf25"
__version__ = "2026.10.1"
__author__ = "The gf25 developers"
__author_email__ = "devs@gf25.org"
__copyright__ = "Copyright (C) 2024-2026 The gf25 developers"
__license__ = "MIT License"
