#!/usr/bin/env python3

# Copyright 2025 PolySecret Development Team.
#
# This file is part of PolySecret, a reconstruction tool for Shamir
# shared secrets.
#
# PolySecret is free software: you can redistribute it and/or modify it
# under the terms of the GNU Lesser General Public License (LGPL) as
# published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# PolySecret is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU
# Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with PolySecret. If not, see <http://www.gnu.org/licenses/>.

# Reconstructs the constant term of a shared polynomial. The input is
# a JSON document such as testcase-1.json in this directory:
#
# % ./reconstruct.py testcase-1.json
#
# Without a file argument an interactive menu asks where to read the
# document from. Use "-" to read a single line of JSON from standard
# input, and --help for the other options.

import sys

from polysecret.runner import main

sys.exit(main())
