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

"""Console output of decoded points and results."""

__docformat__ = "restructuredtext"

import sys


class Reporter:
    """Writes a human readable account of a run.

    Normal output goes to *stream*, errors to *errors*. Listing of
    points is skipped when *show_points* is false, the result is
    always written.
    """

    def __init__(self, stream=None, errors=None, show_points=True):
        self.stream = stream if stream is not None else sys.stdout
        self.errors = errors if errors is not None else sys.stderr
        self.show_points = show_points

    def _print(self, *args):
        print(*args, file=self.stream)

    def points(self, point_set):
        """List the decoded points of *point_set*."""
        if not self.show_points:
            return
        self._print("Decoded Points:")
        for point in point_set:
            self._print("  x=%d y=%d" % point)

    def selected(self, points):
        """Name the x-coordinates of the points used for solving."""
        if not self.show_points:
            return
        self._print("Using %d points: %s"
                    % (len(points), ", ".join(str(p.x) for p in points)))

    def result(self, value):
        """Write the constant term."""
        self._print("The constant term of the polynomial (C) is: %d" % value)

    def error(self, exc):
        """Write *exc* to the error stream."""
        print("Error: %s" % exc, file=self.errors)
