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

"""Tests for polysecret.lagrange."""

from twisted.trial.unittest import TestCase

from polysecret import lagrange
from polysecret.errors import InsufficientPointsError, InexactTermError, \
     StructureError
from polysecret.lagrange import basis, select, solve
from polysecret.points import Point, PointSet, build
from polysecret.test.util import evaluate, make_document

#: Declare doctests for Trial.
__doctests__ = ['polysecret.lagrange']


def points_on(coefficients, xs, k=None):
    if k is None:
        k = len(coefficients)
    return PointSet(k, [Point(x, evaluate(coefficients, x)) for x in xs])


class SolveTest(TestCase):
    """Tests for :func:`polysecret.lagrange.solve`."""

    def test_line(self):
        """P(x) = 3x + 7."""
        point_set = PointSet(2, [Point(1, 10), Point(2, 13)])
        self.assertEqual(solve(point_set), 7)

    def test_square(self):
        """P(x) = x^2 + 2x + 1."""
        point_set = PointSet(3, [Point(1, 4), Point(2, 9), Point(3, 16)])
        self.assertEqual(solve(point_set), 1)

    def test_shifted_square(self):
        """P(x) = x^2 + 3."""
        point_set = PointSet(3, [Point(1, 4), Point(2, 7), Point(3, 12)])
        self.assertEqual(solve(point_set), 3)

    def test_single_point(self):
        self.assertEqual(solve(PointSet(1, [Point(5, 42)])), 42)

    def test_negative_constant(self):
        """P(x) = 2x - 9."""
        point_set = points_on([-9, 2], [1, 2])
        self.assertEqual(solve(point_set), -9)

    def test_non_consecutive(self):
        """P(x) = 5x^2 + 11x + 42 at x = 2, 4, 5."""
        point_set = PointSet(3, [Point(2, 84), Point(4, 166), Point(5, 222)])
        self.assertEqual(solve(point_set), 42)

    def test_large_values(self):
        coefficients = [2**256 + 987654321, 3**100, 5**70, 7**40]
        point_set = points_on(coefficients, range(1, 5))
        self.assertEqual(solve(point_set), 2**256 + 987654321)

    def test_declared_order(self):
        coefficients = [10**30 + 7, 12345, 678, 9]
        point_set = points_on(coefficients, [3, 1, 4, 2])
        self.assertEqual(solve(point_set), 10**30 + 7)

    def test_first_k_points(self):
        """Only the first k points are used."""
        points = [Point(1, 10), Point(2, 13), Point(3, 999), Point(4, -1)]
        self.assertEqual(solve(PointSet(2, points)), 7)

    def test_idempotent(self):
        point_set = points_on([31337, 4, 1], [1, 2, 3, 4])
        first = solve(point_set)
        self.assertEqual(solve(point_set), first)
        self.assertEqual(first, 31337)

    def test_result_is_int(self):
        point_set = PointSet(2, [Point(1, 10), Point(2, 13)])
        self.assertIsInstance(solve(point_set), int)

    def test_insufficient_points(self):
        point_set = PointSet(3, [Point(1, 10), Point(2, 13)])
        e = self.assertRaises(InsufficientPointsError, solve, point_set)
        self.assertEqual(e.k, 3)
        self.assertEqual(e.available, 2)

    def test_duplicate_x(self):
        point_set = PointSet(2, [Point(1, 10), Point(1, 13)])
        self.assertRaises(StructureError, solve, point_set)

    def test_fractional_terms(self):
        """P(x) = x + 1 at x = 2, 3, 7 has terms 63/5, -14 and 12/5."""
        point_set = points_on([1, 1], [2, 3, 7], k=3)
        self.assertEqual(solve(point_set), 1)

    def test_fractional_terms_square(self):
        """P(x) = x^2 at x = 1, 2, 4 has terms 8/3, -8 and 16/3."""
        point_set = PointSet(3, [Point(1, 1), Point(2, 4), Point(4, 16)])
        self.assertEqual(solve(point_set), 0)

    def test_large_fractional_terms(self):
        coefficients = [2**128 + 3, 5**30, 7]
        point_set = points_on(coefficients, [3, 10, 17])
        self.assertEqual(solve(point_set), 2**128 + 3)

    def test_non_integer_constant(self):
        """The line through (1, 0) and (3, 1) crosses zero at -1/2."""
        point_set = PointSet(2, [Point(1, 0), Point(3, 1)])
        e = self.assertRaises(InexactTermError, solve, point_set)
        self.assertEqual(e.numerator, -1)
        self.assertEqual(e.denominator, 2)
        self.assertIn("-1/2", str(e))

    def test_truncate(self):
        """Truncation drops the fractions 3/5 and 8/20 term by term."""
        point_set = points_on([1, 1], [2, 3, 7], k=3)
        self.assertEqual(solve(point_set, truncate=True), 0)

        point_set = PointSet(3, [Point(1, 1), Point(2, 4), Point(4, 16)])
        self.assertEqual(solve(point_set, truncate=True), -1)

    def test_truncate_non_integer(self):
        point_set = PointSet(2, [Point(1, 0), Point(3, 1)])
        self.assertEqual(solve(point_set, truncate=True), 0)

    def test_truncate_exact(self):
        point_set = PointSet(2, [Point(1, 10), Point(2, 13)])
        self.assertEqual(solve(point_set, truncate=True), 7)


class SelectTest(TestCase):
    """Tests for :func:`polysecret.lagrange.select`."""

    def test_select(self):
        points = [Point(3, 1), Point(1, 2), Point(2, 3)]
        self.assertEqual(select(PointSet(2, points)), tuple(points[:2]))

    def test_exact_count(self):
        points = [Point(1, 1)]
        self.assertEqual(select(PointSet(1, points)), (Point(1, 1),))

    def test_too_few(self):
        self.assertRaises(InsufficientPointsError, select, PointSet(1, []))


class BasisTest(TestCase):
    """Tests for :func:`polysecret.lagrange.basis`."""

    def test_basis(self):
        self.assertEqual(basis([2, 4, 5]), [(20, 6), (10, -2), (8, 3)])

    def test_cached(self):
        vector = basis((11, 12, 13))
        self.assertIdentical(lagrange._recombination_bases[(11, 12, 13)],
                             vector)
        self.assertIdentical(basis([11, 12, 13]), vector)


class DocumentTest(TestCase):
    """Test decoding and solving together."""

    def test_mixed_bases(self):
        coefficients = [2**130 + 1, 2**90, 17, 3]
        raw = make_document(coefficients, range(1, 7), [2, 16, 36, 7, 10])
        self.assertEqual(solve(build(raw)), 2**130 + 1)

    def test_threshold_below_degree(self):
        """A threshold lower than needed gives another polynomial."""
        raw = make_document([5, 0, 1], [1, 2, 3], [10], k=2)
        # The line through (1, 6) and (2, 9) is 3x + 3.
        self.assertEqual(solve(build(raw)), 3)
