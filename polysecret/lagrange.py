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

"""Lagrange interpolation at zero over the integers. Based on the
recombination step of the paper *How to share a secret* by Adi Shamir
in *Communications of the ACM* **22** (11): 612-613, but without the
finite field: the constant term is computed exactly with unbounded
integers.

The constant term of the polynomial through ``(x_j, y_j)`` is

  C = sum_j y_j * prod_{i != j} x_i / (x_i - x_j)

For ``P(x) = 3x + 7``:

>>> from polysecret.points import Point, PointSet
>>> solve(PointSet(2, [Point(1, 10), Point(2, 13)]))
7
"""

__docformat__ = "restructuredtext"

from functools import reduce
import operator

from gmpy2 import mpq, mpz, t_divmod
from twisted.python import log

from polysecret.errors import InsufficientPointsError, InexactTermError, \
     StructureError

#: Cached recombination bases.
#:
#: The basis used by `solve` depends only on the x-coordinates of the
#: selected points, and so it can be cached. Each entry is a list of
#: ``(numerator, denominator)`` pairs, one for every point. Entries are
#: never evicted; a run solves a single point set.
_recombination_bases = {}


def select(point_set):
    """Return the first *k* points of *point_set*.

    Raises :exc:`~polysecret.errors.InsufficientPointsError` if fewer
    than *k* points are available.
    """
    if len(point_set.points) < point_set.k:
        raise InsufficientPointsError(point_set.k, len(point_set.points))
    return point_set.points[:point_set.k]


def basis(xs):
    """Return the Lagrange basis at zero for the x-coordinates *xs*.

    Entry *j* is the pair ``(prod x_i, prod (x_i - x_j))`` taken over
    all ``i != j``:

    >>> basis((1, 2, 3))
    [(6, 2), (3, -1), (2, 2)]
    """
    xs = tuple(xs)
    try:
        return _recombination_bases[xs]
    except KeyError:
        vector = []
        for j, x_j in enumerate(xs):
            others = [mpz(x_i) for i, x_i in enumerate(xs) if i != j]
            numerator = reduce(operator.mul, others, mpz(1))
            denominator = reduce(operator.mul,
                                 [x_i - x_j for x_i in others], mpz(1))
            if denominator == 0:
                raise StructureError("x=%d occurs more than once" % x_j)
            vector.append((int(numerator), int(denominator)))
        _recombination_bases[xs] = vector
        return vector


def solve(point_set, truncate=False):
    """Compute the constant term of the polynomial through *point_set*.

    The first *k* points are used. The terms are added exactly as
    fractions and the sum must be an integer, otherwise
    :exc:`~polysecret.errors.InexactTermError` is raised. With
    *truncate* set each term is instead divided on its own, truncating
    toward zero, and the quotients are added.

    >>> from polysecret.points import Point, PointSet
    >>> points = PointSet(3, [Point(1, 4), Point(2, 9), Point(3, 16)])
    >>> solve(points)
    1
    """
    selected = select(point_set)
    vector = basis(point.x for point in selected)

    if not truncate:
        constant = mpq(0)
        for point, (numerator, denominator) in zip(selected, vector):
            constant += mpq(mpz(point.y) * numerator, denominator)
        if constant.denominator != 1:
            raise InexactTermError(int(constant.numerator),
                                   int(constant.denominator))
        return int(constant.numerator)

    constant = mpz(0)
    for point, (numerator, denominator) in zip(selected, vector):
        quotient, remainder = t_divmod(mpz(point.y) * numerator,
                                       denominator)
        if remainder != 0:
            log.msg("Truncating inexact term for x=%d (remainder %d)"
                    % (point.x, int(remainder)))
        constant += quotient
    return int(constant)


if __name__ == "__main__":
    import doctest    #pragma NO COVER
    doctest.testmod() #pragma NO COVER
