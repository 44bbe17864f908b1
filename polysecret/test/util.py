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

"""Utility functions used for testing."""

from gmpy2 import mpz


def evaluate(coefficients, x):
    """Evaluate the polynomial with the given *coefficients* at *x*.

    The coefficients are listed from the constant term upwards.
    """
    # Horner's rule, starting from the highest coefficient.
    result = mpz(0)
    for coefficient in reversed(coefficients):
        result = result * x + coefficient
    return int(result)


def encode(value, base):
    """Write a non-negative *value* as a digit string in *base*."""
    return mpz(value).digits(base)


def make_document(coefficients, xs, bases, k=None, metadata_key="keys"):
    """Build an input document with points on a polynomial.

    The points are declared in the order of *xs*, point *i* encoded in
    ``bases[i % len(bases)]``. The threshold defaults to the number of
    coefficients.
    """
    if k is None:
        k = len(coefficients)
    document = {metadata_key: {"n": len(xs), "k": k}}
    for i, x in enumerate(xs):
        base = bases[i % len(bases)]
        document[str(x)] = {"base": str(base),
                            "value": encode(evaluate(coefficients, x), base)}
    return document
