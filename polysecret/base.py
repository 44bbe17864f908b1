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

"""Decoding of digit strings in bases 2 through 36.

Digits are ``0-9`` followed by ``a-z`` (upper case letters are
accepted too), so base 16 uses ``0-9a-f`` and base 36 the whole
alphabet:

>>> decode("ff", 16)
255
>>> decode("1010", 2)
10
>>> decode("Zz", 36)
1295

The value is accumulated on :class:`gmpy2.mpz` integers and is exact
no matter how long the string is:

>>> decode("1" + "0" * 30, 10) == 10**30
True

A digit which is too large for the base is an error:

>>> decode("2", 2)
Traceback (most recent call last):
    ...
polysecret.errors.DecodeError: digit '2' is invalid in base 2
"""

__docformat__ = "restructuredtext"

import re
from gmpy2 import mpz

from polysecret.errors import DecodeError

#: Smallest supported base.
MIN_BASE = 2
#: Largest supported base.
MAX_BASE = 36

#: Maps a lower case digit to its value.
_digits = dict((c, i) for i, c in
               enumerate("0123456789abcdefghijklmnopqrstuvwxyz"))

_decimal = re.compile(r"^\s*[0-9]+\s*$")


def digit_value(char):
    """Return the value of a single digit.

    >>> digit_value("7"), digit_value("a"), digit_value("Z")
    (7, 10, 35)
    """
    try:
        return _digits[char.lower()]
    except KeyError:
        raise DecodeError("%r is not a digit" % char)


def parse_base(raw):
    """Convert the ``base`` field of a point into an integer.

    The field is normally a decimal string, but plain integers are
    accepted as well:

    >>> parse_base("16"), parse_base(8)
    (16, 8)
    """
    if isinstance(raw, bool):
        raise DecodeError("base must be an integer, not %r" % raw)
    if isinstance(raw, int):
        base = raw
    elif isinstance(raw, str) and _decimal.match(raw):
        base = int(raw)
    else:
        raise DecodeError("base must be a decimal integer, not %r" % raw)
    check_base(base)
    return base


def check_base(base):
    if not MIN_BASE <= base <= MAX_BASE:
        raise DecodeError("base %d is out of range [%d, %d]"
                          % (base, MIN_BASE, MAX_BASE))


def decode(digits, base):
    """Decode *digits* written in *base* into an integer.

    The string is read left to right, multiplying the running value
    by *base* before adding each digit. Empty strings, digits not
    below *base* and bases outside [2, 36] raise
    :exc:`~polysecret.errors.DecodeError`.
    """
    check_base(base)
    if not digits:
        raise DecodeError("empty digit string")

    result = mpz(0)
    for char in digits:
        value = digit_value(char)
        if value >= base:
            raise DecodeError("digit %r is invalid in base %d" % (char, base))
        result = result * base + value
    return int(result)


if __name__ == "__main__":
    import doctest    #pragma NO COVER
    doctest.testmod() #pragma NO COVER
