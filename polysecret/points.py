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

"""Points and point sets. An input document is a mapping with one
metadata entry holding the threshold and a number of point entries
keyed by their index:

>>> raw = {"keys": {"n": 2, "k": 2},
...        "1": {"base": "10", "value": "10"},
...        "2": {"base": "16", "value": "d"}}
>>> point_set = build(raw)
>>> point_set.k
2
>>> point_set.points
(Point(x=1, y=10), Point(x=2, y=13))

Keys are told apart by whether they look like numbers. Numeric keys
are point indices and everything else is metadata.
"""

__docformat__ = "restructuredtext"

import re
from collections import namedtuple
from collections.abc import Mapping

from twisted.python import log

from polysecret.base import decode, parse_base
from polysecret.errors import DecodeError, StructureError

#: Key of the metadata entry unless configured otherwise.
METADATA_KEY = "keys"

_numeric = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*$")
_integer = re.compile(r"^\s*\+?\d+\s*$")


class Point(namedtuple("Point", "x y")):
    """A decoded ``(x, y)`` pair of integers."""

    __slots__ = ()


class PointSet(object):
    """Decoded points together with the threshold *k*.

    The points are kept in the order they were declared. *n* is the
    number of shares announced by the metadata entry, or None when the
    document does not state it.
    """

    __slots__ = ("_k", "_points", "_n")

    def __init__(self, k, points, n=None):
        self._k = k
        self._points = tuple(points)
        self._n = n

    k = property(lambda self: self._k)
    points = property(lambda self: self._points)
    n = property(lambda self: self._n)

    def __len__(self):
        return len(self._points)

    def __iter__(self):
        return iter(self._points)

    def __repr__(self):
        return "<PointSet k=%d: %s>" % (self._k, list(self._points))


def is_numeric(key):
    """Return True if *key* reads as a number.

    >>> is_numeric("12"), is_numeric("1.5"), is_numeric("keys")
    (True, True, False)
    """
    return _numeric.match(key) is not None


def parse_index(key):
    """Convert a numeric key into a non-negative integer index."""
    if not _integer.match(key):
        raise StructureError("point key %r is not a non-negative integer"
                             % key)
    return int(key)


def parse_threshold(metadata):
    if not isinstance(metadata, Mapping):
        raise StructureError("metadata entry must be an object")
    if "k" not in metadata:
        raise StructureError("metadata entry lacks the threshold 'k'")
    k = metadata["k"]
    if isinstance(k, str) and _integer.match(k):
        k = int(k)
    if isinstance(k, bool) or not isinstance(k, int) or k < 1:
        raise StructureError("threshold 'k' must be a positive integer, "
                             "not %r" % (metadata["k"],))
    return k


def decode_point(key, entry):
    """Decode the point entry stored under *key*."""
    if not isinstance(entry, Mapping):
        raise StructureError("point %r must be an object" % key)
    for field in ("base", "value"):
        if field not in entry:
            raise StructureError("point %r lacks the %r field" % (key, field))

    value = entry["value"]
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    if not isinstance(value, str):
        raise StructureError("value of point %r must be a string" % key)

    try:
        y = decode(value, parse_base(entry["base"]))
    except DecodeError as e:
        raise DecodeError("point %r: %s" % (key, e))
    return Point(parse_index(key), y)


def build(raw, metadata_key=METADATA_KEY):
    """Build a :class:`PointSet` from a parsed input document.

    Raises :exc:`~polysecret.errors.StructureError` for malformed
    documents and :exc:`~polysecret.errors.DecodeError` for values
    which cannot be decoded.
    """
    if not isinstance(raw, Mapping):
        raise StructureError("input document must be an object")
    if metadata_key not in raw:
        raise StructureError("input document lacks the %r entry"
                             % metadata_key)
    metadata = raw[metadata_key]
    k = parse_threshold(metadata)

    points = []
    seen = {}
    for key, entry in raw.items():
        if isinstance(key, int) and not isinstance(key, bool):
            key = str(key)
        elif not isinstance(key, str):
            raise StructureError("key %r is not a string" % (key,))
        if key == metadata_key or not is_numeric(key):
            continue
        point = decode_point(key, entry)
        if point.x in seen:
            raise StructureError("keys %r and %r name the same point x=%d"
                                 % (seen[point.x], key, point.x))
        seen[point.x] = key
        log.msg("Decoded point %r: x=%d y=%d" % (key, point.x, point.y))
        points.append(point)

    n = metadata.get("n")
    if n is not None and n != len(points):
        log.msg("Metadata declares n=%r but %d points were found"
                % (n, len(points)))

    return PointSet(k, points, n)


if __name__ == "__main__":
    import doctest    #pragma NO COVER
    doctest.testmod() #pragma NO COVER
