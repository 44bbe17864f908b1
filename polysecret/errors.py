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

"""Exceptions raised by PolySecret. Every error ends the current run;
the :mod:`polysecret.runner` reports it and exits without a result.
"""

__docformat__ = "restructuredtext"


class PolySecretError(Exception):
    """Base class for all PolySecret errors."""


class DecodeError(PolySecretError):
    """A digit string is invalid for its base, or the base is out of
    the supported range."""


class StructureError(PolySecretError):
    """The input document is malformed or lacks required fields."""


class InsufficientPointsError(PolySecretError):
    """Fewer points were supplied than the threshold requires."""

    def __init__(self, k, available):
        PolySecretError.__init__(
            self, "Not enough points to solve. The problem requires k=%d, "
            "but only %d points were provided." % (k, available))
        self.k = k
        self.available = available


class InexactTermError(PolySecretError):
    """The interpolated constant term is not an integer.

    This happens when the points do not lie on a polynomial with
    integer coefficients. The exact value is the fraction
    :attr:`numerator` / :attr:`denominator`.
    """

    def __init__(self, numerator, denominator):
        PolySecretError.__init__(
            self, "Constant term %d/%d is not an integer"
            % (numerator, denominator))
        self.numerator = numerator
        self.denominator = denominator


class AcquisitionError(PolySecretError):
    """The input document could not be obtained."""


class ConfigError(PolySecretError):
    """The configuration file is missing or holds invalid values."""
