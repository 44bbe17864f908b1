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

"""
Polynomial secret reconstruction.

PolySecret decodes points written in arbitrary bases and recovers the
constant term of the polynomial through them by exact Lagrange
interpolation at zero.
"""

__version__ = '1.0'
__license__ = 'GNU LGPL'

def release():
    """Get the full release number.

    If git is available, "git describe" will be used to determine the
    state of the repository and a string of the form ``x.y-desc`` is
    returned where ``desc`` is the abbreviated commit or tag. If the
    tag is the same as ``__version__``, then ``__version__`` is simply
    returned.
    """
    try:
        from subprocess import Popen, PIPE
        p = Popen(["git", "describe", "--tags", "--always"],
                  stdout=PIPE, stderr=PIPE)
        stdout, _ = p.communicate()
        if p.returncode != 0:
            extra = "unknown"
        else:
            extra = stdout.decode("ascii", "replace").strip() or "unknown"
    except OSError:
        extra = "unknown"

    if extra == __version__:
        return __version__
    else:
        return "%s-%s" % (__version__, extra)
