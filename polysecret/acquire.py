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

"""Obtaining input documents. A document can be read from a file
name in a known directory, from a full path, or from a single line of
pasted JSON. The :func:`interactive` function lets the user pick one
of these through a small menu.

None of the functions here know about points; they return the parsed
document, which is handed to :func:`polysecret.points.build`.

>>> parse('{"keys": {"k": 1}, "1": {"base": "2", "value": "11"}}')
{'keys': {'k': 1}, '1': {'base': '2', 'value': '11'}}
"""

__docformat__ = "restructuredtext"

import json
import os.path

from twisted.python import log

from polysecret.errors import AcquisitionError, StructureError

MENU = """\
Please choose your input method:
  1. From a file name in the same directory (e.g., data.json)
  2. From a file path (e.g., /Users/me/Documents/data.json)
  3. Paste the raw JSON content directly into the terminal.
"""


def parse(text):
    """Parse JSON *text* into a document."""
    if not text or not text.strip():
        raise StructureError("no JSON content was provided")
    try:
        return json.loads(text)
    except ValueError as e:
        raise StructureError("invalid JSON: %s" % e)


def read_path(path):
    """Read and parse the file at *path*."""
    log.msg("Reading input from %s" % path)
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        raise AcquisitionError("cannot read %s: %s" % (path, e.strerror or e))
    return parse(text)


def read_file(name, directory="."):
    """Read and parse the file called *name* in *directory*."""
    return read_path(os.path.join(directory, name))


def read_stream(stream):
    """Read one line of JSON from *stream*."""
    return parse(stream.readline())


def interactive(ask, write, directory="."):
    """Ask the user for an input method and return the document.

    The *ask* function is called with a prompt and must return the
    answer, *write* is called with text to show. Passing :func:`input`
    and :meth:`sys.stdout.write` gives the usual terminal dialog.
    """
    write(MENU)
    choice = ask("Enter your choice (1, 2, or 3): ").strip()
    if choice == "1":
        return read_file(ask("Enter the file name (e.g., data.json): ").strip(),
                         directory)
    elif choice == "2":
        return read_path(ask("Enter the full file path: ").strip())
    elif choice == "3":
        write("Please paste the raw, single-line JSON content below "
              "and press Enter:\n")
        return parse(ask("> "))
    else:
        raise AcquisitionError("invalid choice %r, choose 1, 2, or 3"
                               % choice)


if __name__ == "__main__":
    import doctest    #pragma NO COVER
    doctest.testmod() #pragma NO COVER
