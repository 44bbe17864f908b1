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

"""The reconstruction program. The :func:`main` function ties the
parts together: a document is acquired, decoded into a
:class:`~polysecret.points.PointSet`, solved, and the result reported.

Every :exc:`~polysecret.errors.PolySecretError` ends the run with exit
status 1 after being reported. No partial result is printed.
"""

__docformat__ = "restructuredtext"

import sys
from optparse import OptionParser, OptionGroup

from twisted.python import log

import polysecret
from polysecret import acquire
from polysecret.config import load_config, write_config
from polysecret.errors import PolySecretError
from polysecret.lagrange import select, solve
from polysecret.points import build
from polysecret.report import Reporter


def print_version(option, opt, value, parser):
    print("PolySecret %s" % polysecret.release(), file=parser.values.stdout)
    parser.exit()


def add_options(parser):
    """Add the reconstruction options to *parser*."""
    group = OptionGroup(parser, "Reconstruction Options")
    parser.add_option_group(group)

    group.add_option("-c", "--config", metavar="FILE",
                     help="Read settings from this configuration file.")
    group.add_option("-d", "--directory", metavar="DIR",
                     help=("Directory searched for file names entered "
                           "in the interactive menu."))
    group.add_option("--truncate", action="store_const", const="truncate",
                     dest="division",
                     help="Divide term by term, truncating toward zero.")
    group.add_option("--strict", action="store_const", const="strict",
                     dest="division",
                     help="Fail when the constant term is not an integer.")
    group.add_option("--write-config", metavar="FILE",
                     help="Write the default configuration to FILE and exit.")

    parser.add_option("-q", "--quiet", dest="show_points",
                      action="store_false",
                      help="Do not print the decoded points.")
    parser.add_option("-v", "--verbose", action="store_true",
                      help="Log diagnostics to standard error.")
    parser.add_option("--version", action="callback", callback=print_version,
                      help="Show the program version and exit.")

    parser.set_defaults(config=None, directory=None, division=None,
                        write_config=None, show_points=None, verbose=False)


def acquire_document(args, settings, stdin, stdout, ask):
    if not args:
        return acquire.interactive(ask, stdout.write, settings.directory)
    elif args[0] == "-":
        return acquire.read_stream(stdin)
    else:
        return acquire.read_path(args[0])


def reconstruct(document, settings, reporter):
    """Decode *document* and report its constant term."""
    point_set = build(document, settings.metadata_key)
    reporter.points(point_set)
    reporter.selected(select(point_set))
    constant = solve(point_set, truncate=settings.truncate)
    reporter.result(constant)
    return constant


def main(argv=None, stdin=None, stdout=None, stderr=None, ask=None):
    """Run the program and return its exit status."""
    if stdin is None:
        stdin = sys.stdin
    if stdout is None:
        stdout = sys.stdout
    if stderr is None:
        stderr = sys.stderr
    if ask is None:
        ask = input

    parser = OptionParser(usage="%prog [options] [FILE]")
    add_options(parser)
    # The --version callback prints to the same stream as the result.
    values = parser.get_default_values()
    values.stdout = stdout
    options, args = parser.parse_args(argv, values)
    if len(args) > 1:
        parser.error("at most one input file may be given")

    reporter = Reporter(stdout, stderr)
    try:
        if options.write_config:
            write_config(options.write_config)
            print("Wrote %s" % options.write_config, file=stdout)
            return 0

        settings = load_config(options.config)
        if options.directory is not None:
            settings.directory = options.directory
        if options.division is not None:
            settings.division = options.division
        if options.show_points is not None:
            settings.show_points = options.show_points
        reporter.show_points = settings.show_points

        if options.verbose:
            log.startLogging(stderr, setStdout=False)
        log.msg("Using %r" % settings)

        document = acquire_document(args, settings, stdin, stdout, ask)
        reconstruct(document, settings, reporter)
    except PolySecretError as e:
        reporter.error(e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main()) #pragma NO COVER
