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

"""Loading and saving configuration files. A configuration file is a
simple INI-file with three sections::

  [input]
  metadata_key = keys
  directory = .

  [solver]
  division = strict

  [report]
  show_points = True

Settings missing from a file keep their defaults. The :class:`Settings`
class holds the converted values; :func:`load_config` builds one from a
file and :func:`write_config` saves the defaults so they can be edited.
"""

__docformat__ = "restructuredtext"

from configobj import ConfigObj, ConfigObjError

from polysecret.errors import ConfigError
from polysecret.points import METADATA_KEY

#: Allowed values of the ``division`` setting.
DIVISIONS = ("strict", "truncate")


def default_config():
    """Return a :class:`ConfigObj` holding the default settings."""
    config = ConfigObj(indent_type='  ')
    config['input'] = {'metadata_key': METADATA_KEY, 'directory': '.'}
    config['solver'] = {'division': 'strict'}
    config['report'] = {'show_points': 'True'}
    config['input'].comments['metadata_key'] = \
        ['Key of the entry holding the threshold k.']
    config['input'].comments['directory'] = \
        ['Directory searched for plain file names.']
    config['solver'].comments['division'] = \
        ['"strict" fails on inexact terms, "truncate" drops remainders.']
    return config


class Settings:
    """Converted configuration values."""

    def __init__(self, metadata_key=METADATA_KEY, directory='.',
                 division='strict', show_points=True):
        self.metadata_key = metadata_key
        self.directory = directory
        self.division = division
        self.show_points = show_points

    @property
    def truncate(self):
        return self.division == 'truncate'

    def __repr__(self):
        return "<Settings %s division=%s>" % (self.metadata_key,
                                              self.division)


def load_config(source=None):
    """Load a configuration file.

    The *source* may be a filename, a :class:`ConfigObj` or None for
    the defaults. The values read are merged over the defaults and
    converted into a :class:`Settings` instance.
    """
    config = default_config()
    if source is not None:
        if isinstance(source, ConfigObj):
            user = source
        else:
            try:
                user = ConfigObj(source, file_error=True)
            except (IOError, ConfigObjError) as e:
                raise ConfigError("cannot load %s: %s" % (source, e))
        config.merge(user)

    try:
        division = config['solver']['division']
        if division not in DIVISIONS:
            raise ConfigError("division must be one of %s, not %r"
                              % (", ".join(DIVISIONS), division))
        return Settings(metadata_key=config['input']['metadata_key'],
                        directory=config['input']['directory'],
                        division=division,
                        show_points=config['report'].as_bool('show_points'))
    except (KeyError, AttributeError, TypeError, ValueError) as e:
        raise ConfigError("invalid configuration: %s" % e)


def write_config(filename):
    """Write the default configuration to *filename*."""
    config = default_config()
    config.filename = filename
    config.write()
    return config
