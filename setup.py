# This is the PolySecret setup script.
#
# For an install into the current environment, use:  pip install .
# For a development install, use:                    pip install -e .[test]

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

import sys
if sys.version_info < (3, 8):
    raise SystemExit("PolySecret requires Python version 3.8 or later.")

from setuptools import setup

import polysecret

setup(name='polysecret',
      version=polysecret.__version__,
      author='PolySecret Development Team',
      description='Reconstruction of Shamir shared secrets from encoded points',
      long_description="""\
PolySecret recovers the constant term of a polynomial from a set of
points whose values are written in bases from 2 to 36. Features
include:

* exact decoding of digit strings of any length.

* exact Lagrange interpolation at zero with unbounded integers.

* input from files, paths, standard input or an interactive menu.
""",
      keywords=[
        'crypto', 'cryptography', 'Shamir', 'secret sharing',
        'Lagrange interpolation'
        ],
      license=polysecret.__license__,
      packages=['polysecret', 'polysecret.test'],
      scripts=['apps/reconstruct.py'],
      python_requires='>=3.8',
      install_requires=['gmpy2', 'Twisted', 'configobj'],
      extras_require={'test': ['pytest']},
      platforms=['any'],
      classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: GNU Lesser General Public License v3 or later (LGPLv3+)',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Security :: Cryptography',
        'Topic :: Software Development :: Libraries :: Python Modules'
        ]
      )
