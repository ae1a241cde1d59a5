#!/usr/bin/env python

# Copyright (C) 2014. Ben Pruitt & Nick Conway
# See LICENSE for full GPLv2 license.
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along
# with this program; if not, write to the Free Software Foundation, Inc.,
# 51 Franklin Street, Fifth Floor, Boston, MA 02110-1301 USA.

"""
======================================================================
 primerbind: primer binding site detection and template assignment
======================================================================

``primerbind`` finds where the 3' end of a primer anneals to a template and
greedily assigns each primer in a list to at most one template from a pool.

Setup / installation is fairly simple (the package may be used in place or
may be installed in your Python site-packages directory by running this
script, or with ``pip install .``).

Python dependencies:

    biopython       https://pypi.python.org/pypi/biopython
    numpy           https://pypi.python.org/pypi/numpy


See README.md for more information.

"""

from setuptools import setup

setup(
    name='primerbind',
    version='0.0.1',
    license='GPLv2',
    author='Ben Pruitt, Nick Conway',
    author_email='benjamin.pruitt@wyss.harvard.edu',
    description='Primer binding site detection and primer-to-template '
                'assignment',
    classifiers=[
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Science/Research',
        'Topic :: Scientific/Engineering :: Bio-Informatics',
        'License :: OSI Approved :: GNU General Public License v2 (GPLv2)'
    ],
    packages=['primerbind'],
    python_requires='>=3.8',
    install_requires=['numpy>=1.20', 'biopython'],
    scripts=['scripts/primerbindcli']
)
