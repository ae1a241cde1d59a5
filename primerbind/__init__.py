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
may be installed in your Python site-packages directory with pip).

Python dependencies:

    biopython       https://pypi.python.org/pypi/biopython
    numpy           https://pypi.python.org/pypi/numpy


See README.md for more information.

"""

from . import binding, ioutil, pipeline, primingsite, sequences, templates

from .binding import Binding, BindingConsistencyError, assignBindings
from .pipeline import findBindings
from .primingsite import PrimingSite, detectPrimingSite
from .sequences import InvalidSequenceError, Primer, Template


__all__ = ['binding', 'ioutil', 'pipeline', 'primingsite', 'sequences',
           'templates', 'Binding', 'BindingConsistencyError',
           'assignBindings', 'findBindings', 'PrimingSite',
           'detectPrimingSite', 'InvalidSequenceError', 'Primer', 'Template']
