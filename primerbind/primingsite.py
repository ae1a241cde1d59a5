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
'''
primingsite | primingsite.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Methods for finding the site at which the 3' end of a primer anneals to a
template.

'''
from collections import namedtuple

import numpy as np

from .sequences import asPrimer, asTemplate


class PrimingSite(namedtuple('PrimingSite',
        ['start',               # Always 0, sites are anchored to the
                                #   template start
         'stop'                 # Exclusive end of the primer overlap
         ])):
    __slots__ = ()

    @property
    def length(self):
        return self.stop - self.start


'''
Priming site detection

Templates are expected to be oriented so that index 0 is the 3' landing
boundary of the primer. A short 3' seed of the primer is located in the
template and each hit is extended towards the 5' end of the primer until a
single hit remains. That hit must then account for the entire template
prefix:

Primer            GGGATCGATCGATCGATCGATCG
                     ||||||||||||||||||||
Template             ATCGATCGATCGATCGATCGTTTTTTTT
                     |                  |
Site                 0                  stop

The primer bases left over on the 5' side (GGG above) are the overhang.

'''


def findSeedHits(template_seq, seed):
    """Return the exclusive stop index of every occurrence of ``seed``.

    Overlapping occurrences are all reported. Comparison is case-insensitive
    and literal (no pattern syntax).

    Args:
        template_seq (str)  : template sequence string
        seed (str)          : sequence to search for

    Returns:
        Sorted ``numpy.ndarray`` of stop indices (empty if there are no hits)

    """
    seed_len = len(seed)
    if seed_len == 0 or seed_len > len(template_seq):
        return np.empty(0, dtype=np.intp)
    template_arr = np.frombuffer(template_seq.upper().encode('ascii'),
                                 dtype=np.uint8)
    seed_arr = np.frombuffer(seed.upper().encode('ascii'), dtype=np.uint8)
    windows = np.lib.stride_tricks.sliding_window_view(template_arr, seed_len)
    return np.flatnonzero((windows == seed_arr).all(axis=1)) + seed_len


def detectPrimingSite(primer, template, min_length=16, require_perfect=3,
                      allow_mismatch=1):
    """Find the site at which the 3' end of ``primer`` anneals to ``template``

    Hits of the ``require_perfect`` 3'-most primer bases are collected and
    those ending before ``min_length`` are dropped. While more than one hit
    remains, the seed grows by one base towards the 5' end of the primer and
    the hits that no longer match are dropped. The surviving hit must then
    match the primer suffix across the whole template prefix ``[0, stop)``.

    If the seed runs past the 5' end of the primer with more than one hit
    still standing, the site is ambiguous and no site is reported.

    Args:
        primer (``Primer``)             : primer (or bare primer sequence)
        template (``Template``)         : template (or anything accepted by
                                          :func:``asTemplate``)

        min_length (int, optional)      : minimum overlap in bp between the
                                          primer and the template
        require_perfect (int, optional) : number of 3'-most bases that must
                                          match without error
        allow_mismatch (int, optional)  : accepted but currently ignored,
                                          mismatches are never tolerated

    Returns:
        ``PrimingSite`` or ``None`` if no unambiguous site was found

    Raises:
        ``ValueError`` if ``min_length`` or ``require_perfect`` is not
        positive, ``InvalidSequenceError`` for non-DNA input

    """
    if min_length < 1:
        raise ValueError('min_length must be positive, got %r' % min_length)
    if require_perfect < 1:
        raise ValueError('require_perfect must be positive, got %r' %
                         require_perfect)

    primer = asPrimer(primer)
    if isinstance(template, str) and not template.strip():
        return None
    template = asTemplate(template)

    primer_seq = primer.sequence.upper()
    template_seq = template.seq.upper()
    if require_perfect > len(primer_seq):
        return None

    stops = findSeedHits(template_seq, primer_seq[-require_perfect:])
    stops = stops[stops >= min_length]
    if len(stops) == 0:
        return None

    template_arr = np.frombuffer(template_seq.encode('ascii'), dtype=np.uint8)
    seed_len = require_perfect
    while len(stops) > 1:
        seed_len += 1
        if seed_len > len(primer_seq):
            return None
        starts = stops - seed_len
        in_bounds = starts >= 0
        stops = stops[in_bounds]
        starts = starts[in_bounds]
        # Survivors already match the shorter seed, only the new base differs
        stops = stops[template_arr[starts] == ord(primer_seq[-seed_len])]

    if len(stops) == 0:
        return None

    stop = int(stops[0])
    if stop > len(primer_seq) or template_seq[:stop] != primer_seq[-stop:]:
        return None
    return PrimingSite(0, stop)


# ~~~~~~~~~~~~~~~~~~~~~ Function aliases for convenience ~~~~~~~~~~~~~~~~~~~~ #

detect_priming_site = detectPrimingSite
find_seed_hits = findSeedHits
