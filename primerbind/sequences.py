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
primerbind.sequences
~~~~~~~~~~~~~~~~~~~~

Immutable value types for the inputs of binding site detection: primers
(an overhang followed by an annealing region) and templates (the sequences
a primer is expected to land on).

Sequences are validated on construction. Only the unambiguous DNA alphabet
(A, C, G, T in either case) is accepted, so everything downstream can treat
sequences as plain literal strings. Case is preserved for display.

"""
from collections import namedtuple

from Bio.SeqRecord import SeqRecord


VALID_BASES = frozenset('ACGTacgt')


class InvalidSequenceError(ValueError):
    """Raised when a primer or template sequence is empty or not DNA."""
    pass


def validateSequence(seq, allow_empty=False, label='sequence'):
    """Strip and validate a nucleotide sequence string.

    Args:
        seq (str)                   : sequence to validate (anything with a
                                      ``str`` representation, e.g. a
                                      Biopython ``Seq``)

        allow_empty (bool, optional): whether an empty sequence is acceptable
        label (str, optional)       : name of the sequence used in error
                                      messages

    Returns:
        The sequence as a ``str`` with surrounding whitespace removed

    Raises:
        ``InvalidSequenceError``

    """
    seq = str(seq).strip()
    if not seq and not allow_empty:
        raise InvalidSequenceError('%s is empty' % label)
    invalid = set(seq) - VALID_BASES
    if invalid:
        raise InvalidSequenceError('%s contains invalid base(s): %s' %
                                   (label, ', '.join(sorted(invalid))))
    return seq


class Primer(namedtuple('Primer', ['overhang', 'anneal', 't_anneal', 'name'])):
    """A primer composed of a 5' overhang and a 3' annealing region.

    ``t_anneal`` is the annealing temperature as entered by the user. It is
    never calculated and plays no part in binding site detection.
    """
    __slots__ = ()

    def __new__(cls, overhang, anneal, t_anneal=None, name=None):
        overhang = validateSequence(overhang, allow_empty=True,
                                    label='overhang sequence')
        anneal = validateSequence(anneal, allow_empty=True,
                                  label='anneal sequence')
        if not overhang + anneal:
            raise InvalidSequenceError('primer sequence is empty')
        if t_anneal is not None:
            t_anneal = float(t_anneal)
        return super(Primer, cls).__new__(cls, overhang, anneal, t_anneal,
                                          name)

    @property
    def sequence(self):
        return self.overhang + self.anneal

    @property
    def length(self):
        return len(self.sequence)

    @property
    def label(self):
        return self.name or self.sequence

    def last(self, n):
        """Return the 3'-most ``n`` bases of the primer sequence."""
        if n <= 0:
            return ''
        return self.sequence[-n:]


class Template(namedtuple('Template', ['seq', 'name'])):
    """A candidate binding target, oriented so that index 0 is the expected
    3' landing boundary of a primer.
    """
    __slots__ = ()

    def __new__(cls, seq, name=None):
        seq = validateSequence(seq, label='template sequence')
        return super(Template, cls).__new__(cls, seq, name)

    @property
    def length(self):
        return len(self.seq)

    @property
    def label(self):
        if self.name:
            return self.name
        if len(self.seq) > 20:
            return self.seq[:20] + '...'
        return self.seq


def asPrimer(obj):
    """Return ``obj`` as a ``Primer`` (a bare sequence becomes the anneal
    region of a primer without an overhang).
    """
    if isinstance(obj, Primer):
        return obj
    return Primer('', obj)


def asTemplate(obj, name=None):
    """Return ``obj`` as a ``Template``.

    Accepts ``Template`` objects, strings, Biopython ``Seq`` objects and
    ``SeqRecord`` objects (the record id is used as the template name unless
    ``name`` is given).

    Raises:
        ``InvalidSequenceError``

    """
    if isinstance(obj, Template):
        return obj
    if isinstance(obj, SeqRecord):
        return Template(str(obj.seq), name or obj.id)
    return Template(obj, name)
