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
primerbind.templates
~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2014 Ben Pruitt & Nick Conway.
:license: GPLv2, see LICENSE for more details.

Methods to build ``Template`` objects from sequence files and from
instantiated ``SeqRecord`` objects (``Biopython`` objects that abstract the
contents of a genbank or fasta file), including templates cut from the
footprints of selected features.

"""
import os
import re

from Bio import SeqIO

from .sequences import Template


FORMAT_BY_EXTENSION = {
    '.gb': 'genbank',
    '.gbk': 'genbank',
    '.genbank': 'genbank',
    '.fa': 'fasta',
    '.fas': 'fasta',
    '.fasta': 'fasta',
    '.fna': 'fasta',
}

# Qualifiers tried in order when naming a feature template
NAME_QUALIFIERS = ('label', 'gene', 'locus_tag')


def filterFeatures(sr_obj, feature_types=None, qualifier_regexs=None):
    """Filter a `SeqRecord` object's `SeqFeature` list by type and qualifiers.


    Args:
        ``sr_obj``: instantiated Biopython ``SeqRecord`` object

    Kwargs:
        ``feature_types``: list of feature types (e.g., ['gene', 'CDS'])
        ``qualifier_regexs``: dict of <field name>: <value regex> entries

    Returns:
        Filtered list of `SeqFeature` objects

    Raises:
        None


    Examples:

        Return all ``SeqFeature`` objects from ``gb_rec`` of type
        'primer_bind' whose 'label' qualifier starts with 'junction'::

            >>>filterFeatures(gb_rec, ['primer_bind'], {'label': 'junction.*'})

    A feature lacking a qualifier named in ``qualifier_regexs`` is not
    excluded by that qualifier.

    """
    qualifier_regexs = qualifier_regexs or {}

    def _featureFilter(feature):
        if feature_types is not None and feature.type not in feature_types:
            return False
        for feat_key, feat_value_re in qualifier_regexs.items():
            q_values = feature.qualifiers.get(feat_key, [])
            for v in q_values:
                if re.search(feat_value_re, v) is None:
                    return False
        return True

    return [feature for feature in sr_obj.features if _featureFilter(feature)]


def featureName(sr_obj, feature):
    """Name a feature by its first naming qualifier or by its footprint."""
    for key in NAME_QUALIFIERS:
        values = feature.qualifiers.get(key)
        if values:
            return values[0]
    return '%s:%d-%d' % (sr_obj.id, int(feature.location.start),
                         int(feature.location.end))


def templateFromRecord(sr_obj):
    """Build a ``Template`` from the full sequence of a ``SeqRecord``."""
    return Template(str(sr_obj.seq), sr_obj.id)


def templatesFromFeatures(sr_obj, feature_types=None, qualifier_regexs=None):
    """Build one ``Template`` per feature passing :func:`filterFeatures`.

    Each template is the feature's footprint read 5' to 3' on the feature's
    own strand, so index 0 of a reverse strand template is the feature's
    end on the forward strand.

    Args:
        ``sr_obj``: instantiated Biopython ``SeqRecord`` object

    Kwargs:
        ``feature_types``: list of feature types (e.g., ['misc_feature'])
        ``qualifier_regexs``: dict of <field name>: <value regex> entries

    Returns:
        List of ``Template`` objects in feature order

    Raises:
        ``InvalidSequenceError``

    """
    templates = []
    for feature in filterFeatures(sr_obj, feature_types, qualifier_regexs):
        seq = feature.extract(sr_obj.seq)
        templates.append(Template(str(seq), featureName(sr_obj, feature)))
    return templates


def readRecords(fp, fmt=None):
    """Read all ``SeqRecord`` objects from a genbank or fasta file.

    The format is inferred from the file extension unless ``fmt`` (any
    ``Bio.SeqIO`` format name) is given.

    Raises:
        ``ValueError`` if the format cannot be inferred, ``OSError``

    """
    if fmt is None:
        ext = os.path.splitext(fp)[1].lower()
        fmt = FORMAT_BY_EXTENSION.get(ext)
        if fmt is None:
            raise ValueError('Cannot infer the sequence format of %s, '
                             'please specify one' % fp)
    return list(SeqIO.parse(fp, fmt))


def loadTemplates(fp, fmt=None):
    """Load every record of a sequence file as a ``Template``.

    See :func:`readRecords` for format handling.
    """
    return [templateFromRecord(sr_obj) for sr_obj in readRecords(fp, fmt)]
