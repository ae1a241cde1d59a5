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
primerbind.ioutil
~~~~~~~~~~~~~~~~~

Reading primer tables and writing binding reports.

"""
import csv
import errno
import os

from .sequences import Primer, asPrimer


# Accepted (lowercased) primer table headers -> Primer field
PRIMER_COLUMNS = {
    'name': 'name',
    'overhang': 'overhang',
    'overhang sequence': 'overhang',
    'anneal': 'anneal',
    'anneal sequence': 'anneal',
    't_anneal': 't_anneal',
    't anneal': 't_anneal',
}

REPORT_HEADER = ['primer', 'primer_sequence', 'template', 'site_start',
                 'site_stop', 'overhang_length', 't_anneal']


def readPrimerCsv(fp):
    """Read a list of ``Primer`` objects from a csv file.

    Headers are case-insensitive. Both the short (``name``, ``overhang``,
    ``anneal``, ``t_anneal``) and the long (``Overhang Sequence``,
    ``Anneal Sequence``, ``T Anneal``) header styles are understood. Only
    the anneal column is required; blank rows are skipped.

    Raises:
        ``ValueError`` if there is no anneal column, ``InvalidSequenceError``,
        ``OSError``

    """
    primers = []
    with open(fp, newline='') as fd:
        reader = csv.DictReader(fd)
        field_map = {}
        for field in reader.fieldnames or []:
            key = PRIMER_COLUMNS.get(field.strip().lower())
            if key is not None:
                field_map[key] = field
        if 'anneal' not in field_map:
            raise ValueError('%s has no anneal sequence column' % fp)

        def _value(row, key):
            field = field_map.get(key)
            if field is None:
                return ''
            return (row.get(field) or '').strip()

        for row in reader:
            if not any((v or '').strip() for v in row.values()
                       if isinstance(v, str)):
                continue
            t_anneal = _value(row, 't_anneal')
            primers.append(Primer(
                overhang=_value(row, 'overhang'),
                anneal=_value(row, 'anneal'),
                t_anneal=float(t_anneal) if t_anneal else None,
                name=_value(row, 'name') or None))
    return primers


def writeCsvReport(bindings, primers, params):
    """Write a csv report with one row per primer.

    Primers without a binding get blank template and site columns. The
    report is written to ``<output_fp>/<output_basename>_binding_report.csv``
    (the directory is created if needed).

    Args:
        bindings (list) : ``Binding`` objects as returned by
                          :func:``primerbind.binding.assignBindings``
        primers (list)  : the primers that were assigned, in the same order
        params (dict)   : pipeline parameters (see
                          :module:``primerbind.pipeline``)

    Returns:
        Filepath of the report

    Raises:
        ``OSError``

    """
    output_fp = params['output_fp']
    try:
        os.makedirs(output_fp)
    except OSError as e:
        if e.errno != errno.EEXIST:
            raise
    report_fp = os.path.join(output_fp, '%s_binding_report.csv' %
                             params['output_basename'])
    binding_idx = 0
    with open(report_fp, 'w', newline='') as fd:
        writer = csv.writer(fd)
        writer.writerow(REPORT_HEADER)
        for primer in primers:
            primer = asPrimer(primer)
            t_anneal = '' if primer.t_anneal is None else primer.t_anneal
            # Bindings are a subsequence of the primers, in the same order
            if (binding_idx < len(bindings) and
                    bindings[binding_idx].primer == primer):
                binding = bindings[binding_idx]
                binding_idx += 1
                writer.writerow([primer.label, primer.sequence,
                                 binding.template.label, binding.site.start,
                                 binding.site.stop, binding.overhang_length,
                                 t_anneal])
            else:
                writer.writerow([primer.label, primer.sequence, '', '', '',
                                 '', t_anneal])
    return report_fp
