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
primerbind.cli
~~~~~~~~~~~~~~

Command line interface behind the ``primerbindcli`` script.

"""
import argparse
import sys

from . import pipeline, templates
from .binding import BindingConsistencyError
from .ioutil import readPrimerCsv


def parseQualifiers(qualifier_args):
    """Turn a list of ``KEY=REGEX`` strings into a qualifier regex dict."""
    qualifier_regexs = {}
    for arg in qualifier_args or []:
        key, sep, regex = arg.partition('=')
        if not sep or not key:
            raise ValueError('Qualifier filters must look like KEY=REGEX, '
                             'got %r' % arg)
        qualifier_regexs[key] = regex
    return qualifier_regexs


def buildParser():
    defaults = pipeline.DEFAULT_PARAMS
    parser = argparse.ArgumentParser(
        prog='primerbindcli',
        description='Find the template each primer anneals to by its 3\' '
                    'end and write a csv binding report.')
    parser.add_argument(
        'primers', metavar='PRIMERS_CSV',
        help='Primer table with an anneal column and optional name, overhang '
             'and t_anneal columns')
    parser.add_argument(
        'templates', metavar='TEMPLATES', nargs='+',
        help='Genbank or fasta file(s) with the template sequences, tried in '
             'the order given')
    parser.add_argument(
        '--format', dest='fmt', default=None,
        help='Bio.SeqIO format of the template files (inferred from the '
             'extension by default)')
    parser.add_argument(
        '--feature-type', action='append', default=[],
        help='Use the footprints of features of this type as templates '
             '(repeatable)')
    parser.add_argument(
        '--qualifier', action='append', default=[], metavar='KEY=REGEX',
        help='Only use features whose qualifier KEY matches REGEX '
             '(repeatable)')
    parser.add_argument(
        '--min-length', type=int, default=defaults['min_length'],
        help='Minimum primer/template overlap in bp (default: %(default)s)')
    parser.add_argument(
        '--require-perfect', type=int, default=defaults['require_perfect'],
        help='Number of 3\' primer bases that must match perfectly '
             '(default: %(default)s)')
    parser.add_argument(
        '--output-fp', default=defaults['output_fp'],
        help='Output directory (default: current working directory)')
    parser.add_argument(
        '--output-basename', default=defaults['output_basename'],
        help='Basename of the report file (default: %(default)s)')
    parser.add_argument(
        '--quiet', action='store_true',
        help='Do not print status updates')
    return parser


def main(argv=None):
    args = buildParser().parse_args(argv)
    params = {
        'min_length': args.min_length,
        'require_perfect': args.require_perfect,
        'output_fp': args.output_fp,
        'output_basename': args.output_basename,
        'verbose': not args.quiet,
    }
    try:
        qualifier_regexs = parseQualifiers(args.qualifier)
        use_features = bool(args.feature_type or qualifier_regexs)
        primers = readPrimerCsv(args.primers)
        template_list = []
        for fp in args.templates:
            if use_features:
                for sr_obj in templates.readRecords(fp, args.fmt):
                    template_list.extend(templates.templatesFromFeatures(
                        sr_obj, args.feature_type or None, qualifier_regexs))
            else:
                template_list.extend(templates.loadTemplates(fp, args.fmt))
        pipeline.findBindings(primers, template_list, params)
    except (ValueError, OSError, BindingConsistencyError) as e:
        print('primerbindcli: error: {}'.format(e), file=sys.stderr)
        return 1
    return 0
