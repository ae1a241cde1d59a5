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
primerbind.pipeline
~~~~~~~~~~~~~~~~~~~

This is the main entry point for primer binding assignment. It reconciles the
user-provided parameters with the defaults, runs the greedy assignment,
reports progress on stdout and writes the binding report.

"""
import copy
import os

from . import binding
from . import ioutil
from .sequences import asPrimer

CWD = os.getcwd()


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~#
# Default parameters for binding assignment.
#
# This dictionary is updated with user provided parameters, so the user does
# not need to provide an exhaustive / equivalent dictionary
# ~~~ #

DEFAULT_PARAMS = {
    # Minimum overlap in bp between the primer 3' end and the template
    'min_length': 16,
    # Number of 3'-most primer bases that seed the site search and must
    # match perfectly
    'require_perfect': 3,
    # Number of tolerated mismatches (accepted but not used yet)
    'allow_mismatch': 1,
    # Filepath at which to write output files, defaults to current working dir
    'output_fp': CWD,
    # Default output basename for files
    'output_basename': 'primerbind_out',
    # Whether or not to write a csv binding report
    'output_report': True,
    # Whether or not to print status updates to stdout
    'verbose': True,
}

MATCH_PARAMS = ('min_length', 'require_perfect', 'allow_mismatch')


def findBindings(primers, templates, params=None):
    """Assign primers to templates and report the result.

    Args:
        primers (list)          : ``Primer`` objects in priority order
        templates (list)        : template pool (``Template``, str, ``Seq`` or
                                  ``SeqRecord``), not modified

        params (dict, optional) : user-specified parameters to override the
                                  defaults (see ``DEFAULT_PARAMS``)

    Returns:
        List of ``Binding`` objects in primer order

    Raises:
        ``BindingConsistencyError``, ``InvalidSequenceError``, ``OSError``

    """
    # ~~~~~~~~~~ Reconcile default params with user-provided params ~~~~~~~~~ #
    _params = copy.deepcopy(DEFAULT_PARAMS)
    _params.update(params or {})
    params = _params
    verbose = params['verbose']

    primers = [asPrimer(primer) for primer in primers]
    templates = list(templates)

    if verbose:
        print('Assigning {} primer(s) to {} template(s) (min overlap: {} bp, '
              'perfect 3\' bases: {})...'.format(len(primers), len(templates),
              params['min_length'], params['require_perfect']))

    bindings = binding.assignBindings(
        primers, templates, **{key: params[key] for key in MATCH_PARAMS})

    if verbose:
        for b in bindings:
            print('\t{} -> {} [{}, {}) overhang: {} nt'.format(
                  b.primer.label, b.template.label, b.site.start, b.site.stop,
                  b.overhang_length))
        for primer in binding.unboundPrimers(primers, bindings):
            print('\tNo priming site found for {}'.format(primer.label))
        print('Bound {} of {} primer(s), {} template(s) unused'.format(
              len(bindings), len(primers), len(templates) - len(bindings)))

    # ~~~~~~~~~~~~~~~~~~~~~~~~~~ Write output files ~~~~~~~~~~~~~~~~~~~~~~~~~ #
    if params['output_report']:
        report_fp = ioutil.writeCsvReport(bindings, primers, params)
        if verbose:
            print('Wrote binding report to', report_fp)

    return bindings
