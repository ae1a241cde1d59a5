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
primerbind.binding
~~~~~~~~~~~~~~~~~~

Assign primers to the templates they prime from.

Assignment is greedy and order-sensitive: primers are handled in input order
and each one claims the first template in the (shrinking) pool at which a
priming site is found. A claimed template is never offered to a later primer.
This is not an optimal bipartite matching; reordering primers or templates
can change which primer claims a template that several of them could bind.

"""
from collections import namedtuple

from .primingsite import detectPrimingSite
from .sequences import asPrimer, asTemplate


Binding = namedtuple('Binding',
        ['primer',              # ``Primer`` that binds
         'template',            # ``Template`` it binds to
         'site',                # ``PrimingSite`` on the template
         'overhang_length'      # Primer bases (5') not covered by the site
         ])


class BindingConsistencyError(RuntimeError):
    """Raised when a detected priming site is longer than its primer."""
    pass


def assignBindings(primers, templates, min_length=16, require_perfect=3,
                   allow_mismatch=1, consume=False):
    """Greedily assign each primer to at most one template.

    The assignment works on a copy of ``templates``; the caller's list is
    left untouched unless ``consume`` is set, in which case bound templates
    are also removed from it in place (so it must be a mutable list).

    Args:
        primers (list)                  : ``Primer`` objects in priority order
        templates (list)                : template pool (``Template``, str,
                                          ``Seq`` or ``SeqRecord``) in the
                                          order they should be tried

        min_length (int, optional)      : see :func:``detectPrimingSite``
        require_perfect (int, optional) : see :func:``detectPrimingSite``
        allow_mismatch (int, optional)  : see :func:``detectPrimingSite``
        consume (bool, optional)        : remove bound templates from
                                          ``templates``

    Returns:
        List of ``Binding`` objects, in primer order. Primers without a
        binding are absent.

    Raises:
        ``BindingConsistencyError`` if a site exceeds the primer length (no
        bindings are returned in that case), ``InvalidSequenceError``

    """
    pool = [(template, asTemplate(template)) for template in templates]
    bindings = []
    for primer in primers:
        primer = asPrimer(primer)
        for pool_idx, (raw_template, template) in enumerate(pool):
            site = detectPrimingSite(primer, template, min_length=min_length,
                                     require_perfect=require_perfect,
                                     allow_mismatch=allow_mismatch)
            if site is None:
                continue
            overhang_length = primer.length - site.length
            if overhang_length < 0:
                raise BindingConsistencyError(
                    'Detected priming site [%d, %d) on %s is longer than '
                    'primer %s (%d nt)' % (site.start, site.stop,
                    template.label, primer.label, primer.length))
            bindings.append(Binding(primer, template, site, overhang_length))
            del pool[pool_idx]
            if consume:
                _removeFirst(templates, lambda t: t is raw_template)
            break
    return bindings


def unboundPrimers(primers, bindings):
    """Return the members of ``primers`` that did not receive a binding."""
    remaining = list(primers)
    for binding in bindings:
        _removeFirst(remaining, lambda p: asPrimer(p) == binding.primer)
    return remaining


def unboundTemplates(templates, bindings):
    """Return the members of ``templates`` that no primer was bound to."""
    remaining = list(templates)
    for binding in bindings:
        _removeFirst(remaining, lambda t: asTemplate(t) == binding.template)
    return remaining


def _removeFirst(items, predicate):
    for idx, item in enumerate(items):
        if predicate(item):
            del items[idx]
            return


# ~~~~~~~~~~~~~~~~~~~~~ Function aliases for convenience ~~~~~~~~~~~~~~~~~~~~ #

assign_bindings = assignBindings
unbound_primers = unboundPrimers
unbound_templates = unboundTemplates
