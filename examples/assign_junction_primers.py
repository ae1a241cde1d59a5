"""
assign_junction_primers | examples/assign_junction_primers.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

This is an example script that assigns a handful of primers to the insertion
junctions of a small vector built in memory.

For one-off tasks you might be better off using the `primerbindcli` script,
but you could also modify this script to suit your needs.

"""
import os
import sys

# This fanciness is only necessary to run the script in place without
# installing the package. If you install the package you can just import
# "primerbind" and call it a day.
PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.realpath(__file__)))

try:
    import primerbind
except ImportError:
    if not 'primerbind' in os.listdir(PACKAGE_DIR):
        raise ImportError('`primerbind` must be installed in your PYTHONPATH '
                          'or script must be run from within the package '
                          'directory')
    sys.path.append(PACKAGE_DIR)
    import primerbind

from Bio.Seq import Seq
from Bio.SeqFeature import FeatureLocation, SeqFeature
from Bio.SeqRecord import SeqRecord


# We will set up our params here, note that we only define parameters that
# deviate from the defaults (see primerbind/pipeline.py for defaults)
params = {
    # Our report will be written to example_junctions_binding_report.csv
    'output_basename': 'example_junctions'
}

# A toy vector with two junctions. Each junction feature starts exactly where
# the 3' end of its primer is expected to land, which is what the binding
# site search assumes about its templates.
junction_a = 'CTGAAGTCGTACGATCCTGA'
junction_b = 'GATTACAGGCTTCACCGTAC'
vector = SeqRecord(
    Seq('GGCC' + junction_a + 'TTTTTTTT' + junction_b + 'AAAAAAAA'),
    id='toy_vector')
vector.features = [
    SeqFeature(FeatureLocation(4, 32, strand=1), type='misc_feature',
               qualifiers={'label': ['junction_a']}),
    SeqFeature(FeatureLocation(32, 60, strand=1), type='misc_feature',
               qualifiers={'label': ['junction_b']}),
]

# Only use the features labelled as junctions (the regular expression
# "junction_.*" matches "junction_" followed by any characters)
templates = primerbind.templates.templatesFromFeatures(
    vector, ['misc_feature'], {'label': 'junction_.*'})

primers = [
    primerbind.Primer('GGATCC', junction_b, t_anneal=62, name='fwd_b'),
    primerbind.Primer('GAATTC', junction_a, t_anneal=60, name='fwd_a'),
    primerbind.Primer('', 'ACGTACGTACGTACGTAAAA', name='stray'),
]

bindings = primerbind.findBindings(primers, templates, params)
