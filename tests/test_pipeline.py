import contextlib
import csv
import io
import os
import unittest

from primerbind import pipeline
from primerbind.sequences import Primer, Template

from ._common import ANNEAL_1, ANNEAL_REPEAT, TEST_OUTPUT_DIR


PRIMERS = [
    Primer('GGG', ANNEAL_REPEAT, name='repeat'),
    Primer('GGATCC', ANNEAL_1, name='p1'),
    Primer('', 'ACGTACGTACGTACGTAAAA', name='orphan'),
]

TEMPLATES = [
    Template(ANNEAL_1 + 'GGGGGG', name='t_anneal_1'),
    Template(ANNEAL_REPEAT + 'TTTTTTTT', name='t_repeat'),
    Template('CCCCAAAACCCCAAAACCCC', name='t_unused'),
]


class TestPipeline(unittest.TestCase):

    def test_findBindings(self):
        params = {
            'output_fp': TEST_OUTPUT_DIR,
            'output_basename': 'pipeline',
            'verbose': False
        }
        bindings = pipeline.findBindings(PRIMERS, TEMPLATES, params)
        self.assertEqual([(b.primer.name, b.template.name, b.overhang_length)
                          for b in bindings],
                         [('repeat', 't_repeat', 3), ('p1', 't_anneal_1', 6)])

        report_fp = os.path.join(TEST_OUTPUT_DIR,
                                 'pipeline_binding_report.csv')
        with open(report_fp, newline='') as fd:
            rows = list(csv.reader(fd))
        self.assertEqual([row[0] for row in rows[1:]],
                         ['repeat', 'p1', 'orphan'])
        self.assertEqual(rows[3][2], '')

    def test_statusOutput(self):
        params = {'output_report': False}
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            pipeline.findBindings(PRIMERS, TEMPLATES, params)
        output = out.getvalue()
        self.assertIn('Assigning 3 primer(s) to 3 template(s)', output)
        self.assertIn('p1 -> t_anneal_1 [0, 20) overhang: 6 nt', output)
        self.assertIn('No priming site found for orphan', output)
        self.assertIn('Bound 2 of 3 primer(s), 1 template(s) unused', output)

    def test_matchParamsPassedThrough(self):
        params = {'output_report': False, 'verbose': False, 'min_length': 21}
        self.assertEqual(pipeline.findBindings(PRIMERS, TEMPLATES, params), [])

    def test_defaultsNotMutated(self):
        pipeline.findBindings(PRIMERS, TEMPLATES,
                              {'output_report': False, 'verbose': False,
                               'min_length': 18})
        self.assertEqual(pipeline.DEFAULT_PARAMS['min_length'], 16)
