import os
import unittest

from Bio import SeqIO
from Bio.Seq import Seq

from primerbind import templates
from primerbind.sequences import Template

from ._common import ANNEAL_1, FLANK_3P, FLANK_5P, TEST_OUTPUT_DIR, \
                     buildRecord


class TestTemplates(unittest.TestCase):

    def test_filterFeatures(self):
        record = buildRecord()
        self.assertEqual(len(templates.filterFeatures(record)), 3)
        feats = templates.filterFeatures(record, ['misc_feature'])
        self.assertEqual([f.type for f in feats], ['misc_feature'] * 2)
        feats = templates.filterFeatures(record, None, {'label': r'.*_rev'})
        self.assertEqual(len(feats), 2)
        feats = templates.filterFeatures(record, ['misc_feature'],
                                         {'label': r'.*_rev'})
        self.assertEqual(feats[0].qualifiers['label'], ['junction_rev'])
        self.assertEqual(len(feats), 1)

    def test_templatesFromFeatures(self):
        record = buildRecord()
        fwd, rev = templates.templatesFromFeatures(record, ['misc_feature'])
        self.assertEqual(fwd, Template(ANNEAL_1 + FLANK_3P, 'junction_fwd'))
        rc = str(Seq(FLANK_5P + ANNEAL_1).reverse_complement())
        self.assertEqual(rev, Template(rc, 'junction_rev'))

    def test_unlabelledFeatureName(self):
        record = buildRecord()
        template, = templates.templatesFromFeatures(record, ['primer_bind'])
        self.assertEqual(template.name, 'test_vector:10-20')
        self.assertEqual(template.seq, str(record.seq)[10:20])

    def test_templateFromRecord(self):
        record = buildRecord()
        self.assertEqual(templates.templateFromRecord(record),
                         Template(str(record.seq), 'test_vector'))

    def test_loadTemplates(self):
        record = buildRecord()
        gb_fp = os.path.join(TEST_OUTPUT_DIR, 'test_vector.gb')
        fa_fp = os.path.join(TEST_OUTPUT_DIR, 'test_vector.fasta')
        SeqIO.write([record], gb_fp, 'genbank')
        SeqIO.write([record], fa_fp, 'fasta')
        expected = [Template(str(record.seq), 'test_vector')]
        gb_templates = templates.loadTemplates(gb_fp)
        self.assertEqual([t.seq for t in gb_templates], [str(record.seq)])
        self.assertEqual(templates.loadTemplates(fa_fp), expected)
        features = templates.readRecords(gb_fp)[0].features
        self.assertEqual(len(features), 3)

    def test_unknownFormat(self):
        self.assertRaises(ValueError, templates.loadTemplates,
                          os.path.join(TEST_OUTPUT_DIR, 'templates.txt'))
