import unittest

import numpy as np

from primerbind import primingsite
from primerbind.primingsite import PrimingSite, detectPrimingSite, \
                                   findSeedHits
from primerbind.sequences import InvalidSequenceError, Primer, Template

from ._common import ANNEAL_1, ANNEAL_REPEAT


class TestFindSeedHits(unittest.TestCase):

    def test_overlappingHits(self):
        hits = findSeedHits('AAAA', 'AA')
        self.assertEqual(hits.tolist(), [2, 3, 4])

    def test_caseInsensitive(self):
        self.assertEqual(findSeedHits('tcgATCG', 'TCG').tolist(), [3, 7])

    def test_noHits(self):
        self.assertEqual(len(findSeedHits('ACGT', 'TTT')), 0)
        self.assertEqual(len(findSeedHits('AC', 'ACG')), 0)
        self.assertEqual(len(findSeedHits('ACGT', '')), 0)
        self.assertIsInstance(findSeedHits('ACGT', 'TTT'), np.ndarray)


class TestDetectPrimingSite(unittest.TestCase):

    def test_overhangPrimerOnRepeatTemplate(self):
        # Seed 'TCG' hits at every repeat, extension resolves the true site
        primer = Primer('GGG', ANNEAL_REPEAT)
        template = ANNEAL_REPEAT + 'TTTTTTTT'
        site = detectPrimingSite(primer, template, min_length=16)
        self.assertEqual(site, PrimingSite(0, 20))
        self.assertEqual(site.length, 20)
        self.assertEqual(primer.length - site.length, 3)

    def test_annealAbsent(self):
        primer = Primer('GGG', ANNEAL_1)
        self.assertIsNone(detectPrimingSite(primer, 'CCCCAAAACCCCAAAACCCCAAAA'))

    def test_uniqueHit(self):
        primer = Primer('GGATCC', ANNEAL_1)
        site = detectPrimingSite(primer, Template(ANNEAL_1 + 'GGGGGG'))
        self.assertEqual(site, PrimingSite(0, 20))

    def test_siteIncludesMatchingOverhangBases(self):
        primer = Primer('GGATCC', ANNEAL_1)
        site = detectPrimingSite(primer, 'ATCC' + ANNEAL_1 + 'GGGG')
        self.assertEqual(site, PrimingSite(0, 24))

    def test_overlapShorterThanMinLength(self):
        primer = Primer('GGG', ANNEAL_1)
        template = ANNEAL_1[-12:] + 'GGGGGGGGGGGG'
        self.assertIsNone(detectPrimingSite(primer, template))
        self.assertEqual(detectPrimingSite(primer, template, min_length=10),
                         PrimingSite(0, 12))

    def test_prefixMismatchFailsFinalValidation(self):
        # Seed is unique but the template prefix does not match the primer
        primer = Primer('', ANNEAL_1)
        template = 'G' + ANNEAL_1[1:] + 'GGGG'
        self.assertIsNone(detectPrimingSite(primer, template))

    def test_siteNotAtTemplateStart(self):
        primer = Primer('', ANNEAL_1)
        self.assertIsNone(detectPrimingSite(primer, 'GGGGG' + ANNEAL_1))

    def test_ambiguousSiteIsNotReported(self):
        # Hits at 20 and 24 can not be told apart within the primer length
        primer = Primer('', ANNEAL_REPEAT)
        template = ANNEAL_REPEAT + 'ATCG'
        self.assertIsNone(detectPrimingSite(primer, template))
        self.assertIsNone(detectPrimingSite(Primer('', 'C' * 18), 'C' * 30))

    def test_caseInsensitive(self):
        primer = Primer('ggg', ANNEAL_REPEAT.lower())
        upper = ANNEAL_REPEAT + 'TTTTTTTT'
        lower = upper.lower()
        self.assertEqual(detectPrimingSite(primer, upper),
                         detectPrimingSite(primer, lower))
        self.assertEqual(detectPrimingSite(primer, lower), PrimingSite(0, 20))

    def test_idempotent(self):
        primer = Primer('GGATCC', ANNEAL_1)
        template = 'ATCC' + ANNEAL_1 + 'GGGG'
        self.assertEqual(detectPrimingSite(primer, template),
                         detectPrimingSite(primer, template))

    def test_allowMismatchHasNoEffect(self):
        cases = [
            (Primer('GGG', ANNEAL_REPEAT), ANNEAL_REPEAT + 'TTTTTTTT'),
            (Primer('GGG', ANNEAL_1), 'CCCCAAAACCCCAAAACCCCAAAA'),
            (Primer('', ANNEAL_1), 'G' + ANNEAL_1[1:] + 'GGGG'),
            (Primer('', ANNEAL_REPEAT), ANNEAL_REPEAT + 'ATCG'),
        ]
        for primer, template in cases:
            expected = detectPrimingSite(primer, template)
            for allow_mismatch in (0, 1, 2, 5, 20):
                self.assertEqual(
                    detectPrimingSite(primer, template,
                                      allow_mismatch=allow_mismatch),
                    expected)

    def test_emptyTemplate(self):
        self.assertIsNone(detectPrimingSite(Primer('', ANNEAL_1), ''))

    def test_seedLongerThanPrimer(self):
        primer = Primer('', 'ACGT')
        self.assertIsNone(detectPrimingSite(primer, 'ACGT' * 8,
                                            require_perfect=5))

    def test_bareSequencePrimer(self):
        self.assertEqual(detectPrimingSite(ANNEAL_1, ANNEAL_1 + 'GG'),
                         PrimingSite(0, 20))

    def test_badParameters(self):
        primer = Primer('', ANNEAL_1)
        self.assertRaises(ValueError, detectPrimingSite, primer, ANNEAL_1,
                          min_length=0)
        self.assertRaises(ValueError, detectPrimingSite, primer, ANNEAL_1,
                          require_perfect=0)

    def test_invalidTemplate(self):
        self.assertRaises(InvalidSequenceError, detectPrimingSite,
                          Primer('', ANNEAL_1), ANNEAL_1 + 'NNNN')

    def test_snakeCaseAlias(self):
        self.assertIs(primingsite.detect_priming_site, detectPrimingSite)
