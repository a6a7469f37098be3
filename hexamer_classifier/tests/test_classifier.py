#!/usr/bin/env python3

"""
Unit tests for log-odds classification.

Covers the decision policy, unknown hexamer handling, degenerate
sequences and the symmetry of swapped reference tables.
"""

import math
import unittest
import sys
import os
from unittest import mock

# Add the parent directory to the path to import modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from hexamer_classifier.core import classifier as classifier_module
from hexamer_classifier.core.classifier import HexamerClassifier, classify, decide, log2
from hexamer_classifier.core.config import ClassifierConfig
from hexamer_classifier.core.data_structures import (
    ClassificationLabel, HexamerFrequencyTable, SequenceCollection
)
from hexamer_classifier.core.exceptions import ScoringError
from hexamer_classifier.core.profiler import build_frequency_table


def table(frequencies):
    return HexamerFrequencyTable.from_frequencies(frequencies)


class TestLog2(unittest.TestCase):

    def test_powers_of_two(self):
        self.assertEqual(log2(2), 1)
        self.assertEqual(log2(4), 2)
        self.assertEqual(log2(0.25), -2)


class TestDecide(unittest.TestCase):
    """Test the decision policy."""

    def test_negative_is_intronic(self):
        self.assertIs(decide(-1e-12), ClassificationLabel.INTRONIC)

    def test_positive_is_coding(self):
        self.assertIs(decide(1e-12), ClassificationLabel.CODING)

    def test_zero_is_undetermined(self):
        self.assertIs(decide(0.0), ClassificationLabel.UNDETERMINED)
        self.assertIs(decide(-0.0), ClassificationLabel.UNDETERMINED)

    def test_nan_is_error(self):
        self.assertIs(decide(math.nan), ClassificationLabel.ERROR)


class TestScenarios(unittest.TestCase):
    """Reference scenarios for the classifier."""

    def test_no_shared_hexamer_is_undetermined(self):
        coding = build_frequency_table({"c": "AAAAAAAAAAAA"})
        intronic = build_frequency_table({"i": "TTTTTTTTTTTT"})
        unknown = SequenceCollection.from_sequences({"u": "AAAAAAAAAAAA"})

        with self.assertLogs('hexamer_classifier.core.classifier', level='WARNING') as logs:
            [result] = classify(unknown, coding, intronic)

        self.assertIs(result.label, ClassificationLabel.UNDETERMINED)
        self.assertEqual(result.score, 0)
        self.assertEqual(result.n_hexamers, 3)
        self.assertEqual(result.n_scored, 0)
        self.assertEqual(len(logs.output), 3)
        self.assertIn("Unknown hexamer AAAAAA. Use a better trainer", logs.output[0])

    def test_higher_coding_frequency_is_coding(self):
        unknown = {"u": "AAAAAA"}
        [result] = classify(unknown, table({"AAAAAA": 0.8}), table({"AAAAAA": 0.2}))

        self.assertIs(result.label, ClassificationLabel.CODING)
        self.assertAlmostEqual(result.score, 2.0)

    def test_higher_intronic_frequency_is_intronic(self):
        unknown = {"u": "AAAAAA"}
        [result] = classify(unknown, table({"AAAAAA": 0.2}), table({"AAAAAA": 0.8}))

        self.assertIs(result.label, ClassificationLabel.INTRONIC)
        self.assertAlmostEqual(result.score, -2.0)


class TestHexamerClassifier(unittest.TestCase):
    """Test scoring details."""

    def setUp(self):
        self.coding = table({"AAACCC": 0.5, "CCCGGG": 0.25, "GGGTTT": 0.25})
        self.intronic = table({"AAACCC": 0.125, "CCCGGG": 0.5, "TTTAAA": 0.375})
        self.classifier = HexamerClassifier(self.coding, self.intronic)

    def test_unknown_windows_count_in_normalization(self):
        # AAACCC: log2(4) = 2, CCCGGG: log2(0.5) = -1, GGGTTT missing from intronic
        with self.assertLogs('hexamer_classifier.core.classifier', level='WARNING'):
            score, n_hexamers, n_scored = self.classifier.score_sequence("AAACCCGGGTTT")

        self.assertEqual(n_hexamers, 3)
        self.assertEqual(n_scored, 2)
        self.assertAlmostEqual(score, 1 / 3)

    def test_unknown_warning_can_be_silenced(self):
        quiet = HexamerClassifier(self.coding, self.intronic,
                                  ClassifierConfig(warn_unknown_hexamers=False))
        with mock.patch.object(classifier_module.logger, 'warning') as warning:
            quiet.score_sequence("AAACCCGGGTTT")
        warning.assert_not_called()

    def test_short_sequence_raises_scoring_error(self):
        with self.assertRaises(ScoringError):
            self.classifier.score_sequence("AAAC", "short")

    def test_short_sequence_classified_as_error(self):
        with self.assertLogs('hexamer_classifier.core.classifier', level='ERROR') as logs:
            results = self.classifier.classify({"tiny": "ACG", "ok": "AAACCC"})

        self.assertEqual([r.label for r in results],
                         [ClassificationLabel.ERROR, ClassificationLabel.CODING])
        self.assertIsNone(results[0].score)
        self.assertIn("Error in tiny", logs.output[0])

    def test_nan_score_classified_as_error(self):
        with mock.patch.object(HexamerClassifier, 'score_sequence', return_value=(math.nan, 1, 1)):
            with self.assertLogs('hexamer_classifier.core.classifier', level='ERROR'):
                result = self.classifier.classify_sequence("u", "AAACCC")

        self.assertIs(result.label, ClassificationLabel.ERROR)

    def test_results_follow_collection_order(self):
        unknown = SequenceCollection.from_sequences(
            {"z": "AAACCC", "a": "CCCGGG", "m": "AAACCCGGG"})
        results = self.classifier.classify(unknown)
        self.assertEqual([r.identifier for r in results], ["z", "a", "m"])

    def test_swapping_tables_negates_scores(self):
        unknown = SequenceCollection.from_sequences(
            {"s1": "AAACCC", "s2": "CCCGGG", "s3": "AAACCCGGGTTTAAA"})
        swapped = HexamerClassifier(self.intronic, self.coding,
                                    ClassifierConfig(warn_unknown_hexamers=False))
        self.classifier.config = ClassifierConfig(warn_unknown_hexamers=False)

        for original, reverse in zip(self.classifier.classify(unknown), swapped.classify(unknown)):
            self.assertAlmostEqual(reverse.score, -original.score)
            if original.label is ClassificationLabel.CODING:
                self.assertIs(reverse.label, ClassificationLabel.INTRONIC)
            elif original.label is ClassificationLabel.INTRONIC:
                self.assertIs(reverse.label, ClassificationLabel.CODING)

    def test_empty_tables_leave_everything_undetermined(self):
        empty = HexamerFrequencyTable()
        classifier = HexamerClassifier(empty, empty, ClassifierConfig(warn_unknown_hexamers=False))
        [result] = classifier.classify({"u": "ACGTACGTACGT"})
        self.assertIs(result.label, ClassificationLabel.UNDETERMINED)


if __name__ == '__main__':
    unittest.main()
