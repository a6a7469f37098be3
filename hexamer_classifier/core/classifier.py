#!/usr/bin/env python3

"""
Log-odds classification of unknown sequences against two hexamer models.
"""

import logging
import math
from typing import List, Mapping, Optional, Tuple

from .config import ClassifierConfig
from .data_structures import (
    ClassificationLabel, ClassificationResult, HexamerFrequencyTable,
    SequenceRecord, compact_identifier
)
from .exceptions import ScoringError
from .profiler import iter_hexamers

logger = logging.getLogger(__name__)


def log2(value: float) -> float:
    """Calculate the base-2 logarithm of a number."""
    return math.log2(value)


def decide(hexamer_score: float) -> ClassificationLabel:
    """Map a length-normalized score to a label, with no tolerance around zero."""
    if hexamer_score < 0:
        return ClassificationLabel.INTRONIC
    elif hexamer_score > 0:
        return ClassificationLabel.CODING
    elif hexamer_score == 0:
        return ClassificationLabel.UNDETERMINED
    # NaN compares false against everything
    return ClassificationLabel.ERROR


class HexamerClassifier:
    """Score sequences by their mean coding vs. intronic hexamer log-odds."""

    def __init__(self, coding_table: HexamerFrequencyTable,
                 intronic_table: HexamerFrequencyTable,
                 config: Optional[ClassifierConfig] = None):
        self.coding_table = coding_table
        self.intronic_table = intronic_table
        self.config = config or ClassifierConfig()

    def score_sequence(self, sequence: str, record_id: str = "") -> Tuple[float, int, int]:
        """
        Compute the length-normalized log-odds score of a sequence.

        Windows missing from either table are skipped but still count in the
        normalizing window total.

        Returns:
            (hexamer_score, n_hexamers, n_scored)

        Raises:
            ScoringError: if the sequence holds no complete window
        """
        score = 0.0
        n_hexamers = 0
        n_scored = 0

        for hexamer in iter_hexamers(sequence, self.config.hexamer_size, self.config.step_size):
            n_hexamers += 1
            coding_freq = self.coding_table.frequency(hexamer)
            intronic_freq = self.intronic_table.frequency(hexamer)

            if coding_freq is not None and intronic_freq is not None:
                score += log2(coding_freq / intronic_freq)
                n_scored += 1
            elif self.config.warn_unknown_hexamers:
                logger.warning(f"Unknown hexamer {hexamer}. Use a better trainer")

        if n_hexamers == 0:
            raise ScoringError("sequence is shorter than one hexamer", record_id)

        return score / n_hexamers, n_hexamers, n_scored

    def classify_sequence(self, identifier: str, sequence: str) -> ClassificationResult:
        """Classify one sequence; scoring failures become an ERROR result."""
        record_id = compact_identifier(identifier)
        try:
            hexamer_score, n_hexamers, n_scored = self.score_sequence(sequence, record_id)
        except ScoringError as e:
            logger.error(f"Error in {identifier}: {e}")
            return ClassificationResult(identifier, ClassificationLabel.ERROR)

        label = decide(hexamer_score)
        if label is ClassificationLabel.ERROR:
            logger.error(f"Error in {identifier}: score is not a number")
            return ClassificationResult(identifier, label, n_hexamers=n_hexamers, n_scored=n_scored)

        logger.debug(f"{record_id} scored {hexamer_score:.6f} over {n_hexamers} hexamers "
                     f"({n_scored} known to both models)")
        return ClassificationResult(identifier, label, hexamer_score, n_hexamers, n_scored)

    def classify(self, collection: Mapping) -> List[ClassificationResult]:
        """Classify every sequence of a collection in its iteration order."""
        results = []
        for identifier, record in collection.items():
            sequence = record.sequence if isinstance(record, SequenceRecord) else record
            results.append(self.classify_sequence(identifier, sequence))
        return results


def classify(unknown_collection: Mapping,
             coding_table: HexamerFrequencyTable,
             intronic_table: HexamerFrequencyTable,
             config: Optional[ClassifierConfig] = None) -> List[ClassificationResult]:
    """Classify each unknown sequence as coding, intronic or undetermined."""
    return HexamerClassifier(coding_table, intronic_table, config).classify(unknown_collection)
