#!/usr/bin/env python3

"""
Hexamer frequency profiling of reference sequence collections.

Windows are anchored on codon boundaries: a hexamer starts at every third
base, so consecutive windows share one codon.
"""

import logging
from collections import Counter
from typing import Iterator, Mapping, Optional

from .config import ClassifierConfig
from .data_structures import HexamerFrequencyTable, SequenceRecord, compact_identifier

logger = logging.getLogger(__name__)


def iter_hexamers(sequence: str, size: int = 6, step: int = 3) -> Iterator[str]:
    """
    Yield the in-frame windows of a sequence.

    Scanning stops at the first window that would run past the end of the
    sequence; partial windows are never padded.

    >>> list(iter_hexamers("ACGTACGTAC"))
    ['ACGTAC', 'TACGTA']
    """
    for start in range(0, len(sequence), step):
        window = sequence[start:start + size]
        if len(window) < size:
            break
        yield window


def count_hexamers(sequence: str, counter: Counter, size: int = 6, step: int = 3) -> int:
    """Add the windows of one sequence to counter and return how many were added."""
    windows = 0
    for hexamer in iter_hexamers(sequence, size, step):
        counter[hexamer] += 1
        windows += 1
    return windows


class HexamerProfiler:
    """Build hexamer frequency tables from sequence collections."""

    def __init__(self, config: Optional[ClassifierConfig] = None):
        self.config = config or ClassifierConfig()

    def build_frequency_table(self, collection: Mapping) -> HexamerFrequencyTable:
        """
        Count in-frame hexamers over every record and normalize by the grand total.

        The denominator is shared by the whole collection, so longer and more
        numerous sequences weigh more than short ones.

        Args:
            collection: identifier -> SequenceRecord (or plain sequence string)

        Returns:
            HexamerFrequencyTable: empty with a zero total when no window fits
        """
        counter: Counter = Counter()
        total = 0

        for identifier, record in collection.items():
            sequence = record.sequence if isinstance(record, SequenceRecord) else record
            total += count_hexamers(sequence, counter,
                                    self.config.hexamer_size, self.config.step_size)
            logger.debug(f"{compact_identifier(identifier)}'s hexamer counted")

        source = getattr(collection, 'source', '') or 'collection'
        if total == 0:
            logger.warning(f"No complete hexamer found in {source}, frequency table is empty")
        else:
            logger.info(f"Counted {total} hexamers ({len(counter)} distinct) in {source}")

        return HexamerFrequencyTable(counter, total)


def build_frequency_table(collection: Mapping,
                          config: Optional[ClassifierConfig] = None) -> HexamerFrequencyTable:
    """Build the hexamer frequency table of a sequence collection."""
    return HexamerProfiler(config).build_frequency_table(collection)
