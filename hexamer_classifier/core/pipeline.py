#!/usr/bin/env python3

"""
Main pipeline class for hexamer-based sequence classification.

Reads the unknown set, profiles both reference sets and writes one
classification line per unknown sequence.
"""

import sys
import logging
from collections import Counter
from typing import List, Optional, TextIO

from .config import ClassifierConfig
from .data_structures import ClassificationResult, HexamerFrequencyTable, SequenceCollection
from .parsers import read_records
from .profiler import HexamerProfiler
from .classifier import HexamerClassifier
from ..utils.performance_monitor import PerformanceMonitor

logger = logging.getLogger(__name__)


class HexamerPipeline:
    """Main pipeline class that coordinates all processing phases."""

    def __init__(self, config: Optional[ClassifierConfig] = None):
        self.config = config or ClassifierConfig()
        self.monitor = PerformanceMonitor(memory_limit_mb=self.config.memory_limit_mb,
                                          enabled=self.config.enable_memory_monitoring)
        self.profiler = HexamerProfiler(self.config)

        self.unknown: Optional[SequenceCollection] = None
        self.intronic_table: Optional[HexamerFrequencyTable] = None
        self.coding_table: Optional[HexamerFrequencyTable] = None
        self.results: List[ClassificationResult] = []

    def run(self, intronic_file: str, coding_file: str, unknown_file: str,
            output: Optional[TextIO] = None) -> List[ClassificationResult]:
        """
        Run the complete classification.

        Args:
            intronic_file: Reference intronic sequences
            coding_file: Reference coding sequences
            unknown_file: Sequences to classify
            output: Stream receiving classification lines (default: stdout)

        Returns:
            One ClassificationResult per accepted unknown sequence

        Raises:
            SequenceFileError: if any input file cannot be read
        """
        output = output or sys.stdout
        logger.info("Starting analysis")

        # The unknown set is read once up front, before either reference
        with self.monitor.phase_context("read_unknown") as metrics:
            self.unknown = read_records(unknown_file, self.config)
            metrics.operations_count = len(self.unknown)

        self.intronic_table = self._profile("profile_intronic", intronic_file)
        self.coding_table = self._profile("profile_coding", coding_file)

        with self.monitor.phase_context("classification") as metrics:
            classifier = HexamerClassifier(self.coding_table, self.intronic_table, self.config)
            self.results = classifier.classify(self.unknown)
            metrics.operations_count = len(self.results)

        self._write_results(output)
        self._log_summary()
        self.monitor.log_performance_report()

        logger.info("Ending analysis")
        return self.results

    def _profile(self, phase_name: str, reference_file: str) -> HexamerFrequencyTable:
        """Read a reference file and build its frequency table."""
        with self.monitor.phase_context(phase_name) as metrics:
            collection = read_records(reference_file, self.config)
            table = self.profiler.build_frequency_table(collection)
            metrics.operations_count = len(collection)
        return table

    def _write_results(self, output: TextIO) -> None:
        for result in self.results:
            line = result.output_line(show_score=self.config.show_scores)
            if line is not None:
                output.write(line)
        output.flush()

    def _log_summary(self) -> None:
        labels = Counter(result.label.value for result in self.results)
        summary = ", ".join(f"{label}: {count}" for label, count in sorted(labels.items()))
        logger.info(f"Classified {len(self.results)} sequences ({summary or 'none'})")
