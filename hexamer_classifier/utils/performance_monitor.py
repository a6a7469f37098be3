#!/usr/bin/env python3

"""
Performance monitoring for the hexamer classifier.

Tracks elapsed time, processed records and resident memory for every
pipeline phase.
"""

import time
import logging
from dataclasses import dataclass
from typing import Optional, Dict, Any
from contextlib import contextmanager

import psutil

logger = logging.getLogger(__name__)


@dataclass
class PhaseMetrics:
    """Container for the metrics of one phase."""
    start_time: float
    end_time: Optional[float] = None
    peak_memory_mb: float = 0.0
    current_memory_mb: float = 0.0
    operations_count: int = 0
    phase_name: str = ""

    @property
    def elapsed_time(self) -> float:
        """Get elapsed time in seconds."""
        if self.end_time is None:
            return time.time() - self.start_time
        return self.end_time - self.start_time

    @property
    def operations_per_second(self) -> float:
        elapsed = self.elapsed_time
        if elapsed > 0 and self.operations_count > 0:
            return self.operations_count / elapsed
        return 0.0


class PerformanceMonitor:
    """Per-phase timing and memory monitoring backed by psutil."""

    def __init__(self, memory_limit_mb: int = 4096, enabled: bool = True):
        self.memory_limit_mb = memory_limit_mb
        self.enabled = enabled
        self.start_time = time.time()
        self.phase_metrics: Dict[str, PhaseMetrics] = {}
        self.current_phase: Optional[str] = None
        self.limit_exceeded = False
        self.process = psutil.Process() if enabled else None

    def get_memory_usage(self) -> float:
        """Get current resident memory in MB, 0.0 when monitoring is disabled."""
        if not self.process:
            return 0.0

        try:
            memory_mb = self.process.memory_info().rss / 1024 / 1024
        except psutil.Error as e:
            logger.warning(f"Error getting memory usage: {e}")
            return 0.0

        if self.current_phase in self.phase_metrics:
            metrics = self.phase_metrics[self.current_phase]
            metrics.current_memory_mb = memory_mb
            metrics.peak_memory_mb = max(metrics.peak_memory_mb, memory_mb)

        return memory_mb

    def check_memory_limit(self) -> bool:
        """Warn when memory usage exceeds the limit; return whether it is within it."""
        current_memory = self.get_memory_usage()

        if current_memory > self.memory_limit_mb:
            logger.warning(f"Memory usage exceeded limit: {current_memory:.1f}MB > {self.memory_limit_mb}MB")
            self.limit_exceeded = True
            return False

        return True

    def start_phase(self, phase_name: str) -> None:
        """Start monitoring a processing phase."""
        if self.current_phase:
            self.end_phase()

        self.current_phase = phase_name
        self.phase_metrics[phase_name] = PhaseMetrics(start_time=time.time(), phase_name=phase_name)
        self.get_memory_usage()

        logger.debug(f"Started phase: {phase_name}")

    def end_phase(self) -> Optional[PhaseMetrics]:
        """End the current phase and return its metrics."""
        if not self.current_phase:
            return None

        self.get_memory_usage()
        metrics = self.phase_metrics[self.current_phase]
        metrics.end_time = time.time()

        logger.debug(f"Completed phase {self.current_phase} in {metrics.elapsed_time:.2f}s "
                     f"(peak memory: {metrics.peak_memory_mb:.1f}MB)")

        self.current_phase = None
        return metrics

    @contextmanager
    def phase_context(self, phase_name: str):
        """Monitor a phase and check the memory limit when it finishes."""
        self.start_phase(phase_name)
        try:
            yield self.phase_metrics[phase_name]
            if self.enabled:
                self.check_memory_limit()
        finally:
            self.end_phase()

    def get_total_elapsed_time(self) -> float:
        return time.time() - self.start_time

    def get_peak_memory(self) -> float:
        """Get peak memory usage across all phases."""
        if not self.phase_metrics:
            return self.get_memory_usage()

        return max(metrics.peak_memory_mb for metrics in self.phase_metrics.values())

    def get_performance_summary(self) -> Dict[str, Any]:
        """Get comprehensive performance summary."""
        summary = {
            "total_elapsed_time": self.get_total_elapsed_time(),
            "peak_memory_mb": self.get_peak_memory(),
            "memory_limit_mb": self.memory_limit_mb,
            "phases": {}
        }

        for phase_name, metrics in self.phase_metrics.items():
            summary["phases"][phase_name] = {
                "elapsed_time": metrics.elapsed_time,
                "operations_count": metrics.operations_count,
                "operations_per_second": metrics.operations_per_second,
                "peak_memory_mb": metrics.peak_memory_mb
            }

        return summary

    def log_performance_report(self) -> None:
        """Log the performance summary at debug level."""
        summary = self.get_performance_summary()

        logger.debug(f"Total time: {summary['total_elapsed_time']:.2f} seconds")
        logger.debug(f"Peak memory: {summary['peak_memory_mb']:.1f} MB "
                     f"(limit {summary['memory_limit_mb']} MB)")

        for phase_name, phase_data in summary['phases'].items():
            logger.debug(f"  {phase_name}: {phase_data['elapsed_time']:.2f}s "
                         f"({phase_data['operations_count']} ops, "
                         f"{phase_data['operations_per_second']:.1f} ops/s, "
                         f"{phase_data['peak_memory_mb']:.1f}MB)")
