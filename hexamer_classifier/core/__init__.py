#!/usr/bin/env python3

"""
Core module for the hexamer classifier.

Contains data structures, exception types, configuration management and the
reader, profiler and classifier components.
"""

from .data_structures import (
    SequenceRecord, SequenceCollection, HexamerFrequencyTable,
    ClassificationLabel, ClassificationResult
)
from .exceptions import (
    HexamerClassifierError, SequenceFileError, RecordRejectedError,
    ScoringError, ConfigurationError
)
from .config import ClassifierConfig, load_config
from .parsers import RecordReader, read_records
from .profiler import HexamerProfiler, build_frequency_table, iter_hexamers
from .classifier import HexamerClassifier, classify

__all__ = [
    'SequenceRecord', 'SequenceCollection', 'HexamerFrequencyTable',
    'ClassificationLabel', 'ClassificationResult',
    'HexamerClassifierError', 'SequenceFileError', 'RecordRejectedError',
    'ScoringError', 'ConfigurationError',
    'ClassifierConfig', 'load_config',
    'RecordReader', 'read_records',
    'HexamerProfiler', 'build_frequency_table', 'iter_hexamers',
    'HexamerClassifier', 'classify'
]
