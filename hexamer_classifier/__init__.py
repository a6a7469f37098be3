#!/usr/bin/env python3

"""
Hexamer Classifier

Decides whether nucleotide sequences are coding or intronic by comparing the
log-odds of their in-frame hexamers under frequency models trained on a
coding and an intronic reference set.

Modules:
- core: Data structures, exceptions, configuration, reader, profiler, classifier
- utils: Performance monitoring
- tests: Unit test suite
"""

__version__ = "1.0.0"

from .core.data_structures import (
    SequenceRecord, SequenceCollection, HexamerFrequencyTable,
    ClassificationLabel, ClassificationResult
)
from .core.exceptions import (
    HexamerClassifierError, SequenceFileError, RecordRejectedError,
    ScoringError, ConfigurationError
)
from .core.config import ClassifierConfig, load_config
from .core.parsers import read_records
from .core.profiler import build_frequency_table
from .core.classifier import classify
from .core.pipeline import HexamerPipeline

__all__ = [
    # Main pipeline
    'HexamerPipeline',
    # Components
    'read_records', 'build_frequency_table', 'classify',
    # Data structures
    'SequenceRecord', 'SequenceCollection', 'HexamerFrequencyTable',
    'ClassificationLabel', 'ClassificationResult',
    # Exceptions
    'HexamerClassifierError', 'SequenceFileError', 'RecordRejectedError',
    'ScoringError', 'ConfigurationError',
    # Configuration
    'ClassifierConfig', 'load_config'
]
