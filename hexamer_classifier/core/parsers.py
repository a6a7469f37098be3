#!/usr/bin/env python3

"""
File parsers for nucleotide sequence collections.

Records are separated by a '>' marker. Whatever precedes the first marker is
discarded, the first line of every record is its header and the remaining
lines form the sequence body.
"""

import logging
from typing import Dict, List, Optional, Tuple

from .config import ClassifierConfig
from .data_structures import IUPAC_DNA_ALPHABET, SequenceCollection, SequenceRecord, compact_identifier
from .exceptions import RecordRejectedError, SequenceFileError

logger = logging.getLogger(__name__)

RECORD_MARKER = '>'


def split_record(chunk: str) -> Tuple[str, str]:
    """Split a raw record chunk into its header and concatenated sequence body."""
    lines = chunk.split('\n')
    header = lines[0]
    body = ''.join(lines[1:])
    return header, body


def validate_sequence(header: str, body: str, min_length: int = 6) -> str:
    """
    Check a sequence body against the IUPAC DNA alphabet and minimum length.

    Args:
        header: Raw header line, used for the error message
        body: Concatenated sequence lines in any case
        min_length: Shortest acceptable body

    Returns:
        The upper-cased sequence

    Raises:
        RecordRejectedError: if the body has a non-IUPAC symbol or is too short
    """
    record_id = compact_identifier(header)

    # Unicode case mapping folds some letters into IUPAC symbols, so only ASCII is accepted
    if not body.isascii() or not IUPAC_DNA_ALPHABET.issuperset(body.upper()):
        raise RecordRejectedError("does not use the IUPAC code for DNA",
                                  record_id, reason="alphabet")
    if len(body) < min_length:
        raise RecordRejectedError("is shorter than an hexamer",
                                  record_id, reason="length")
    return body.upper()


class RecordReader:
    """Read '>'-delimited sequence collections into validated records."""

    def __init__(self, file_path: str, config: Optional[ClassifierConfig] = None):
        self.file_path = file_path
        self.config = config or ClassifierConfig()
        self.records: Dict[str, SequenceRecord] = {}
        self.rejected: List[RecordRejectedError] = []
        self.records_read = 0

    def read(self) -> SequenceCollection:
        """Parse the whole file and return the accepted records."""
        try:
            with open(self.file_path, 'r', encoding='latin-1') as f:
                content = f.read()
        except FileNotFoundError as e:
            raise SequenceFileError("Unable to open file: not found", self.file_path) from e
        except OSError as e:
            raise SequenceFileError(f"Unable to open file: {e}", self.file_path) from e

        logger.info(f"Reading {self.file_path} fasta file")

        # The first chunk precedes any marker and never holds a record
        for chunk in content.split(RECORD_MARKER)[1:]:
            self._read_chunk(chunk.rstrip('\n'))

        logger.info(f"Just read {self.records_read} FASTA sequences from {self.file_path} "
                    f"({len(self.records)} accepted, {len(self.rejected)} rejected)")
        return SequenceCollection(self.records, source=self.file_path)

    def _read_chunk(self, chunk: str) -> None:
        header, body = split_record(chunk)
        record_id = compact_identifier(header)
        self.records_read += 1
        logger.info(f"Reading sequence {record_id}")

        try:
            sequence = validate_sequence(header, body, self.config.min_sequence_length)
        except RecordRejectedError as e:
            logger.warning(f"{record_id} {e.args[0]}")
            self.rejected.append(e)
            return

        if header in self.records:
            logger.warning(f"Duplicate identifier {record_id}, keeping the last record read")
        self.records[header] = SequenceRecord(header, sequence)


def read_records(path: str, config: Optional[ClassifierConfig] = None) -> SequenceCollection:
    """Read a sequence collection file, dropping records that fail validation."""
    return RecordReader(path, config).read()
