#!/usr/bin/env python3

"""
Core data structures for the hexamer classifier.

Defines sequence records and collections, hexamer frequency tables and
classification results.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterator, Optional


IUPAC_DNA_ALPHABET = frozenset("ACGTRYSWKMBDHVN.")
WHITESPACE = re.compile(r"\s+")


def compact_identifier(header: str) -> str:
    """Return the first whitespace-delimited token of a header line.

    A header that starts with whitespace has an empty first token.

    >>> compact_identifier("NM_001103386.01.e12_cds11 chrX 23878 11577 11716")
    'NM_001103386.01.e12_cds11'
    >>> compact_identifier(" chrX 23878")
    ''
    """
    return WHITESPACE.split(header, maxsplit=1)[0]


@dataclass(frozen=True)
class SequenceRecord:
    """A validated nucleotide sequence keyed by its raw header."""
    identifier: str
    sequence: str

    def __post_init__(self):
        """Validate record data after initialization."""
        if not IUPAC_DNA_ALPHABET.issuperset(self.sequence):
            raise ValueError(f"Sequence of {self.compact_id} is not uppercase IUPAC DNA")

    @property
    def compact_id(self) -> str:
        """Short display name used in diagnostics."""
        return compact_identifier(self.identifier)

    @property
    def length(self) -> int:
        return len(self.sequence)


class SequenceCollection(Mapping):
    """Read-only mapping of identifier to SequenceRecord in file order."""

    def __init__(self, records: Optional[Dict[str, SequenceRecord]] = None, source: str = ""):
        self._records: Dict[str, SequenceRecord] = dict(records or {})
        self.source = source

    @classmethod
    def from_sequences(cls, sequences: Dict[str, str], source: str = "") -> 'SequenceCollection':
        """Build a collection from a plain identifier -> sequence mapping."""
        return cls(
            {identifier: SequenceRecord(identifier, seq.upper()) for identifier, seq in sequences.items()},
            source=source,
        )

    def __getitem__(self, identifier: str) -> SequenceRecord:
        return self._records[identifier]

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"SequenceCollection(source={self.source!r}, records={len(self)})"

    def sequences(self) -> Dict[str, str]:
        """Get identifier -> sequence as a plain dict."""
        return {identifier: record.sequence for identifier, record in self._records.items()}

    @property
    def total_length(self) -> int:
        return sum(record.length for record in self._records.values())


@dataclass(frozen=True, eq=False)
class HexamerFrequencyTable:
    """Relative frequencies of observed hexamers across one collection."""
    counts: Mapping = field(default_factory=dict)
    total_windows: int = 0

    def __post_init__(self):
        """Freeze counts and derive frequencies."""
        counts = MappingProxyType(dict(self.counts))
        if any(count < 1 for count in counts.values()):
            raise ValueError("Hexamer counts must be positive")
        if sum(counts.values()) != self.total_windows:
            raise ValueError(
                f"Hexamer counts sum to {sum(counts.values())}, expected {self.total_windows}"
            )
        object.__setattr__(self, 'counts', counts)

        # An empty table has no denominator and no frequencies
        if self.total_windows:
            frequencies = {hexamer: count / self.total_windows for hexamer, count in counts.items()}
        else:
            frequencies = {}
        object.__setattr__(self, '_frequencies', MappingProxyType(frequencies))

    @classmethod
    def from_frequencies(cls, frequencies: Dict[str, float]) -> 'HexamerFrequencyTable':
        """Build a table directly from known frequencies, bypassing counting.

        Raises:
            ValueError: if a frequency is outside (0, 1]; log-odds are undefined at 0
        """
        for hexamer, value in frequencies.items():
            if not 0 < value <= 1:
                raise ValueError(f"Frequency of {hexamer} must be in (0, 1], got {value}")

        table = cls()
        object.__setattr__(table, '_frequencies', MappingProxyType(dict(frequencies)))
        return table

    def __eq__(self, other):
        if not isinstance(other, HexamerFrequencyTable):
            return NotImplemented
        return (self.total_windows == other.total_windows
                and self.counts == other.counts
                and self._frequencies == other._frequencies)

    __hash__ = None

    @property
    def frequencies(self) -> Mapping:
        return self._frequencies

    def frequency(self, hexamer: str) -> Optional[float]:
        """Get the frequency of a hexamer, or None when it was never observed."""
        return self._frequencies.get(hexamer)

    def __contains__(self, hexamer: str) -> bool:
        return hexamer in self._frequencies

    def __len__(self) -> int:
        return len(self._frequencies)

    @property
    def is_empty(self) -> bool:
        return not self._frequencies


class ClassificationLabel(Enum):
    """Outcome of scoring one unknown sequence."""
    CODING = "Coding"
    INTRONIC = "Intronic"
    UNDETERMINED = "Undetermined"
    ERROR = "Error"


@dataclass(frozen=True)
class ClassificationResult:
    """Label assigned to one unknown sequence."""
    identifier: str
    label: ClassificationLabel
    score: Optional[float] = None
    n_hexamers: int = 0
    n_scored: int = 0

    @property
    def compact_id(self) -> str:
        return compact_identifier(self.identifier)

    @property
    def n_unknown(self) -> int:
        """Windows skipped because a reference table lacked them."""
        return self.n_hexamers - self.n_scored

    def output_line(self, show_score: bool = False) -> Optional[str]:
        """Render the standard-output line, or None for errors."""
        if self.label is ClassificationLabel.ERROR:
            return None

        if self.label is ClassificationLabel.UNDETERMINED:
            line = f"Unable to decide if {self.identifier} is or not a coding sequence"
        else:
            line = f"{self.label.value} {self.identifier}"

        if show_score:
            line += f"\t{self.score:.6f}"
        return line + "\n"
