#!/usr/bin/env python3

"""
Custom exceptions for the hexamer classifier.

Only file errors abort a run, and configuration errors are raised before one
starts. Record rejections and scoring errors are recovered per record by the
component that raises them.
"""

class HexamerClassifierError(Exception):
    """Base exception for all classifier-related errors."""
    pass


class SequenceFileError(HexamerClassifierError, IOError):
    """A sequence file could not be opened or read."""

    def __init__(self, message: str, filename: str = ""):
        super().__init__(message)
        self.filename = filename

    def __str__(self):
        if self.filename:
            return f"Sequence file error in {self.filename}: {self.args[0]}"
        return self.args[0]


class RecordRejectedError(HexamerClassifierError):
    """A sequence record failed alphabet or length validation."""

    def __init__(self, message: str, record_id: str = "", reason: str = ""):
        super().__init__(message)
        self.record_id = record_id
        self.reason = reason

    def __str__(self):
        if self.record_id:
            return f"Record {self.record_id} rejected: {super().__str__()}"
        return super().__str__()


class ScoringError(HexamerClassifierError):
    """A sequence could not be given a numeric log-odds score."""

    def __init__(self, message: str, record_id: str = ""):
        super().__init__(message)
        self.record_id = record_id

    def __str__(self):
        if self.record_id:
            return f"Scoring error for {self.record_id}: {super().__str__()}"
        return super().__str__()


class ConfigurationError(HexamerClassifierError):
    """Error in classifier configuration."""
    pass

