"""Concrete infrastructure implementations."""

from .candidate_source import CsvCandidateSource
from .filesystem import LocalFileSystem
from .validation import IncomingDataError, validate_as, validate_json_as

__all__ = [
    "CsvCandidateSource",
    "IncomingDataError",
    "LocalFileSystem",
    "validate_as",
    "validate_json_as",
]
