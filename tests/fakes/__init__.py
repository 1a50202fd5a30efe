"""Exports for test fakes."""

from .candidate_source import FakeCandidateSource
from .clock import FakeClock
from .filesystem import InMemoryFileSystem

__all__ = [
    "FakeCandidateSource",
    "FakeClock",
    "InMemoryFileSystem",
]
