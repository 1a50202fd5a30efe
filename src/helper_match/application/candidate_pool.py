"""Caller-owned cache of the adapted candidate pool.

Usage example:
    from pathlib import Path

    from helper_match.application.candidate_pool import CandidatePoolCache
    from helper_match.infrastructure import CsvCandidateSource, LocalFileSystem

    source = CsvCandidateSource(Path("data/helpers.csv"), LocalFileSystem())
    cache = CandidatePoolCache(source, ttl_seconds=300)
    pool = cache.get()
    cache.invalidate()
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field

from ..domain.records import CandidateRecord
from ..infrastructure.validation import IncomingDataError
from ..observability import get_logger
from ..protocols import CandidateSource
from .adapters import candidate_from_row

logger = get_logger("helper_match.candidate_pool")


def load_candidates(source: CandidateSource) -> list[CandidateRecord]:
    """Adapt every row of ``source``; rows that fail validation are skipped and logged."""
    candidates: list[CandidateRecord] = []
    for index, row in enumerate(source.load_rows()):
        try:
            candidates.append(candidate_from_row(row))
        except IncomingDataError as exc:
            logger.warning("Skipping candidate row %s from %s: %s", index, source.label, exc)
    return candidates


@dataclass
class CandidatePoolCache:
    """Candidate pool loaded from a source and reused until the TTL expires.

    The cache holds no process-wide state: whoever creates it owns it and decides when
    to ``invalidate()``.
    """

    source: CandidateSource
    ttl_seconds: float = 300.0
    clock: Callable[[], float] = time.monotonic
    _candidates: list[CandidateRecord] | None = field(default=None, init=False)
    _loaded_at: float = field(default=0.0, init=False)

    def get(self) -> list[CandidateRecord]:
        """Return the cached pool, reloading it when empty or expired."""
        now = self.clock()
        if self._candidates is None or now - self._loaded_at >= self.ttl_seconds:
            self._candidates = load_candidates(self.source)
            self._loaded_at = now
            logger.info("Loaded %s candidates from %s", len(self._candidates), self.source.label)
        return list(self._candidates)

    def invalidate(self) -> None:
        """Drop the cached pool so the next ``get()`` reloads from the source."""
        self._candidates = None
