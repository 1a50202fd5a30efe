"""Rank a candidate pool against one requirement.

Scoring is an independent map over candidates followed by a stable sort, so the pool
may be scored on a thread pool without locking: the prepared requirement and the
config are immutable.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from datetime import date
from functools import partial

from ..config import MatchConfig
from ..observability import get_logger
from .profile import prepare_requirement
from .records import CandidateRecord, Requirement
from .scoring import MatchReport, score_prepared, today_utc

logger = get_logger("helper_match.ranking")


def _usable_pool(candidates: object) -> list[CandidateRecord]:
    if isinstance(candidates, (str, bytes, Mapping)) or not isinstance(candidates, Sequence):
        logger.warning(
            "Candidate pool is not a sequence (%s); returning no results",
            type(candidates).__name__,
        )
        return []
    pool: list[CandidateRecord] = []
    for index, item in enumerate(candidates):
        if isinstance(item, CandidateRecord):
            pool.append(item)
        else:
            logger.warning(
                "Skipping malformed candidate at position %s (%s)", index, type(item).__name__
            )
    return pool


def rank_candidates(
    candidates: Sequence[CandidateRecord],
    requirement: Requirement,
    *,
    config: MatchConfig | None = None,
    today: date | None = None,
) -> list[MatchReport]:
    """Score every candidate and return reports by descending total score.

    Ties keep input order. Candidates whose code appears in the requirement's
    excluded codes are dropped before scoring. A pool that is not a sequence yields an
    empty list, and non-record entries are skipped.

    Args:
        candidates: Candidate pool.
        requirement: Employer requirement.
        config: Thresholds, worker count and optional top-N truncation.
        today: Reference date for start-date text (UTC today when omitted).

    Returns:
        Ranked reports, truncated to ``config.top_n`` when set.
    """
    config = config or MatchConfig()
    pool = _usable_pool(candidates)

    excluded = {code.strip().lower() for code in requirement.excluded_codes if code.strip()}
    eligible = [c for c in pool if c.code.strip().lower() not in excluded] if excluded else pool
    excluded_count = len(pool) - len(eligible)

    profile = prepare_requirement(requirement, today=today or today_utc(), config=config)
    score = partial(score_prepared, profile, config=config)

    if config.max_workers > 1 and len(eligible) > 1:
        with ThreadPoolExecutor(max_workers=config.max_workers) as executor:
            reports = list(executor.map(score, eligible))
    else:
        reports = [score(candidate) for candidate in eligible]

    # sorted() is stable: equal scores keep input order
    ranked = sorted(reports, key=lambda report: report.total_score, reverse=True)
    if config.top_n is not None:
        ranked = ranked[: config.top_n]

    logger.info(
        "Ranked %s candidates (pool %s, excluded %s)",
        len(ranked),
        len(pool),
        excluded_count,
    )
    return ranked
