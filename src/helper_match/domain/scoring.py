"""Scoring engine: run every applicable evaluator for one (requirement, candidate) pair.

Usage example:
    from datetime import date

    from helper_match.domain.records import CandidateRecord, Requirement
    from helper_match.domain.scoring import score_candidate

    report = score_candidate(
        CandidateRecord(code="H001", nationality="Indonesia", passport_status="ready"),
        Requirement(nationality="Indo only", start_date="ASAP"),
        today=date(2026, 10, 19),
    )
    assert report.total_score == 3
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, date, datetime

from ..config import MatchConfig
from ..observability import get_logger
from ..types import MatchReportDict
from .criteria import (
    Criterion,
    CriterionStatus,
    Evaluator,
    evaluate_additional_languages,
    evaluate_age,
    evaluate_care_bands,
    evaluate_cooking,
    evaluate_eat_pork,
    evaluate_education,
    evaluate_elderly_care,
    evaluate_english_level,
    evaluate_handle_pork,
    evaluate_height,
    evaluate_helper_type,
    evaluate_household_chores,
    evaluate_jobscope,
    evaluate_marital_status,
    evaluate_nationality,
    evaluate_off_days,
    evaluate_passport_readiness,
    evaluate_pets,
    evaluate_preference_remarks,
    evaluate_religion,
    evaluate_salary,
    evaluate_weight,
    evaluate_years_of_experience,
)
from .profile import RequirementProfile, prepare_requirement
from .records import CandidateRecord, Requirement

# Fixed evaluation order; a report's criteria always appear in this order
EVALUATORS: tuple[Evaluator, ...] = (
    evaluate_nationality,
    evaluate_helper_type,
    evaluate_years_of_experience,
    evaluate_english_level,
    evaluate_additional_languages,
    evaluate_height,
    evaluate_weight,
    evaluate_age,
    evaluate_salary,
    evaluate_care_bands,
    evaluate_elderly_care,
    evaluate_cooking,
    evaluate_household_chores,
    evaluate_religion,
    evaluate_education,
    evaluate_marital_status,
    evaluate_eat_pork,
    evaluate_handle_pork,
    evaluate_off_days,
    evaluate_passport_readiness,
    evaluate_jobscope,
    evaluate_pets,
    evaluate_preference_remarks,
)

logger = get_logger("helper_match.scoring")


@dataclass(frozen=True)
class MatchReport:
    """Scored, explained comparison of one candidate against one requirement."""

    candidate: CandidateRecord
    criteria: tuple[Criterion, ...]

    @property
    def total_score(self) -> int:
        """Sum of weights of matched and partially matched criteria."""
        return sum(c.weight for c in self.criteria if c.contributes)

    @property
    def max_score(self) -> int:
        return sum(c.weight for c in self.criteria)

    def count(self, status: CriterionStatus) -> int:
        return sum(1 for c in self.criteria if c.status is status)

    def to_dict(self) -> MatchReportDict:
        return {
            "candidate": {"code": self.candidate.code, "name": self.candidate.name},
            "total_score": self.total_score,
            "max_score": self.max_score,
            "criteria": [c.to_dict() for c in self.criteria],
        }


def today_utc() -> date:
    return datetime.now(UTC).date()


def score_prepared(
    profile: RequirementProfile, candidate: CandidateRecord, config: MatchConfig
) -> MatchReport:
    """Score a candidate against an already prepared requirement."""
    criteria: list[Criterion] = []
    for evaluator in EVALUATORS:
        criteria.extend(evaluator(profile, candidate, config))
    for criterion in criteria:
        logger.debug(
            "%s %s: %s (weight %s) %s",
            candidate.code or candidate.name,
            criterion.name,
            criterion.status.value,
            criterion.weight,
            criterion.reason,
        )
    return MatchReport(candidate=candidate, criteria=tuple(criteria))


def score_candidate(
    candidate: CandidateRecord,
    requirement: Requirement,
    *,
    config: MatchConfig | None = None,
    today: date | None = None,
) -> MatchReport:
    """Score one candidate against one requirement.

    Args:
        candidate: Helper profile.
        requirement: Employer requirement; absent fields omit their criteria.
        config: Thresholds and day boundaries (defaults when omitted).
        today: Reference date for start-date text (UTC today when omitted).

    Returns:
        A report whose criteria follow ``EVALUATORS`` order.
    """
    config = config or MatchConfig()
    profile = prepare_requirement(requirement, today=today or today_utc(), config=config)
    return score_prepared(profile, candidate, config)
