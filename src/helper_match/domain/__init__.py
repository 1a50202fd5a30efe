"""Pure matching engine: records, rule tables, extraction, evaluators, scoring and ranking."""

from .criteria import Criterion, CriterionStatus
from .ranking import rank_candidates
from .records import CandidateRecord, Requirement
from .scoring import MatchReport, score_candidate

__all__ = [
    "CandidateRecord",
    "Criterion",
    "CriterionStatus",
    "MatchReport",
    "Requirement",
    "rank_candidates",
    "score_candidate",
]
