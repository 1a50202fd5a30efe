"""Typed data contracts for rows crossing the engine boundary."""

from __future__ import annotations

from typing import TypedDict

# A raw sheet row keyed by column header, before the adapter runs
type RawRow = dict[str, object]


class CriterionDict(TypedDict):
    """Render-ready criterion shape."""

    name: str
    status: str
    weight: int
    reason: str
    value: str


class CandidateRefDict(TypedDict):
    """Candidate reference carried by a rendered report."""

    code: str
    name: str


class MatchReportDict(TypedDict):
    """Render-ready match report shape."""

    candidate: CandidateRefDict
    total_score: int
    max_score: int
    criteria: list[CriterionDict]


class MatchSummaryRow(TypedDict):
    """One row of the ranked summary CSV."""

    rank: int
    code: str
    name: str
    total_score: int
    max_score: int
    matched: int
    partial: int
    mismatched: int


class JobscopeFactsDict(TypedDict, total=False):
    """Render-ready jobscope facts; keys are omitted when the fact is absent."""

    adults: int
    kids: int
    kid_ages: list[str]
    babies: int
    babies_edd: int
    twins: bool
    elderly: int
    elderly_ages: list[str]
    elderly_needs: list[str]
    pets: int
    pet_types: list[str]
    special_needs: list[str]
