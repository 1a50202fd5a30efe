"""One-off preparation of a requirement before it is scored against many candidates.

Parsing the requirement's free text (nationality, ranges, jobscope facts, timing) does not
depend on the candidate, so it happens once per ranking call and the resulting profile
is shared read-only across workers.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date

from ..config import MatchConfig
from .keyword_tables import (
    CARE_BANDS,
    FOCUS_CHILDCARE,
    FOCUS_ELDERLY,
    NO_CONSTRAINT_VALUES,
    NO_VALUE_ANSWERS,
    CareBand,
)
from .preferences import (
    NumericRange,
    TimingAssessment,
    assess_timing,
    extract_nationality_preferences,
    parse_range_expression,
)
from .records import Requirement
from .text_facts import (
    JobscopeFacts,
    age_in_years,
    extract_facts,
    extract_tags,
    split_jobscope_text,
)

_PHRASE_SPLIT_RE = re.compile(r"[\n,]")
_ANNOTATION_RE = re.compile(r"\([^)]*\)?")


@dataclass(frozen=True)
class RequirementProfile:
    """A requirement together with everything derived from its text."""

    requirement: Requirement
    nationalities: frozenset[str]
    height_range: NumericRange | None
    weight_range: NumericRange | None
    age_range: NumericRange | None
    salary_range: NumericRange | None
    jobscope_facts: JobscopeFacts
    jobscope_tags: frozenset[str]
    required_bands: tuple[CareBand, ...]
    elderly_present: bool
    childcare_focused: bool
    elderly_focused: bool
    preference_phrases: tuple[str, ...]
    timing: TimingAssessment | None


def is_no_constraint(value: str) -> bool:
    """Return True for empty, "any" and "all" requirement values."""
    return value.strip().lower() in NO_CONSTRAINT_VALUES


def is_left_blank(value: str) -> bool:
    """Return True when a free-text answer is empty, "any"/"all" or a placeholder like "NIL"."""
    lowered = value.strip().lower()
    return lowered in NO_CONSTRAINT_VALUES or lowered in NO_VALUE_ANSWERS


def band_for_age(years: float) -> CareBand | None:
    """Return the youngest care band covering ``years``; None past the last band."""
    for band in CARE_BANDS:
        if years <= band.max_age_years:
            return band
    return None


def split_preference_phrases(text: str) -> tuple[str, ...]:
    """Split remarks on newlines/commas, dropping "(must-have)"-style annotations."""
    phrases = (_ANNOTATION_RE.sub("", part).strip() for part in _PHRASE_SPLIT_RE.split(text or ""))
    return tuple(phrase for phrase in phrases if phrase)


def _required_bands(requirement: Requirement, facts: JobscopeFacts) -> tuple[CareBand, ...]:
    fields: set[str] = set()
    for token in (*requirement.children_ages, *facts.kid_ages):
        years = age_in_years(token)
        band = band_for_age(years) if years is not None else None
        if band is not None:
            fields.add(band.field)
    if facts.babies or facts.babies_edd:
        fields.add(CARE_BANDS[0].field)
    return tuple(band for band in CARE_BANDS if band.field in fields)


def prepare_requirement(
    requirement: Requirement,
    *,
    today: date,
    config: MatchConfig,
) -> RequirementProfile:
    """Parse a requirement once for scoring.

    Args:
        requirement: Employer requirement.
        today: Reference date for relative start-date text.
        config: Supplies the passport-readiness day boundaries.

    Returns:
        An immutable profile shared by every candidate evaluation.
    """
    jobscope_text = "\n".join(requirement.jobscope)
    facts = extract_facts(split_jobscope_text(jobscope_text))
    tags = extract_tags(jobscope_text)
    focus = requirement.focus_area.strip().lower()

    elderly_present = (
        facts.elderly > 0
        or not is_left_blank(requirement.elderly_relationship)
        or focus == FOCUS_ELDERLY
    )

    timing = None
    if requirement.start_date.strip():
        timing = assess_timing(
            requirement.start_date,
            today,
            urgent_days=config.urgent_days,
            near_days=config.near_days,
        )

    return RequirementProfile(
        requirement=requirement,
        nationalities=extract_nationality_preferences(
            requirement.nationality, requirement.preferences
        ),
        height_range=parse_range_expression(requirement.height),
        weight_range=parse_range_expression(requirement.weight),
        age_range=parse_range_expression(requirement.age),
        salary_range=parse_range_expression(requirement.salary),
        jobscope_facts=facts,
        jobscope_tags=tags,
        required_bands=_required_bands(requirement, facts),
        elderly_present=elderly_present,
        childcare_focused=focus == FOCUS_CHILDCARE,
        elderly_focused=focus == FOCUS_ELDERLY,
        preference_phrases=split_preference_phrases(requirement.preferences),
        timing=timing,
    )
