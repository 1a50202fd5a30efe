"""Criterion evaluators: one per requirement dimension.

Every evaluator takes ``(profile, candidate, config)`` and returns the criteria it
produced, usually zero or one. An empty list means the requirement field driving the
evaluator is absent, so the dimension is omitted rather than scored either way. Bad
candidate values degrade to documented defaults (0 for numbers, "" for text) instead of
raising.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from ..config import MatchConfig
from ..types import CriterionDict
from .fuzzy import approximate_contains
from .jobscope import match_jobscope
from .keyword_tables import (
    CRITERION_WEIGHTS,
    FOCUS_MULTIPLIER,
    MAX_CREDITED_YEARS,
    NO_PET_VALUES,
    PASSPORT_DEFAULT_WEIGHT,
    PASSPORT_URGENT_WEIGHT,
    THREE_VALUE_PARTIAL_ANSWERS,
)
from .preferences import (
    NumericRange,
    TimingBand,
    canonical_nationality,
    language_rank,
    normalize_language_level,
    parse_number,
)
from .profile import RequirementProfile, is_no_constraint
from .records import CandidateRecord

_LEADING_NOISE_RE = re.compile(r"^[\s\u200b-\u200d\ufeff\-\u2013\u2014]+|^\W+")
_LIST_SPLIT_RE = re.compile(r"[\n,]")


class CriterionStatus(StrEnum):
    """Verdict of one evaluated criterion."""

    MATCH = "match"
    PARTIAL = "partial"
    MISMATCH = "mismatch"


@dataclass(frozen=True)
class Criterion:
    """One evaluated requirement dimension.

    Matched and partial criteria both contribute their full weight to the total score;
    mismatched criteria contribute nothing but stay in the report.
    """

    name: str
    status: CriterionStatus
    weight: int
    reason: str
    value: str = ""

    @property
    def matched(self) -> bool:
        return self.status is CriterionStatus.MATCH

    @property
    def contributes(self) -> bool:
        return self.status is not CriterionStatus.MISMATCH

    def to_dict(self) -> CriterionDict:
        return {
            "name": self.name,
            "status": self.status.value,
            "weight": self.weight,
            "reason": self.reason,
            "value": self.value,
        }


type Evaluator = Callable[[RequirementProfile, CandidateRecord, MatchConfig], list[Criterion]]


def _verdict(ok: bool) -> CriterionStatus:
    return CriterionStatus.MATCH if ok else CriterionStatus.MISMATCH


def _coverage(found: int, requested: int) -> CriterionStatus:
    if found >= requested:
        return CriterionStatus.MATCH
    if found:
        return CriterionStatus.PARTIAL
    return CriterionStatus.MISMATCH


def is_yes(value: str | None) -> bool:
    """Return True for a "yes" answer, ignoring leading bullets and stray symbols."""
    cleaned = _LEADING_NOISE_RE.sub("", value or "").strip().lower()
    return cleaned == "yes"


def three_valued(value: str | None) -> tuple[CriterionStatus, str]:
    """Classify a personal-experience answer: yes, willing to learn, or anything else."""
    text = (value or "").strip().lower()
    if text == "yes":
        return CriterionStatus.MATCH, "Yes"
    if text in THREE_VALUE_PARTIAL_ANSWERS:
        return CriterionStatus.PARTIAL, "No, but willing to learn"
    return CriterionStatus.MISMATCH, (value or "").strip() or "No"


# --- Identity and background ---


def evaluate_nationality(
    profile: RequirementProfile, candidate: CandidateRecord, config: MatchConfig
) -> list[Criterion]:
    if not profile.nationalities:
        return []
    helper_nationality = canonical_nationality(candidate.nationality)
    ok = helper_nationality in profile.nationalities
    preferred = ", ".join(sorted(profile.nationalities))
    return [
        Criterion(
            name="Nationality",
            status=_verdict(ok),
            weight=CRITERION_WEIGHTS["nationality"],
            reason="Nationality matches employer preference"
            if ok
            else f"Preferred: {preferred} | Helper: {candidate.nationality or 'N/A'}",
            value=candidate.nationality,
        )
    ]


def evaluate_helper_type(
    profile: RequirementProfile, candidate: CandidateRecord, config: MatchConfig
) -> list[Criterion]:
    wanted = profile.requirement.helper_type
    if is_no_constraint(wanted):
        return []
    haystack = f"{candidate.helper_type} {candidate.helper_experience}"
    ok = approximate_contains(haystack, wanted, config.preference_fuzzy_threshold)
    return [
        Criterion(
            name="Helper Type",
            status=_verdict(ok),
            weight=CRITERION_WEIGHTS["helper_type"],
            reason=f"Helper is {wanted}"
            if ok
            else f"Employer wants {wanted}, Helper: {haystack.strip() or 'N/A'}",
            value=candidate.helper_type,
        )
    ]


def evaluate_years_of_experience(
    profile: RequirementProfile, candidate: CandidateRecord, config: MatchConfig
) -> list[Criterion]:
    if not profile.requirement.min_years_experience.strip():
        return []
    minimum = parse_number(profile.requirement.min_years_experience)
    years = min(parse_number(candidate.years_of_experience), MAX_CREDITED_YEARS)
    ok = years >= minimum
    return [
        Criterion(
            name="Years of Experience",
            status=_verdict(ok),
            weight=CRITERION_WEIGHTS["years_of_experience"],
            reason=f"Helper has {years:g} years, meets minimum {minimum:g}"
            if ok
            else f"Helper has {years:g} years, below minimum {minimum:g}",
            value=candidate.years_of_experience,
        )
    ]


def evaluate_english_level(
    profile: RequirementProfile, candidate: CandidateRecord, config: MatchConfig
) -> list[Criterion]:
    wanted = profile.requirement.english_level
    if is_no_constraint(wanted):
        return []
    required = normalize_language_level(wanted)
    helper_level = normalize_language_level(candidate.language)
    ok = language_rank(helper_level) >= language_rank(required)
    return [
        Criterion(
            name="English Level",
            status=_verdict(ok),
            weight=CRITERION_WEIGHTS["english_level"],
            reason="English is sufficient"
            if ok
            else f"Employer wants: {required}, Helper: {helper_level}",
            value=candidate.language,
        )
    ]


def evaluate_additional_languages(
    profile: RequirementProfile, candidate: CandidateRecord, config: MatchConfig
) -> list[Criterion]:
    requested = [lang for lang in profile.requirement.additional_languages if lang.strip()]
    if not requested:
        return []
    helper_text = candidate.additional_languages or candidate.language
    helper_languages = [s.strip() for s in _LIST_SPLIT_RE.split(helper_text) if s.strip()]
    found = [
        lang
        for lang in requested
        if approximate_contains(" ".join(helper_languages), lang, config.preference_fuzzy_threshold)
    ]
    ok = bool(found)
    return [
        Criterion(
            name="Additional Languages",
            status=_verdict(ok),
            weight=len(requested),
            reason=f"Matched languages: {', '.join(found)}"
            if ok
            else f"Employer wants: {', '.join(requested)}, "
            f"Helper: {', '.join(helper_languages) or 'None'}",
            value=", ".join(helper_languages),
        )
    ]


# --- Physical and salary ranges ---


def _range_criterion(
    name: str,
    wanted: NumericRange | None,
    wanted_text: str,
    observed: str,
    weight: int,
    *,
    strict_minimum: bool = False,
) -> list[Criterion]:
    if wanted is None:
        return []
    ok = wanted.contains(parse_number(observed), strict_minimum=strict_minimum)
    return [
        Criterion(
            name=name,
            status=_verdict(ok),
            weight=weight,
            reason=f"{name} within preferred range"
            if ok
            else f"Employer wants {wanted_text.strip()}, Helper: {observed or 'N/A'}",
            value=observed,
        )
    ]


def evaluate_height(
    profile: RequirementProfile, candidate: CandidateRecord, config: MatchConfig
) -> list[Criterion]:
    return _range_criterion(
        "Height",
        profile.height_range,
        profile.requirement.height,
        candidate.height,
        CRITERION_WEIGHTS["height"],
        strict_minimum=True,
    )


def evaluate_weight(
    profile: RequirementProfile, candidate: CandidateRecord, config: MatchConfig
) -> list[Criterion]:
    return _range_criterion(
        "Weight",
        profile.weight_range,
        profile.requirement.weight,
        candidate.weight,
        CRITERION_WEIGHTS["weight"],
    )


def evaluate_age(
    profile: RequirementProfile, candidate: CandidateRecord, config: MatchConfig
) -> list[Criterion]:
    # Only scored when the helper states an age
    if not candidate.age.strip():
        return []
    return _range_criterion(
        "Age", profile.age_range, profile.requirement.age, candidate.age, CRITERION_WEIGHTS["age"]
    )


def evaluate_salary(
    profile: RequirementProfile, candidate: CandidateRecord, config: MatchConfig
) -> list[Criterion]:
    return _range_criterion(
        "Salary",
        profile.salary_range,
        profile.requirement.salary,
        candidate.salary,
        CRITERION_WEIGHTS["salary"],
    )


# --- Care experience ---


def evaluate_care_bands(
    profile: RequirementProfile, candidate: CandidateRecord, config: MatchConfig
) -> list[Criterion]:
    """Structured band flags for every required child age band, then personal experience."""
    if not profile.required_bands:
        return []
    multiplier = FOCUS_MULTIPLIER if profile.childcare_focused else 1
    criteria: list[Criterion] = []
    for band in profile.required_bands:
        raw = candidate.flag(band.field)
        ok = is_yes(raw)
        criteria.append(
            Criterion(
                name=band.label,
                status=_verdict(ok),
                weight=CRITERION_WEIGHTS["care_band"] * multiplier,
                reason=f"Has experience with {band.label}"
                if ok
                else f"Required: no experience with {band.label}",
                value="Yes" if ok else (raw.strip() or "No"),
            )
        )

    kinds = {band.kind for band in profile.required_bands}
    personal = (
        ("infant", "Personal Infant Care Experience", candidate.personal_infant_care),
        ("childcare", "Personal Childcare Experience", candidate.personal_childcare),
    )
    for kind, name, answer in personal:
        if kind not in kinds or answer is None:
            continue
        status, clean = three_valued(answer)
        criteria.append(
            Criterion(
                name=name,
                status=status,
                weight=CRITERION_WEIGHTS["personal_care"] * multiplier,
                reason={
                    CriterionStatus.MATCH: f"Has {name.lower()}",
                    CriterionStatus.PARTIAL: "No experience, but willing to learn",
                    CriterionStatus.MISMATCH: f"No {name.lower()}",
                }[status],
                value=clean,
            )
        )
    return criteria


def evaluate_elderly_care(
    profile: RequirementProfile, candidate: CandidateRecord, config: MatchConfig
) -> list[Criterion]:
    """Elderly care: structured flag, then personal answer, then free text."""
    if not profile.elderly_present:
        return []
    multiplier = FOCUS_MULTIPLIER if profile.elderly_focused else 1
    weight = CRITERION_WEIGHTS["elderly_care"] * multiplier

    if is_yes(candidate.elderly_care):
        status, reason = CriterionStatus.MATCH, "Has elderly care experience (structured field)"
    else:
        status, _ = three_valued(candidate.personal_elderly_care)
        reason = {
            CriterionStatus.MATCH: "Has personal elderly care experience",
            CriterionStatus.PARTIAL: "No elderly care experience, but willing to learn",
            CriterionStatus.MISMATCH: "No elderly care experience found",
        }[status]
        if status is not CriterionStatus.MATCH and approximate_contains(
            candidate.profile_text, "elderly", config.jobscope_fuzzy_threshold
        ):
            status, reason = CriterionStatus.MATCH, "Has elderly care experience (free text)"

    criteria = [
        Criterion(
            name="Elderly Care Experience",
            status=status,
            weight=weight,
            reason=reason,
            value="Yes" if status is CriterionStatus.MATCH else (candidate.elderly_care or "No"),
        )
    ]

    if profile.jobscope_facts.elderly_needs:
        if candidate.caregiver_cert is None:
            certified = any(
                approximate_contains(candidate.profile_text, word, config.jobscope_fuzzy_threshold)
                for word in ("caregiver", "nursing")
            )
        else:
            certified = is_yes(candidate.caregiver_cert)
        needs = ", ".join(profile.jobscope_facts.elderly_needs)
        criteria.append(
            Criterion(
                name="Care Giver/Nursing Cert",
                status=_verdict(certified),
                weight=CRITERION_WEIGHTS["caregiver_cert"] * multiplier,
                reason="Has care giver/nursing cert"
                if certified
                else f"Elderly needs ({needs}) but no care giver/nursing cert",
                value="Yes" if certified else "No",
            )
        )
    return criteria


# --- Household tasks ---


def _task_experience(
    name: str,
    weight_key: str,
    keywords: tuple[str, ...],
    candidate: CandidateRecord,
    threshold: float,
) -> Criterion:
    ok = any(approximate_contains(candidate.work_experience, kw, threshold) for kw in keywords)
    return Criterion(
        name=name,
        status=_verdict(ok),
        weight=CRITERION_WEIGHTS[weight_key],
        reason=f"Has {name.lower()}" if ok else f"No {keywords[0]} found in work experience",
        value="Yes" if ok else "No",
    )


def evaluate_cooking(
    profile: RequirementProfile, candidate: CandidateRecord, config: MatchConfig
) -> list[Criterion]:
    if "cooking" not in profile.jobscope_tags:
        return []
    return [
        _task_experience(
            "Cooking Experience", "cooking", ("cook",), candidate, config.jobscope_fuzzy_threshold
        )
    ]


def evaluate_household_chores(
    profile: RequirementProfile, candidate: CandidateRecord, config: MatchConfig
) -> list[Criterion]:
    if "household chores" not in profile.jobscope_tags:
        return []
    return [
        _task_experience(
            "Household Chores Experience",
            "household_chores",
            ("household", "housework", "clean"),
            candidate,
            config.jobscope_fuzzy_threshold,
        )
    ]


# --- Equality preferences ---


def _equality(name: str, weight_key: str, wanted: str, observed: str) -> list[Criterion]:
    if is_no_constraint(wanted):
        return []
    ok = wanted.strip().lower() == observed.strip().lower()
    return [
        Criterion(
            name=name,
            status=_verdict(ok),
            weight=CRITERION_WEIGHTS[weight_key],
            reason=f"{name} matches"
            if ok
            else f"Employer: {wanted.strip()}, Helper: {observed or 'N/A'}",
            value=observed,
        )
    ]


def evaluate_religion(
    profile: RequirementProfile, candidate: CandidateRecord, config: MatchConfig
) -> list[Criterion]:
    return _equality("Religion", "religion", profile.requirement.religion, candidate.religion)


def evaluate_education(
    profile: RequirementProfile, candidate: CandidateRecord, config: MatchConfig
) -> list[Criterion]:
    return _equality("Education", "education", profile.requirement.education, candidate.education)


def evaluate_marital_status(
    profile: RequirementProfile, candidate: CandidateRecord, config: MatchConfig
) -> list[Criterion]:
    return _equality(
        "Marital Status",
        "marital_status",
        profile.requirement.marital_status,
        candidate.marital_status,
    )


def evaluate_eat_pork(
    profile: RequirementProfile, candidate: CandidateRecord, config: MatchConfig
) -> list[Criterion]:
    return _equality("Eat Pork", "eat_pork", profile.requirement.eat_pork, candidate.eat_pork)


def evaluate_handle_pork(
    profile: RequirementProfile, candidate: CandidateRecord, config: MatchConfig
) -> list[Criterion]:
    return _equality(
        "Handle Pork", "handle_pork", profile.requirement.handle_pork, candidate.handle_pork
    )


def evaluate_off_days(
    profile: RequirementProfile, candidate: CandidateRecord, config: MatchConfig
) -> list[Criterion]:
    return _equality("Off Days", "off_days", profile.requirement.off_days, candidate.off_days)


# --- Timing ---


def evaluate_passport_readiness(
    profile: RequirementProfile, candidate: CandidateRecord, config: MatchConfig
) -> list[Criterion]:
    """Passport readiness against how soon the employer needs the helper.

    | band     | required passport state   | weight |
    |----------|---------------------------|--------|
    | open     | none                      | 1      |
    | urgent   | "ready"                   | 2      |
    | near     | "ready" or "...process..." | 1      |
    | far      | none                      | 1      |
    | unparsed | "ready" or "...process..." | 1      |
    """
    timing = profile.timing
    if timing is None:
        return []
    status_text = candidate.passport_status.strip().lower()
    ready = status_text == "ready"
    ready_or_processing = ready or "process" in status_text
    weight = PASSPORT_DEFAULT_WEIGHT

    match timing.band:
        case TimingBand.OPEN:
            ok, reason = True, "No specific timing required, any passport status accepted"
        case TimingBand.URGENT:
            weight = PASSPORT_URGENT_WEIGHT
            ok = ready
            reason = (
                "Passport ready for urgent need"
                if ok
                else f"Employer needs urgently, but passport: {status_text or 'N/A'}"
            )
        case TimingBand.NEAR:
            ok = ready_or_processing
            reason = (
                "Passport ready/in process for near-future start"
                if ok
                else f"Employer needs in {timing.days_until} days, "
                f"but passport: {status_text or 'N/A'}"
            )
        case TimingBand.FAR:
            ok, reason = True, "Employer need is far in future, any status is OK"
        case _:
            ok = ready_or_processing
            reason = (
                "Passport ready/in process for general need"
                if ok
                else "Passport status might delay placement"
            )

    return [
        Criterion(
            name="Passport Readiness",
            status=_verdict(ok),
            weight=weight,
            reason=reason,
            value=f"{candidate.passport_status or 'N/A'}, "
            f"available: {candidate.available_from or 'N/A'}",
        )
    ]


# --- Free-text coverage ---


def evaluate_jobscope(
    profile: RequirementProfile, candidate: CandidateRecord, config: MatchConfig
) -> list[Criterion]:
    """All requested tasks must be covered for a full match."""
    tasks = [task.strip() for task in profile.requirement.jobscope if task.strip()]
    if not tasks:
        return []
    matched, missing = match_jobscope(tasks, candidate, config.jobscope_fuzzy_threshold)
    status = _coverage(len(matched), len(tasks))
    return [
        Criterion(
            name="Jobscope",
            status=status,
            weight=max(len(tasks), 1),
            reason="All requested jobscope tasks are covered"
            if not missing
            else f"Missing: {', '.join(missing)}",
            value=f"{len(matched)} of {len(tasks)} requested tasks matched"
            + (f": {', '.join(matched)}" if matched else ""),
        )
    ]


def evaluate_pets(
    profile: RequirementProfile, candidate: CandidateRecord, config: MatchConfig
) -> list[Criterion]:
    requested = [
        pet.strip().lower()
        for pet in profile.requirement.pets
        if pet.strip() and pet.strip().lower() not in NO_PET_VALUES
    ]
    if not requested:
        return []
    if "any" in requested:
        found = list(requested)
    else:
        found = [
            pet
            for pet in requested
            if approximate_contains(candidate.pets, pet, config.preference_fuzzy_threshold)
        ]
    status = _coverage(len(found), len(requested))
    return [
        Criterion(
            name="Pets",
            status=status,
            weight=len(requested),
            reason=f"Matches pet preferences: {', '.join(found)}"
            if status is CriterionStatus.MATCH
            else f"Employer has {', '.join(requested)}, Helper: {candidate.pets or 'None'}",
            value=candidate.pets,
        )
    ]


def evaluate_preference_remarks(
    profile: RequirementProfile, candidate: CandidateRecord, config: MatchConfig
) -> list[Criterion]:
    """Any single remark found in the helper's profile counts as a match."""
    phrases = profile.preference_phrases
    if not phrases:
        return []
    profile_text = candidate.profile_text
    found = [
        phrase
        for phrase in phrases
        if approximate_contains(profile_text, phrase, config.preference_fuzzy_threshold)
    ]
    ok = bool(found)
    return [
        Criterion(
            name="Preference Remarks",
            status=_verdict(ok),
            weight=max(len(found), 1),
            reason=f"Matched preferences: {', '.join(found)}" if ok else "No preferences matched",
            value=", ".join(found),
        )
    ]
