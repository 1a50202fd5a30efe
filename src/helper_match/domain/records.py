"""Typed requirement and candidate records consumed by the scoring engine.

Usage example:
    from helper_match.domain.records import CandidateRecord, Requirement

    requirement = Requirement(nationality="Myanmar/Indonesian", height="above 150")
    candidate = CandidateRecord(code="H001", name="Ani", nationality="Indonesia", height="155")
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Requirement:
    """Employer requirement. Every field is optional; empty means "no constraint"."""

    customer_name: str = ""
    nationality: str = ""
    helper_type: str = ""
    min_years_experience: str = ""
    english_level: str = ""
    additional_languages: tuple[str, ...] = ()
    height: str = ""
    weight: str = ""
    age: str = ""
    salary: str = ""
    children_ages: tuple[str, ...] = ()
    elderly_relationship: str = ""
    focus_area: str = ""
    religion: str = ""
    education: str = ""
    marital_status: str = ""
    eat_pork: str = ""
    handle_pork: str = ""
    off_days: str = ""
    start_date: str = ""
    jobscope: tuple[str, ...] = ()
    pets: tuple[str, ...] = ()
    preferences: str = ""
    excluded_codes: tuple[str, ...] = ()


@dataclass(frozen=True)
class CandidateRecord:
    """A helper profile as read from the helper sheet.

    Structured experience flags are ``None`` when the sheet has no such column, and a
    (possibly empty) string when it does.
    """

    code: str = ""
    name: str = ""
    nationality: str = ""
    age: str = ""
    work_experience: str = ""
    skills: str = ""
    bio: str = ""
    salary: str = ""
    religion: str = ""
    education: str = ""
    marital_status: str = ""
    weight: str = ""
    height: str = ""
    passport_status: str = ""
    available_from: str = ""
    helper_type: str = ""
    helper_experience: str = ""
    language: str = ""
    additional_languages: str = ""
    years_of_experience: str = ""
    eat_pork: str = ""
    handle_pork: str = ""
    off_days: str = ""
    pets: str = ""
    infant_care_0_6m: str | None = None
    infant_care_7_12m: str | None = None
    childcare_1_3y: str | None = None
    childcare_4_6y: str | None = None
    childcare_7_12y: str | None = None
    elderly_care: str | None = None
    caregiver_cert: str | None = None
    personal_infant_care: str | None = None
    personal_childcare: str | None = None
    personal_elderly_care: str | None = None

    @property
    def profile_text(self) -> str:
        """Combined free-text profile: work experience, skills and bio."""
        return " ".join(part for part in (self.work_experience, self.skills, self.bio) if part)

    def flag(self, attribute: str) -> str:
        """Return a structured flag or free-text attribute by name ("" when absent)."""
        value = getattr(self, attribute)
        return value if isinstance(value, str) else ""
