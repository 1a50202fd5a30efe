"""Normalisation of loosely formatted preference strings.

Covers nationality preferences, numeric range expressions ("above 150", "150-160cm"),
English levels and relative start dates ("end Dec", "Jan/Feb 2026").

Usage example:
    from datetime import date

    from helper_match.domain.preferences import (
        extract_nationality_preferences,
        parse_range_expression,
        parse_relative_date,
    )

    extract_nationality_preferences("Myanmar/Indonesian", "")  # {"Myanmar", "Indonesia"}
    parse_range_expression("700 and above")  # NumericRange(minimum=700.0, maximum=inf)
    parse_relative_date("end Dec", date(2026, 10, 19))  # date(2026, 12, 25)
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import date
from enum import StrEnum

from .keyword_tables import (
    ALL_NATIONALITIES,
    DEFAULT_LANGUAGE_LEVEL,
    LANGUAGE_LEVEL_HINTS,
    LANGUAGE_LEVELS,
    MONTH_NAMES,
    NATIONALITY_ANY_PATTERNS,
    NATIONALITY_COMPOUND_PATTERNS,
    NATIONALITY_KEYWORD_PATTERNS,
    NATIONALITY_ONLY_PATTERNS,
    OPEN_TIMING_WORDS,
    PERIOD_DAYS,
    URGENCY_WORDS,
)

_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?")
_PERIOD_MONTH_RE = re.compile(r"\b(end|early|mid)[\s-]*(?:of\s+)?([a-z]+)\s*(\d{4})?")
_MONTH_LIST_RE = re.compile(r"([a-z]+)\s*/\s*([a-z]+)(?:\s*/\s*([a-z]+))?\s*(\d{4})?")
_WORD_RE = re.compile(r"[a-z]+")

_PREFERENCE_NUMBER_PATTERNS = (
    ("weight", re.compile(r"(above|below)\s*(\d{2,3})\s*kg", re.IGNORECASE)),
    ("height", re.compile(r"(above|below)\s*(\d{2,3})\s*cm", re.IGNORECASE)),
    (
        "age",
        re.compile(
            r"(above|below)\s*(\d{2})\s*(?:yo|years?\s*old)?\b(?!\s*kg|\s*cm)", re.IGNORECASE
        ),
    ),
)


# --- Nationality ---


def extract_nationality_preferences(nationality: str, remarks: str = "") -> frozenset[str]:
    """Return the nationalities an employer accepts.

    Rules apply in precedence order: "any"/"all nationality" accepts all three; a compound
    phrase ("myanmar/indonesian") accepts both; "<X> only" accepts one; otherwise the
    union of every nationality keyword found. An empty result means no constraint.
    """
    text = f"{nationality or ''} {remarks or ''}".lower()
    if any(re.search(pattern, text) for pattern in NATIONALITY_ANY_PATTERNS):
        return ALL_NATIONALITIES
    for pattern, accepted in NATIONALITY_COMPOUND_PATTERNS:
        if re.search(pattern, text):
            return accepted
    for pattern, single in NATIONALITY_ONLY_PATTERNS:
        if re.search(pattern, text):
            return frozenset({single})
    return frozenset(
        nationality_name
        for nationality_name, patterns in NATIONALITY_KEYWORD_PATTERNS.items()
        if any(re.search(pattern, text) for pattern in patterns)
    )


def canonical_nationality(text: str) -> str | None:
    """Map a free-text nationality ("Indonesian", "Burmese") to its canonical name."""
    lower = (text or "").lower()
    for nationality_name, patterns in NATIONALITY_KEYWORD_PATTERNS.items():
        if any(re.search(pattern, lower) for pattern in patterns):
            return nationality_name
    return None


# --- Numeric ranges ---


@dataclass(frozen=True)
class NumericRange:
    """Closed numeric interval; ``maximum`` may be infinite."""

    minimum: float
    maximum: float

    def contains(self, value: float, *, strict_minimum: bool = False) -> bool:
        """Return True when ``value`` lies in the range."""
        above_min = value > self.minimum if strict_minimum else value >= self.minimum
        return above_min and value <= self.maximum


def parse_range_expression(text: str) -> NumericRange | None:
    """Parse "above N", "below N", "A-B" or a bare number into a range.

    Units and other words ("cm", "SGD", "and") are stripped before the digits are read,
    so "above 700" and "700 and above" parse identically.

    Returns:
        The range, or None when no digits remain (no constraint).
    """
    lower = (text or "").lower()
    stripped = re.sub(r"[^0-9\-]", "", lower)
    numbers = [float(n) for n in re.findall(r"\d+", stripped)]
    if not numbers:
        return None
    if "above" in lower:
        return NumericRange(numbers[0], math.inf)
    if "below" in lower:
        return NumericRange(0.0, numbers[0])
    if len(numbers) >= 2 and "-" in stripped:
        return NumericRange(numbers[0], numbers[1])
    return NumericRange(numbers[0], numbers[0])


def parse_number(text: str) -> float:
    """Return the first number in ``text``; 0.0 when there is none."""
    match = _NUMBER_RE.search(text or "")
    return float(match.group(0)) if match else 0.0


def extract_preference_numbers(remarks: str) -> dict[str, str]:
    """Lift "above/below N kg|cm|yo" phrases out of free-text remarks.

    Returns:
        Mapping of requirement attribute ("weight", "height", "age") to the phrase found.
    """
    found: dict[str, str] = {}
    if not remarks:
        return found
    for attribute, pattern in _PREFERENCE_NUMBER_PATTERNS:
        match = pattern.search(remarks)
        if match:
            found[attribute] = match.group(0).strip()
    return found


# --- Language ---


def normalize_language_level(text: str) -> str:
    """Map a free-text English level onto the nearest named level (default "average")."""
    lower = (text or "").lower()
    for level, hints in LANGUAGE_LEVEL_HINTS:
        if any(hint in lower for hint in hints):
            return level
    return DEFAULT_LANGUAGE_LEVEL


def language_rank(level: str) -> int:
    return LANGUAGE_LEVELS.index(level)


# --- Relative dates ---


def _month_number(token: str | None) -> int | None:
    if not token or len(token) < 3:
        return None
    prefix = token[:3]
    for index, name in enumerate(MONTH_NAMES):
        if name.startswith(prefix):
            return index + 1
    return None


def _first_of_month(year: int, month: int) -> date:
    return date(year, month, 1)


def parse_relative_date(text: str, reference_date: date) -> date | None:
    """Resolve loose start-date text against ``reference_date``.

    Handles, in order:
    1. "end/early/mid <month> [year]" -> day 25/5/15 of that month. Without a year the
       reference year is used even when that date has already passed.
    2. Month lists "Jan/Feb[/Mar] [year]" -> the first listed month whose first day is
       strictly after the reference date, else the first listed month.
    3. A bare month name -> its first day in the reference year, only if strictly after the
       reference date.

    Returns:
        The resolved date, or None for open-ended ("anytime") or unparseable text.
    """
    lower = (text or "").lower()
    if not lower.strip() or any(word in lower for word in OPEN_TIMING_WORDS):
        return None

    period = _PERIOD_MONTH_RE.search(lower)
    if period:
        month = _month_number(period.group(2))
        if month is not None:
            year = int(period.group(3) or 0) or reference_date.year
            return date(year, month, PERIOD_DAYS[period.group(1)])

    month_list = _MONTH_LIST_RE.search(lower)
    if month_list:
        months = [
            month
            for month in (_month_number(token) for token in month_list.group(1, 2, 3))
            if month is not None
        ]
        if months:
            year = int(month_list.group(4) or 0) or reference_date.year
            for month in months:
                candidate = _first_of_month(year, month)
                if candidate > reference_date:
                    return candidate
            return _first_of_month(year, months[0])

    for word in _WORD_RE.findall(lower):
        if len(word) < 3 or not any(
            name.startswith(word) or (word == "sept" and name == "september")
            for name in MONTH_NAMES
        ):
            continue
        month = _month_number(word)
        if month is not None:
            candidate = _first_of_month(reference_date.year, month)
            if candidate > reference_date:
                return candidate
            return None
    return None


class TimingBand(StrEnum):
    """Urgency band of an employer's start-date text."""

    OPEN = "open"
    URGENT = "urgent"
    NEAR = "near"
    FAR = "far"
    UNPARSED = "unparsed"


@dataclass(frozen=True)
class TimingAssessment:
    band: TimingBand
    target_date: date | None = None
    days_until: int | None = None


def assess_timing(
    text: str,
    reference_date: date,
    *,
    urgent_days: int,
    near_days: int,
) -> TimingAssessment:
    """Classify start-date text into an urgency band.

    Open-ended text ("anytime") is OPEN. Urgency words or a date at most ``urgent_days``
    away are URGENT; at most ``near_days`` away is NEAR; later is FAR. Text that is present
    but unparseable is UNPARSED.
    """
    lower = (text or "").lower()
    if any(word in lower for word in OPEN_TIMING_WORDS):
        return TimingAssessment(TimingBand.OPEN)
    target = parse_relative_date(lower, reference_date)
    days_until = (target - reference_date).days if target is not None else None
    if any(word in lower for word in URGENCY_WORDS):
        return TimingAssessment(TimingBand.URGENT, target, days_until)
    if target is None or days_until is None:
        return TimingAssessment(TimingBand.UNPARSED)
    if days_until <= urgent_days:
        return TimingAssessment(TimingBand.URGENT, target, days_until)
    if days_until <= near_days:
        return TimingAssessment(TimingBand.NEAR, target, days_until)
    return TimingAssessment(TimingBand.FAR, target, days_until)
