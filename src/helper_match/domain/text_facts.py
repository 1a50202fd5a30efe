"""Structured facts and canonical tags extracted from free-text jobscope descriptions.

Usage example:
    from helper_match.domain.text_facts import extract_facts, extract_tags, split_jobscope_text

    text = "- 2 adults, 1 kid 6yo\\n- grandma 82yo wheelchair\\n- cooking, 1 dog"
    facts = extract_facts(split_jobscope_text(text))
    assert facts.adults == 2 and facts.elderly == 1
    assert "cooking" in extract_tags(text)
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from ..types import JobscopeFactsDict
from .keyword_tables import (
    BABY_PATTERN,
    ELDERLY_NEEDS,
    ELDERLY_PATTERN,
    PET_KEYWORDS,
    SPECIAL_NEEDS,
    TAG_TABLE,
)

# Line separators: newlines and bullets. Commas are content ("2 adults, 1 kid").
_LINE_BREAK_RE = re.compile(r"[\r\n•]+")
_INLINE_BULLET_RE = re.compile(r"\s[-–]\s")
_LEADING_BULLET_RE = re.compile(r"^[\s\-–]+")

_ADULTS_RE = re.compile(r"(\d+)\s*adults?\b")
_KIDS_RE = re.compile(r"(\d+)\s*kids?\b")
_CHILDREN_RE = re.compile(r"(\d+)\s*child(?:ren)?\b")
_AGE_TOKEN_RE = re.compile(r"(\d+(?:\.\d+)?)\s*(?:yo|y/o|years?\s*old|yrs?\s*old|mos?|months?)\b")
_BABY_RE = re.compile(BABY_PATTERN)
_BABY_COUNT_RE = re.compile(r"(\d+)\s*(?:babies|baby|newborns?|infants?)")
_EDD_RE = re.compile(r"\bedd\b")
_ELDERLY_RE = re.compile(ELDERLY_PATTERN)
_ELDERLY_COUNT_RE = re.compile(r"(\d+)\s*elderly")
_ELDERLY_AGE_RE = re.compile(rf"(?:{ELDERLY_PATTERN})\D*(\d+)\s*(?:yo|y/o|years?\s*old)")
_PET_RE = re.compile(rf"\b({'|'.join(PET_KEYWORDS)})s?\b")
_PET_COUNT_RE = re.compile(rf"(\d+)\s*({'|'.join(PET_KEYWORDS)})s?\b")
_MONTH_UNIT_RE = re.compile(r"mo|month")


@dataclass(frozen=True)
class JobscopeFacts:
    """Household facts derived from jobscope text. Recomputed on every extraction."""

    adults: int = 0
    kids: int = 0
    kid_ages: tuple[str, ...] = ()
    babies: int = 0
    babies_edd: int = 0
    twins: bool = False
    elderly: int = 0
    elderly_ages: tuple[str, ...] = ()
    elderly_needs: tuple[str, ...] = ()
    pets: int = 0
    pet_types: tuple[str, ...] = ()
    special_needs: tuple[str, ...] = ()

    def to_dict(self) -> JobscopeFactsDict:
        """Return the non-empty facts only."""
        out: JobscopeFactsDict = {}
        if self.adults:
            out["adults"] = self.adults
        if self.kids:
            out["kids"] = self.kids
        if self.kid_ages:
            out["kid_ages"] = list(self.kid_ages)
        if self.babies:
            out["babies"] = self.babies
        if self.babies_edd:
            out["babies_edd"] = self.babies_edd
        if self.twins:
            out["twins"] = True
        if self.elderly:
            out["elderly"] = self.elderly
        if self.elderly_ages:
            out["elderly_ages"] = list(self.elderly_ages)
        if self.elderly_needs:
            out["elderly_needs"] = list(self.elderly_needs)
        if self.pets:
            out["pets"] = self.pets
        if self.pet_types:
            out["pet_types"] = list(self.pet_types)
        if self.special_needs:
            out["special_needs"] = list(self.special_needs)
        return out


def split_jobscope_text(text: str) -> list[str]:
    """Split jobscope text into lines on newlines and bullets, keeping commas.

    Examples:
        "• 2 adults, 1 kid\\n• cooking" → ["2 adults, 1 kid", "cooking"]
        "care for 7-12y kid - ironing" → ["care for 7-12y kid", "ironing"]
    """
    lines: list[str] = []
    for chunk in _LINE_BREAK_RE.split(text or ""):
        for part in _INLINE_BULLET_RE.split(chunk):
            cleaned = _LEADING_BULLET_RE.sub("", part).strip()
            if cleaned:
                lines.append(cleaned)
    return lines


def _unique(values: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(values))


def extract_facts(lines: Sequence[str]) -> JobscopeFacts:
    """Extract household composition facts from jobscope lines.

    Counts ("2 adults", "3 kids", "1 children") are summed across lines. Presence-only
    signals (baby/elderly/pet keywords) count one each unless a number precedes them;
    "twins" on a baby line counts two babies. Age tokens on elderly lines are recorded
    as elderly ages, elsewhere as kid ages.

    Args:
        lines: Jobscope lines, e.g. from ``split_jobscope_text``.

    Returns:
        A fresh ``JobscopeFacts``; identical input always yields an equal result.
    """
    adults = kids = babies = babies_edd = elderly = pets = 0
    twins = False
    kid_ages: list[str] = []
    elderly_ages: list[str] = []
    elderly_needs: list[str] = []
    pet_types: list[str] = []
    special_needs: list[str] = []

    for line in lines:
        lower = line.lower()

        adults += sum(int(n) for n in _ADULTS_RE.findall(lower))
        kids += sum(int(n) for n in _KIDS_RE.findall(lower))
        kids += sum(int(n) for n in _CHILDREN_RE.findall(lower))

        is_elderly_line = bool(_ELDERLY_RE.search(lower))
        if not is_elderly_line:
            kid_ages.extend(m.group(0).strip() for m in _AGE_TOKEN_RE.finditer(lower))

        if _BABY_RE.search(lower):
            baby_count = _BABY_COUNT_RE.search(lower)
            if baby_count:
                babies += int(baby_count.group(1))
            elif "twins" in lower:
                twins = True
                babies += 2
            else:
                babies += 1
        if _EDD_RE.search(lower):
            babies_edd += 1

        if is_elderly_line:
            elderly_count = _ELDERLY_COUNT_RE.search(lower)
            elderly += int(elderly_count.group(1)) if elderly_count else 1
            elderly_ages.extend(m.group(1) for m in _ELDERLY_AGE_RE.finditer(lower))
            elderly_needs.extend(need for need in ELDERLY_NEEDS if need in lower)

        if _PET_RE.search(lower):
            pet_count = _PET_COUNT_RE.search(lower)
            if pet_count:
                pets += int(pet_count.group(1))
                pet_types.append(pet_count.group(2))
            else:
                pets += 1
                pet_types.extend(m.group(1) for m in _PET_RE.finditer(lower))

        special_needs.extend(need for need in SPECIAL_NEEDS if need in lower)
        if "twins" in lower:
            twins = True

    return JobscopeFacts(
        adults=adults,
        kids=kids,
        kid_ages=_unique(kid_ages),
        babies=babies,
        babies_edd=babies_edd,
        twins=twins,
        elderly=elderly,
        elderly_ages=tuple(elderly_ages),
        elderly_needs=_unique(elderly_needs),
        pets=pets,
        pet_types=_unique(pet_types),
        special_needs=_unique(special_needs),
    )


def extract_tags(text: str) -> frozenset[str]:
    """Return canonical jobscope tags whose keywords occur anywhere in ``text``.

    Matching is case-insensitive substring containment, not tokenised.
    """
    lower = (text or "").lower()
    return frozenset(rule.tag for rule in TAG_TABLE if any(kw in lower for kw in rule.keywords))


def age_in_years(token: str) -> float | None:
    """Convert an age token ("6yo", "8 months", "3") to years; None if there is no number."""
    lower = token.lower()
    number = re.search(r"\d+(?:\.\d+)?", lower)
    if number is None:
        return None
    value = float(number.group(0))
    if _MONTH_UNIT_RE.search(lower[number.end() :]):
        return value / 12.0
    return value
