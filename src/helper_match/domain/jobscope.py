"""Coverage of employer-requested jobscope tasks by a candidate profile.

Each requested task is resolved in two tiers: structured yes/no columns chosen by the
``JOBSCOPE_FIELD_TABLE`` rule whose keyword names the task, then free text
(work experience, then the combined profile). The free-text tier stops incomplete
structured data from producing false negatives.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from .fuzzy import approximate_contains, contains_either_way
from .keyword_tables import JOBSCOPE_FIELD_TABLE, JobscopeFieldRule
from .records import CandidateRecord


def _names_keyword(task: str, keyword: str) -> bool:
    return re.search(rf"\b{re.escape(keyword)}", task) is not None


def rule_for_task(task: str, threshold: float) -> JobscopeFieldRule | None:
    """Return the table rule for ``task``, or None when no keyword relates to it.

    An exact pass picks the first rule with a keyword starting a word of the task. Only
    when nothing hits exactly does a fuzzy pass accept a keyword that approximately
    contains, or is contained in, the task.
    """
    lowered = task.lower().strip()
    for rule in JOBSCOPE_FIELD_TABLE:
        if any(_names_keyword(lowered, keyword) for keyword in rule.keywords):
            return rule
    for rule in JOBSCOPE_FIELD_TABLE:
        if any(contains_either_way(lowered, keyword, threshold) for keyword in rule.keywords):
            return rule
    return None


def _structured_hit(rule: JobscopeFieldRule, candidate: CandidateRecord) -> bool:
    if rule.yes_value is None:
        return False
    return any(
        candidate.flag(field).strip().upper() == rule.yes_value for field in rule.fields
    )


def _free_text_hit(
    task: str, rule: JobscopeFieldRule | None, candidate: CandidateRecord, threshold: float
) -> bool:
    work_experience = candidate.work_experience
    if approximate_contains(work_experience, task, threshold):
        return True
    if rule is not None and rule.yes_value is None:
        if any(
            approximate_contains(work_experience, keyword, threshold) for keyword in rule.keywords
        ):
            return True
    return approximate_contains(candidate.profile_text, task, threshold)


def task_covered(task: str, candidate: CandidateRecord, threshold: float) -> bool:
    rule = rule_for_task(task, threshold)
    if rule is not None and _structured_hit(rule, candidate):
        return True
    return _free_text_hit(task, rule, candidate, threshold)


def match_jobscope(
    tasks: Sequence[str], candidate: CandidateRecord, threshold: float
) -> tuple[list[str], list[str]]:
    """Split requested tasks into (matched, missing), preserving request order."""
    matched: list[str] = []
    missing: list[str] = []
    for task in tasks:
        if not task.strip():
            continue
        if task_covered(task, candidate, threshold):
            matched.append(task)
        else:
            missing.append(task)
    return matched, missing
