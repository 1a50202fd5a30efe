"""Approximate phrase containment for matching requested wording against profile text.

Usage example:
    from helper_match.domain.fuzzy import approximate_contains

    approximate_contains("5 yrs cookng and cleaning", "cooking", 0.3)  # True
    approximate_contains("cook", "household chores", 0.3)  # False
"""

from __future__ import annotations

from rapidfuzz.distance import Levenshtein

DEFAULT_THRESHOLD = 0.3
_MIN_MATCH_FLOOR = 3


def min_match_length(needle: str) -> int:
    """Return the shortest aligned span that may count as a match for ``needle``."""
    return max(len(needle) - 2, _MIN_MATCH_FLOOR)


def approximate_contains(haystack: str, needle: str, threshold: float = DEFAULT_THRESHOLD) -> bool:
    """Return True when ``needle`` occurs in ``haystack`` allowing minor wording differences.

    The haystack is treated as a single document. Some window of the haystack, about as
    long as the needle and never shorter than ``min_match_length(needle)``, must be
    within ``threshold`` normalised edit distance of the needle (0 = exact, 1 = anything).

    The test is directional: ``approximate_contains(a, b)`` and
    ``approximate_contains(b, a)`` can disagree, so callers that accept either
    direction must check both.

    Args:
        haystack: Free text to search (e.g. a work-experience narrative).
        needle: Requested phrase.
        threshold: Maximum proportion of edit dissimilarity.

    Returns:
        True on an approximate hit; False on a miss or when either input is empty.
    """
    hay = haystack.lower().strip()
    ned = needle.lower().strip()
    if not hay or not ned:
        return False

    floor = min_match_length(ned)
    if len(ned) < floor:
        return False
    if ned in hay:
        return True

    if len(hay) < len(ned):
        # Whole haystack against the longer needle: missing characters count as edits
        if len(hay) < floor:
            return False
        return Levenshtein.normalized_distance(ned, hay) <= threshold

    # Windows one character shorter or longer than the needle absorb a dropped or
    # doubled letter
    sizes = range(max(len(ned) - 1, floor), len(ned) + 2)
    return any(
        Levenshtein.normalized_distance(ned, hay[start : start + size]) <= threshold
        for size in sizes
        for start in range(len(hay) - size + 1)
    )


def contains_either_way(a: str, b: str, threshold: float = DEFAULT_THRESHOLD) -> bool:
    """Return True when either string approximately contains the other."""
    return approximate_contains(a, b, threshold) or approximate_contains(b, a, threshold)
