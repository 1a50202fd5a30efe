"""Boundary adapters from header-keyed sheet rows to typed engine records.

Raw rows are keyed by the spreadsheet's column headers. This module is the only place
those headers are looked up; the engine works on ``Requirement`` and ``CandidateRecord``.

Usage example:
    from helper_match.application.adapters import candidate_from_row, requirement_from_row

    requirement = requirement_from_row(
        {"Nationality preference": "Indo only", "Jobscope": "cooking\\nchildcare"}
    )
    candidate = candidate_from_row({"Code": "H001", "Nationality": "Indonesia"})
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping

from ..domain.preferences import extract_preference_numbers
from ..domain.records import CandidateRecord, Requirement
from ..infrastructure.validation import IncomingDataError, validate_as
from ..schemas import (
    CANDIDATE_COLUMNS,
    REQUIREMENT_COLUMN_ALIASES,
    REQUIREMENT_COLUMNS,
    REQUIREMENT_LIST_ATTRIBUTES,
)
from ..types import RawRow

_LIST_SPLIT_RE = re.compile(r"[\r\n,]+")

_REQUIREMENT_HEADERS = {header: attr for attr, header in REQUIREMENT_COLUMNS.items()}
_CANDIDATE_HEADERS = {header: attr for attr, header in CANDIDATE_COLUMNS.items()}


def validate_row(row: object) -> RawRow:
    """Validate that a row is a mapping keyed by strings.

    Raises:
        IncomingDataError: If the row is not a string-keyed mapping.
    """
    validated = validate_as(dict[str, object], row)
    return {key.strip(): value for key, value in validated.items()}


def _as_text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        return f"{value:g}"
    if isinstance(value, (list, tuple)):
        return ", ".join(_as_text(item) for item in value if _as_text(item))
    return str(value).strip()


def _as_list(value: object) -> tuple[str, ...]:
    if isinstance(value, (list, tuple)):
        items = [_as_text(item) for item in value]
    else:
        items = _LIST_SPLIT_RE.split(_as_text(value))
    return tuple(item.strip() for item in items if item.strip())


def _map_headers(
    row: RawRow,
    headers: Mapping[str, str],
    aliases: Mapping[str, str] | None = None,
) -> dict[str, object]:
    mapped: dict[str, object] = {}
    for header, value in row.items():
        attr = headers.get(header)
        if attr is not None:
            mapped[attr] = value
    # Misspelt headers only fill attributes the canonical header left empty
    for header, attr in (aliases or {}).items():
        if header in row and not _as_text(mapped.get(attr)):
            mapped[attr] = row[header]
    return mapped


def requirement_from_row(row: object) -> Requirement:
    """Build a ``Requirement`` from a header-keyed employer row.

    List columns (jobscope, pets, kid ages, languages, excluded codes) are split on
    newlines and commas. When the height, weight or age column is empty, an
    "above/below N cm|kg|yo" phrase in the preference remarks fills it.

    Raises:
        IncomingDataError: If the row is not a string-keyed mapping.
    """
    mapped = _map_headers(validate_row(row), _REQUIREMENT_HEADERS, REQUIREMENT_COLUMN_ALIASES)
    values: dict[str, object] = {}
    for attr, value in mapped.items():
        values[attr] = _as_list(value) if attr in REQUIREMENT_LIST_ATTRIBUTES else _as_text(value)

    lifted = extract_preference_numbers(_as_text(values.get("preferences", "")))
    for attr, phrase in lifted.items():
        if not values.get(attr):
            values[attr] = phrase
    return Requirement(**values)


def candidate_from_row(row: object) -> CandidateRecord:
    """Build a ``CandidateRecord`` from a header-keyed helper row.

    Structured yes/no flags whose column is missing stay ``None``.

    Raises:
        IncomingDataError: If the row is not a string-keyed mapping.
    """
    mapped = _map_headers(validate_row(row), _CANDIDATE_HEADERS)
    values: dict[str, str] = {attr: _as_text(value) for attr, value in mapped.items()}
    return CandidateRecord(**values)


__all__ = ["IncomingDataError", "candidate_from_row", "requirement_from_row", "validate_row"]
