"""Tests for header-keyed row adapters."""

import math

import pytest

from helper_match.application.adapters import (
    IncomingDataError,
    candidate_from_row,
    requirement_from_row,
    validate_row,
)
from tests.support.rows import candidate_row, requirement_row


class TestRequirementFromRow:
    def test_maps_headers_onto_attributes(self) -> None:
        requirement = requirement_from_row(requirement_row(**{"Prefer helper Religion": "Any"}))

        assert requirement.customer_name == "Mrs Tan"
        assert requirement.nationality == "Indo only"
        assert requirement.religion == "Any"

    def test_list_columns_split_on_newlines_and_commas(self) -> None:
        requirement = requirement_from_row(
            requirement_row(
                **{
                    "Jobscope": "cooking\nhousehold chores, laundry\n",
                    "Bio Sended": "H001, H002",
                    "Age of kids": ["2yo", "5yo"],
                }
            )
        )

        assert requirement.jobscope == ("cooking", "household chores", "laundry")
        assert requirement.excluded_codes == ("H001", "H002")
        assert requirement.children_ages == ("2yo", "5yo")

    def test_misspelt_alias_fills_an_empty_attribute(self) -> None:
        requirement = requirement_from_row({"Salary and palcement budget": "below 700"})

        assert requirement.salary == "below 700"

    def test_canonical_header_wins_over_alias(self) -> None:
        requirement = requirement_from_row(
            {"Salary and palcement budget": "below 900", "Salary and placement budget": "650"}
        )

        assert requirement.salary == "650"

    def test_remarks_fill_empty_physical_preferences(self) -> None:
        requirement = requirement_from_row(
            {
                "Preference remarks": "above 155cm, below 60kg",
                "Prefer Helper Weight (kg)": "below 55",
            }
        )

        assert requirement.height == "above 155cm"
        assert requirement.weight == "below 55"

    def test_unknown_headers_are_ignored(self) -> None:
        requirement = requirement_from_row({"Timestamp": "2026-10-01", " Jobscope ": "cooking"})

        assert requirement.jobscope == ("cooking",)

    def test_rejects_non_mapping_rows(self) -> None:
        with pytest.raises(IncomingDataError):
            requirement_from_row(["not", "a", "row"])


class TestCandidateFromRow:
    def test_maps_helper_sheet_headers(self) -> None:
        candidate = candidate_from_row(candidate_row())

        assert candidate.code == "H001"
        assert candidate.nationality == "Indonesia"
        assert candidate.passport_status == "Ready"
        assert "cooking" in candidate.profile_text

    def test_missing_flag_columns_stay_none(self) -> None:
        candidate = candidate_from_row(candidate_row())

        assert candidate.infant_care_0_6m is None
        assert candidate.flag("infant_care_0_6m") == ""

    def test_present_but_blank_flags_are_empty_strings(self) -> None:
        candidate = candidate_from_row(
            candidate_row(**{"Elderly Care Work Experience (Yes/No)": None})
        )

        assert candidate.elderly_care == ""

    def test_numbers_and_missing_values_are_rendered_as_text(self) -> None:
        candidate = candidate_from_row(
            candidate_row(**{"Height (cm)": 155.0, "Weight (Kg)": math.nan, "Age": 31})
        )

        assert candidate.height == "155"
        assert candidate.weight == ""
        assert candidate.age == "31"


def test_validate_row_strips_header_whitespace() -> None:
    assert validate_row({" Code ": "H001"}) == {"Code": "H001"}
