"""Tests for preference normalisation: nationality, ranges, language and timing."""

import math
from datetime import date

import pytest

from helper_match.domain.keyword_tables import ALL_NATIONALITIES
from helper_match.domain.preferences import (
    NumericRange,
    TimingBand,
    assess_timing,
    canonical_nationality,
    extract_nationality_preferences,
    extract_preference_numbers,
    language_rank,
    normalize_language_level,
    parse_number,
    parse_range_expression,
    parse_relative_date,
)

TODAY = date(2026, 10, 19)


class TestNationalityPreferences:
    def test_compound_phrase_accepts_both(self) -> None:
        assert extract_nationality_preferences("Myanmar/Indonesian") == frozenset(
            {"Myanmar", "Indonesia"}
        )

    def test_any_accepts_every_nationality(self) -> None:
        assert extract_nationality_preferences("Any") == ALL_NATIONALITIES

    def test_any_takes_precedence_over_only(self) -> None:
        assert extract_nationality_preferences("Indo only, any is ok") == ALL_NATIONALITIES

    def test_only_phrase_accepts_one(self) -> None:
        assert extract_nationality_preferences("Indo only") == frozenset({"Indonesia"})

    def test_keywords_are_unioned(self) -> None:
        assert extract_nationality_preferences("Filipino or Myanmar") == frozenset(
            {"Philippines", "Myanmar"}
        )

    def test_remarks_are_searched_too(self) -> None:
        assert extract_nationality_preferences("", "prefer Burmese") == frozenset({"Myanmar"})

    def test_empty_means_no_constraint(self) -> None:
        assert extract_nationality_preferences("", "") == frozenset()


@pytest.mark.parametrize(
    ("text", "expected"),
    [("Indonesian", "Indonesia"), ("Burmese", "Myanmar"), ("Pinoy", "Philippines"), ("Thai", None)],
)
def test_canonical_nationality(text: str, expected: str | None) -> None:
    assert canonical_nationality(text) == expected


class TestRangeExpressions:
    @pytest.mark.parametrize(
        ("text", "minimum", "maximum"),
        [
            ("above 150", 150.0, math.inf),
            ("700 and above", 700.0, math.inf),
            ("below 60kg", 0.0, 60.0),
            ("150-160cm", 150.0, 160.0),
            ("30", 30.0, 30.0),
        ],
    )
    def test_parses_range_shapes(self, text: str, minimum: float, maximum: float) -> None:
        assert parse_range_expression(text) == NumericRange(minimum, maximum)

    @pytest.mark.parametrize("text", ["", "any", "no preference"])
    def test_text_without_digits_is_no_constraint(self, text: str) -> None:
        assert parse_range_expression(text) is None

    def test_strict_minimum_excludes_the_boundary(self) -> None:
        wanted = NumericRange(150.0, math.inf)

        assert wanted.contains(150.0)
        assert not wanted.contains(150.0, strict_minimum=True)
        assert wanted.contains(151.0, strict_minimum=True)


def test_parse_number_defaults_to_zero() -> None:
    assert parse_number("5 years") == 5.0
    assert parse_number("1.5") == 1.5
    assert parse_number("none") == 0.0


def test_extract_preference_numbers_lifts_each_unit() -> None:
    found = extract_preference_numbers("Prefer above 155cm, below 60kg, below 40yo")

    assert found == {"height": "above 155cm", "weight": "below 60kg", "age": "below 40yo"}


def test_extract_preference_numbers_ignores_empty_remarks() -> None:
    assert extract_preference_numbers("") == {}


class TestLanguageLevels:
    @pytest.mark.parametrize(
        ("text", "level"),
        [
            ("Very good English", "very good"),
            ("Fluent", "very good"),
            ("good", "good"),
            ("fair", "average"),
            ("poor", "basic"),
            ("", "average"),
        ],
    )
    def test_normalize(self, text: str, level: str) -> None:
        assert normalize_language_level(text) == level

    def test_levels_are_ordered(self) -> None:
        assert language_rank("learning") < language_rank("basic") < language_rank("very good")


class TestParseRelativeDate:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("end Dec", date(2026, 12, 25)),
            ("early Jan 2027", date(2027, 1, 5)),
            ("end of November", date(2026, 11, 25)),
            ("mid Mar", date(2026, 3, 15)),
            ("Nov/Dec", date(2026, 11, 1)),
            ("Jan/Feb 2027", date(2027, 1, 1)),
            ("Jan/Feb", date(2026, 1, 1)),
            ("December", date(2026, 12, 1)),
        ],
    )
    def test_resolves(self, text: str, expected: date) -> None:
        assert parse_relative_date(text, TODAY) == expected

    @pytest.mark.parametrize("text", ["", "anytime", "whenever", "March"])
    def test_unresolved(self, text: str) -> None:
        assert parse_relative_date(text, TODAY) is None


class TestAssessTiming:
    def _assess(self, text: str) -> TimingBand:
        return assess_timing(text, TODAY, urgent_days=45, near_days=75).band

    def test_open_wording(self) -> None:
        assert self._assess("Anytime") is TimingBand.OPEN

    def test_urgency_words(self) -> None:
        assessment = assess_timing("ASAP", TODAY, urgent_days=45, near_days=75)

        assert assessment.band is TimingBand.URGENT
        assert assessment.target_date is None

    def test_bands_by_days_until(self) -> None:
        assert self._assess("end Oct") is TimingBand.URGENT
        assert self._assess("mid Dec") is TimingBand.NEAR
        assert self._assess("end Feb 2027") is TimingBand.FAR

    def test_days_until_is_reported(self) -> None:
        assessment = assess_timing("mid Dec", TODAY, urgent_days=45, near_days=75)

        assert assessment.target_date == date(2026, 12, 15)
        assert assessment.days_until == 57

    def test_unparseable_text(self) -> None:
        assert self._assess("sometime soon") is TimingBand.UNPARSED
