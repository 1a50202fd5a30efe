"""Tests for one-off requirement preparation."""

from datetime import date

from helper_match.domain.preferences import TimingBand
from helper_match.domain.keyword_tables import CARE_BANDS
from helper_match.domain.profile import (
    band_for_age,
    is_left_blank,
    is_no_constraint,
    split_preference_phrases,
)
from tests.support.rows import make_profile, make_requirement


def test_is_no_constraint() -> None:
    assert is_no_constraint("")
    assert is_no_constraint(" Any ")
    assert is_no_constraint("ALL")
    assert not is_no_constraint("Christian")


def test_is_left_blank_accepts_sheet_placeholders() -> None:
    for value in ("", "any", "No", " NIL ", "none", "N/A", "-"):
        assert is_left_blank(value), value
    assert not is_left_blank("Mother")


def test_band_for_age_picks_the_youngest_covering_band() -> None:
    first = band_for_age(0.25)
    toddler = band_for_age(2.0)

    assert first is not None and first.field == "infant_care_0_6m"
    assert toddler is not None and toddler.field == "childcare_1_3y"
    assert band_for_age(15.0) is None


def test_split_preference_phrases_drops_annotations() -> None:
    assert split_preference_phrases("Can swim, loves kids (must)\nno tattoos") == (
        "Can swim",
        "loves kids",
        "no tattoos",
    )


class TestPrepareRequirement:
    def test_empty_requirement_has_no_derived_constraints(self) -> None:
        profile = make_profile(make_requirement())

        assert profile.nationalities == frozenset()
        assert profile.height_range is None
        assert profile.required_bands == ()
        assert profile.elderly_present is False
        assert profile.timing is None

    def test_required_bands_come_from_kid_ages_and_jobscope(self) -> None:
        requirement = make_requirement(
            children_ages=("8 months",), jobscope=("1 kid 4yo", "newborn coming")
        )

        fields = [band.field for band in make_profile(requirement).required_bands]

        assert fields == ["infant_care_0_6m", "infant_care_7_12m", "childcare_4_6y"]

    def test_elderly_presence(self) -> None:
        assert make_profile(make_requirement(jobscope=("grandma 80yo",))).elderly_present
        assert make_profile(make_requirement(elderly_relationship="Mother")).elderly_present
        assert make_profile(make_requirement(focus_area="Elderly Care")).elderly_focused

    def test_timing_uses_the_reference_date(self) -> None:
        profile = make_profile(make_requirement(start_date="mid Dec"), today=date(2026, 10, 19))

        assert profile.timing is not None
        assert profile.timing.band is TimingBand.NEAR

    def test_counted_babies_require_the_youngest_infant_band(self) -> None:
        profile = make_profile(make_requirement(jobscope=("2 babies",)))

        assert profile.jobscope_facts.babies == 2
        assert profile.required_bands == (CARE_BANDS[0],)

    def test_placeholder_relationship_is_not_an_elderly_household(self) -> None:
        assert not make_profile(make_requirement(elderly_relationship="NIL")).elderly_present
        assert make_profile(make_requirement(elderly_relationship="Father")).elderly_present
