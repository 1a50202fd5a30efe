"""Tests for approximate phrase containment."""

from helper_match.domain.fuzzy import approximate_contains, contains_either_way, min_match_length


class TestApproximateContains:
    def test_exact_substring_matches(self) -> None:
        assert approximate_contains("5 years cooking and cleaning", "cooking")

    def test_minor_misspelling_matches(self) -> None:
        assert approximate_contains("5 yrs cookng and cleaning", "cooking", 0.3)

    def test_match_is_case_insensitive(self) -> None:
        assert approximate_contains("GENERAL HOUSEWORK", "housework")

    def test_unrelated_phrase_does_not_match(self) -> None:
        assert not approximate_contains("cook", "household chores", 0.3)

    def test_empty_inputs_never_match(self) -> None:
        assert not approximate_contains("", "cooking")
        assert not approximate_contains("cooking", "")
        assert not approximate_contains("   ", "   ")

    def test_needles_shorter_than_the_floor_never_match(self) -> None:
        assert not approximate_contains("abc", "ab")

    def test_containment_is_directional(self) -> None:
        assert approximate_contains("cooking and cleaning", "cooking")
        assert not approximate_contains("cooking", "cooking and cleaning")

    def test_zero_threshold_requires_an_exact_occurrence(self) -> None:
        assert approximate_contains("ironing", "ironing", 0.0)
        assert not approximate_contains("ironnig", "ironing", 0.0)

    def test_windows_are_compared_by_edit_distance(self) -> None:
        assert approximate_contains("experienced in laundary", "laundry")
        assert not approximate_contains("household chores", "child")
        assert not contains_either_way("ironing", "nursing")


def test_contains_either_way_accepts_both_directions() -> None:
    assert contains_either_way("cooking", "cooking and cleaning")
    assert contains_either_way("cooking and cleaning", "cooking")
    assert not contains_either_way("laundry", "elderly care")


def test_min_match_length_has_a_floor_of_three() -> None:
    assert min_match_length("ab") == 3
    assert min_match_length("cooking") == 5
