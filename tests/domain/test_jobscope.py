"""Tests for jobscope task coverage."""

import pytest

from helper_match.domain.jobscope import match_jobscope, rule_for_task, task_covered
from helper_match.domain.keyword_tables import JOBSCOPE_FIELD_TABLE, JobscopeFieldRule
from tests.support.rows import make_candidate


def _rule_named(first_keyword: str) -> JobscopeFieldRule:
    return next(rule for rule in JOBSCOPE_FIELD_TABLE if rule.keywords[0] == first_keyword)


class TestRuleForTask:
    @pytest.mark.parametrize(
        ("rule", "keyword"),
        [(rule, keyword) for rule in JOBSCOPE_FIELD_TABLE for keyword in rule.keywords],
    )
    def test_every_keyword_maps_to_its_own_rule(
        self, rule: JobscopeFieldRule, keyword: str
    ) -> None:
        assert rule_for_task(keyword, 0.3) is rule

    @pytest.mark.parametrize(
        ("task", "first_keyword"),
        [
            ("household chores", "household chores"),
            ("General housework and cleaning", "household chores"),
            ("ironing", "laundry"),
            ("pet care", "pet care"),
            ("cat care", "pet care"),
            ("dog care", "pet care"),
            ("take care of kids", "take care child"),
            ("look after 2 children", "take care child"),
            ("infant care for newborn", "take care newborn"),
            ("assist elderly grandma", "elderly care"),
            ("cook dinner", "cooking"),
            ("grocery shopping", "marketing"),
            ("change diapers", "change diaper"),
        ],
    )
    def test_common_task_phrases(self, task: str, first_keyword: str) -> None:
        assert rule_for_task(task, 0.3) is _rule_named(first_keyword)

    @pytest.mark.parametrize(
        ("task", "first_keyword"),
        [
            ("laundary", "laundry"),
            ("cokking", "cooking"),
            ("2 babies", "take care newborn"),
        ],
    )
    def test_misspellings_fall_back_to_fuzzy_lookup(self, task: str, first_keyword: str) -> None:
        assert rule_for_task(task, 0.3) is _rule_named(first_keyword)

    def test_unrelated_tasks_have_no_rule(self) -> None:
        assert rule_for_task("drive the car", 0.3) is None
        assert rule_for_task("zzzz qqqq", 0.3) is None


class TestTaskCovered:
    def test_structured_flag_covers_the_task(self) -> None:
        candidate = make_candidate(childcare_4_6y="Yes")

        assert task_covered("take care child", candidate, 0.3)

    def test_structured_flag_must_say_yes(self) -> None:
        candidate = make_candidate(childcare_1_3y="No", childcare_4_6y="", childcare_7_12y="No")

        assert not task_covered("take care child", candidate, 0.3)

    def test_free_text_rescues_missing_structured_data(self) -> None:
        candidate = make_candidate(work_experience="Took care of elderly grandmother for 3 years")

        assert task_covered("elderly care", candidate, 0.3)

    def test_rule_keywords_are_searched_in_work_experience(self) -> None:
        candidate = make_candidate(work_experience="General housework for a family of four")

        assert task_covered("household chores", candidate, 0.3)

    def test_pet_keywords_are_searched_in_work_experience(self) -> None:
        candidate = make_candidate(work_experience="walked the family's pet dogs daily")

        assert task_covered("pet care", candidate, 0.3)

    def test_unrelated_structured_flags_do_not_cover_a_task(self) -> None:
        assert not task_covered("pet care", make_candidate(infant_care_0_6m="YES"), 0.3)
        assert not task_covered("ironing", make_candidate(caregiver_cert="YES"), 0.3)

    def test_skills_and_bio_count_as_profile_text(self) -> None:
        candidate = make_candidate(skills="ironing")

        assert task_covered("ironing", candidate, 0.3)


def test_match_jobscope_splits_tasks_in_request_order() -> None:
    candidate = make_candidate(work_experience="cooking for a family of four")

    matched, missing = match_jobscope(["cooking", "childcare", " "], candidate, 0.3)

    assert matched == ["cooking"]
    assert missing == ["childcare"]
