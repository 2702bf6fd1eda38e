"""
Tests for flags and recommendations.
"""

import pytest

from evaluators.advice import _dedupe, build_flags, build_recommendations
from evaluators.aggregator import aggregate
from evaluators.interpretation import interpret
from evaluators.validity import assess_validity
from models.enums import ConditionKey, WarningType
from models.templates import (
    BASE_DO,
    BASE_DONT,
    COMORBIDITY_SPECIALIST_NOTE,
    COMORBIDITY_TABLE,
    CONDITION_DO,
    CONDITION_DONT,
    FLAG_RULES,
    INVALID_RECOMMENDATIONS,
    SPECIALIST_NOTE,
    VALIDITY_SPECIALIST_NOTE,
    VALIDITY_WARNINGS,
)

EMOTIONAL, CAMOUFLAGE, MASKED, SENSORY, IMPULSIVE, COMPLEX, CAUTION = (
    rule["flag"][1] for rule in FLAG_RULES
)


def _run(answers):
    scales = aggregate(answers)
    validity = assess_validity(scales)
    interpretation = interpret(scales, validity)
    return (
        scales,
        build_flags(scales, interpretation, validity),
        build_recommendations(scales, interpretation, validity),
    )


def _titles(flags):
    return [f.title for f in flags]


class TestFlags:
    """Flag rules fire in table order."""

    def test_no_flags_for_all_zero(self, make_answers):
        _, flags, _ = _run(make_answers())
        assert flags == []

    def test_emotional_dysregulation(self, make_answers):
        _, flags, _ = _run(make_answers({"C": 3}))
        assert _titles(flags) == [EMOTIONAL]

    def test_camouflaging_without_autistic_traits(self, make_answers):
        _, flags, _ = _run(make_answers({"G": 4}))
        assert _titles(flags) == [CAMOUFLAGE, MASKED]

    def test_camouflaging_with_autistic_traits(self, make_answers):
        _, flags, _ = _run(make_answers({"D": 4, "E": 4, "F": 4, "G": 4}))
        assert _titles(flags) == [CAMOUFLAGE, SENSORY]

    def test_subscale_rules(self, make_answers):
        _, flags, _ = _run(make_answers({"A": 4, "B": 4, "D": 4, "E": 4, "F": 4}))
        assert _titles(flags) == [SENSORY, IMPULSIVE]

    def test_subscale_below_threshold(self, make_answers):
        # F1 at 75%
        _, flags, _ = _run(make_answers({"F": 3}))
        assert SENSORY not in _titles(flags)

    def test_complex_profile(self, make_answers):
        _, flags, _ = _run(make_answers({"A": 4, "B": 4, "D": 4, "E": 4, "F": 4, "H": 4}))
        assert _titles(flags)[-1] == COMPLEX

    def test_moderate_validity_warning(self, make_answers):
        answers = make_answers()
        answers[63] = 4
        _, flags, _ = _run(answers)
        assert _titles(flags) == [CAUTION]

    def test_invalid_has_no_flags(self, make_answers):
        answers = make_answers({"C": 4, "G": 4})
        for qid in (7, 39, 71, 103):
            answers[qid] = 4
        _, flags, _ = _run(answers)
        assert flags == []


class TestRecommendations:
    """Do/don't lists and specialist notes."""

    def test_base_lists_only(self, make_answers):
        _, _, recs = _run(make_answers())
        assert recs.do_list == BASE_DO
        assert recs.dont_list == BASE_DONT
        assert recs.specialist_notes == []

    def test_present_condition_adds_advice(self, make_answers):
        _, _, recs = _run(make_answers({"A": 4, "B": 4}))

        assert recs.do_list == BASE_DO + CONDITION_DO[ConditionKey.ADHD]
        assert recs.dont_list == BASE_DONT + CONDITION_DONT[ConditionKey.ADHD]
        assert recs.specialist_notes == [
            SPECIALIST_NOTE.format(
                title="ADHD traits",
                percentage=100,
                status="pronounced",
                confidence="high confidence",
            )
        ]

    def test_condition_order(self, make_answers):
        _, _, recs = _run(make_answers({"A": 4, "B": 4, "D": 4, "E": 4, "F": 4}))

        assert recs.do_list == (
            BASE_DO + CONDITION_DO[ConditionKey.ADHD] + CONDITION_DO[ConditionKey.ASD]
        )
        assert len(recs.specialist_notes) == 3
        assert recs.specialist_notes[0].startswith("ADHD traits")
        assert recs.specialist_notes[1].startswith("Autistic traits")
        assert recs.specialist_notes[2] == COMORBIDITY_SPECIALIST_NOTE.format(
            title=COMORBIDITY_TABLE[0]["title"]
        )

    def test_validity_note(self, make_answers):
        answers = make_answers()
        answers[63] = 4
        scales, _, recs = _run(answers)

        _, title, _ = VALIDITY_WARNINGS[("M", WarningType.MODERATE)]
        assert recs.specialist_notes == [
            VALIDITY_SPECIALIST_NOTE.format(scale=scales["M"].name, percentage=33, title=title)
        ]

    def test_invalid_gets_retake_advice_only(self, make_answers):
        answers = make_answers()
        for qid in (7, 39, 71, 103):
            answers[qid] = 4
        _, _, recs = _run(answers)

        assert recs.do_list == INVALID_RECOMMENDATIONS["do_list"]
        assert recs.dont_list == INVALID_RECOMMENDATIONS["dont_list"]
        assert recs.specialist_notes == []

    def test_no_duplicates(self, make_answers):
        _, _, recs = _run(make_answers({"A": 4, "B": 4, "D": 4, "E": 4, "F": 4, "H": 4, "I": 4, "J": 4}))
        assert len(recs.do_list) == len(set(recs.do_list))
        assert len(recs.dont_list) == len(set(recs.dont_list))
        assert len(recs.specialist_notes) == len(set(recs.specialist_notes))


class TestDedupe:

    @pytest.mark.parametrize("items,expected", [
        ([], []),
        (["a", "b", "a", "c", "b"], ["a", "b", "c"]),
    ])
    def test_keeps_first_occurrence(self, items, expected):
        assert _dedupe(items) == expected
