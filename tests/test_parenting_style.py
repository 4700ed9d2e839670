"""Unit tests for the survey analyzer and the multiple-choice questionnaires."""
from __future__ import annotations

import sys
from pathlib import Path

# Ensure project root is on path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest
from config import ChildPersonality, ParentingArchetype, ParentingStyle
from scoring.parenting_style import (
    SurveyValidationError,
    analyze_parenting_styles,
    describe_dominant_styles,
)
from scoring.questionnaire import calculate_parenting_style, calculate_personality_traits

POSITIVE = [
    ParentingArchetype.AUTHORITATIVE,
    ParentingArchetype.MINDFUL,
    ParentingArchetype.ATTACHMENT_BASED,
    ParentingArchetype.MONTESSORI,
]
INVERSE = [ParentingArchetype.AUTHORITARIAN, ParentingArchetype.PERMISSIVE]


def _survey(*values):
    return {f"Q{i}": v for i, v in enumerate(values, start=1)}


# ══════════════════════════════════════════════════════════════════════
# Fixtures
# ══════════════════════════════════════════════════════════════════════

@pytest.fixture
def neutral_survey():
    """Default form state: every slider at 5."""
    return _survey(5, 5, 5, 5, 5, 5)


@pytest.fixture
def relationship_first_survey():
    return _survey(9, 8, 7, 10, 6, 5)


# ══════════════════════════════════════════════════════════════════════
# Survey analyzer
# ══════════════════════════════════════════════════════════════════════

class TestArchetypeScores:
    def test_formulas(self, relationship_first_survey):
        scores = analyze_parenting_styles(relationship_first_survey).scores
        assert scores[ParentingArchetype.AUTHORITATIVE] == pytest.approx((8 + 7 + 6 + 5) / 4)
        assert scores[ParentingArchetype.MINDFUL] == pytest.approx((9 + 8 + 10 + 6) / 4)
        assert scores[ParentingArchetype.ATTACHMENT_BASED] == pytest.approx((9 + 10) / 2)
        assert scores[ParentingArchetype.MONTESSORI] == pytest.approx((7 + 5) / 2)
        assert scores[ParentingArchetype.AUTHORITARIAN] == pytest.approx((1 + 2 + 3 + 4) / 4)
        assert scores[ParentingArchetype.PERMISSIVE] == pytest.approx((2 + 0 + 5) / 3)

    def test_scores_keep_declaration_order(self, neutral_survey):
        scores = analyze_parenting_styles(neutral_survey).scores
        assert list(scores) == list(ParentingArchetype)

    @pytest.mark.parametrize(
        "answers",
        [
            _survey(1, 1, 1, 1, 1, 1),
            _survey(10, 10, 10, 10, 10, 10),
            _survey(1, 10, 1, 10, 1, 10),
            _survey(10, 1, 10, 1, 10, 1),
            _survey(3, 7, 2, 9, 4, 6),
        ],
    )
    def test_bounds_for_valid_answers(self, answers):
        scores = analyze_parenting_styles(answers, strict=True).scores
        for style in POSITIVE:
            assert 1 <= scores[style] <= 10
        for style in INVERSE:
            assert 0 <= scores[style] <= 9


class TestDominantStyles:
    def test_neutral_survey_tie_uses_declaration_order(self, neutral_survey):
        result = analyze_parenting_styles(neutral_survey)
        assert set(result.scores.values()) == {5.0}
        assert result.dominant_styles == [
            ParentingArchetype.AUTHORITATIVE,
            ParentingArchetype.MINDFUL,
            ParentingArchetype.ATTACHMENT_BASED,
        ]

    def test_top_three_sorted_descending(self, relationship_first_survey):
        result = analyze_parenting_styles(relationship_first_survey)
        assert len(result.dominant_styles) == 3
        top = [result.scores[s] for s in result.dominant_styles]
        assert top == sorted(top, reverse=True)
        assert result.dominant_styles[0] == ParentingArchetype.ATTACHMENT_BASED
        others = set(result.scores) - set(result.dominant_styles)
        assert all(result.scores[s] <= top[-1] for s in others)

    def test_rule_focused_parent(self):
        result = analyze_parenting_styles(_survey(1, 2, 1, 3, 2, 2))
        assert result.dominant_styles[:2] == [
            ParentingArchetype.AUTHORITARIAN,
            ParentingArchetype.PERMISSIVE,
        ]

    def test_report_is_empty(self, neutral_survey):
        assert analyze_parenting_styles(neutral_survey).report == ""

    def test_description_names_three_styles(self, neutral_survey):
        text = describe_dominant_styles(analyze_parenting_styles(neutral_survey))
        assert text.startswith("سه سبک غالب شما")
        assert "«مقتدرانه»" in text
        assert text.count("«") == 3


class TestLenientAndStrictInput:
    def test_missing_answers_default_to_zero(self):
        result = analyze_parenting_styles({})
        assert result.scores[ParentingArchetype.AUTHORITATIVE] == 0
        assert result.scores[ParentingArchetype.AUTHORITARIAN] == 10
        assert result.dominant_styles == [
            ParentingArchetype.AUTHORITARIAN,
            ParentingArchetype.PERMISSIVE,
            ParentingArchetype.AUTHORITATIVE,
        ]

    def test_null_answer_counts_as_zero(self):
        answers = _survey(None, 5, 5, 5, 5, 5)
        result = analyze_parenting_styles(answers)
        assert result.scores[ParentingArchetype.ATTACHMENT_BASED] == pytest.approx(2.5)
        assert result.scores[ParentingArchetype.MINDFUL] == pytest.approx(3.75)
        assert result.scores[ParentingArchetype.AUTHORITARIAN] == pytest.approx(6.25)
        with pytest.raises(SurveyValidationError):
            analyze_parenting_styles(answers, strict=True)

    def test_out_of_range_passes_through_when_lenient(self):
        result = analyze_parenting_styles(_survey(12, 12, 12, 12, 12, 12))
        assert result.scores[ParentingArchetype.MONTESSORI] == 12
        assert result.scores[ParentingArchetype.PERMISSIVE] == -2

    def test_strict_rejects_missing_key(self):
        answers = _survey(5, 5, 5, 5, 5)
        with pytest.raises(SurveyValidationError, match="Q6"):
            analyze_parenting_styles(answers, strict=True)

    @pytest.mark.parametrize("bad", [0, 11, -3, "7", True])
    def test_strict_rejects_bad_values(self, bad):
        answers = _survey(5, 5, bad, 5, 5, 5)
        with pytest.raises(SurveyValidationError):
            analyze_parenting_styles(answers, strict=True)

    def test_strict_is_a_value_error(self):
        with pytest.raises(ValueError):
            analyze_parenting_styles({}, strict=True)


# ══════════════════════════════════════════════════════════════════════
# Multiple-choice questionnaires
# ══════════════════════════════════════════════════════════════════════

class TestParentingStyleQuestionnaire:
    def test_explaining_parent_is_authoritative(self):
        answers = {"1": "explain", "2": "flexible", "3": "guide"}
        assert calculate_parenting_style(answers) == ParentingStyle.AUTHORITATIVE

    def test_controlling_parent_is_authoritarian(self):
        answers = {"1": "punish", "2": "strict", "3": "control"}
        assert calculate_parenting_style(answers) == ParentingStyle.AUTHORITARIAN

    def test_tie_keeps_first_declared_style(self):
        # neglectful and free-range both total 8
        answers = {"1": "ignore", "2": "few", "3": "hands_off"}
        assert calculate_parenting_style(answers) == ParentingStyle.NEGLECTFUL

    def test_no_answers_defaults_to_authoritative(self):
        assert calculate_parenting_style({}) == ParentingStyle.AUTHORITATIVE

    def test_unknown_option_is_ignored(self):
        assert calculate_parenting_style({"1": "shout", "9": "explain"}) == ParentingStyle.AUTHORITATIVE


class TestPersonalityQuestionnaire:
    def test_top_three_traits(self):
        traits = calculate_personality_traits({"1": "social", "2": "analyze"})
        assert traits == [
            ChildPersonality.EXTROVERT,
            ChildPersonality.ANALYTICAL,
            ChildPersonality.LEADER,
        ]

    def test_sensitive_dependent_child(self):
        traits = calculate_personality_traits({"1": "selective", "2": "ask_help"})
        assert traits == [
            ChildPersonality.SENSITIVE,
            ChildPersonality.DEPENDENT,
            ChildPersonality.INTROVERT,
        ]

    def test_empty_answers_return_first_three_traits(self):
        assert calculate_personality_traits({}) == [
            ChildPersonality.INTROVERT,
            ChildPersonality.EXTROVERT,
            ChildPersonality.SENSITIVE,
        ]
