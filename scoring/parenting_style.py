"""Parenting-style analyzer: scores the six-question survey per archetype.

Each archetype is the arithmetic mean of a fixed subset of answers (or of
their 10-complement for the two inverse archetypes). The three highest
scores become the dominant styles; ties keep the archetype declaration order
from config.py.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping

from config import (
    ARCHETYPE_LABELS,
    DOMINANT_STYLE_COUNT,
    SURVEY_KEYS,
    SURVEY_MAX_ANSWER,
    SURVEY_MIN_ANSWER,
    ParentingArchetype,
)


class SurveyValidationError(ValueError):
    pass


@dataclass
class ParentingScoreResult:
    scores: Dict[ParentingArchetype, float]
    dominant_styles: List[ParentingArchetype]
    report: str = ""


def _mean(*values: float) -> float:
    return sum(values) / len(values)


def _read_answers(answers: Mapping[str, float], strict: bool) -> Dict[str, float]:
    """Pull Q1..Q6 out of the raw form values.

    Lenient mode keeps the storefront behavior: a missing or null answer counts as 0
    and out-of-range values are scored as given.
    """
    if not strict:
        values = {key: answers.get(key) for key in SURVEY_KEYS}
        return {key: 0 if value is None else value for key, value in values.items()}

    missing = [key for key in SURVEY_KEYS if key not in answers]
    if missing:
        raise SurveyValidationError(f"Missing survey answers: {missing}")

    out: Dict[str, float] = {}
    for key in SURVEY_KEYS:
        value = answers[key]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise SurveyValidationError(f"{key} must be a number, got {value!r}")
        if not SURVEY_MIN_ANSWER <= value <= SURVEY_MAX_ANSWER:
            raise SurveyValidationError(
                f"{key}={value} is outside [{SURVEY_MIN_ANSWER}, {SURVEY_MAX_ANSWER}]"
            )
        out[key] = value
    return out


def score_archetypes(answers: Mapping[str, float]) -> Dict[ParentingArchetype, float]:
    q1, q2, q3, q4, q5, q6 = (answers[key] for key in SURVEY_KEYS)
    return {
        ParentingArchetype.AUTHORITATIVE: _mean(q2, q3, q5, q6),
        ParentingArchetype.MINDFUL: _mean(q1, q2, q4, q5),
        ParentingArchetype.ATTACHMENT_BASED: _mean(q1, q4),
        ParentingArchetype.MONTESSORI: _mean(q3, q6),
        ParentingArchetype.AUTHORITARIAN: _mean(10 - q1, 10 - q2, 10 - q3, 10 - q5),
        ParentingArchetype.PERMISSIVE: _mean(10 - q2, 10 - q4, 10 - q6),
    }


def analyze_parenting_styles(
    answers: Mapping[str, float],
    strict: bool = False,
) -> ParentingScoreResult:
    values = _read_answers(answers, strict)
    scores = score_archetypes(values)

    # sorted() is stable, so equal scores stay in declaration order
    ranked = sorted(scores.items(), key=lambda item: item[1], reverse=True)
    dominant = [style for style, _ in ranked[:DOMINANT_STYLE_COUNT]]

    return ParentingScoreResult(scores=scores, dominant_styles=dominant)


def describe_dominant_styles(result: ParentingScoreResult) -> str:
    names = "، ".join(f"«{ARCHETYPE_LABELS[s]}»" for s in result.dominant_styles)
    return f"سه سبک غالب شما: {names}"
