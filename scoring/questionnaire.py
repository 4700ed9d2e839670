"""Multiple-choice questionnaires: parenting style and child personality.

Every chosen option carries a point table; points are summed per style/trait
across the answered questions. Unanswered questions and unknown option values
are skipped.
"""
from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence

from config import ChildPersonality, ParentingStyle
from data.questionnaires import PARENTING_STYLE_QUESTIONS, PERSONALITY_QUESTIONS

PERSONALITY_TRAIT_COUNT = 3


def _chosen_option(question: Dict, answers: Mapping[str, str]) -> Optional[Dict]:
    answer = answers.get(question["id"])
    if not answer:
        return None
    return next((opt for opt in question["options"] if opt["value"] == answer), None)


def _tally(questions: Sequence[Dict], answers: Mapping[str, str], points_key: str, keys) -> Dict:
    totals = {k: 0 for k in keys}
    for question in questions:
        option = _chosen_option(question, answers)
        if option is None:
            continue
        for key, points in option[points_key].items():
            totals[key] += points
    return totals


def calculate_parenting_style(answers: Mapping[str, str]) -> ParentingStyle:
    scores = _tally(PARENTING_STYLE_QUESTIONS, answers, "styles", ParentingStyle)

    dominant = ParentingStyle.AUTHORITATIVE
    best = 0
    for style, score in scores.items():
        if score > best:
            best = score
            dominant = style
    return dominant


def calculate_personality_traits(answers: Mapping[str, str]) -> List[ChildPersonality]:
    scores = _tally(PERSONALITY_QUESTIONS, answers, "traits", ChildPersonality)
    ranked = sorted(scores, key=lambda trait: scores[trait], reverse=True)
    return ranked[:PERSONALITY_TRAIT_COUNT]
