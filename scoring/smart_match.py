"""Smart match engine: scores toys against a child/parent profile.

Six criteria add up to a 0-100 score:

- age fit (20) and gender fit (15) are all-or-nothing,
- growth-goal fit (25) and interest fit (20) are the share of the product's
  skills/tags that map onto a requested goal/interest,
- parenting-style fit (10) is a fixed per-style weight,
- budget fit (10) applies only when a budget is given.

Products scoring at least MATCH_THRESHOLD are kept, then sorted by a fresh
recomputation of the same score. Lookup tables and weights live in config.py.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from config import (
    CHILD_INTEREST_LABELS,
    GROWTH_GOAL_LABELS,
    MATCH_POINTS,
    MATCH_THRESHOLD,
    PARENTING_STYLE_WEIGHTS,
    SKILL_GOAL_MAP,
    TAG_INTEREST_MAP,
    ChildInterest,
    Gender,
    GrowthGoal,
    ParentingStyle,
)
from scoring.criteria import SmartSearchCriteria

logger = logging.getLogger(__name__)


def skill_matches_goal(skill: str, goal: GrowthGoal) -> bool:
    return goal in SKILL_GOAL_MAP.get(skill, ())


def tag_matches_interest(tag: str, interest: ChildInterest) -> bool:
    return interest in TAG_INTEREST_MAP.get(tag, ())


def parenting_style_weight(style: ParentingStyle) -> float:
    return PARENTING_STYLE_WEIGHTS[ParentingStyle(style)]


def _matching_share(items: Sequence[str], matches) -> float:
    """Fraction of items accepted by `matches`. An empty list contributes 0."""
    if not items:
        return 0.0
    return sum(1 for item in items if matches(item)) / len(items)


def _age_fits(product: Dict, age: int) -> bool:
    age_range = product.get("age_range") or {}
    low, high = age_range.get("min"), age_range.get("max")
    if low is None or high is None:
        return False
    return low <= age <= high


def _gender_fits(product: Dict, gender: Gender) -> bool:
    product_gender = product.get("gender")
    return product_gender == Gender(gender).value or product_gender == Gender.UNISEX.value


def score_breakdown(product: Dict, criteria: SmartSearchCriteria) -> Dict[str, float]:
    goals = criteria.growth_goals
    interests = criteria.interests

    goal_share = _matching_share(
        product.get("skills", []),
        lambda skill: any(skill_matches_goal(skill, g) for g in goals),
    )
    interest_share = _matching_share(
        product.get("tags", []),
        lambda tag: any(tag_matches_interest(tag, i) for i in interests),
    )

    breakdown = {
        "age": MATCH_POINTS["age"] if _age_fits(product, criteria.child_age) else 0.0,
        "gender": MATCH_POINTS["gender"] if _gender_fits(product, criteria.child_gender) else 0.0,
        "goals": goal_share * MATCH_POINTS["goals"],
        "interests": interest_share * MATCH_POINTS["interests"],
        "style": parenting_style_weight(criteria.parenting_style) * MATCH_POINTS["style"],
        "budget": 0.0,
    }
    if criteria.budget is not None and criteria.budget.contains(product.get("price", 0)):
        breakdown["budget"] = MATCH_POINTS["budget"]

    breakdown["total"] = (
        breakdown["age"]
        + breakdown["gender"]
        + breakdown["goals"]
        + breakdown["interests"]
        + breakdown["style"]
        + breakdown["budget"]
    )
    return breakdown


def calculate_product_score(product: Dict, criteria: SmartSearchCriteria) -> float:
    return score_breakdown(product, criteria)["total"]


def _in_scope(product: Dict, criteria: SmartSearchCriteria) -> bool:
    category = product.get("category", "")
    if criteria.exclude_categories and category in criteria.exclude_categories:
        return False
    if criteria.preferred_categories and category not in criteria.preferred_categories:
        return False
    return True


def smart_search(criteria: SmartSearchCriteria, products: Iterable[Dict]) -> List[Dict]:
    candidates = [p for p in products if _in_scope(p, criteria)]

    # Pass 1: threshold filter.
    matched = [p for p in candidates if calculate_product_score(p, criteria) >= MATCH_THRESHOLD]

    # Pass 2: rank by a fresh score; ties keep catalog order.
    matched.sort(key=lambda p: calculate_product_score(p, criteria), reverse=True)

    logger.debug(
        "Smart search kept %d of %d candidate products (threshold %.1f)",
        len(matched), len(candidates), MATCH_THRESHOLD,
    )
    return matched


def build_explanation(product: Dict, criteria: SmartSearchCriteria, scores: Dict[str, float]) -> str:
    parts = []
    if scores["age"]:
        parts.append(f"مناسب سن {criteria.child_age} سال")
    if scores["goals"]:
        goals = [
            GROWTH_GOAL_LABELS[g]
            for g in sorted(criteria.growth_goals, key=list(GrowthGoal).index)
            if any(skill_matches_goal(s, g) for s in product.get("skills", []))
        ]
        parts.append("تقویت " + "، ".join(goals))
    if scores["interests"]:
        interests = [
            CHILD_INTEREST_LABELS[i]
            for i in sorted(criteria.interests, key=list(ChildInterest).index)
            if any(tag_matches_interest(t, i) for t in product.get("tags", []))
        ]
        parts.append("هم‌راستا با علاقه به " + "، ".join(interests))
    if scores["budget"]:
        parts.append("در محدوده بودجه")

    name = product.get("name", "این محصول")
    if not parts:
        return f"{name} با معیارهای شما تطابق کمی دارد."
    return f"{name}: " + "؛ ".join(parts) + "."


def score_product(product: Dict, criteria: SmartSearchCriteria) -> Dict:
    scores = score_breakdown(product, criteria)
    return {
        "product": product,
        "scores": {key: round(value, 2) for key, value in scores.items()},
        "explanation": build_explanation(product, criteria, scores),
    }


def rank_matches(
    criteria: SmartSearchCriteria,
    products: Iterable[Dict],
    top_k: Optional[int] = None,
) -> List[Dict]:
    matched = smart_search(criteria, products)
    if top_k is not None:
        matched = matched[:top_k]
    return [score_product(p, criteria) for p in matched]
