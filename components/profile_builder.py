from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, FrozenSet, Iterable, Optional, Type

from config import (
    DEFAULT_CHILD_AGE,
    DEFAULT_GENDER,
    DEFAULT_PARENTING_STYLE,
    ChildInterest,
    ChildPersonality,
    Gender,
    GrowthGoal,
    ParentingStyle,
)
from scoring.criteria import Budget, SmartSearchCriteria

logger = logging.getLogger(__name__)


def _coerce(enum_cls: Type[Enum], value, default=None):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).lower())
    except ValueError:
        if default is not None:
            logger.warning("Unknown %s %r, using %s", enum_cls.__name__, value, default.value)
        return default


def _coerce_all(enum_cls: Type[Enum], values: Optional[Iterable]) -> FrozenSet:
    picked = set()
    for value in values or []:
        member = _coerce(enum_cls, value)
        if member is None:
            logger.warning("Dropping unknown %s %r", enum_cls.__name__, value)
            continue
        picked.add(member)
    return frozenset(picked)


def _build_budget(manual: Dict) -> Optional[Budget]:
    low, high = manual.get("budget_min"), manual.get("budget_max")
    if low is None or high is None:
        return None
    return Budget(min=float(low), max=float(high))


def build_search_criteria(manual: Dict) -> SmartSearchCriteria:
    """Turn raw storefront form state into typed search criteria."""
    personality = _coerce_all(ChildPersonality, manual.get("personality"))

    return SmartSearchCriteria(
        child_age=int(manual.get("child_age", DEFAULT_CHILD_AGE)),
        child_gender=_coerce(Gender, manual.get("child_gender", DEFAULT_GENDER), DEFAULT_GENDER),
        interests=_coerce_all(ChildInterest, manual.get("interests")),
        growth_goals=_coerce_all(GrowthGoal, manual.get("growth_goals")),
        parenting_style=_coerce(
            ParentingStyle,
            manual.get("parenting_style", DEFAULT_PARENTING_STYLE),
            DEFAULT_PARENTING_STYLE,
        ),
        budget=_build_budget(manual),
        personality=tuple(p for p in ChildPersonality if p in personality),
        preferred_categories=tuple(manual.get("preferred_categories") or ()),
        exclude_categories=tuple(manual.get("exclude_categories") or ()),
    )
