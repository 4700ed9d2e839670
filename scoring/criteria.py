from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple

from config import (
    ChildInterest,
    ChildPersonality,
    Gender,
    GrowthGoal,
    ParentingStyle,
)


@dataclass(frozen=True)
class Budget:
    min: float
    max: float

    def contains(self, price: Optional[float]) -> bool:
        if price is None:
            return False
        return self.min <= price <= self.max


@dataclass(frozen=True)
class SmartSearchCriteria:
    """Everything the match engine knows about the child and the parent."""

    child_age: int
    child_gender: Gender
    interests: FrozenSet[ChildInterest] = frozenset()
    growth_goals: FrozenSet[GrowthGoal] = frozenset()
    parenting_style: ParentingStyle = ParentingStyle.AUTHORITATIVE
    budget: Optional[Budget] = None
    personality: Tuple[ChildPersonality, ...] = ()
    preferred_categories: Tuple[str, ...] = ()
    exclude_categories: Tuple[str, ...] = ()
