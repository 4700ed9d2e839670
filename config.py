"""Centralized configuration for ToyMatch.

Single source of truth for every vocabulary, Persian label, lookup table and
scoring constant. Every module that needs an interest, a growth goal or a
parenting style should import from here.
"""
from __future__ import annotations

import os
from enum import Enum
from types import MappingProxyType
from typing import Dict, List


# ── Vocabularies ───────────────────────────────────────────────────────
# Used by: survey analyzer, questionnaires, profile builder, catalog
# validation, match engine, Streamlit UI.

class ParentingArchetype(str, Enum):
    """Archetypes scored by the six-question survey. Declaration order is the
    tie-break order for dominant styles."""

    AUTHORITATIVE = "authoritative"
    MINDFUL = "mindful"
    ATTACHMENT_BASED = "attachment_based"
    MONTESSORI = "montessori"
    AUTHORITARIAN = "authoritarian"
    PERMISSIVE = "permissive"


class ParentingStyle(str, Enum):
    """Styles understood by the match engine and the style questionnaire."""

    AUTHORITATIVE = "authoritative"
    AUTHORITARIAN = "authoritarian"
    PERMISSIVE = "permissive"
    NEGLECTFUL = "neglectful"
    HELICOPTER = "helicopter"
    FREE_RANGE = "free_range"


class ChildPersonality(str, Enum):
    INTROVERT = "introvert"
    EXTROVERT = "extrovert"
    SENSITIVE = "sensitive"
    ADVENTUROUS = "adventurous"
    ANALYTICAL = "analytical"
    CREATIVE = "creative"
    LEADER = "leader"
    TEAM_PLAYER = "team_player"
    INDEPENDENT = "independent"
    DEPENDENT = "dependent"


class GrowthGoal(str, Enum):
    COGNITIVE_DEVELOPMENT = "cognitive_development"
    EMOTIONAL_INTELLIGENCE = "emotional_intelligence"
    SOCIAL_SKILLS = "social_skills"
    PHYSICAL_DEVELOPMENT = "physical_development"
    CREATIVITY = "creativity"
    PROBLEM_SOLVING = "problem_solving"
    LANGUAGE_SKILLS = "language_skills"
    MOTOR_SKILLS = "motor_skills"
    SELF_CONFIDENCE = "self_confidence"
    INDEPENDENCE = "independence"


class ChildInterest(str, Enum):
    ART_CRAFTS = "art_crafts"
    MUSIC = "music"
    SPORTS = "sports"
    SCIENCE = "science"
    TECHNOLOGY = "technology"
    NATURE = "nature"
    ANIMALS = "animals"
    READING = "reading"
    PUZZLES = "puzzles"
    BUILDING = "building"
    PRETEND_PLAY = "pretend_play"
    OUTDOOR_ACTIVITIES = "outdoor_activities"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    UNISEX = "unisex"


GENDERS = [g.value for g in Gender]
GENDERS_SET = set(GENDERS)

# ── Persian labels ─────────────────────────────────────────────────────

ARCHETYPE_LABELS: Dict[ParentingArchetype, str] = {
    ParentingArchetype.AUTHORITATIVE: "مقتدرانه",
    ParentingArchetype.MINDFUL: "آگاهانه",
    ParentingArchetype.ATTACHMENT_BASED: "مبتنی بر دلبستگی",
    ParentingArchetype.MONTESSORI: "مونته‌سوری",
    ParentingArchetype.AUTHORITARIAN: "اقتدارگرا",
    ParentingArchetype.PERMISSIVE: "سهل‌انگارانه",
}

PARENTING_STYLE_LABELS: Dict[ParentingStyle, str] = {
    ParentingStyle.AUTHORITATIVE: "مقتدرانه",
    ParentingStyle.AUTHORITARIAN: "مستبدانه",
    ParentingStyle.PERMISSIVE: "سهل‌گیرانه",
    ParentingStyle.NEGLECTFUL: "غفلت‌کننده",
    ParentingStyle.HELICOPTER: "هلیکوپتری",
    ParentingStyle.FREE_RANGE: "آزادانه",
}

CHILD_PERSONALITY_LABELS: Dict[ChildPersonality, str] = {
    ChildPersonality.INTROVERT: "درون‌گرا",
    ChildPersonality.EXTROVERT: "برون‌گرا",
    ChildPersonality.SENSITIVE: "حساس",
    ChildPersonality.ADVENTUROUS: "ماجراجو",
    ChildPersonality.ANALYTICAL: "تحلیلی",
    ChildPersonality.CREATIVE: "خلاق",
    ChildPersonality.LEADER: "رهبر",
    ChildPersonality.TEAM_PLAYER: "تیمی",
    ChildPersonality.INDEPENDENT: "مستقل",
    ChildPersonality.DEPENDENT: "وابسته",
}

GROWTH_GOAL_LABELS: Dict[GrowthGoal, str] = {
    GrowthGoal.COGNITIVE_DEVELOPMENT: "رشد شناختی",
    GrowthGoal.EMOTIONAL_INTELLIGENCE: "هوش هیجانی",
    GrowthGoal.SOCIAL_SKILLS: "مهارت‌های اجتماعی",
    GrowthGoal.PHYSICAL_DEVELOPMENT: "رشد جسمانی",
    GrowthGoal.CREATIVITY: "خلاقیت",
    GrowthGoal.PROBLEM_SOLVING: "حل مسئله",
    GrowthGoal.LANGUAGE_SKILLS: "مهارت‌های زبانی",
    GrowthGoal.MOTOR_SKILLS: "مهارت‌های حرکتی",
    GrowthGoal.SELF_CONFIDENCE: "اعتماد به نفس",
    GrowthGoal.INDEPENDENCE: "استقلال",
}

CHILD_INTEREST_LABELS: Dict[ChildInterest, str] = {
    ChildInterest.ART_CRAFTS: "هنر و کاردستی",
    ChildInterest.MUSIC: "موسیقی",
    ChildInterest.SPORTS: "ورزش",
    ChildInterest.SCIENCE: "علوم",
    ChildInterest.TECHNOLOGY: "تکنولوژی",
    ChildInterest.NATURE: "طبیعت",
    ChildInterest.ANIMALS: "حیوانات",
    ChildInterest.READING: "مطالعه",
    ChildInterest.PUZZLES: "پازل",
    ChildInterest.BUILDING: "ساختن",
    ChildInterest.PRETEND_PLAY: "بازی تخیلی",
    ChildInterest.OUTDOOR_ACTIVITIES: "فعالیت‌های بیرون از خانه",
}

GENDER_LABELS: Dict[Gender, str] = {
    Gender.MALE: "پسر",
    Gender.FEMALE: "دختر",
    Gender.UNISEX: "فرقی نمی‌کند",
}

# ── Parenting survey ───────────────────────────────────────────────────
# Each question is one bipolar axis scored 1..10 (min pole → max pole).

SURVEY_MIN_ANSWER = 1
SURVEY_MAX_ANSWER = 10
SURVEY_DEFAULT_ANSWER = 5

SURVEY_QUESTIONS: List[Dict[str, str]] = [
    {"key": "Q1", "label": "وقتی فرزندتون قانونی را نقض میکند اولویتتون چیه؟",
     "min_label": "اجرای قانون", "max_label": "حفظ رابطه"},
    {"key": "Q2", "label": "موقع خستگی ، واکنشتون به رفتار کودک بیشتر ناخودآگاه هست یا فکر شده؟",
     "min_label": "ناخوداگاه", "max_label": "فکر شده"},
    {"key": "Q3", "label": "چقدر در تصمیم گیری ها نظر کودک را هم میپرسیم؟",
     "min_label": "کم", "max_label": "زیاد"},
    {"key": "Q4", "label": "با احساسات شدید کودک (مثل عصبانیت و یا ناراحتی) چه میکنید؟",
     "min_label": "نادیده گرفتن", "max_label": "هدایت کردن"},
    {"key": "Q5", "label": "وقتی اشتباه میکند بیشتر بروی نتیجه تمرکز میکنید یا ریشه رفتار؟",
     "min_label": "نتیجه", "max_label": "ریشه رفتار"},
    {"key": "Q6", "label": "چقدر از مسئولیت هایش را به خودش میسپارید؟",
     "min_label": "کم", "max_label": "زیاد"},
]
SURVEY_KEYS = [q["key"] for q in SURVEY_QUESTIONS]

DOMINANT_STYLE_COUNT = 3

# ── Match engine tables ────────────────────────────────────────────────
# Product skills/tags are free Persian strings; anything not listed here
# matches nothing.

SKILL_GOAL_MAP = MappingProxyType({
    "ریاضی": (GrowthGoal.COGNITIVE_DEVELOPMENT, GrowthGoal.PROBLEM_SOLVING),
    "منطق": (GrowthGoal.COGNITIVE_DEVELOPMENT, GrowthGoal.PROBLEM_SOLVING),
    "خلاقیت": (GrowthGoal.CREATIVITY,),
    "اجتماعی": (GrowthGoal.SOCIAL_SKILLS, GrowthGoal.EMOTIONAL_INTELLIGENCE),
    "حرکتی": (GrowthGoal.PHYSICAL_DEVELOPMENT, GrowthGoal.MOTOR_SKILLS),
    "زبانی": (GrowthGoal.LANGUAGE_SKILLS,),
    "اعتماد به نفس": (GrowthGoal.SELF_CONFIDENCE,),
    "استقلال": (GrowthGoal.INDEPENDENCE,),
})

TAG_INTEREST_MAP = MappingProxyType({
    "هنری": (ChildInterest.ART_CRAFTS,),
    "موسیقی": (ChildInterest.MUSIC,),
    "ورزشی": (ChildInterest.SPORTS,),
    "علمی": (ChildInterest.SCIENCE,),
    "تکنولوژی": (ChildInterest.TECHNOLOGY,),
    "طبیعت": (ChildInterest.NATURE,),
    "حیوانات": (ChildInterest.ANIMALS,),
    "کتاب": (ChildInterest.READING,),
    "پازل": (ChildInterest.PUZZLES,),
    "ساختن": (ChildInterest.BUILDING,),
    "تخیلی": (ChildInterest.PRETEND_PLAY,),
    "بیرون از خانه": (ChildInterest.OUTDOOR_ACTIVITIES,),
})

PARENTING_STYLE_WEIGHTS = MappingProxyType({
    ParentingStyle.AUTHORITATIVE: 1.0,
    ParentingStyle.AUTHORITARIAN: 0.8,
    ParentingStyle.PERMISSIVE: 0.9,
    ParentingStyle.NEGLECTFUL: 0.6,
    ParentingStyle.HELICOPTER: 0.7,
    ParentingStyle.FREE_RANGE: 0.8,
})

# ── Scoring points ─────────────────────────────────────────────────────

MATCH_POINTS = MappingProxyType({
    "age": 20.0,
    "gender": 15.0,
    "goals": 25.0,
    "interests": 20.0,
    "style": 10.0,
    "budget": 10.0,
})
MATCH_THRESHOLD = 50.0

# ── UI defaults ────────────────────────────────────────────────────────

DEFAULT_CHILD_AGE = 5
DEFAULT_GENDER = Gender.UNISEX
DEFAULT_PARENTING_STYLE = ParentingStyle.AUTHORITATIVE
DEFAULT_BUDGET_MIN = 0
DEFAULT_BUDGET_MAX = 1_000_000

# ── Deployment settings (environment / .env) ───────────────────────────

CATALOG_ENV_VAR = "TOYMATCH_CATALOG"
LOG_LEVEL = os.getenv("TOYMATCH_LOG_LEVEL", "INFO").upper()
