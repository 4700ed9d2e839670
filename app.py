from __future__ import annotations

import logging
from pathlib import Path

from dotenv import load_dotenv
load_dotenv()

import streamlit as st

from components.product_catalog import filter_products, list_categories, load_catalog
from components.profile_builder import build_search_criteria
from components.ui_theme import apply_theme, hero_block, render_stepper, section_header, top_nav
from config import (
    ARCHETYPE_LABELS,
    CHILD_INTEREST_LABELS,
    CHILD_PERSONALITY_LABELS,
    DEFAULT_BUDGET_MAX,
    DEFAULT_BUDGET_MIN,
    DEFAULT_CHILD_AGE,
    GENDER_LABELS,
    GROWTH_GOAL_LABELS,
    LOG_LEVEL,
    PARENTING_STYLE_LABELS,
    SURVEY_DEFAULT_ANSWER,
    SURVEY_MAX_ANSWER,
    SURVEY_MIN_ANSWER,
    SURVEY_QUESTIONS,
    ChildInterest,
    Gender,
    GrowthGoal,
    ParentingStyle,
)
from data.mock_data import MOCK_FAMILIES
from data.questionnaires import PARENTING_STYLE_QUESTIONS, PERSONALITY_QUESTIONS
from scoring.parenting_style import analyze_parenting_styles, describe_dominant_styles
from scoring.questionnaire import calculate_parenting_style, calculate_personality_traits
from scoring.smart_match import rank_matches

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

st.set_page_config(page_title="اسباب‌بازی هوشمند", page_icon="🧸", layout="wide")
apply_theme()

for key, default in {
    "survey_answers": {q["key"]: SURVEY_DEFAULT_ANSWER for q in SURVEY_QUESTIONS},
    "style_result": None,
    "manual_profile": {},
    "_results": [],
    "_catalog_name": "",
}.items():
    if key not in st.session_state:
        st.session_state[key] = default

base_dir = Path(__file__).resolve().parent
products, products_path = load_catalog(base_dir)


def _choose(question: dict, key_prefix: str) -> str:
    labels = {opt["value"]: opt["text"] for opt in question["options"]}
    return st.radio(
        question["question"],
        list(labels),
        format_func=labels.get,
        index=None,
        key=f"{key_prefix}_{question['id']}",
    )


top_nav()
render_stepper(
    bool(st.session_state.style_result),
    bool(st.session_state.manual_profile),
    bool(st.session_state._results),
)
hero_block()

with st.expander("نمونه خانواده‌ها", expanded=False):
    for family in MOCK_FAMILIES:
        if st.button(f"پر کردن فرم با نمونه {family['name']}", key=f"mock_{family['name']}"):
            st.session_state.survey_answers = dict(family["survey"])
            st.session_state.manual_profile = dict(family["search"])
            st.session_state.style_result = analyze_parenting_styles(family["survey"])
            st.rerun()

# ── 1) Survey ──────────────────────────────────────────────────────────

section_header("۱) سبک فرزندپروری", "به هر سؤال از ۱ تا ۱۰ امتیاز دهید.")

answers = {}
for q in SURVEY_QUESTIONS:
    answers[q["key"]] = st.slider(
        q["label"],
        min_value=SURVEY_MIN_ANSWER,
        max_value=SURVEY_MAX_ANSWER,
        value=int(st.session_state.survey_answers.get(q["key"], SURVEY_DEFAULT_ANSWER)),
        help=f"{SURVEY_MIN_ANSWER}: {q['min_label']} · {SURVEY_MAX_ANSWER}: {q['max_label']}",
    )

if st.button("تحلیل سبک فرزندپروری", type="primary", use_container_width=True):
    st.session_state.survey_answers = answers
    st.session_state.style_result = analyze_parenting_styles(answers, strict=True)

result = st.session_state.style_result
if result:
    st.success(describe_dominant_styles(result))
    with st.expander("امتیاز همه سبک‌ها", expanded=False):
        for style, score in result.scores.items():
            st.caption(f"{ARCHETYPE_LABELS[style]}: {score:.2f}")

with st.expander("پرسشنامه تعیین سبک برای جستجو", expanded=False):
    style_answers = {q["id"]: _choose(q, "style") for q in PARENTING_STYLE_QUESTIONS}
    if st.button("محاسبه سبک"):
        picked = calculate_parenting_style(style_answers)
        st.session_state.manual_profile = {
            **st.session_state.manual_profile,
            "parenting_style": picked.value,
        }
        st.info(f"سبک شما: {PARENTING_STYLE_LABELS[picked]}")

# ── 2) Child profile ───────────────────────────────────────────────────

section_header("۲) مشخصات کودک", "سن، جنسیت، علایق و اهداف رشد فرزندتان را انتخاب کنید.")

manual = st.session_state.manual_profile

col_a, col_b = st.columns(2)
with col_a:
    child_age = st.number_input("سن کودک", min_value=0, max_value=18,
                                value=int(manual.get("child_age", DEFAULT_CHILD_AGE)))
with col_b:
    gender_options = list(Gender)
    default_gender = Gender(manual.get("child_gender", Gender.UNISEX.value))
    child_gender = st.selectbox("جنسیت", gender_options, index=gender_options.index(default_gender),
                                format_func=GENDER_LABELS.get)

interests = st.multiselect(
    "علایق کودک",
    list(ChildInterest),
    default=[ChildInterest(i) for i in manual.get("interests", [])],
    format_func=CHILD_INTEREST_LABELS.get,
)
growth_goals = st.multiselect(
    "اهداف رشد",
    list(GrowthGoal),
    default=[GrowthGoal(g) for g in manual.get("growth_goals", [])],
    format_func=GROWTH_GOAL_LABELS.get,
)

style_options = list(ParentingStyle)
default_style = ParentingStyle(manual.get("parenting_style", ParentingStyle.AUTHORITATIVE.value))
parenting_style = st.selectbox("سبک فرزندپروری", style_options,
                               index=style_options.index(default_style),
                               format_func=PARENTING_STYLE_LABELS.get)

col_c, col_d = st.columns(2)
with col_c:
    budget_min = st.number_input("حداقل بودجه (تومان)", min_value=0, step=10000,
                                 value=int(manual.get("budget_min", DEFAULT_BUDGET_MIN)))
with col_d:
    budget_max = st.number_input("حداکثر بودجه (تومان)", min_value=0, step=10000,
                                 value=int(manual.get("budget_max", DEFAULT_BUDGET_MAX)))

categories = list_categories(products)
preferred = st.multiselect("فقط این دسته‌ها (اختیاری)", categories,
                           default=manual.get("preferred_categories") or None)
excluded = st.multiselect("به‌جز این دسته‌ها (اختیاری)", categories,
                          default=manual.get("exclude_categories") or None)

personality = manual.get("personality", [])
with st.expander("ویژگی‌های شخصیتی کودک (اختیاری)", expanded=False):
    trait_answers = {q["id"]: _choose(q, "trait") for q in PERSONALITY_QUESTIONS}
    if st.button("محاسبه ویژگی‌ها"):
        traits = calculate_personality_traits(trait_answers)
        personality = [t.value for t in traits]
        st.session_state.manual_profile = {**manual, "personality": personality}
        st.info("، ".join(CHILD_PERSONALITY_LABELS[t] for t in traits))

# ── 3) Results ─────────────────────────────────────────────────────────

section_header("۳) پیشنهادها", "اسباب‌بازی‌هایی که حداقل ۵۰ امتیاز تطابق دارند.")

if st.button("جستجوی هوشمند", type="primary", use_container_width=True):
    st.session_state.manual_profile = {
        "child_age": child_age,
        "child_gender": child_gender.value,
        "interests": [i.value for i in interests],
        "growth_goals": [g.value for g in growth_goals],
        "parenting_style": parenting_style.value,
        "budget_min": budget_min,
        "budget_max": budget_max,
        "personality": personality,
        "preferred_categories": preferred,
        "exclude_categories": excluded,
    }
    criteria = build_search_criteria(st.session_state.manual_profile)
    st.session_state._results = rank_matches(criteria, products)
    st.session_state._catalog_name = products_path.name

if st.session_state.get("_results"):
    st.subheader("پیشنهادهای ما")
    for idx, item in enumerate(st.session_state._results, start=1):
        p = item["product"]
        s = item["scores"]
        with st.container(border=True):
            st.markdown(f"### {idx}. {p.get('name', 'محصول')}")
            st.caption(f"{p.get('brand', '')} · {p.get('category', '')}")
            st.write(item["explanation"])
            st.caption(f"قیمت: {p.get('price', 0):,} تومان")
            with st.expander("جزئیات امتیاز", expanded=False):
                st.caption(
                    f"کل {s['total']} · سن {s['age']} · جنسیت {s['gender']} · اهداف {s['goals']} "
                    f"· علایق {s['interests']} · سبک {s['style']} · بودجه {s['budget']}"
                )
    st.caption(f"منبع کاتالوگ: {st.session_state._catalog_name}")
elif st.session_state.manual_profile:
    st.info("محصولی با تطابق کافی پیدا نشد.")

with st.expander("جستجوی ساده در کاتالوگ", expanded=False):
    term = st.text_input("نام یا برچسب محصول")
    if term:
        for p in filter_products(products, search=term):
            st.write(f"- {p['name']} ({p.get('category', '')})")
