from __future__ import annotations

import streamlit as st


def apply_theme() -> None:
    st.markdown(
        """
        <style>
          @import url('https://fonts.googleapis.com/css2?family=Vazirmatn:wght@400;500;700&display=swap');

          :root {
            --bg: #fdf8f2;
            --surface: #ffffff;
            --text: #23201d;
            --muted: #6e665e;
            --line: #efe3d3;
            --accent: #2f9e8f;
            --accent-dark: #23786c;
          }

          .stApp {
            background: var(--bg);
            color: var(--text);
            font-family: 'Vazirmatn', Tahoma, sans-serif;
            direction: rtl;
          }

          .block-container {
            max-width: 880px;
            padding-top: 1.0rem;
            padding-bottom: 2rem;
          }

          [data-testid="stMarkdownContainer"],
          [data-testid="stWidgetLabel"],
          [data-baseweb="select"] {
            direction: rtl;
            text-align: right;
          }

          [data-testid="stSlider"] {
            direction: ltr;
          }

          .top-nav {
            border-bottom: 1px solid var(--line);
            padding: 0.45rem 0;
            margin-bottom: 0.9rem;
          }

          .brand-mark {
            font-size: 1.45rem;
            font-weight: 700;
            color: var(--accent);
          }

          .stepper {
            display: grid;
            grid-template-columns: repeat(3, 1fr);
            gap: 0.4rem;
            margin: 0.2rem 0 1rem 0;
          }

          .step {
            display: flex;
            flex-direction: column;
            align-items: center;
            gap: 0.24rem;
            color: var(--muted);
            font-size: 0.78rem;
          }

          .step .dot {
            width: 26px;
            height: 26px;
            border-radius: 999px;
            border: 1px solid var(--line);
            background: #fff;
            display: flex;
            align-items: center;
            justify-content: center;
          }

          .step.active .dot,
          .step.done .dot {
            background: var(--accent);
            color: #fff;
            border-color: transparent;
          }

          .hero-wrap {
            text-align: center;
            border: 1px solid var(--line);
            background: var(--surface);
            border-radius: 20px;
            padding: 1.6rem 1.1rem;
            margin-bottom: 1rem;
          }

          .hero-title {
            font-size: 2.2rem;
            font-weight: 700;
            margin: 0;
          }

          .hero-sub {
            color: var(--muted) !important;
            max-width: 640px;
            margin: 0.5rem auto 0 auto;
            line-height: 1.6;
          }

          .section-card {
            border: 1px solid var(--line);
            border-radius: 14px;
            background: var(--surface);
            padding: 0.8rem 0.95rem;
            margin: 0.9rem 0 0.45rem 0;
          }

          .section-title {
            font-weight: 700;
          }

          .section-hint {
            color: var(--muted) !important;
            font-size: 0.89rem;
            margin-top: 0.12rem;
          }

          .stButton > button[kind="primary"] {
            background: var(--accent);
            color: white;
            border-color: transparent;
          }

          .stButton > button[kind="primary"]:hover {
            background: var(--accent-dark);
          }
        </style>
        """,
        unsafe_allow_html=True,
    )


def top_nav() -> None:
    st.markdown(
        """
        <div class="top-nav">
          <div class="brand-mark">اسباب‌بازی هوشمند</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def render_stepper(survey_done: bool, profile_done: bool, results_done: bool) -> None:
    states = [
        ("سبک فرزندپروری", survey_done),
        ("مشخصات کودک", profile_done),
        ("پیشنهادها", results_done),
    ]

    # Active is first incomplete step
    active_idx = len(states) - 1
    for i, (_, done) in enumerate(states):
        if not done:
            active_idx = i
            break

    bits = ["<div class='stepper'>"]
    for i, (label, done) in enumerate(states):
        cls = "done" if done else ("active" if i == active_idx else "")
        marker = "✓" if done else str(i + 1)
        bits.append(
            f"<div class='step {cls}'><div class='dot'>{marker}</div><div>{label}</div></div>"
        )
    bits.append("</div>")
    st.markdown("".join(bits), unsafe_allow_html=True)


def hero_block() -> None:
    st.markdown(
        """
        <div class="hero-wrap">
          <div class="hero-title">اسباب‌بازی مناسب فرزند شما</div>
          <div class="hero-sub">با چند سؤال کوتاه سبک فرزندپروری شما را می‌شناسیم و اسباب‌بازی‌هایی را پیشنهاد می‌دهیم که با سن، علایق و اهداف رشد کودک‌تان هم‌خوان باشند.</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def section_header(title: str, hint: str) -> None:
    st.markdown(
        f"""
        <div class="section-card">
          <div class="section-title">{title}</div>
          <div class="section-hint">{hint}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )
