"""Landing page: event header, highlights and the registration section."""
from html import escape

import streamlit as st

from src.models.choices import COMPETITIVE_SPORTS, ENTERTAINMENT_SPORTS, TSHIRT_SIZES
from src.ui.html_utils import chip_list_html, html_block
from src.ui.registration_form import render_registration_form
from src.utils.settings import get_settings

TAGLINE = (
    "Get Active & Competitive! Join us for entertainment sports, competitive "
    "tournaments, and family-friendly activities."
)


def _hero_html(event_name: str) -> str:
    return html_block(f"""
        <div class="hero">
            <h1>{escape(event_name.upper())}</h1>
            <p>{TAGLINE}</p>
            <a class="hero-cta" href="#registration">Register Now</a>
        </div>
    """)


def _highlight_card_html(icon: str, title: str, items) -> str:
    return html_block(f"""
        <div class="highlight-card">
            <div class="highlight-icon">{icon}</div>
            <h4>{title}</h4>
            {chip_list_html(items)}
        </div>
    """)


def _render_highlights() -> None:
    entertainment_col, competitive_col, kit_col = st.columns(3, gap="medium")

    with entertainment_col:
        st.markdown(
            _highlight_card_html("🏸", "Entertainment Sports", [s["label"] for s in ENTERTAINMENT_SPORTS]),
            unsafe_allow_html=True,
        )
    with competitive_col:
        st.markdown(
            _highlight_card_html("🏆", "Competitive Sports", [s["label"] for s in COMPETITIVE_SPORTS]),
            unsafe_allow_html=True,
        )
    with kit_col:
        st.markdown(
            _highlight_card_html("👕", "Event Kits", TSHIRT_SIZES),
            unsafe_allow_html=True,
        )


def render_home() -> None:
    """Render the full single-page site."""
    settings = get_settings()

    st.markdown(_hero_html(settings.event_name), unsafe_allow_html=True)
    _render_highlights()

    st.markdown("<div id='registration'></div>", unsafe_allow_html=True)
    st.markdown("## Register Now")
    st.caption(
        "Don't miss out on this incredible opportunity to connect with colleagues, "
        "showcase your skills, and create lasting memories with your family."
    )
    render_registration_form()
