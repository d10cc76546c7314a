"""
Next Card - Main App

Single-screen Streamlit UI: pick categories, draw a conversation card.
"""

import logging

import streamlit as st

from app.state import ensure_session_state
from app.ui import render_card, render_category_toggles, render_page_background
from core import deck


# ---- Page Setup ----

st.set_page_config(
    page_title="Next Card",
    page_icon="🃏",
    layout="centered"
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)


# ---- Session State Initialization ----

ensure_session_state()


# ---- UI Rendering ----

def render_header() -> None:
    """Render title and tagline."""
    st.markdown(
        "<h1 style='text-align: center; font-size: 3.2rem; margin-bottom: 0;'>Next Card</h1>"
        "<p style='text-align: center; font-size: 1.3rem; color: #374151; margin: 0.5rem 0 0 0;'>"
        "Push the button. Start the conversation.</p>"
        "<p style='text-align: center; color: #4b5563;'>A game for connection.</p>",
        unsafe_allow_html=True
    )


def render_controls(session: deck.DeckSession) -> None:
    """Render the manual re-draw button."""
    _, col, _ = st.columns([1, 2, 1])
    with col:
        if st.button("Next Card", type="primary", use_container_width=True):
            session.request_draw()
            st.rerun()


def render_footer() -> None:
    st.markdown(
        "<p style='text-align: center; color: #4b5563; margin-top: 1.5rem;'>"
        "No accounts. No clutter. Just conversation.</p>",
        unsafe_allow_html=True
    )


# ---- Main App ----

def main():
    """Main app entry point."""
    session: deck.DeckSession = st.session_state.deck
    card = session.get_current_card()

    render_page_background(card)
    render_header()
    st.markdown("<br>", unsafe_allow_html=True)

    render_category_toggles(session)
    st.markdown("<br>", unsafe_allow_html=True)

    if card is not None:
        render_card(card, rotation_index=session.rotation_index)
    else:
        st.info("No cards in the selected categories.")
    st.markdown("<br>", unsafe_allow_html=True)

    render_controls(session)
    render_footer()

    if deck.is_test_mode():
        st.caption("TEST MODE - Using nextcard_test.db")


if __name__ == "__main__":
    main()
