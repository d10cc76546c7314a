"""
Card UI Component

Renders the current prompt card with its category badge.
"""

from __future__ import annotations

import re
from html import escape

import streamlit as st

from app.ui.card_style import (
    CARD_BG,
    CARD_MIN_HEIGHT,
    CARD_PADDING,
    CARD_SHADOW,
    COMPACT_CARD_STYLE,
    DEFAULT_CARD_STYLE,
    DEFAULT_PAGE_GRADIENT,
    ROTATION_TILTS,
    CardStyle,
)
from core.deck import Card

LONG_PROMPT_CHARS = 90  # Prompts longer than this use the compact style

_CSS_UNSAFE = re.compile(r"[\"'<>;{}\\]")


def css_value(value: str) -> str:
    """
    Strip characters that could end a CSS declaration, attribute or tag.
    """
    return _CSS_UNSAFE.sub("", value).strip()


def render_page_background(card: Card | None) -> None:
    """
    Paint the page background with the card's category gradient.
    """
    gradient = css_value(card.display.gradient) if card else ""
    gradient = gradient or DEFAULT_PAGE_GRADIENT
    st.markdown(
        f"<style>.stApp {{ background: {gradient}; transition: background 1s ease-in-out; }}</style>",
        unsafe_allow_html=True
    )


def render_card(card: Card, rotation_index: int = 0, style: CardStyle | None = None) -> None:
    """
    Render a prompt card.

    Args:
        card: Card to show
        rotation_index: Cosmetic rotation slot (see ROTATION_TILTS)
        style: Optional style preset; picked from prompt length when omitted
    """
    if style is None:
        style = COMPACT_CARD_STYLE if len(card.text) > LONG_PROMPT_CHARS else DEFAULT_CARD_STYLE

    tilt = ROTATION_TILTS[rotation_index % len(ROTATION_TILTS)]
    badge_color = css_value(card.display.color) or style.default_badge_color

    badge_html = (
        f'<div style="display: inline-block; padding: 8px 20px; border-radius: 999px; '
        f'background: {badge_color}; color: {style.badge_text_color}; '
        f'font-size: {style.badge_font_size}; font-weight: 700; margin-bottom: 28px;">'
        f"{escape(card.category_name)}</div>"
    )
    text_html = (
        f'<p style="font-size: {style.text_font_size}; color: {style.text_color}; '
        f'font-weight: {style.text_weight}; margin: 0; line-height: 1.45; '
        'overflow-wrap: anywhere;">'
        f"{escape(card.text)}</p>"
    )
    html = (
        f'<div style="background: {CARD_BG}; padding: {CARD_PADDING}; '
        f'border-radius: 24px; text-align: center; box-shadow: {CARD_SHADOW}; '
        f'min-height: {CARD_MIN_HEIGHT}; display: flex; flex-direction: column; '
        'align-items: center; justify-content: center; '
        f'transform: rotate({tilt});">{badge_html}{text_html}</div>'
    )

    st.markdown(html, unsafe_allow_html=True)
