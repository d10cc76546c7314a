"""UI Components for Next Card"""

from app.ui.card import render_card, render_page_background
from app.ui.category_toggles import render_category_toggles

__all__ = [
    "render_card",
    "render_page_background",
    "render_category_toggles",
]
