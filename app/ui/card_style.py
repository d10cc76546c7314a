"""
Card style presets and constants.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---- Shared Card Layout ----

CARD_PADDING = "48px 32px"
CARD_MIN_HEIGHT = "260px"
CARD_BG = "linear-gradient(135deg, rgba(255,255,255,0.95) 0%, rgba(255,255,255,0.85) 100%)"
CARD_SHADOW = "0 25px 50px -12px rgba(0, 0, 0, 0.25), 0 0 0 1px rgba(255,255,255,0.05)"
DEFAULT_PAGE_GRADIENT = "linear-gradient(135deg, #eff6ff 0%, #f0f9ff 50%, #dbeafe 100%)"


# ---- Background Rotation ----
# One tilt per rotation slot; the slot advances with every draw

ROTATION_TILTS = ("-1.2deg", "0.6deg", "1.2deg", "-0.6deg")


@dataclass(frozen=True)
class CardStyle:
    """
    Visual style for the prompt card.
    """
    text_font_size: str = "2.1em"
    text_color: str = "#1f2937"
    text_weight: str = "700"
    badge_font_size: str = "1em"
    badge_text_color: str = "#ffffff"
    default_badge_color: str = "#374151"


DEFAULT_CARD_STYLE = CardStyle()

COMPACT_CARD_STYLE = CardStyle(
    text_font_size="1.6em",
    badge_font_size="0.9em",
)
