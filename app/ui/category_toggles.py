"""
Category Toggle UI

Renders one toggle button per catalog category.
"""

import streamlit as st

from core.deck import DeckSession

BUTTONS_PER_ROW = 5


def render_category_toggles(session: DeckSession) -> None:
    """
    Render category toggle buttons and apply clicks to the session.

    Active categories use the primary button style.
    """
    categories = session.catalog.categories
    for row_start in range(0, len(categories), BUTTONS_PER_ROW):
        row = categories[row_start:row_start + BUTTONS_PER_ROW]
        columns = st.columns(len(row))
        for column, category in zip(columns, row):
            with column:
                selected = session.is_selected(category.id)
                if st.button(
                    category.name,
                    key=f"toggle_{category.id}",
                    type="primary" if selected else "secondary",
                    use_container_width=True,
                ):
                    session.toggle_category(category.id)
                    st.rerun()
