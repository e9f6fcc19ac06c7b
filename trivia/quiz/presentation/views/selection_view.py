from collections.abc import Callable
from typing import Any

import streamlit as st

from trivia.config import Messages
from trivia.game.core import Action, CardPayload, SelectionPayload, SubcategoryPayload
from trivia.quiz.presentation.views.components import render_empty_pool_warning

Callback = Callable[[str, Any], None]


def _render_cards(
    cards: list[CardPayload], action: str, key_prefix: str, callback: Callback
) -> None:
    cols = st.columns(2)
    for idx, card in enumerate(cards):
        with cols[idx % 2]:
            if card.image:
                st.image(card.image, use_container_width=True)
            label = f"✅ {card.name}" if card.selected else card.name
            if st.button(
                label,
                key=f"{key_prefix}_{card.id}",
                type="primary" if card.selected else "secondary",
                use_container_width=True,
            ):
                callback(action, card.id)


def render_categories(payload: SelectionPayload, callback: Callback) -> None:
    st.title(payload.title)
    render_empty_pool_warning(payload.empty_pool)

    # Multi-category mode: cards toggle, a start button appears
    if payload.required_count:
        st.caption(f"{payload.chosen_count} / {payload.required_count}")
        _render_cards(payload.cards, Action.TOGGLE_CATEGORY, "cat", callback)

        if st.button(
            Messages.START,
            type="primary",
            disabled=not payload.can_start,
            use_container_width=True,
        ):
            callback(Action.START_GAME, None)
        return

    _render_cards(payload.cards, Action.CHOOSE_CATEGORY, "cat", callback)


def render_subcategories(payload: SubcategoryPayload, callback: Callback) -> None:
    st.title(payload.category_name)
    render_empty_pool_warning(payload.empty_pool)

    _render_cards(payload.cards, Action.CHOOSE_SUBCATEGORY, "sub", callback)

    st.markdown("---")
    if st.button(Messages.BACK, type="secondary"):
        callback(Action.BACK_TO_CATEGORIES, None)
