from collections.abc import Callable
from typing import Any

import streamlit as st

from trivia.config import Messages
from trivia.game.core import Action, QuestionPayload
from trivia.quiz.presentation.views.components import render_scoreboard

Callback = Callable[[str, Any], None]


def render_active(payload: QuestionPayload, callback: Callback) -> None:
    """Question with selectable options; submit stays disabled until one is picked."""
    render_scoreboard(payload.counter_text, payload.score_text)
    st.markdown(
        f'<div class="question-text">{payload.prompt}</div>', unsafe_allow_html=True
    )

    for idx, text in enumerate(payload.options):
        is_selected = payload.selected_option == idx
        if st.button(
            text,
            key=f"opt_{payload.current_index}_{idx}",
            type="primary" if is_selected else "secondary",
            use_container_width=True,
        ):
            callback(Action.SELECT_OPTION, idx)

    if st.button(
        Messages.SUBMIT,
        key=f"submit_{payload.current_index}",
        disabled=not payload.can_submit,
    ):
        callback(Action.SUBMIT_ANSWER, None)


def render_feedback(payload: QuestionPayload) -> None:
    """
    Reveal: the correct option in green, a wrong pick in red.
    No inputs; the controller advances on its own after a short delay.
    """
    render_scoreboard(payload.counter_text, payload.score_text)
    st.markdown(
        f'<div class="question-text">{payload.prompt}</div>', unsafe_allow_html=True
    )

    fb = payload.feedback
    for idx, text in enumerate(payload.options):
        if fb and idx == fb.correct_index:
            st.success(text, icon="✅")
        elif fb and idx == fb.selected_index:
            st.error(text, icon="❌")
        else:
            st.info(text)

    st.button(Messages.SUBMIT, key=f"submit_{payload.current_index}", disabled=True)
