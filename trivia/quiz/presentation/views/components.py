import streamlit as st

from trivia.config import Messages


def apply_styles() -> None:
    st.markdown(
        """
        <style>
            .block-container { padding-top: 2rem !important; direction: rtl; text-align: right; }
            .scoreboard { display: flex; justify-content: space-between; font-weight: bold; margin-bottom: 1rem; }
            .question-text { font-size: 1.2rem; font-weight: 600; margin-bottom: 1rem; }
        </style>
        """,
        unsafe_allow_html=True,
    )


def render_scoreboard(counter_text: str, score_text: str) -> None:
    st.markdown(
        f'<div class="scoreboard"><span>{counter_text}</span>'
        f"<span>{score_text}</span></div>",
        unsafe_allow_html=True,
    )


def render_empty_pool_warning(show: bool) -> None:
    if show:
        st.warning(Messages.EMPTY_POOL)
