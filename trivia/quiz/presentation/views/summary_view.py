from collections.abc import Callable
from typing import Any

import streamlit as st

from trivia.config import Messages
from trivia.game.core import Action, SummaryPayload


def render(payload: SummaryPayload, callback: Callable[[str, Any], None]) -> None:
    st.title("🏁")

    col1, col2 = st.columns(2)
    col1.metric("النتيجة", f"{payload.score} / {payload.total}")
    percent = (payload.score / payload.total * 100) if payload.total > 0 else 0
    col2.metric("النسبة", f"{int(percent)}%")

    st.success(payload.message)

    if payload.history:
        st.markdown(" ".join("✅" if ok else "❌" for ok in payload.history))

    st.markdown("---")
    if st.button(Messages.PLAY_AGAIN, type="primary", use_container_width=True):
        callback(Action.RESTART, None)
