from collections.abc import Callable
from typing import Any

import streamlit as st

from trivia.game.core import ScreenType, UIModel
from trivia.quiz.presentation.views import question_view, selection_view, summary_view
from trivia.shared.telemetry import Telemetry


class StreamlitRenderer:
    """
    Translates controller DTOs (UIModel) into Streamlit widgets.
    """

    def __init__(self) -> None:
        self.telemetry = Telemetry("StreamlitRenderer")

    def render(
        self, ui_model: UIModel | None, callback_handler: Callable[[str, Any], None]
    ) -> None:
        if not ui_model:
            self.telemetry.log_info("UI Model is None. Rendering fallback.")
            st.info("...")
            return

        step_type = ui_model.type
        payload = ui_model.payload
        self.telemetry.log_debug(f"Rendering Screen: {step_type}")

        if step_type == ScreenType.CATEGORIES:
            selection_view.render_categories(payload, callback_handler)
        elif step_type == ScreenType.SUBCATEGORIES:
            selection_view.render_subcategories(payload, callback_handler)
        elif step_type == ScreenType.QUESTION:
            question_view.render_active(payload, callback_handler)
        elif step_type == ScreenType.FEEDBACK:
            question_view.render_feedback(payload)
        elif step_type == ScreenType.SUMMARY:
            summary_view.render(payload, callback_handler)
        else:
            self.telemetry.log_error(
                f"Unknown Screen Type: {step_type}", Exception("Renderer Error")
            )
            st.error(f"Unknown Screen Type: {step_type}")
