# ==============================================================================
# ARCHITECTURE: UNIT TEST (PRESENTATION LAYER)
# ------------------------------------------------------------------------------
# GOAL: Verify View Logic (e.g., 'If button clicked, trigger callback').
# CONSTRAINTS:
#   1. DEPENDENCIES: MUST mock the 'streamlit' library.
#   2. STATE: Views never touch the controller; they only call the callback.
# ==============================================================================
from unittest.mock import MagicMock, Mock, patch

import pytest

from trivia.config import Messages
from trivia.game.core import (
    Action,
    CardPayload,
    QuestionPayload,
    ScreenType,
    SelectionPayload,
    SubcategoryPayload,
    SummaryPayload,
    UIModel,
)
from trivia.quiz.domain.models import AnswerResult
from trivia.quiz.presentation.renderer import StreamlitRenderer

PATCHED_MODULES = [
    "trivia.quiz.presentation.renderer.st",
    "trivia.quiz.presentation.views.components.st",
    "trivia.quiz.presentation.views.selection_view.st",
    "trivia.quiz.presentation.views.question_view.st",
    "trivia.quiz.presentation.views.summary_view.st",
]


@pytest.fixture
def mock_st():
    """One Streamlit mock shared by the renderer and every view."""
    st = MagicMock()

    def create_cols(spec=1, *args, **kwargs):
        count = spec if isinstance(spec, int) else len(spec)
        return [MagicMock() for _ in range(count)]

    st.columns.side_effect = create_cols
    st.button.return_value = False

    patchers = [patch(target, st) for target in PATCHED_MODULES]
    for p in patchers:
        p.start()
    yield st
    for p in reversed(patchers):
        p.stop()


@pytest.fixture
def renderer():
    return StreamlitRenderer()


def _button_keys(st):
    return [c.kwargs.get("key") for c in st.button.call_args_list]


def _click(st, key):
    """Makes only the button with `key` report a click."""
    st.button.side_effect = lambda *args, **kwargs: kwargs.get("key") == key


def _question_payload(**overrides):
    data = dict(
        prompt="Capital?",
        options=["A", "B", "C", "D"],
        current_index=2,
        total_count=6,
        counter_text="2 / 6",
        score=1,
        score_text="1",
    )
    data.update(overrides)
    return QuestionPayload(**data)


class TestSelectionScreens:
    def test_category_click_sends_choose_category(self, renderer, mock_st):
        callback = Mock()
        _click(mock_st, "cat_science")
        payload = SelectionPayload(
            title="Pick",
            cards=[CardPayload(id="history", name="H"), CardPayload(id="science", name="S")],
        )

        renderer.render(UIModel(ScreenType.CATEGORIES, payload), callback)

        callback.assert_called_once_with(Action.CHOOSE_CATEGORY, "science")
        mock_st.title.assert_called_once_with("Pick")

    def test_multi_mode_toggles_and_start_disabled(self, renderer, mock_st):
        callback = Mock()
        _click(mock_st, "cat_a")
        payload = SelectionPayload(
            title="Pick three",
            cards=[CardPayload(id="a", name="A"), CardPayload(id="b", name="B", selected=True)],
            chosen_count=1,
            required_count=3,
            can_start=False,
        )

        renderer.render(UIModel(ScreenType.CATEGORIES, payload), callback)

        callback.assert_called_once_with(Action.TOGGLE_CATEGORY, "a")
        start_call = mock_st.button.call_args_list[-1]
        assert start_call.args[0] == Messages.START
        assert start_call.kwargs["disabled"] is True
        labels = [c.args[0] for c in mock_st.button.call_args_list]
        assert "✅ B" in labels

    def test_empty_pool_shows_warning(self, renderer, mock_st):
        payload = SelectionPayload(title="Pick", cards=[], empty_pool=True)

        renderer.render(UIModel(ScreenType.CATEGORIES, payload), Mock())

        mock_st.warning.assert_called_once_with(Messages.EMPTY_POOL)

    def test_subcategory_screen_and_back(self, renderer, mock_st):
        callback = Mock()
        mock_st.button.side_effect = lambda label, *a, **kw: label == Messages.BACK
        payload = SubcategoryPayload(
            category_id="science",
            category_name="Science",
            cards=[CardPayload(id="space", name="Space")],
        )

        renderer.render(UIModel(ScreenType.SUBCATEGORIES, payload), callback)

        assert "sub_space" in _button_keys(mock_st)
        callback.assert_called_once_with(Action.BACK_TO_CATEGORIES, None)


class TestQuestionScreens:
    def test_option_click_sends_index(self, renderer, mock_st):
        callback = Mock()
        _click(mock_st, "opt_2_3")

        renderer.render(UIModel(ScreenType.QUESTION, _question_payload()), callback)

        callback.assert_called_once_with(Action.SELECT_OPTION, 3)

    def test_submit_disabled_without_selection(self, renderer, mock_st):
        renderer.render(UIModel(ScreenType.QUESTION, _question_payload()), Mock())

        submit = mock_st.button.call_args_list[-1]
        assert submit.kwargs["key"] == "submit_2"
        assert submit.kwargs["disabled"] is True

    def test_submit_click(self, renderer, mock_st):
        callback = Mock()
        _click(mock_st, "submit_2")
        payload = _question_payload(selected_option=1, can_submit=True)

        renderer.render(UIModel(ScreenType.QUESTION, payload), callback)

        callback.assert_called_once_with(Action.SUBMIT_ANSWER, None)

    def test_feedback_colours_correct_and_wrong(self, renderer, mock_st):
        payload = _question_payload(
            selected_option=2,
            feedback=AnswerResult(correct=False, correct_index=0, selected_index=2),
        )

        renderer.render(UIModel(ScreenType.FEEDBACK, payload), Mock())

        mock_st.success.assert_called_once_with("A", icon="✅")
        mock_st.error.assert_called_once_with("C", icon="❌")
        assert mock_st.info.call_count == 2
        assert mock_st.button.call_args.kwargs["disabled"] is True


class TestSummaryScreen:
    def test_play_again_sends_restart(self, renderer, mock_st):
        callback = Mock()
        mock_st.button.return_value = True
        payload = SummaryPayload(score=4, total=6, message="4/6", history=[True, False])

        renderer.render(UIModel(ScreenType.SUMMARY, payload), callback)

        mock_st.success.assert_called_once_with("4/6")
        callback.assert_called_once_with(Action.RESTART, None)


class TestRendererFallbacks:
    def test_none_model(self, renderer, mock_st):
        renderer.render(None, Mock())
        mock_st.info.assert_called_once()

    def test_unknown_screen(self, renderer, mock_st):
        renderer.render(UIModel("NOPE", None), Mock())
        mock_st.error.assert_called_once_with("Unknown Screen Type: NOPE")
