from abc import ABC, abstractmethod
from collections.abc import MutableMapping
from typing import Any

import streamlit as st

from trivia.game.controller import TriviaController

CONTROLLER_KEY = "trivia_controller"


class IGameStore(ABC):
    """Where the running game lives between two UI refreshes."""

    @abstractmethod
    def load(self) -> TriviaController | None:
        pass

    @abstractmethod
    def save(self, controller: TriviaController) -> None:
        pass


class StreamlitGameStore(IGameStore):
    """
    One controller per browser session, kept in `st.session_state` so it
    survives script reruns.
    """

    def __init__(self, state: MutableMapping[str, Any] | None = None) -> None:
        self._state = state if state is not None else st.session_state

    def load(self) -> TriviaController | None:
        return self._state.get(CONTROLLER_KEY)

    def save(self, controller: TriviaController) -> None:
        self._state[CONTROLLER_KEY] = controller

    def load_or_create(self, factory) -> TriviaController:
        controller = self.load()
        if controller is None:
            controller = factory()
            self.save(controller)
        return controller
