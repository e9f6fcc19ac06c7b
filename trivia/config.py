import os
from enum import Enum
from typing import Final


class SelectionMode(Enum):
    # Enum Member = ("config value", "Screen title")
    SUBCATEGORY = ("subcategory", "اختر الفئة")
    MULTI_CATEGORY = ("multi", "اختر ثلاث فئات")

    def __init__(self, key: str, title: str):
        self.key = key
        self.title = title

    @classmethod
    def from_key(cls, key: str | None) -> "SelectionMode":
        """Resolves a config string to a mode. Unknown values fall back to SUBCATEGORY."""
        for mode in cls:
            if mode.key == key:
                return mode
        return cls.SUBCATEGORY


class Messages:
    # Fixed UI templates (RTL, Arabic)
    QUESTION_COUNTER = "السؤال {current} من {total}"
    SCORE = "النقاط: {score}"
    FINAL_SCORE = "لقد حصلت على {score} من أصل {total} نقاط."
    EMPTY_POOL = "لا توجد أسئلة في هذا الاختيار."
    SUBMIT = "إرسال الإجابة"
    START = "ابدأ اللعبة"
    BACK = "العودة إلى الفئات"
    PLAY_AGAIN = "العب مرة أخرى"


class GameConfig:
    # --- App Identity ---
    APP_TITLE = "لعبة المعلومات العامة"

    # --- Data Source ---
    # URL (http/https) or a local JSON path
    DATASET_SOURCE: str = os.getenv("TRIVIA_DATASET_SOURCE", "data/questions.json")
    FETCH_TIMEOUT_SECONDS: Final[float] = 5.0

    # --- Game Rules ---
    SELECTION_MODE: SelectionMode = SelectionMode.from_key(
        os.getenv("TRIVIA_SELECTION_MODE")
    )
    OPTIONS_PER_QUESTION: Final[int] = 4
    QUESTIONS_PER_CATEGORY: Final[int] = 2
    REQUIRED_CATEGORY_COUNT: Final[int] = 3

    # --- Pacing ---
    # Delay between revealing the answer and presenting the next question
    ADVANCE_DELAY_SECONDS: float = float(os.getenv("TRIVIA_ADVANCE_DELAY", "1.0"))

    @staticmethod
    def is_remote_source(source: str) -> bool:
        return source.startswith("http://") or source.startswith("https://")
