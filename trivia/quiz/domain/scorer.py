from trivia.quiz.domain.models import AnswerResult, GameSession, Question
from trivia.shared.telemetry import ANSWERS_TOTAL


class Scorer:
    """
    Pure domain logic for answer evaluation.
    The score only ever grows: +1 per correct answer, nothing otherwise.
    """

    @staticmethod
    def evaluate(selected_index: int, question: Question) -> AnswerResult:
        return AnswerResult(
            correct=question.is_correct(selected_index),
            correct_index=question.correct_index,
            selected_index=selected_index,
        )

    def submit(
        self, selected_index: int, question: Question, session: GameSession
    ) -> AnswerResult:
        result = self.evaluate(selected_index, question)
        if result.correct:
            session.record_correct_answer()

        ANSWERS_TOTAL.labels(correct=str(result.correct).lower()).inc()
        return result
