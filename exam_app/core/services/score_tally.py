"""Service for accumulating the score of a single exam run."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from exam_app.core.models import ExamResult, Question


@dataclass(slots=True)
class ScoreTally:
    """Mutable running score used internally by the exam session."""

    total_score: int = 0
    max_score: int = 0
    answered_count: int = 0
    correct_count: int = 0

    def record_answer(self, question: Question, answer_id: int) -> bool:
        """Score one presented question, all or nothing. Returns whether it was correct."""
        is_correct = question.is_correct(answer_id)
        self.answered_count += 1
        self.max_score += question.mark
        if is_correct:
            self.correct_count += 1
            self.total_score += question.mark
        return is_correct

    def to_result(self, time_taken: timedelta) -> ExamResult:
        """Return an immutable snapshot of the tally."""
        return ExamResult(
            total_score=self.total_score,
            max_score=self.max_score,
            time_taken=time_taken,
        )
