"""Domain models for the exam application."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import timedelta
from enum import IntEnum

from exam_app.constants.exam_constants import (
    FALSE_ANSWER_ID,
    FALSE_LABEL,
    FIRST_ANSWER_ID,
    TRUE_ANSWER_ID,
    TRUE_LABEL,
)
from exam_app.core.markdown_text_renderer import renderer


class QuestionType(IntEnum):
    TRUE_FALSE = 1
    MULTIPLE_CHOICE = 2


class ExamType(IntEnum):
    FINAL = 1
    PRACTICAL = 2


@dataclass(frozen=True, slots=True)
class Answer:
    """A labeled choice within a question."""

    id: int
    text: str


_TRUE_FALSE_ANSWERS = (
    Answer(id=TRUE_ANSWER_ID, text=TRUE_LABEL),
    Answer(id=FALSE_ANSWER_ID, text=FALSE_LABEL),
)


@dataclass(frozen=True, slots=True)
class Question:
    """A question of either kind; behaviour dispatches on ``kind``.

    True/false questions always carry the fixed True/False pair. Multiple-choice
    questions carry the authored answers with ids assigned from 1 in order.
    Use the ``true_false`` and ``multiple_choice`` constructors rather than
    building answers by hand.
    """

    kind: QuestionType
    body: str
    mark: int
    answers: tuple[Answer, ...]
    right_answer: int

    @classmethod
    def true_false(cls, body: str, mark: int, right_answer: int) -> "Question":
        return cls(
            kind=QuestionType.TRUE_FALSE,
            body=body,
            mark=mark,
            answers=_TRUE_FALSE_ANSWERS,
            right_answer=right_answer,
        )

    @classmethod
    def multiple_choice(
        cls, body: str, mark: int, answer_texts: Sequence[str], right_answer: int
    ) -> "Question":
        answers = tuple(
            Answer(id=answer_id, text=text)
            for answer_id, text in enumerate(answer_texts, start=FIRST_ANSWER_ID)
        )
        return cls(
            kind=QuestionType.MULTIPLE_CHOICE,
            body=body,
            mark=mark,
            answers=answers,
            right_answer=right_answer,
        )

    def validate_answer(self, candidate_id: int) -> bool:
        """Return True if ``candidate_id`` is an acceptable answer id.

        True/false accepts exactly 1 or 2, hard-coded on purpose instead of
        derived from the answer count. Multiple choice checks the id range
        ``[1, len(answers)]``; this matches id membership only because ids are
        sequential.
        """
        if self.kind is QuestionType.TRUE_FALSE:
            return candidate_id in (TRUE_ANSWER_ID, FALSE_ANSWER_ID)
        return FIRST_ANSWER_ID <= candidate_id <= len(self.answers)

    def is_correct(self, candidate_id: int) -> bool:
        return candidate_id == self.right_answer

    def display(self) -> str:
        """Return the question as shown to the candidate."""
        lines = [f"\nQ: {renderer.render(self.body)}"]
        if self.kind is QuestionType.TRUE_FALSE:
            lines.append(f"{TRUE_ANSWER_ID}. {TRUE_LABEL} / {FALSE_ANSWER_ID}. {FALSE_LABEL}")
        else:
            lines.extend(f"{answer.id}. {renderer.render(answer.text)}" for answer in self.answers)
        return "\n".join(lines)


@dataclass(frozen=True, slots=True)
class ExamPolicy:
    """What distinguishes one exam type from another."""

    time_boxed: bool
    immediate_feedback: bool
    forced_question_type: QuestionType | None = None


_EXAM_POLICIES: dict[ExamType, ExamPolicy] = {
    ExamType.FINAL: ExamPolicy(time_boxed=True, immediate_feedback=False),
    ExamType.PRACTICAL: ExamPolicy(
        time_boxed=False,
        immediate_feedback=True,
        forced_question_type=QuestionType.MULTIPLE_CHOICE,
    ),
}


def policy_for(exam_type: ExamType) -> ExamPolicy:
    return _EXAM_POLICIES[exam_type]


@dataclass(frozen=True, slots=True)
class Exam:
    """An authored exam. Question order is answering order."""

    exam_type: ExamType
    duration: timedelta
    expected_question_count: int
    questions: tuple[Question, ...] = ()

    @property
    def policy(self) -> ExamPolicy:
        return policy_for(self.exam_type)

    @property
    def max_possible_score(self) -> int:
        return sum(question.mark for question in self.questions)


@dataclass(frozen=True, slots=True)
class ExamResult:
    """Immutable outcome of one exam run."""

    total_score: int
    max_score: int
    time_taken: timedelta

    @property
    def percentage(self) -> float:
        """Score ratio in ``[0, 1]``; 0.0 when nothing was scored."""
        if self.max_score == 0:
            return 0.0
        return self.total_score / self.max_score

    def format(self) -> str:
        """Render the result summary; the percentage rounds half to even (1/8 shows 12%)."""
        minutes, seconds = divmod(int(self.time_taken.total_seconds()), 60)
        return (
            "\nExam Results:"
            f"\nScore: {self.total_score}/{self.max_score} ({self.percentage:.0%})"
            f"\nTime taken: {minutes}m {seconds}s"
        )

    def __str__(self) -> str:
        return self.format()

