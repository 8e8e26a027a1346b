"""Interactive authoring of an exam from operator input.

The builder decides what to ask and in which order; reading and re-prompting
is left to the ``ExamIO`` it is given. Answers are collected into pydantic
drafts and only turned into the immutable ``Exam``/``Question`` graph once a
draft is complete, so no half-built exam ever escapes.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
import logging

from pydantic import BaseModel, Field, PositiveInt, model_validator

from exam_app.constants.exam_constants import (
    FALSE_ANSWER_ID,
    FIRST_ANSWER_ID,
    MAX_CHOICES,
    MAX_DURATION_MINUTES,
    MIN_CHOICES,
    TRUE_ANSWER_ID,
)
from exam_app.constants.ui_constants import (
    ANSWER_TEXT_PROMPT_TEMPLATE,
    CHOICE_COUNT_PROMPT,
    EXAM_TIME_PROMPT,
    EXAM_TYPE_PROMPT,
    FORCED_MCQ_NOTICE,
    MCQ_CORRECT_PROMPT,
    QUESTION_BODY_PROMPT,
    QUESTION_COUNT_PROMPT,
    QUESTION_HEADER_TEMPLATE,
    QUESTION_MARK_PROMPT,
    QUESTION_TYPE_PROMPT,
    TF_CORRECT_PROMPT,
)
from exam_app.core.exam_io import ExamIO
from exam_app.core.models import Exam, ExamType, Question, QuestionType, policy_for

logger = logging.getLogger(__name__)


class QuestionDraft(BaseModel):
    """Question as collected from the operator, checked before it is built."""

    kind: QuestionType
    body: str = Field(min_length=1)
    mark: PositiveInt
    answer_texts: list[str] = Field(default_factory=list)
    right_answer: int

    @model_validator(mode="after")
    def _check_answers(self) -> "QuestionDraft":
        if self.kind is QuestionType.TRUE_FALSE:
            if self.answer_texts:
                raise ValueError("True/false questions use the fixed True/False answers.")
            if self.right_answer not in (TRUE_ANSWER_ID, FALSE_ANSWER_ID):
                raise ValueError("True/false correct answer must be 1 (True) or 2 (False).")
            return self

        if not MIN_CHOICES <= len(self.answer_texts) <= MAX_CHOICES:
            raise ValueError(
                f"Multiple-choice questions need {MIN_CHOICES}-{MAX_CHOICES} answers."
            )
        if any(not text.strip() for text in self.answer_texts):
            raise ValueError("Answer text cannot be empty.")
        if not FIRST_ANSWER_ID <= self.right_answer <= len(self.answer_texts):
            raise ValueError("Correct answer must reference one of the answers.")
        return self

    def to_question(self) -> Question:
        if self.kind is QuestionType.TRUE_FALSE:
            return Question.true_false(self.body, self.mark, self.right_answer)
        return Question.multiple_choice(
            self.body, self.mark, self.answer_texts, self.right_answer
        )


class ExamDraft(BaseModel):
    """Exam settings and question drafts collected during authoring."""

    exam_type: ExamType
    duration_minutes: PositiveInt = Field(le=MAX_DURATION_MINUTES)
    question_count: PositiveInt
    questions: list[QuestionDraft] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_question_kinds(self) -> "ExamDraft":
        forced = policy_for(self.exam_type).forced_question_type
        if forced is not None and any(q.kind is not forced for q in self.questions):
            raise ValueError(
                f"{self.exam_type.name.title()} exams only accept "
                f"{forced.name.replace('_', ' ').lower()} questions."
            )
        return self

    def to_exam(self) -> Exam:
        return Exam(
            exam_type=self.exam_type,
            duration=timedelta(minutes=self.duration_minutes),
            expected_question_count=self.question_count,
            questions=tuple(draft.to_question() for draft in self.questions),
        )


def _is_positive(value: int) -> bool:
    return value > 0


def _is_valid_duration(minutes: int) -> bool:
    return 0 < minutes <= MAX_DURATION_MINUTES


class ExamBuilder:
    """Walks the operator through creating one exam."""

    def __init__(self, io: ExamIO) -> None:
        self._io = io

    def build(self) -> Exam:
        exam_type = self._io.read_enum_choice(EXAM_TYPE_PROMPT, ExamType)
        duration_minutes = self._io.read_int(EXAM_TIME_PROMPT, _is_valid_duration)
        question_count = self._io.read_int(QUESTION_COUNT_PROMPT, _is_positive)
        forced_type = policy_for(exam_type).forced_question_type

        questions: list[QuestionDraft] = []
        for number in range(1, question_count + 1):
            self._io.report(QUESTION_HEADER_TEMPLATE.format(number=number))
            questions.append(self._collect_question(forced_type))

        exam = ExamDraft(
            exam_type=exam_type,
            duration_minutes=duration_minutes,
            question_count=question_count,
            questions=questions,
        ).to_exam()
        logger.info(
            "Built %s exam: %d question(s), %d minute(s), %d mark(s) available",
            exam_type.name.lower(),
            len(exam.questions),
            duration_minutes,
            exam.max_possible_score,
        )
        return exam

    def _collect_question(self, forced_type: QuestionType | None) -> QuestionDraft:
        if forced_type is not None:
            kind = forced_type
            self._io.report(FORCED_MCQ_NOTICE)
        else:
            kind = self._io.read_enum_choice(QUESTION_TYPE_PROMPT, QuestionType)

        body = self._io.read_string(QUESTION_BODY_PROMPT)
        mark = self._io.read_int(QUESTION_MARK_PROMPT, _is_positive)

        answer_texts: list[str] = []
        if kind is QuestionType.MULTIPLE_CHOICE:
            choice_count = self._io.read_int(
                CHOICE_COUNT_PROMPT.format(minimum=MIN_CHOICES, maximum=MAX_CHOICES),
                lambda n: MIN_CHOICES <= n <= MAX_CHOICES,
            )
            answer_texts = [
                self._io.read_string(ANSWER_TEXT_PROMPT_TEMPLATE.format(number=number))
                for number in range(FIRST_ANSWER_ID, choice_count + FIRST_ANSWER_ID)
            ]
            right_answer = self._io.read_int(
                MCQ_CORRECT_PROMPT,
                lambda n: FIRST_ANSWER_ID <= n <= len(answer_texts),
            )
        else:
            right_answer = self._io.read_int(
                TF_CORRECT_PROMPT, lambda n: n in (TRUE_ANSWER_ID, FALSE_ANSWER_ID)
            )

        logger.debug("Collected %s question worth %d", kind.name.lower(), mark)
        return QuestionDraft(
            kind=kind,
            body=body,
            mark=mark,
            answer_texts=answer_texts,
            right_answer=right_answer,
        )


@dataclass(slots=True)
class Subject:
    """Authoring context that exclusively owns one exam, created on demand."""

    subject_id: int
    name: str
    exam: Exam | None = None

    def create_exam(self, io: ExamIO) -> Exam:
        self.exam = ExamBuilder(io).build()
        return self.exam
