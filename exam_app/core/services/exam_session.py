"""Service that runs one candidate through an exam."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from enum import Enum, auto
import logging

from exam_app.constants.ui_constants import (
    ANSWER_PROMPT,
    CORRECT_FEEDBACK,
    EXAM_DURATION_TEMPLATE,
    EXAM_END_TEMPLATE,
    EXAM_STARTED_TEMPLATE,
    TIME_UP_MESSAGE,
    WRONG_FEEDBACK_TEMPLATE,
)
from exam_app.core.exam_io import ExamIO
from exam_app.core.models import Exam, ExamResult, Question
from exam_app.core.services.score_tally import ScoreTally

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class ExamStateError(RuntimeError):
    """Raised when a session is driven out of order."""


class ExamState(Enum):
    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    COMPLETED = auto()


class ExamSession:
    """Exam-taking state machine: NOT_STARTED -> IN_PROGRESS -> COMPLETED.

    The loop is shared by every exam type. The exam's policy plugs in at two
    points: a gate checked before each question (the time-box of a final
    exam) and feedback reported after each answer (practical exams).
    """

    def __init__(self, exam: Exam, clock: Clock = datetime.now) -> None:
        self._exam = exam
        self._clock = clock
        self._state: ExamState = ExamState.NOT_STARTED
        self._started_at: datetime | None = None
        self._result: ExamResult | None = None
        self._presented_count: int = 0

    @property
    def exam(self) -> Exam:
        return self._exam

    @property
    def state(self) -> ExamState:
        return self._state

    @property
    def started_at(self) -> datetime | None:
        return self._started_at

    @property
    def result(self) -> ExamResult | None:
        return self._result

    @property
    def presented_count(self) -> int:
        return self._presented_count

    def start(self, io: ExamIO) -> None:
        """Record the start time and announce the schedule."""
        if self._state is not ExamState.NOT_STARTED:
            raise ExamStateError("Exam has already been started.")

        self._started_at = self._clock()
        self._state = ExamState.IN_PROGRESS
        duration = self._exam.duration
        logger.info(
            "Started %s exam with %d question(s)",
            self._exam.exam_type.name.lower(),
            len(self._exam.questions),
        )
        io.report(EXAM_STARTED_TEMPLATE.format(started_at=self._started_at))
        io.report(EXAM_DURATION_TEMPLATE.format(minutes=duration.total_seconds() / 60))
        io.report(EXAM_END_TEMPLATE.format(ends_at=self._started_at + duration))

    def run(self, io: ExamIO) -> ExamResult:
        """Present every question in order and return the single result."""
        if self._state is ExamState.NOT_STARTED:
            raise ExamStateError("Exam must be started before it can run.")
        if self._state is ExamState.COMPLETED:
            raise ExamStateError("Exam has already been completed.")

        tally = ScoreTally()
        for question in self._exam.questions:
            if self._is_cut_off():
                logger.info("Time-box expired after %d question(s)", self._presented_count)
                io.report(TIME_UP_MESSAGE)
                break

            io.present(question)
            self._presented_count += 1
            answer_id = io.read_int(ANSWER_PROMPT, question.validate_answer)
            is_correct = tally.record_answer(question, answer_id)
            logger.debug("Answered %d (correct=%s)", answer_id, is_correct)
            self._give_feedback(io, question, is_correct)

        return self._finish(tally)

    def take(self, io: ExamIO) -> ExamResult:
        """Start the exam and run it to completion."""
        self.start(io)
        return self.run(io)

    def is_time_up(self) -> bool:
        if self._started_at is None:
            return False
        duration = self._exam.duration
        if duration.total_seconds() <= 0:
            return True
        return self._clock() - self._started_at > duration

    def _is_cut_off(self) -> bool:
        return self._exam.policy.time_boxed and self.is_time_up()

    def _give_feedback(self, io: ExamIO, question: Question, is_correct: bool) -> None:
        if not self._exam.policy.immediate_feedback:
            return
        if is_correct:
            io.report(CORRECT_FEEDBACK)
        else:
            io.report(WRONG_FEEDBACK_TEMPLATE.format(answer_id=question.right_answer))

    def _finish(self, tally: ScoreTally) -> ExamResult:
        result = tally.to_result(self._clock() - self._started_at)
        self._result = result
        self._state = ExamState.COMPLETED
        logger.info(
            "Completed exam: %d/%d, %d of %d answered correctly, in %s",
            result.total_score,
            result.max_score,
            tally.correct_count,
            tally.answered_count,
            result.time_taken,
        )
        return result
