"""Application entry point for the exam console."""

from __future__ import annotations

from exam_app.constants.about import APP_NAME, APP_VERSION
from exam_app.constants.exam_constants import DEFAULT_SUBJECT_ID, DEFAULT_SUBJECT_NAME
from exam_app.constants.ui_constants import START_EXAM_PROMPT
from exam_app.core.exam_builder import Subject
from exam_app.core.services.exam_session import ExamSession
from exam_app.ui.console_io import ConsoleIO
from exam_app.utils.logging_config import configure_logging


def run_console(console: ConsoleIO) -> None:
    """Build one exam, then run it if the operator confirms."""
    subject = Subject(subject_id=DEFAULT_SUBJECT_ID, name=DEFAULT_SUBJECT_NAME)
    exam = subject.create_exam(console)

    if not console.confirm(START_EXAM_PROMPT):
        return

    result = ExamSession(exam).take(console)
    console.report(result.format())


def main() -> None:
    """Initialize logging and drive a single authoring + exam session."""
    logger = configure_logging()
    logger.info("Starting %s %s", APP_NAME, APP_VERSION)

    try:
        run_console(ConsoleIO())
    except (EOFError, KeyboardInterrupt):
        logger.info("Input closed; ending session.")
        print()


if __name__ == "__main__":
    main()
