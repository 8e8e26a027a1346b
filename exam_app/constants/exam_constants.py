"""Exam-related constants shared across the core and console layers."""

MIN_CHOICES: int = 2
MAX_CHOICES: int = 4
FIRST_ANSWER_ID: int = 1
TRUE_ANSWER_ID: int = 1
FALSE_ANSWER_ID: int = 2
TRUE_LABEL: str = "True"
FALSE_LABEL: str = "False"
DEFAULT_SUBJECT_ID: int = 1
DEFAULT_SUBJECT_NAME: str = "General"
# Largest 32-bit signed value; the scheduled end time stays within datetime range.
MAX_DURATION_MINUTES: int = 2_147_483_647
