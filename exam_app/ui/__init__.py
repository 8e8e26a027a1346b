"""Terminal front end for authoring and taking exams."""

from .console_io import ConsoleIO

__all__ = [
    "ConsoleIO",
]
