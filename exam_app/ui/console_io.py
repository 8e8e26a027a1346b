"""Line-oriented terminal implementation of the exam input/output boundary."""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum
from typing import TypeVar

from exam_app.constants.ui_constants import EMPTY_INPUT_MESSAGE, INVALID_INPUT_MESSAGE
from exam_app.core.models import Question

E = TypeVar("E", bound=IntEnum)

InputFunc = Callable[[str], str]
OutputFunc = Callable[[str], None]


class ConsoleIO:
    """Prompts on a terminal and re-prompts until the input is usable.

    ``input_func`` and ``output_func`` default to ``input`` and ``print``.
    An ``EOFError`` from ``input_func`` is not caught; the caller decides how
    to end the session.
    """

    def __init__(
        self,
        input_func: InputFunc = input,
        output_func: OutputFunc = print,
    ) -> None:
        self._input = input_func
        self._output = output_func

    def read_int(self, prompt: str, predicate: Callable[[int], bool]) -> int:
        while True:
            value = _parse_int(self._input(prompt))
            if value is not None and predicate(value):
                return value
            self._output(INVALID_INPUT_MESSAGE)

    def read_string(self, prompt: str) -> str:
        while True:
            value = self._input(prompt).strip()
            if value:
                return value
            self._output(EMPTY_INPUT_MESSAGE)

    def read_enum_choice(self, prompt: str, enum_type: type[E]) -> E:
        """Accept either the member's number or its name (case-insensitive)."""
        while True:
            member = _parse_enum(self._input(prompt), enum_type)
            if member is not None:
                return member
            self._output(INVALID_INPUT_MESSAGE)

    def confirm(self, prompt: str) -> bool:
        return self.read_string(prompt).lower() == "y"

    def present(self, question: Question) -> None:
        self._output(question.display())

    def report(self, message: str) -> None:
        self._output(message)


def _parse_int(raw: str) -> int | None:
    try:
        return int(raw.strip())
    except ValueError:
        return None


def _parse_enum(raw: str, enum_type: type[E]) -> E | None:
    text = raw.strip()
    if not text:
        return None
    number = _parse_int(text)
    if number is not None:
        try:
            return enum_type(number)
        except ValueError:
            return None
    key = text.upper().replace(" ", "_").replace("-", "_")
    return enum_type.__members__.get(key)
