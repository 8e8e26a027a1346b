"""Boundary between the exam core and whatever reads and writes to the candidate."""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum
from typing import Protocol, TypeVar

from exam_app.core.models import Question

E = TypeVar("E", bound=IntEnum)


class ExamIO(Protocol):
    """Blocking input/output surface used by the authoring and exam flows.

    Every ``read_*`` call returns only once a valid value is available;
    retrying on bad input is the implementation's job, never the caller's.
    """

    def read_int(self, prompt: str, predicate: Callable[[int], bool]) -> int: ...

    def read_string(self, prompt: str) -> str: ...

    def read_enum_choice(self, prompt: str, enum_type: type[E]) -> E: ...

    def present(self, question: Question) -> None: ...

    def report(self, message: str) -> None: ...
