"""Shared fixtures: a scripted stand-in for the console and a controllable clock."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable
from datetime import datetime, timedelta

import pytest

from exam_app.core.models import Question

START = datetime(2026, 1, 5, 9, 0, 0)


class ScriptedIO:
    """ExamIO fake fed from a fixed list of responses.

    ``read_int`` skips responses the predicate rejects, the same way the
    console would re-prompt, and remembers them in ``rejected``.
    """

    def __init__(self, responses: Iterable[object]) -> None:
        self._responses = deque(responses)
        self.prompts: list[str] = []
        self.presented: list[Question] = []
        self.reports: list[str] = []
        self.rejected: list[int] = []

    def _next(self, prompt: str):
        self.prompts.append(prompt)
        return self._responses.popleft()

    def read_int(self, prompt: str, predicate: Callable[[int], bool]) -> int:
        while True:
            value = self._next(prompt)
            if predicate(value):
                return value
            self.rejected.append(value)

    def read_string(self, prompt: str) -> str:
        return self._next(prompt)

    def read_enum_choice(self, prompt, enum_type):
        return enum_type(self._next(prompt))

    def present(self, question: Question) -> None:
        self.presented.append(question)

    def report(self, message: str) -> None:
        self.reports.append(message)

    @property
    def remaining(self) -> int:
        return len(self._responses)


class SteppingClock:
    """Returns ``START + offset`` for each offset in turn, repeating the last."""

    def __init__(self, *offsets: timedelta) -> None:
        self._offsets = deque(offsets or (timedelta(0),))
        self.calls = 0

    def __call__(self) -> datetime:
        self.calls += 1
        offset = self._offsets[0]
        if len(self._offsets) > 1:
            self._offsets.popleft()
        return START + offset


@pytest.fixture
def make_io() -> Callable[..., ScriptedIO]:
    def factory(*responses: object) -> ScriptedIO:
        return ScriptedIO(responses)

    return factory


@pytest.fixture
def make_clock() -> Callable[..., SteppingClock]:
    def factory(*offsets: timedelta) -> SteppingClock:
        return SteppingClock(*offsets)

    return factory
