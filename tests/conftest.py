"""Test configuration and fixtures."""

from __future__ import annotations

import io
from collections.abc import Callable, Sequence
from typing import Any

import pytest
from rich.console import Console

from agentflow_cli.marketplace.catalog import Catalog, default_catalog
from agentflow_cli.marketplace.install import InstallSimulator
from agentflow_cli.marketplace.prompts import Choice


class ScriptedPrompter:
    """Answer prompts from a fixed script and record what was asked.

    ``select`` answers are matched against choice labels (exact match, or a
    label ending with the answer so emoji prefixes can be omitted).
    """

    def __init__(self, answers: Sequence[Any]) -> None:
        self._answers = list(answers)
        self.asked: list[tuple[str, str]] = []
        self.choices_seen: list[list[Choice[Any]]] = []

    def _next(self, kind: str, message: str) -> Any:
        self.asked.append((kind, message))
        if not self._answers:
            raise AssertionError(f"No scripted answer left for {kind} prompt: {message}")
        return self._answers.pop(0)

    def select(self, message: str, choices: Sequence[Choice[Any]]) -> Any:
        self.choices_seen.append(list(choices))
        answer = self._next("select", message)
        for choice in choices:
            if choice.label == answer or choice.label.endswith(str(answer)):
                return choice.value
        raise AssertionError(f"{answer!r} is not one of {[c.label for c in choices]}")

    def text(self, message: str, *, validate: Callable[[str], str | None] | None = None) -> str:
        while True:
            answer = self._next("text", message)
            if validate is None or validate(answer) is None:
                return answer

    def confirm(self, message: str, *, default: bool = True) -> bool:
        answer = self._next("confirm", message)
        return default if answer is None else bool(answer)

    @property
    def exhausted(self) -> bool:
        return not self._answers


@pytest.fixture
def catalog() -> Catalog:
    """Provide the built-in sample catalog."""
    return default_catalog()


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(output: io.StringIO) -> Console:
    """Provide a non-terminal console so rendered text has no escape codes."""
    return Console(file=output, width=120, force_terminal=False, color_system=None)


@pytest.fixture
def installer(console: Console) -> InstallSimulator:
    """Provide an install simulator that never actually waits."""
    return InstallSimulator(console, delay_seconds=0, sleep=lambda _seconds: None)


@pytest.fixture
def scripted() -> Callable[..., ScriptedPrompter]:
    """Build a :class:`ScriptedPrompter` from positional answers."""

    def _build(*answers: Any) -> ScriptedPrompter:
        return ScriptedPrompter(answers)

    return _build
