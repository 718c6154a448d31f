"""Interactive terminal prompts.

The menu only talks to the :class:`Prompter` protocol. :class:`RichPrompter`
is the terminal implementation; tests drive the menu with scripted answers.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Generic, Protocol, TextIO, TypeVar

from rich.console import Console
from rich.prompt import Confirm, Prompt
from rich.text import Text

T = TypeVar("T")

Validator = Callable[[str], str | None]


class PromptAborted(RuntimeError):
    """Raised when the user closes input (EOF) or interrupts a prompt."""


@dataclass(frozen=True, slots=True)
class Choice(Generic[T]):
    """A selectable item: ``label`` is displayed, ``value`` is returned."""

    label: str
    value: T


class Prompter(Protocol):
    def select(self, message: str, choices: Sequence[Choice[T]]) -> T: ...

    def text(self, message: str, *, validate: Validator | None = None) -> str: ...

    def confirm(self, message: str, *, default: bool = True) -> bool: ...


def require_non_empty(error_message: str) -> Validator:
    def _validate(answer: str) -> str | None:
        return None if answer else error_message

    return _validate


class _StrictStream:
    """Raise EOFError at end of input, as `input()` does for stdin."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def readline(self) -> str:
        line = self._stream.readline()
        if not line:
            raise EOFError
        return line


class RichPrompter:
    """Prompt on a :class:`rich.console.Console`.

    Single-select prompts print a numbered list and accept the item number.
    ``stream`` overrides stdin, mainly for tests.
    """

    def __init__(self, console: Console, *, stream: TextIO | None = None) -> None:
        self._console = console
        self._stream = _StrictStream(stream) if stream is not None else None

    def select(self, message: str, choices: Sequence[Choice[T]]) -> T:
        if not choices:
            raise ValueError("select() needs at least one choice")

        for number, choice in enumerate(choices, start=1):
            self._console.print(Text.assemble((f"  {number}) ", "cyan"), choice.label))

        numbers = [str(number) for number in range(1, len(choices) + 1)]
        answer = self._ask(
            lambda: Prompt.ask(
                Text(message, style="white"),
                console=self._console,
                choices=numbers,
                show_choices=False,
                stream=self._stream,
            )
        )
        return choices[int(answer) - 1].value

    def text(self, message: str, *, validate: Validator | None = None) -> str:
        while True:
            answer = self._ask(
                lambda: Prompt.ask(
                    Text(message, style="white"), console=self._console, stream=self._stream
                )
            )
            error = validate(answer) if validate is not None else None
            if error is None:
                return answer
            self._console.print(Text(f">> {error}", style="red"))

    def confirm(self, message: str, *, default: bool = True) -> bool:
        return self._ask(
            lambda: Confirm.ask(
                Text(message, style="white"),
                console=self._console,
                default=default,
                stream=self._stream,
            )
        )

    @staticmethod
    def _ask(ask: Callable[[], T]) -> T:
        try:
            return ask()
        except (EOFError, KeyboardInterrupt) as e:
            raise PromptAborted("Input aborted") from e


__all__ = ["Choice", "PromptAborted", "Prompter", "RichPrompter", "require_non_empty"]
