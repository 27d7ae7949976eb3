"""Interactive question steps and a console prompter that answers them."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol

Validator = Callable[[str], str | None]


@dataclass(frozen=True)
class Choice:
    label: str
    value: str


@dataclass(frozen=True)
class SelectQuestion:
    message: str
    choices: list[Choice] = field(default_factory=list)


@dataclass(frozen=True)
class TextQuestion:
    """Free-text question.

    ``validate`` returns an error message for a rejected answer and None for
    an accepted one.
    """

    message: str
    default: str | None = None
    validate: Validator | None = None


@dataclass(frozen=True)
class ConfirmQuestion:
    message: str
    default: bool = False


class Prompter(Protocol):
    def select(self, question: SelectQuestion) -> str: ...

    def text(self, question: TextQuestion) -> str: ...

    def confirm(self, question: ConfirmQuestion) -> bool: ...


_YES = frozenset({"y", "yes"})
_NO = frozenset({"n", "no"})


class ConsolePrompter:
    """Asks questions on the terminal, re-asking until the answer is valid."""

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ) -> None:
        self._input = input_func
        self._output = output

    def select(self, question: SelectQuestion) -> str:
        if not question.choices:
            raise ValueError("select question needs at least one choice")
        self._output(question.message)
        for index, choice in enumerate(question.choices, start=1):
            self._output(f"  {index}. {choice.label}")
        while True:
            raw = self._input(f"Choice [1-{len(question.choices)}]: ").strip()
            if raw.isdigit() and 1 <= int(raw) <= len(question.choices):
                return question.choices[int(raw) - 1].value
            self._output(f"Please enter a number between 1 and {len(question.choices)}")

    def text(self, question: TextQuestion) -> str:
        suffix = f" ({question.default})" if question.default else ""
        while True:
            answer = self._input(f"{question.message}{suffix} ")
            if not answer.strip() and question.default:
                answer = question.default
            if question.validate is not None:
                error = question.validate(answer)
                if error is not None:
                    self._output(f">> {error}")
                    continue
            return answer

    def confirm(self, question: ConfirmQuestion) -> bool:
        hint = "Y/n" if question.default else "y/N"
        while True:
            raw = self._input(f"{question.message} ({hint}) ").strip().lower()
            if not raw:
                return question.default
            if raw in _YES:
                return True
            if raw in _NO:
                return False
            self._output(">> Please answer yes or no")
