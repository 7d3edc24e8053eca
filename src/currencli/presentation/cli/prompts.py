"""Input providers for the interactive CLI.

PromptInput asks on the terminal through ``typer.prompt``; ScriptedInput
replays fixed answers so commands can run without a terminal.
"""
from __future__ import annotations

from collections import deque
from collections.abc import Iterable

import typer

from currencli.domain.errors import ValidationError

__all__ = [
    "AMOUNT_PROMPT",
    "FROM_PROMPT",
    "TO_PROMPT",
    "BASE_PROMPT",
    "PromptInput",
    "ScriptedInput",
]

AMOUNT_PROMPT = "Enter amount"
FROM_PROMPT = "From currency (e.g., USD)"
TO_PROMPT = "To currency (e.g., EUR)"
BASE_PROMPT = "Base currency (e.g., USD)"


class PromptInput:
    def ask(self, message: str) -> str:
        return str(typer.prompt(message))


class ScriptedInput:
    """Replay answers in order; records every question asked."""

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers = deque(answers)
        self.asked: list[str] = []

    def ask(self, message: str) -> str:
        self.asked.append(message)
        if not self._answers:
            raise ValidationError(f"No scripted answer for prompt: {message}")
        return self._answers.popleft()
