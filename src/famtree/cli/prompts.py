"""
Line-based readers for the interactive menu.

Built on ``rich.prompt`` so every reader loops until it gets a valid
answer. The classes below only change the wording of the retry messages
and how a scripted input stream is read.
"""

from __future__ import annotations

from typing import IO, Optional

from rich.console import Console
from rich.prompt import Confirm, IntPrompt, Prompt
from rich.text import Text

from famtree.registry.entities import Gender


class _StreamAwareMixin:
    """
    Normalise input read from an explicit stream.

    ``stream.readline()`` keeps the newline, which would stop rich from
    applying a default on a blank line, and returns "" at end of input,
    which would otherwise loop forever.
    """

    @classmethod
    def get_input(cls, console, prompt, password, stream=None):
        line = super().get_input(console, prompt, password, stream=stream)
        if stream is None:
            return line
        if line == "":
            raise EOFError("input stream exhausted")
        return line.rstrip("\r\n")


class TextPrompt(_StreamAwareMixin, Prompt):
    pass


class GenderPrompt(_StreamAwareMixin, Prompt):
    illegal_choice_message = "[prompt.invalid.choice]Invalid gender. Enter M or F."


class YesNoPrompt(_StreamAwareMixin, Confirm):
    validate_error_message = "[prompt.invalid]Please enter y or n"


class ChoicePrompt(_StreamAwareMixin, IntPrompt):
    validate_error_message = "[prompt.invalid]Invalid number, enter again"


class ConsolePrompter:
    """
    Request/response surface used by the menu.

    The registry and renderer never see this class; they receive the
    values it returns.
    """

    def __init__(self, console: Console, stream: Optional[IO[str]] = None):
        self.console = console
        self.stream = stream

    def read_name(self, prompt: str) -> str:
        return TextPrompt.ask(Text(prompt), console=self.console, stream=self.stream)

    def read_gender(self, prompt: str) -> Gender:
        answer = GenderPrompt.ask(
            Text(prompt),
            console=self.console,
            choices=[g.value for g in Gender],
            case_sensitive=False,
            show_choices=False,
            stream=self.stream,
        )
        return Gender(answer)

    def read_yes_no(self, prompt: str, default: Optional[bool] = None) -> bool:
        if default is None:
            return YesNoPrompt.ask(Text(prompt), console=self.console, stream=self.stream)
        return YesNoPrompt.ask(
            Text(prompt),
            console=self.console,
            default=default,
            stream=self.stream,
        )

    def read_choice(self, prompt: str) -> int:
        return ChoicePrompt.ask(Text(prompt), console=self.console, stream=self.stream)
