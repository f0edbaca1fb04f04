"""src/codequiz/ui/cli/display/quiz.py
What: Print quiz hints and reveals and read the Enter-to-continue gates.
Why: Keep console formatting out of the session state machine.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich.console import Console
from rich.text import Text

from codequiz.config.settings import PATH_STYLE, RULE
from codequiz.features.sampling import QuizRound

REVEAL_PROMPT = "Think: where is this? Press Enter to reveal…"
NEXT_PROMPT = "Press Enter to go again"
FINISH_PROMPT = "Press Enter to finish"


def make_console() -> Console:
    """Console that prints file content verbatim: no markup, emoji or wrapping."""

    return Console(markup=False, highlight=False, emoji=False, soft_wrap=True)


@final
class QuizDisplay:
    """Render quiz rounds to the terminal."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize quiz display.

        Args:
            console: Console to print to; defaults to standard output.
        """
        self.console = console if console is not None else make_console()

    def show_prompt(self, quiz_round: QuizRound, rows: Sequence[Text], context: int) -> None:
        """Print the banner and the highlighted hint window."""

        _ = quiz_round
        self.console.print()
        self.console.print(f"🎯 RANDOM LINE (showing context ±{context})")
        self.console.print(RULE)
        for row in rows:
            self.console.print(row)
        self.console.print(RULE)
        self.console.print()

    def show_reveal(self, quiz_round: QuizRound, rows: Sequence[Text], reveal: int) -> None:
        """Print the file path, line number and the wide reveal window."""

        header = Text("File: ")
        _ = header.append(str(quiz_round.path), style=PATH_STYLE)
        self.console.print(header)
        self.console.print(f"Line: {quiz_round.line_number}")
        self.console.print()
        self.console.print(f"Context (±{reveal}):")
        for row in rows:
            self.console.print(row)
        self.console.print()

    def wait_for_reveal(self) -> None:
        _ = self.console.input(REVEAL_PROMPT)

    def wait_for_next(self, *, last: bool) -> None:
        _ = self.console.input(FINISH_PROMPT if last else NEXT_PROMPT)
