"""Display management for CLI interface."""

from codequiz.ui.cli.display.linecount import LineCountDisplay
from codequiz.ui.cli.display.quiz import QuizDisplay, make_console

__all__ = ["LineCountDisplay", "QuizDisplay", "make_console"]
